"""HTTP fetcher for seed pages."""

from __future__ import annotations

import logging

import httpx

from harvester.config import settings
from harvester.scraper.models import FetchResult

logger = logging.getLogger(__name__)


def default_headers() -> dict[str, str]:
    """The single header :func:`build_client` sets for page fetches and downloads."""
    return {"User-Agent": settings.user_agent}


def build_client(timeout: float | None = None) -> httpx.Client:
    """Return an ``httpx.Client`` carrying the harvester's ``User-Agent``.

    *timeout* applies to page fetches; downloads override it per request.
    ``None`` disables the timeout entirely.
    """
    return httpx.Client(
        headers=default_headers(),
        timeout=timeout,
        follow_redirects=True,
    )


def fetch_page(url: str, client: httpx.Client | None = None) -> FetchResult:
    """Fetch *url* and return a :class:`FetchResult`.

    Failures never raise: invalid URLs, transport errors and undecodable
    bodies are logged and reported with ``ok=False``.  The response status is
    recorded but not checked, so an error page's body is still returned.

    Headers come from the client; pass one built by :func:`build_client` so
    that the ``User-Agent`` is sent.
    """
    logger.info("Scraping %s", url)

    owns_client = client is None
    if client is None:
        client = build_client(settings.fetch_timeout)

    try:
        response = client.get(url)
        text = response.text
    except httpx.InvalidURL as exc:
        logger.warning("Error creating request for %s: %s", url, exc)
        return FetchResult(url=url, ok=False, reason=f"invalid url: {exc}")
    except httpx.HTTPError as exc:
        logger.warning("Request error for %s: %s", url, exc)
        return FetchResult(url=url, ok=False, reason=f"request error: {exc}")
    except UnicodeDecodeError as exc:
        logger.warning("Error reading body of %s: %s", url, exc)
        return FetchResult(url=url, ok=False, reason=f"read error: {exc}")
    finally:
        if owns_client:
            client.close()

    return FetchResult(
        url=url,
        ok=True,
        text=text,
        status_code=response.status_code,
    )


def fetch_text(url: str, client: httpx.Client | None = None) -> str:
    """Return the body of *url*, or an empty string if the fetch failed."""
    result = fetch_page(url, client)
    return result.text if result.ok else ""
