"""URL helpers: host detection, base-domain resolution and validation."""

from __future__ import annotations

import logging
import re
from urllib.parse import urlsplit

import httpx

logger = logging.getLogger(__name__)

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def has_host(candidate: str) -> bool:
    """Return ``True`` if *candidate* parses as a URL with a non-empty host.

    Strings that cannot be parsed at all count as hostless.
    """
    try:
        return bool(urlsplit(candidate).netloc)
    except ValueError:
        return False


def resolve(candidate: str, base_domain: str) -> str:
    """Prefix hostless *candidate* with *base_domain*.

    This is plain string concatenation: ``base_domain`` must be a full
    ``scheme://host`` string and *candidate* is expected to start with ``/``.
    """
    if has_host(candidate):
        return candidate
    return base_domain + candidate


def is_valid(candidate: str) -> bool:
    """Return ``True`` if *candidate* is acceptable as an HTTP request URI.

    Accepts absolute URLs and absolute paths (``/x.pdf``), so a ``True``
    result does not imply a host; call this after :func:`resolve`.
    """
    if not candidate or _CONTROL_CHARS.search(candidate):
        return False
    try:
        parts = urlsplit(candidate)
    except ValueError:
        return False

    if not parts.scheme:
        return candidate.startswith("/")

    if parts.netloc:
        try:
            httpx.URL(candidate)
        except httpx.InvalidURL:
            return False
    return True


def extract_base_domain(url: str) -> str:
    """Return the registrable name of *url*'s host without its suffix.

    ``https://sub.cam2.com`` gives ``cam2``.  Hosts with a single label are
    returned whole; unparsable input gives an empty string.
    """
    try:
        hostname = urlsplit(url).hostname or ""
    except ValueError as exc:
        logger.warning("Error parsing URL %r: %s", url, exc)
        return ""

    parts = hostname.split(".")
    if len(parts) >= 2:
        return parts[-2]
    return hostname
