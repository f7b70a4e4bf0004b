"""PDF downloader.

Each resolved URL ends in exactly one :class:`DownloadOutcome`.  The
destination file is created only after the whole body has been read, so a
failed download never leaves a partial file behind.
"""

from __future__ import annotations

import logging
import threading
import time
from pathlib import Path

import httpx

from harvester.config import settings
from harvester.filenames import sanitize
from harvester.scraper.fetcher import build_client
from harvester.scraper.models import DownloadOutcome, DownloadResult

logger = logging.getLogger(__name__)

ACCEPTED_CONTENT_TYPES = ("binary/octet-stream", "application/pdf")


class PathClaims:
    """Destination paths already taken by a download in this run.

    Shared between worker threads so that the exists-check and the write are
    one decision per path.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._claimed: set[Path] = set()

    def claim(self, path: Path) -> bool:
        """Return ``True`` if *path* was free and is now claimed."""
        with self._lock:
            if path in self._claimed or path.exists():
                return False
            self._claimed.add(path)
            return True

    def release(self, path: Path) -> None:
        """Give *path* back after a failed attempt so another URL may fill it."""
        with self._lock:
            self._claimed.discard(path)


def destination_for(url: str, output_dir: Path) -> Path:
    return Path(output_dir) / sanitize(url).lower()


def _is_pdf_content_type(content_type: str) -> bool:
    return any(accepted in content_type for accepted in ACCEPTED_CONTENT_TYPES)


def _fetch_body(
    url: str,
    client: httpx.Client,
    timeout: float,
) -> tuple[DownloadOutcome | None, bytes, str]:
    """GET *url* and return ``(failure, body, detail)``; *failure* is ``None`` on success.

    *timeout* bounds each network operation and also the whole download,
    body included, measured from the start of the request.
    """
    start = time.monotonic()
    try:
        with client.stream("GET", url, timeout=timeout) as response:
            if response.status_code != 200:
                return DownloadOutcome.BAD_STATUS, b"", f"HTTP {response.status_code}"

            content_type = response.headers.get("Content-Type", "")
            if not _is_pdf_content_type(content_type):
                return DownloadOutcome.BAD_CONTENT_TYPE, b"", content_type or "(none)"

            chunks: list[bytes] = []
            for chunk in response.iter_bytes():
                if time.monotonic() - start > timeout:
                    return DownloadOutcome.FETCH_FAILED, b"", f"download exceeded {timeout:g}s"
                chunks.append(chunk)
            body = b"".join(chunks)
    except httpx.InvalidURL as exc:
        return DownloadOutcome.FETCH_FAILED, b"", f"invalid url: {exc}"
    except httpx.HTTPError as exc:
        return DownloadOutcome.FETCH_FAILED, b"", str(exc)

    return None, body, ""


def download_document(
    url: str,
    output_dir: Path,
    client: httpx.Client | None = None,
    claims: PathClaims | None = None,
) -> DownloadResult:
    """Download the PDF at *url* into *output_dir*.

    Args:
        url: Absolute, validated document URL.
        output_dir: Directory receiving the file; it must already exist.
        client: Optional shared client, normally from
            :func:`~harvester.scraper.fetcher.build_client`; the
            ``User-Agent`` comes from the client.  A temporary one is
            created and closed when omitted.
        claims: Optional claim set shared by concurrent workers.

    Returns:
        A :class:`DownloadResult`; nothing is raised for network, HTTP or
        filesystem failures.
    """
    path = destination_for(url, output_dir)

    if claims is not None:
        free = claims.claim(path)
    else:
        free = not path.exists()
    if not free:
        logger.info("File already exists, skipping: %s", path)
        return DownloadResult(url=url, path=path, outcome=DownloadOutcome.SKIPPED_EXISTS)

    owns_client = client is None
    if client is None:
        client = build_client()
    try:
        result = _download_claimed(url, path, client)
    finally:
        if owns_client:
            client.close()

    if claims is not None and not result.ok:
        claims.release(path)
    return result


def _download_claimed(url: str, path: Path, client: httpx.Client) -> DownloadResult:
    failure, body, detail = _fetch_body(url, client, settings.download_timeout)

    if failure is DownloadOutcome.BAD_STATUS:
        logger.warning("Download failed for %s: %s", url, detail)
        return DownloadResult(url=url, path=path, outcome=failure, detail=detail)
    if failure is DownloadOutcome.BAD_CONTENT_TYPE:
        logger.warning("Invalid content type for %s: %s (expected PDF)", url, detail)
        return DownloadResult(url=url, path=path, outcome=failure, detail=detail)
    if failure is not None:
        logger.warning("Failed to download %s: %s", url, detail)
        return DownloadResult(url=url, path=path, outcome=failure, detail=detail)

    if not body:
        logger.warning("Downloaded 0 bytes for %s; not creating file", url)
        return DownloadResult(url=url, path=path, outcome=DownloadOutcome.EMPTY_BODY)

    created = False
    try:
        with path.open("xb") as out:
            created = True
            out.write(body)
    except FileExistsError:
        logger.info("File already exists, skipping: %s", path)
        return DownloadResult(url=url, path=path, outcome=DownloadOutcome.SKIPPED_EXISTS)
    except OSError as exc:
        logger.error("Failed to write PDF to file for %s: %s", url, exc)
        if created:
            # A partial file would be skipped as complete on every later run.
            path.unlink(missing_ok=True)
        return DownloadResult(
            url=url, path=path, outcome=DownloadOutcome.WRITE_FAILED, detail=str(exc)
        )

    logger.info("Successfully downloaded %d bytes: %s → %s", len(body), url, path)
    return DownloadResult(
        url=url,
        path=path,
        outcome=DownloadOutcome.SUCCESS,
        bytes_written=len(body),
    )


def download(url: str, output_dir: Path, client: httpx.Client | None = None) -> bool:
    """Return ``True`` only if a new file was written for *url*."""
    return download_document(url, output_dir, client).ok
