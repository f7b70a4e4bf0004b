"""Scraper package — page fetch & link extraction."""

from harvester.scraper.extractor import dedup, extract_links
from harvester.scraper.fetcher import build_client, fetch_page, fetch_text
from harvester.scraper.models import DownloadOutcome, DownloadResult, FetchResult

__all__ = [
    "build_client",
    "fetch_page",
    "fetch_text",
    "extract_links",
    "dedup",
    "FetchResult",
    "DownloadOutcome",
    "DownloadResult",
]
