"""Harvest pipeline.

    fetch seeds → append to aggregate store → read back → extract links →
    dedup → resolve against base domain → validate → download

Page fetches always run one at a time so the aggregate store keeps seed
order.  Downloads run sequentially unless ``max_workers`` is above one.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

import httpx

from harvester.config import settings
from harvester.downloader import PathClaims, download_document
from harvester.scraper.extractor import dedup, extract_links
from harvester.scraper.fetcher import build_client, fetch_text
from harvester.scraper.models import DownloadResult
from harvester.storage import AggregateStore, aggregate_path_for, ensure_output_dir
from harvester.urls import is_valid, resolve

logger = logging.getLogger(__name__)


@dataclass
class HarvestConfig:
    """Everything one run needs; defaults come from :data:`settings`."""

    seeds: Sequence[str]
    base_domain: str = field(default_factory=lambda: settings.base_domain)
    output_dir: Path = field(default_factory=lambda: settings.output_dir)
    aggregate_dir: Path = field(default_factory=lambda: settings.aggregate_dir)
    max_workers: int = field(default_factory=lambda: settings.max_workers)

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")
        if not self.base_domain:
            raise ValueError("base_domain must not be empty")
        self.output_dir = Path(self.output_dir)
        self.aggregate_dir = Path(self.aggregate_dir)

    @property
    def aggregate_path(self) -> Path:
        return aggregate_path_for(self.base_domain, self.aggregate_dir)


@dataclass
class HarvestSummary:
    pages_requested: int = 0
    pages_fetched: int = 0
    links_found: int = 0
    unique_links: int = 0
    invalid_links: List[str] = field(default_factory=list)
    downloads: List[DownloadResult] = field(default_factory=list)

    @property
    def downloaded(self) -> int:
        return sum(1 for r in self.downloads if r.ok)

    @property
    def skipped(self) -> int:
        return sum(1 for r in self.downloads if r.skipped)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.downloads if not r.ok and not r.skipped)


def load_seeds(path: Path) -> list[str]:
    """Read one URL per line from *path*, ignoring blanks and ``#`` comments."""
    seeds: list[str] = []
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            seeds.append(line)
    return seeds


def collect_candidates(store: AggregateStore) -> tuple[list[str], list[str]]:
    """Return ``(all_matches, unique_matches)`` from the aggregate store."""
    found = extract_links(store.read_all())
    return found, dedup(found)


def _download_all(
    urls: list[str],
    config: HarvestConfig,
    client: httpx.Client,
) -> list[DownloadResult]:
    claims = PathClaims()
    if config.max_workers == 1:
        return [download_document(url, config.output_dir, client, claims) for url in urls]

    with ThreadPoolExecutor(
        max_workers=config.max_workers, thread_name_prefix="download"
    ) as pool:
        futures = [
            pool.submit(download_document, url, config.output_dir, client, claims)
            for url in urls
        ]
        return [f.result() for f in futures]


def run_harvest(config: HarvestConfig, client: httpx.Client | None = None) -> HarvestSummary:
    """Run the whole pipeline for *config* and return what happened.

    Args:
        config: Seeds, target domain and local paths for this run.
        client: Optional ``httpx.Client`` (tests pass one bound to a mock
            transport).  When omitted a client is created and closed here.
    """
    summary = HarvestSummary(pages_requested=len(config.seeds))

    ensure_output_dir(config.output_dir)
    store = AggregateStore(config.aggregate_path)
    store.reset()

    owns_client = client is None
    if client is None:
        client = build_client(settings.fetch_timeout)

    try:
        for seed in config.seeds:
            text = fetch_text(seed, client)
            if text:
                summary.pages_fetched += 1
            store.append(text)

        found, unique = collect_candidates(store)
        summary.links_found = len(found)
        summary.unique_links = len(unique)
        logger.info("Found %d PDF links (%d unique)", len(found), len(unique))

        targets: list[str] = []
        for candidate in unique:
            url = resolve(candidate, config.base_domain)
            if is_valid(url):
                targets.append(url)
            else:
                logger.warning("Skipping invalid URL: %s", url)
                summary.invalid_links.append(url)

        summary.downloads = _download_all(targets, config, client)
    finally:
        if owns_client:
            client.close()

    logger.info(
        "Harvest finished: %d downloaded, %d skipped, %d failed",
        summary.downloaded,
        summary.skipped,
        summary.failed,
    )
    return summary
