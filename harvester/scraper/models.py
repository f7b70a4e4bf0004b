"""Data models for the harvest pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path


@dataclass
class FetchResult:
    """The outcome of fetching a single seed page."""

    url: str
    ok: bool
    text: str = ""
    status_code: int | None = None
    reason: str = ""


class DownloadOutcome(str, enum.Enum):
    """Terminal state of one download attempt."""

    SUCCESS = "success"
    SKIPPED_EXISTS = "skipped-exists"
    FETCH_FAILED = "fetch-failed"
    BAD_STATUS = "bad-status"
    BAD_CONTENT_TYPE = "bad-content-type"
    EMPTY_BODY = "empty-body"
    WRITE_FAILED = "write-failed"


@dataclass
class DownloadResult:
    """What happened when downloading one resolved document URL."""

    url: str
    path: Path
    outcome: DownloadOutcome
    bytes_written: int = 0
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome is DownloadOutcome.SUCCESS

    @property
    def skipped(self) -> bool:
        return self.outcome is DownloadOutcome.SKIPPED_EXISTS
