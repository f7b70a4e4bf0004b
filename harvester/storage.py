"""Local filesystem state for a harvest run.

The aggregate store is one text file holding every fetched page body for
the current run, appended in seed order with nothing separating the pages.
Link extraction reads it back in a single pass once fetching is done.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from harvester.urls import extract_base_domain

logger = logging.getLogger(__name__)

OUTPUT_DIR_MODE = 0o755


def aggregate_path_for(base_domain: str, directory: Path) -> Path:
    """Return ``<directory>/<name>.html`` where *name* comes from *base_domain*."""
    return directory / f"{extract_base_domain(base_domain)}.html"


def ensure_output_dir(path: Path) -> bool:
    """Create *path* if it is missing.  Errors are logged, not raised."""
    if path.is_dir():
        return True
    try:
        path.mkdir(mode=OUTPUT_DIR_MODE, parents=True)
    except OSError as exc:
        logger.error("Could not create output directory %s: %s", path, exc)
        return False
    return True


@dataclass
class AggregateStore:
    path: Path

    def reset(self) -> None:
        """Delete the file left behind by a previous run, if any."""
        if not self.path.is_file():
            return
        try:
            self.path.unlink()
        except OSError as exc:
            logger.error("Could not remove stale aggregate file %s: %s", self.path, exc)

    def append(self, content: str) -> None:
        """Append *content* followed by a newline."""
        try:
            with self.path.open("a", encoding="utf-8", newline="\n") as f:
                f.write(content + "\n")
        except OSError as exc:
            logger.error("Could not append to %s: %s", self.path, exc)

    def read_all(self) -> str:
        """Return the whole file, or an empty string if it cannot be read."""
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Could not read %s: %s", self.path, exc)
            return ""
