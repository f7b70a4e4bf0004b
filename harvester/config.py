"""Centralised settings for the document harvester.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/139.0.0.0 Safari/537.36"
)


def _optional_float(name: str) -> float | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    return float(raw)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Target site
    # ------------------------------------------------------------------
    base_domain: str = field(
        default_factory=lambda: os.environ.get("HARVEST_BASE_DOMAIN", "https://cam2.com")
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get("HARVEST_USER_AGENT", DEFAULT_USER_AGENT)
    )

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------
    output_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("HARVEST_OUTPUT_DIR", "PDFs"))
    )
    aggregate_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("HARVEST_AGGREGATE_DIR", "."))
    )

    # ------------------------------------------------------------------
    # Network
    # ------------------------------------------------------------------
    fetch_timeout: float | None = field(
        default_factory=lambda: _optional_float("HARVEST_FETCH_TIMEOUT")
    )
    download_timeout: float = field(
        default_factory=lambda: float(os.environ.get("HARVEST_DOWNLOAD_TIMEOUT", "900"))
    )
    max_workers: int = field(
        default_factory=lambda: int(os.environ.get("HARVEST_MAX_WORKERS", "1"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("HARVEST_LOG_LEVEL", "INFO")
    )

    @property
    def default_seeds_path(self) -> Path:
        """Absolute path to the seed list bundled with the project."""
        return Path(__file__).resolve().parent.parent / "seeds" / "cam2.txt"


# Module-level singleton; import this everywhere:
#   from harvester.config import settings
settings = Settings()
