"""Document harvester: scrape seed pages and download the PDFs they link to."""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
