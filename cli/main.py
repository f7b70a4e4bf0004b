"""Harvester CLI — entry-point for harvest runs and one-off helpers.

Usage:
    python cli/main.py --help

Commands:
    run       → scrape the seed pages and download every linked PDF
    extract   → list the PDF links found in a local HTML file
    filename  → show the local file name a URL would be saved under
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from harvester.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import List, Optional

import typer

from harvester.config import settings
from harvester.filenames import sanitize
from harvester.logging_config import configure_logging
from harvester.pipeline import HarvestConfig, load_seeds, run_harvest
from harvester.scraper.extractor import dedup, extract_links

app = typer.Typer(
    name="harvest",
    help="Scrape seed pages and download the PDF documents they link to.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (default: HARVEST_LOG_LEVEL or INFO)."
    ),
) -> None:
    """Configure logging before any command runs."""
    configure_logging(log_level or settings.log_level)


@app.command("run")
def run(
    seed: Optional[List[str]] = typer.Option(
        None, "--seed", help="Seed page URL. Repeatable."
    ),
    seeds_file: Optional[Path] = typer.Option(
        None, "--seeds-file", help="File with one seed URL per line."
    ),
    base_domain: Optional[str] = typer.Option(
        None, "--base-domain", help="scheme://host used to resolve relative links."
    ),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", help="Directory receiving the PDFs."
    ),
    workers: Optional[int] = typer.Option(
        None, "--workers", min=1, help="Concurrent downloads (default: 1)."
    ),
    fail_on_error: bool = typer.Option(
        False, "--fail-on-error", help="Exit 1 if any download failed."
    ),
) -> None:
    """Fetch every seed page and download the PDFs linked from them."""
    seeds: list[str] = list(seed or [])
    if seeds_file is not None:
        if not seeds_file.is_file():
            typer.echo(f"[run] Seeds file not found: {seeds_file}")
            raise typer.Exit(code=1)
        seeds.extend(load_seeds(seeds_file))
    if not seeds:
        seeds = load_seeds(settings.default_seeds_path)

    overrides = {}
    if base_domain:
        overrides["base_domain"] = base_domain
    if output_dir is not None:
        overrides["output_dir"] = output_dir
    if workers is not None:
        overrides["max_workers"] = workers
    config = HarvestConfig(seeds=seeds, **overrides)

    typer.echo(f"[run] Harvesting {len(seeds)} page(s) from {config.base_domain} …")
    summary = run_harvest(config)

    typer.echo(f"[run] Pages fetched : {summary.pages_fetched}/{summary.pages_requested}")
    typer.echo(f"[run] PDF links     : {summary.links_found} ({summary.unique_links} unique)")
    typer.echo(f"[run] Invalid links : {len(summary.invalid_links)}")
    typer.echo(f"[run] Downloaded    : {summary.downloaded}")
    typer.echo(f"[run] Skipped       : {summary.skipped}")
    typer.echo(f"[run] Failed        : {summary.failed}")

    if fail_on_error and summary.failed:
        raise typer.Exit(code=1)


@app.command("extract")
def extract(
    path: Path = typer.Argument(..., help="Local HTML file to scan."),
) -> None:
    """Print the unique PDF links found in a local HTML file."""
    if not path.is_file():
        typer.echo(f"[extract] File not found: {path}")
        raise typer.Exit(code=1)

    links = dedup(extract_links(path.read_text(encoding="utf-8", errors="replace")))
    if not links:
        typer.echo("[extract] No PDF links found.")
        return
    for link in links:
        typer.echo(link)


@app.command("filename")
def filename(
    url: str = typer.Argument(..., help="Document URL."),
) -> None:
    """Print the local file name *url* would be saved under."""
    typer.echo(sanitize(url))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
