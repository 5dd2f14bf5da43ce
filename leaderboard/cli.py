from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from .config import SHEET_CSV_URL, REFRESH_INTERVAL_SECONDS, DEFAULT_OUTPUT_PATH, PAGE_TITLE
from .display.renderer import format_score
from .display.surface import HtmlPage
from .ingestion.fetcher import fetch_csv
from .refresh import refresh_leaderboard
from .scheduler import RefreshScheduler
from .utils import setup_logging

logger = setup_logging(__name__)

app = typer.Typer(add_completion=False, help="Publish a ranked leaderboard from a shared sheet")


def _print_entries(entries) -> None:
    for rank, e in enumerate(entries, start=1):
        group = f" ({e.group})" if e.group else ""
        typer.echo(f"#{rank} {e.name}{group} - {format_score(e.score)}%")


@app.command("once")
def once(
    url: str = typer.Option(SHEET_CSV_URL, "--url", help="published CSV URL"),
    output: Optional[Path] = typer.Option(None, "--output", help="write the HTML page here"),
    title: str = typer.Option(PAGE_TITLE, "--title", help="page title"),
):
    """Refresh the leaderboard once and print the ranking."""
    page = HtmlPage(title=title)
    entries = refresh_leaderboard(page, url=url, fetch=fetch_csv)
    if entries is None:
        typer.echo("Failed to update leaderboard", err=True)
        raise typer.Exit(1)
    if output is not None:
        page.write(output)
        logger.info(f"Wrote {output}")
    _print_entries(entries)


@app.command("serve")
def serve(
    url: str = typer.Option(SHEET_CSV_URL, "--url", help="published CSV URL"),
    output: Path = typer.Option(DEFAULT_OUTPUT_PATH, "--output", help="HTML page to keep up to date"),
    interval: float = typer.Option(REFRESH_INTERVAL_SECONDS, "--interval", min=1, help="seconds between refreshes"),
    title: str = typer.Option(PAGE_TITLE, "--title", help="page title"),
):
    """Keep an HTML leaderboard page refreshed until interrupted."""
    page = HtmlPage(title=title)

    def job():
        # Only rewrite the page when the cycle succeeded
        if refresh_leaderboard(page, url=url, fetch=fetch_csv) is not None:
            page.write(output)
            logger.info(f"Wrote {output}")

    scheduler = RefreshScheduler(job, interval_seconds=interval)
    scheduler.start()
    try:
        scheduler.wait()
    except KeyboardInterrupt:
        typer.echo("Stopping...")
    finally:
        scheduler.stop()


if __name__ == "__main__":
    app()
