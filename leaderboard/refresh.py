"""
Leaderboard Refresh

One refresh cycle: fetch the published sheet, parse it, rank the entries and
render them into the page. A failure anywhere drops the cycle and leaves the
page showing whatever it showed before.

Usage:
    from leaderboard.refresh import refresh_leaderboard
    entries = refresh_leaderboard(page)
"""

from typing import Callable

from leaderboard.config import SHEET_CSV_URL, DISPLAY_SURFACE_ID
from leaderboard.display.renderer import render_leaderboard
from leaderboard.display.surface import HtmlPage
from leaderboard.ingestion.csv_parser import parse_csv
from leaderboard.ingestion.fetcher import fetch_csv
from leaderboard.ranking.transform import Entry, transform_data
from leaderboard.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def refresh_leaderboard(
    page: HtmlPage,
    url: str = SHEET_CSV_URL,
    fetch: Callable[[str], str] = fetch_csv,
    surface_id: str = DISPLAY_SURFACE_ID,
) -> list[Entry] | None:
    """
    Fetch, parse, rank and render the leaderboard once.

    Args:
        page: Page whose display surface receives the rows
        url: Published CSV URL
        fetch: Callable returning the CSV text for a URL
        surface_id: Element id of the display surface

    Returns:
        The ranked entries, or None if the cycle failed
    """
    try:
        csv_text = fetch(url)
        records = parse_csv(csv_text)
        entries = transform_data(records)
        render_leaderboard(entries, page, surface_id)
    except Exception as e:
        logger.exception(f"Failed to update leaderboard: {e}")
        return None

    logger.info(f"Leaderboard updated with {len(entries)} entries")
    return entries
