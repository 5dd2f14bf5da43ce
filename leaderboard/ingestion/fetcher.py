"""
Published Sheet Fetcher

Downloads the published CSV export of the leaderboard sheet. The request is
tried directly first, then through each pass-through proxy in turn, and the
first non-empty body wins.

Usage:
    from leaderboard.ingestion.fetcher import fetch_csv
    text = fetch_csv(SHEET_CSV_URL)
"""

from dataclasses import dataclass
from typing import Callable, Sequence
from urllib.parse import quote

import requests

from leaderboard.config import PROXY_PREFIXES
from leaderboard.errors import FetchError
from leaderboard.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)

# Characters encodeURIComponent leaves untouched besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


@dataclass(frozen=True)
class ProxyStrategy:
    """Rewrites a target URL so the request goes through a pass-through proxy.

    An empty prefix is the direct request: the URL is returned as-is.
    """

    prefix: str = ""

    def __call__(self, url: str) -> str:
        if not self.prefix:
            return url
        return self.prefix + quote(url, safe=_URI_COMPONENT_SAFE)

    def __str__(self) -> str:
        return self.prefix or "direct"


DEFAULT_STRATEGIES: tuple[ProxyStrategy, ...] = tuple(ProxyStrategy(p) for p in PROXY_PREFIXES)


def fetch_csv(
    url: str,
    strategies: Sequence[Callable[[str], str]] = DEFAULT_STRATEGIES,
    session: requests.Session | None = None,
) -> str:
    """
    Fetch the CSV text at url, falling back through proxy strategies.

    Args:
        url: Target URL (the published CSV export)
        strategies: Ordered URL rewriters; tried once each, in order
        session: HTTP session to use (default: a new requests.Session)

    Returns:
        The first non-empty response body

    Raises:
        FetchError: If no strategy produced a non-empty body. The last
            failure seen (if any) is chained and kept on ``last_error``.
    """
    owns_session = session is None
    if owns_session:
        session = requests.Session()

    last_error: Exception | None = None
    try:
        for strategy in strategies:
            target = strategy(url)
            logger.debug(f"Fetching CSV via {strategy}: {target}")
            try:
                resp = session.get(target)
                if not 200 <= resp.status_code < 300:
                    raise FetchError(f"HTTP {resp.status_code}")
                # Sheets sends text/csv without a charset; the export is always UTF-8
                text = resp.content.decode("utf-8-sig", errors="replace")
            except (requests.RequestException, FetchError) as e:
                logger.warning(f"Fetch via {strategy} failed: {e}")
                last_error = e
                continue

            if text and text.strip():
                return text
            logger.warning(f"Fetch via {strategy} returned an empty body")
    finally:
        if owns_session:
            session.close()

    if last_error is not None:
        raise FetchError(f"Unable to fetch CSV: {last_error}", last_error) from last_error
    raise FetchError("Unable to fetch CSV")
