"""
Data Ingestion

Modules:
- fetcher: Download the published sheet export with proxy fallback
- csv_parser: Split delimited text into header-keyed records
"""


def __getattr__(name):
    """Lazy imports to keep `python -m` execution free of RuntimeWarnings."""
    if name == "fetch_csv":
        from leaderboard.ingestion.fetcher import fetch_csv
        return fetch_csv
    if name == "parse_csv":
        from leaderboard.ingestion.csv_parser import parse_csv
        return parse_csv
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
