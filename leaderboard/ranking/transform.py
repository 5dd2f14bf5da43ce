"""
Leaderboard Ranking

Turns parsed sheet records into scored entries and orders them for display.

Column names vary between sheets, so each field is looked up through a list
of aliases (see leaderboard.config). Scores are parsed leniently: a leading
number is taken and anything after it ignored, and a cell without one
counts as 0 rather than dropping the participant.

Usage:
    from leaderboard.ranking.transform import transform_data
    entries = transform_data(parse_csv(text))
"""

import re
from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

import pandas as pd

from leaderboard.config import (
    FIRST_NAME_FIELDS,
    LAST_NAME_FIELDS,
    GROUP_FIELDS,
    SCORE_FIELDS,
)

# Longest numeric prefix: sign, then Infinity or a decimal literal with optional exponent
NUMERIC_PREFIX_RE = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)

LEADERBOARD_COLUMNS = ['rank', 'name', 'group', 'score']


@dataclass(frozen=True)
class Entry:
    """One ranked participant."""
    name: str
    group: str
    score: float


def first_present(record: Mapping[str, str], fields: Sequence[str]) -> str | None:
    """Return the first non-empty value among the given column aliases."""
    for field in fields:
        value = record.get(field)
        if value:
            return value
    return None


def parse_score(text: str | None) -> float:
    """
    Parse the leading number of a score cell.

    Leading whitespace is skipped and trailing characters are ignored, so
    "88%" gives 88.0 and "9.5 pts" gives 9.5.

    Args:
        text: Raw score cell (may be None when the column is missing)

    Returns:
        Parsed score, or 0.0 if no number could be read
    """
    if not text:
        return 0.0
    m = NUMERIC_PREFIX_RE.match(text.lstrip())
    if not m:
        return 0.0
    return float(m.group(0).replace("Infinity", "inf"))


def to_entry(record: Mapping[str, str]) -> Entry:
    """Build an Entry from one parsed record."""
    first_name = first_present(record, FIRST_NAME_FIELDS)
    last_name = first_present(record, LAST_NAME_FIELDS)
    group = first_present(record, GROUP_FIELDS) or ""
    score = parse_score(first_present(record, SCORE_FIELDS))
    name = " ".join(part for part in (first_name, last_name) if part)
    return Entry(name=name, group=group, score=score)


def transform_data(records: Iterable[Mapping[str, str]]) -> list[Entry]:
    """
    Convert records to entries sorted by score, highest first.

    The sort is stable, so participants on equal scores keep sheet order.
    """
    entries = [to_entry(r) for r in records]
    return sorted(entries, key=lambda e: e.score, reverse=True)


def entries_to_frame(entries: Sequence[Entry]) -> pd.DataFrame:
    """
    Convert a ranked list to a DataFrame.

    Returns:
        DataFrame with columns: rank, name, group, score (rank is 1-based)
    """
    rows = [
        {'rank': rank, 'name': e.name, 'group': e.group, 'score': e.score}
        for rank, e in enumerate(entries, start=1)
    ]
    return pd.DataFrame(rows, columns=LEADERBOARD_COLUMNS)
