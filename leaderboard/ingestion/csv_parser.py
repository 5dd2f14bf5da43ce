"""
Delimited Text Parser

Splits the published sheet export into one record per data row, keyed by
the header row. Cells are split on the delimiter without regard to quoting,
so values containing the delimiter are not supported.
"""

import re

from leaderboard.config import CSV_DELIMITER

Record = dict[str, str]

LINE_BREAK_RE = re.compile(r"\r?\n")


def parse_csv(text: str, delimiter: str = CSV_DELIMITER) -> list[Record]:
    """
    Parse delimited text into a list of header-keyed records.

    Args:
        text: Raw CSV text; the first line holds the column headers
        delimiter: Field delimiter (default: comma)

    Returns:
        List of dicts mapping header name to trimmed cell value. Blank lines
        are skipped; missing trailing cells become "".
    """
    lines = LINE_BREAK_RE.split(text.strip())
    headers = [h.strip() for h in lines[0].split(delimiter)]

    records: list[Record] = []
    for line in lines[1:]:
        cells = line.split(delimiter)
        if len(cells) == 1 and cells[0] == "":
            continue  # empty line
        records.append({
            header: (cells[idx] if idx < len(cells) else "").strip()
            for idx, header in enumerate(headers)
        })
    return records
