"""
Display Surfaces

A page is a collection of named table bodies. The renderer looks a body up
by element id and swaps its rows; everything else about the page (header,
styles, title) is fixed markup produced here.
"""

import html
from pathlib import Path
from typing import Protocol, Sequence

from leaderboard.config import DISPLAY_SURFACE_ID, PAGE_TITLE
from leaderboard.utils import atomic_write_text


class Row(Protocol):
    def to_html(self) -> str: ...


class TableBody:
    """A <tbody> whose rows are only ever replaced wholesale."""

    def __init__(self, element_id: str):
        self.element_id = element_id
        self._rows: tuple[Row, ...] = ()

    @property
    def rows(self) -> tuple[Row, ...]:
        return self._rows

    def replace_rows(self, rows: Sequence[Row]) -> None:
        self._rows = tuple(rows)

    def inner_html(self) -> str:
        return "".join(row.to_html() for row in self._rows)

    def to_html(self) -> str:
        return f'<tbody id="{html.escape(self.element_id)}">{self.inner_html()}</tbody>'


PAGE_CSS = """
body { font-family: 'Inter', system-ui, sans-serif; background: #FCF7EF; }
.leaderboard-table { width: 100%; border-collapse: separate; border-spacing: 0 0.5rem; }
.leaderboard-table thead th { color: #3893B7; text-transform: uppercase; font-size: 0.75rem; letter-spacing: 0.05em; }
.leaderboard-table tbody tr { background: #FFFFFF; box-shadow: 0 1px 3px rgba(0,0,0,0.08); }
.leaderboard-table tbody tr.rank-1 { background: linear-gradient(90deg, rgba(56,147,183,0.18) 0%, #FFFFFF 100%); }
.leaderboard-table tbody tr.rank-2 { background: linear-gradient(90deg, rgba(33,164,210,0.12) 0%, #FFFFFF 100%); }
.leaderboard-table tbody tr.rank-3 { background: linear-gradient(90deg, rgba(232,244,248,0.9) 0%, #FFFFFF 100%); }
.rank-badge { display: inline-block; min-width: 2.5rem; padding: 0.25rem 0.5rem; border: 2px solid; border-radius: 9999px; font-weight: 700; }
"""

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{title}</title>
<script src="https://cdn.tailwindcss.com"></script>
<style>{css}</style>
</head>
<body>
<main class="max-w-4xl mx-auto px-2 sm:px-6 py-8">
<h1 class="text-2xl sm:text-3xl font-bold text-center mb-6" style="color:#3893B7;">{title}</h1>
{tables}
</main>
</body>
</html>
"""

TABLE_TEMPLATE = """<table class="leaderboard-table">
<thead>
<tr>
<th class="py-2 px-2">Rank</th>
<th class="text-left py-2 px-2 sm:px-4">Name</th>
<th class="text-left py-2 px-4 hidden sm:table-cell">Dealership</th>
<th class="py-2 px-4">Score</th>
</tr>
</thead>
{body}
</table>"""


class HtmlPage:
    """
    In-memory leaderboard page.

    Args:
        title: Page and heading title
        surface_ids: Element ids of the table bodies on the page
    """

    def __init__(self, title: str = PAGE_TITLE, surface_ids: Sequence[str] = (DISPLAY_SURFACE_ID,)):
        self.title = title
        self._surfaces = {sid: TableBody(sid) for sid in surface_ids}

    def get_element_by_id(self, element_id: str) -> TableBody | None:
        return self._surfaces.get(element_id)

    def table_html(self) -> str:
        return "\n".join(TABLE_TEMPLATE.format(body=s.to_html()) for s in self._surfaces.values())

    def to_html(self) -> str:
        return PAGE_TEMPLATE.format(
            title=html.escape(self.title),
            css=PAGE_CSS,
            tables=self.table_html(),
        )

    def write(self, path: Path) -> None:
        """Write the full document to path atomically."""
        atomic_write_text(self.to_html(), path)
