"""
Leaderboard Renderer

Builds one table row per ranked entry and swaps them into the page's
display surface. The top three ranks get their own row class and badge
colours; everyone from rank 4 down shares the default treatment.
"""

import html
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

from leaderboard.config import (
    DISPLAY_SURFACE_ID,
    RANK_BADGE_COLORS,
    DEFAULT_BADGE_COLORS,
    SCORE_BADGE_COLOR,
    SCORE_BADGE_BACKGROUND,
    SCORE_BADGE_BORDER,
)
from leaderboard.display.surface import HtmlPage
from leaderboard.ranking.transform import Entry


@dataclass(frozen=True)
class BadgeStyle:
    background: str
    border: str
    color: str

    def to_css(self) -> str:
        return f"background-color:{self.background};border-color:{self.border};color:{self.color};"


SCORE_BADGE = BadgeStyle(SCORE_BADGE_BACKGROUND, SCORE_BADGE_BORDER, SCORE_BADGE_COLOR)


def rank_class(rank: int) -> str:
    return f"rank-{rank}" if rank in RANK_BADGE_COLORS else "rank-default"


def rank_badge(rank: int) -> BadgeStyle:
    return BadgeStyle(*RANK_BADGE_COLORS.get(rank, DEFAULT_BADGE_COLORS))


def format_score(score: float) -> str:
    """
    Format a score the way a browser prints a number.

    Whole numbers drop the fraction (95.0 -> "95"), other values use the
    shortest round-trip form (88.5 -> "88.5").
    """
    if math.isinf(score):
        return "Infinity" if score > 0 else "-Infinity"
    if score == 0:
        return "0"
    if score.is_integer() and abs(score) < 1e21:
        # Digits from the shortest repr, not the exact binary value
        return format(Decimal(repr(score)).to_integral_value(), "f")
    if 1e-6 <= abs(score) < 1e21:
        return format(Decimal(repr(score)), "f")
    # Exponent form: no zero padding, explicit sign
    mantissa, _, exponent = repr(score).partition("e")
    return f"{mantissa}e{int(exponent):+d}"


@dataclass(frozen=True)
class LeaderboardRow:
    """A rendered table row for one entry at one rank."""
    rank: int
    css_class: str
    badge: BadgeStyle
    name: str
    group: str
    score_text: str

    @property
    def badge_text(self) -> str:
        return f"#{self.rank}"

    def to_html(self) -> str:
        name = html.escape(self.name)
        group = html.escape(self.group)
        score = html.escape(self.score_text)
        return (
            f'<tr class="{self.css_class}">'
            f'<td class="text-center py-2 px-2">'
            f'<span class="rank-badge" style="{self.badge.to_css()}">{self.badge_text}</span></td>'
            f'<td class="font-semibold text-gray-800 py-2 px-2 sm:px-4">'
            f'<div class="flex flex-col"><span>{name}</span>'
            f'<span class="sm:hidden text-xs text-gray-500 font-normal">{group}</span></div></td>'
            f'<td class="font-medium text-gray-600 py-2 px-4 hidden sm:table-cell">{group}</td>'
            f'<td class="text-center py-2 px-4">'
            f'<span class="font-bold px-2 sm:px-3 py-1 rounded-full border-2" '
            f'style="{SCORE_BADGE.to_css()}">{score}%</span></td>'
            f'</tr>'
        )


def build_row(entry: Entry, rank: int) -> LeaderboardRow:
    return LeaderboardRow(
        rank=rank,
        css_class=rank_class(rank),
        badge=rank_badge(rank),
        name=entry.name,
        group=entry.group,
        score_text=format_score(entry.score),
    )


def render_leaderboard(
    entries: Sequence[Entry],
    page: HtmlPage,
    surface_id: str = DISPLAY_SURFACE_ID,
) -> None:
    """
    Replace the rows of the page's display surface with the ranked entries.

    Does nothing if the page has no surface with the given id.

    Args:
        entries: Ranked list, best first
        page: Page holding the display surface
        surface_id: Element id of the table body to fill
    """
    surface = page.get_element_by_id(surface_id)
    if surface is None:
        return
    surface.replace_rows([build_row(entry, rank) for rank, entry in enumerate(entries, start=1)])
