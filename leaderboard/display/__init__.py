"""
Display

Modules:
- surface: In-memory page and table bodies that receive rendered rows
- renderer: Rank-aware row building and surface replacement
"""


def __getattr__(name):
    """Lazy imports to keep `python -m` execution free of RuntimeWarnings."""
    if name in ("HtmlPage", "TableBody"):
        from leaderboard.display import surface
        return getattr(surface, name)
    if name == "render_leaderboard":
        from leaderboard.display.renderer import render_leaderboard
        return render_leaderboard
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
