"""
Ranking

Modules:
- transform: Record-to-entry conversion and score ordering
"""


def __getattr__(name):
    """Lazy imports to keep `python -m` execution free of RuntimeWarnings."""
    if name in ("Entry", "transform_data", "parse_score", "entries_to_frame"):
        from leaderboard.ranking import transform
        return getattr(transform, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
