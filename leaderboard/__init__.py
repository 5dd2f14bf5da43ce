"""
Dealership Leaderboard - Core Package

This package contains the modules for:
- Fetching and parsing the published sheet (leaderboard.ingestion)
- Scoring and ordering participants (leaderboard.ranking)
- Rendering the table into a page (leaderboard.display)
- Refresh orchestration and scheduling
"""

__version__ = "1.0.0"
