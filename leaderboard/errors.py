"""Exception hierarchy for the Dealership Leaderboard."""


class LeaderboardError(Exception):
    """Base exception for leaderboard errors"""
    pass


class FetchError(LeaderboardError):
    """Raised when the CSV export could not be retrieved"""

    def __init__(self, message: str, last_error: BaseException | None = None):
        super().__init__(message)
        self.last_error = last_error


class SchedulerError(LeaderboardError):
    """Raised when the refresh scheduler is misused"""
    pass
