"""Infrastructure adapter exports."""

from .leaderboard import LeaderboardStore

__all__ = ["LeaderboardStore"]
