"""Save-file persistence: user accounts with their progress, and the leaderboard."""

from .leaderboard import Leaderboard, LeaderboardEntry
from .store import UserStore
from .users import deserialize_progress, deserialize_users, serialize_progress, serialize_users

__all__ = [
    "Leaderboard",
    "LeaderboardEntry",
    "UserStore",
    "deserialize_progress",
    "deserialize_users",
    "serialize_progress",
    "serialize_users",
]
