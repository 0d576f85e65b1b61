from __future__ import annotations

from enum import Enum
from typing import Optional


class Difficulty(str, Enum):
    """Puzzle difficulty levels; ``ALL`` is the "no filter" meta value."""

    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"
    ALL = "ALL"

    @classmethod
    def from_string(cls, text: Optional[str]) -> "Difficulty":
        """Look up a difficulty by name, case-insensitively.

        ``None`` and unknown names fall back to EASY. Note that the no-filter
        default used by Progress is ALL, not EASY.
        """
        if text is None:
            return cls.EASY
        try:
            return cls[str(text).strip().upper()]
        except KeyError:
            return cls.EASY
