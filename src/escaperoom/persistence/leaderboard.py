from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..codec import parse, serialize
from ..data.fields import opt_int, opt_str
from ..errors import ParseError
from .fs import atomic_write_text

logger = logging.getLogger(__name__)


@dataclass
class LeaderboardEntry:
    username: str
    score: int
    difficulty: str
    timestamp: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "username": self.username,
            "score": self.score,
            "difficulty": self.difficulty,
            "timestamp": self.timestamp,
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "LeaderboardEntry":
        return LeaderboardEntry(
            username=opt_str(d, "username", "") or "",
            score=opt_int(d, "score", 0),
            difficulty=(opt_str(d, "difficulty", "") or "").lower(),
            timestamp=opt_str(d, "timestamp", "") or "",
        )


class Leaderboard:
    """Best score per player and difficulty, stored as a JSON array.

    A missing or unreadable file is treated as an empty board.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self.lock = threading.RLock()

    def entries(self) -> List[LeaderboardEntry]:
        with self.lock:
            if not self.path.exists():
                return []
            try:
                root = parse(self.path.read_text(encoding="utf-8"))
            except (OSError, ParseError) as e:
                logger.warning("Ignoring unreadable leaderboard %s: %s", self.path, e)
                return []
            if not isinstance(root, list):
                logger.warning("Ignoring leaderboard %s: top-level value is not an array", self.path)
                return []
            return [LeaderboardEntry.from_dict(o) for o in root if isinstance(o, dict)]

    def record(self, username: str, score: int, difficulty: Optional[str]) -> bool:
        """Record a finished run.

        Keeps one entry per (username, difficulty). Returns True when the board
        changed, i.e. this is a new entry or beats the stored score.
        """
        level = (difficulty or "").strip().lower()
        with self.lock:
            entries = self.entries()
            for entry in entries:
                if entry.username == username and entry.difficulty == level:
                    if score <= entry.score:
                        return False
                    entry.score = score
                    entry.timestamp = _now()
                    break
            else:
                entries.append(LeaderboardEntry(username, score, level, _now()))
            self._write(entries)
            logger.info("Recorded score %d for %s (%s)", score, username, level or "-")
            return True

    def top(self, limit: int = 10, difficulty: Optional[str] = None) -> List[LeaderboardEntry]:
        entries = self.entries()
        if difficulty is not None:
            level = difficulty.strip().lower()
            entries = [e for e in entries if e.difficulty == level]
        entries.sort(key=lambda e: e.score, reverse=True)
        return entries[: max(0, limit)]

    def clear(self) -> None:
        with self.lock:
            self._write([])

    def _write(self, entries: List[LeaderboardEntry]) -> None:
        atomic_write_text(self.path, serialize([e.to_dict() for e in entries]))


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")
