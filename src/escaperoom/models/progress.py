from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional

from .difficulty import Difficulty
from .inventory import Inventory

logger = logging.getLogger(__name__)


class Progress:
    """
    A player's mutable game state: level, clock, score, completed puzzles,
    hint usage, last chosen difficulty and an owned inventory.

    Mutators are guarded by an internal lock. Accessors hand out copies or
    read-only views, never the live containers.
    """

    def __init__(self, inventory: Optional[Inventory] = None) -> None:
        self._lock = threading.Lock()
        self._current_level = 1
        self._time_spent = 0
        self._score = 0
        self._completed_ids: set = set()
        self._completed_questions: Dict[str, None] = {}
        self._hints_used: Dict[int, int] = {}
        self._last_difficulty = Difficulty.ALL
        self.inventory = inventory if inventory is not None else Inventory()

    # Level

    @property
    def current_level(self) -> int:
        return self._current_level

    @current_level.setter
    def current_level(self, level: int) -> None:
        with self._lock:
            self._current_level = max(1, int(level))

    # Time / score

    @property
    def time_spent(self) -> int:
        return self._time_spent

    def add_time(self, seconds: int) -> None:
        if seconds <= 0:
            return
        with self._lock:
            self._time_spent += int(seconds)

    @property
    def score(self) -> int:
        return self._score

    def increase_score(self, delta: int) -> None:
        """Add ``delta`` (may be negative) without letting the score drop below zero."""
        with self._lock:
            self._score = max(0, self._score + int(delta))

    # Completion

    def mark_completed_by_id(self, puzzle_id: int) -> None:
        if puzzle_id < 0:
            return
        with self._lock:
            self._completed_ids.add(int(puzzle_id))

    def mark_completed_by_question(self, question: Optional[str]) -> None:
        if question is None:
            return
        with self._lock:
            self._completed_questions.setdefault(question, None)

    def has_completed_puzzle_id(self, puzzle_id: int) -> bool:
        with self._lock:
            return puzzle_id in self._completed_ids

    def has_completed_by_either(self, puzzle_id: int, question: Optional[str]) -> bool:
        with self._lock:
            if puzzle_id >= 0 and puzzle_id in self._completed_ids:
                return True
            return question is not None and question in self._completed_questions

    @property
    def completed_puzzle_ids(self) -> FrozenSet[int]:
        with self._lock:
            return frozenset(self._completed_ids)

    @property
    def completed_puzzles(self) -> List[str]:
        with self._lock:
            return list(self._completed_questions)

    # Hints

    def increment_hint_usage(self, puzzle_id: int) -> int:
        with self._lock:
            count = self._hints_used.get(puzzle_id, 0) + 1
            self._hints_used[puzzle_id] = count
        logger.debug('Hint %d used for puzzle %d', count, puzzle_id)
        return count

    def hints_used_for(self, puzzle_id: int) -> int:
        with self._lock:
            return self._hints_used.get(puzzle_id, 0)

    def hints_used(self) -> Mapping[int, int]:
        with self._lock:
            return MappingProxyType(dict(self._hints_used))

    # Difficulty

    @property
    def last_difficulty(self) -> Difficulty:
        return self._last_difficulty

    def set_last_difficulty(self, difficulty: Optional[Difficulty]) -> None:
        if difficulty is None:
            return
        with self._lock:
            self._last_difficulty = difficulty

    def __repr__(self) -> str:
        return (
            f"Progress(level={self._current_level}, score={self._score}, "
            f"time_spent={self._time_spent}, completed={len(self._completed_ids)}, "
            f"last_difficulty={self._last_difficulty.name})"
        )
