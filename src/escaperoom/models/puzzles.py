from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import ClassVar, Optional

from .difficulty import Difficulty
from .items import ItemName

_INTEGER_RE = re.compile(r"^-?\d+$")


class Puzzle(ABC):
    """
    Common state shared by every puzzle variant.

    ``id`` is -1 until the catalog is flattened or an explicit id is applied.
    Subclasses set ``kind`` and implement ``check_answer``.
    """

    kind: ClassVar[str] = ""

    def __init__(self, question: Optional[str], difficulty: Optional[Difficulty]) -> None:
        self.id: int = -1
        self.question: str = question if question is not None else ""
        self.difficulty: Difficulty = difficulty if difficulty is not None else Difficulty.EASY
        self.locked: bool = False
        self.reward: Optional[ItemName] = None
        self.hidden_hint: Optional[str] = None
        self.hidden_hint_shown: bool = False

    @abstractmethod
    def check_answer(self, answer: Optional[str]) -> bool:
        raise NotImplementedError

    def reveal_hidden_hint(self) -> Optional[str]:
        """Mark the hidden hint as shown and return it (None when there is none)."""
        if self.hidden_hint is None:
            return None
        self.hidden_hint_shown = True
        return self.hidden_hint

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id}, question={self.question!r}, "
            f"difficulty={self.difficulty.name}, reward={self.reward.name if self.reward else None}, "
            f"locked={self.locked})"
        )


def _same_text(expected: Optional[str], given: Optional[str]) -> bool:
    if expected is None or given is None:
        return False
    return expected.strip().lower() == given.strip().lower()


class RiddlePuzzle(Puzzle):
    kind: ClassVar[str] = "riddle"

    def __init__(
        self,
        question: Optional[str],
        answer: Optional[str],
        category: Optional[str] = None,
        difficulty: Optional[Difficulty] = None,
    ) -> None:
        super().__init__(question, difficulty)
        self.answer = answer
        self.category = category
        self.solved = False

    def check_answer(self, answer: Optional[str]) -> bool:
        ok = _same_text(self.answer, answer)
        if ok:
            self.solved = True
        return ok


class TriviaPuzzle(Puzzle):
    kind: ClassVar[str] = "trivia"

    def __init__(
        self,
        question: Optional[str],
        answer: Optional[str],
        category: Optional[str] = None,
        difficulty: Optional[Difficulty] = None,
    ) -> None:
        super().__init__(question, difficulty)
        self.answer = answer
        self.category = category

    def check_answer(self, answer: Optional[str]) -> bool:
        return _same_text(self.answer, answer)


class MathPuzzle(Puzzle):
    kind: ClassVar[str] = "math"

    def __init__(self, question: Optional[str], answer: int, difficulty: Optional[Difficulty] = None) -> None:
        super().__init__(question, difficulty)
        self.answer = int(answer)

    def check_answer(self, answer: Optional[str]) -> bool:
        if answer is None:
            return False
        text = answer.strip()
        if not _INTEGER_RE.match(text):
            return False
        return int(text) == self.answer


class DoorPuzzle(Puzzle):
    """
    Pick the right numbered door.

    ``attempts_allowed`` of 0 means unlimited. A ``blocked`` door (e.g. stuck
    until a crowbar is used) cannot be solved by answering, and neither can a
    locked one.
    """

    kind: ClassVar[str] = "door"

    def __init__(
        self,
        num_doors: int,
        correct_door: int = 1,
        attempts_allowed: int = 0,
        difficulty: Optional[Difficulty] = Difficulty.MEDIUM,
    ) -> None:
        doors = max(1, int(num_doors))
        super().__init__(f"Choose a number (1-{doors}). Answer carefully..", difficulty)
        self.num_doors = doors
        self._correct_door = 1
        self._attempts_allowed = 0
        self._attempts_made = 0
        self.blocked = False
        self.correct_door = correct_door
        self.attempts_allowed = attempts_allowed

    @classmethod
    def with_door_count(cls, num_doors: int) -> "DoorPuzzle":
        return cls(num_doors)

    @property
    def correct_door(self) -> int:
        return self._correct_door

    @correct_door.setter
    def correct_door(self, value: int) -> None:
        self._correct_door = min(max(1, int(value)), self.num_doors)

    @property
    def attempts_allowed(self) -> int:
        return self._attempts_allowed

    @attempts_allowed.setter
    def attempts_allowed(self, value: int) -> None:
        self._attempts_allowed = max(0, int(value))

    @property
    def attempts_made(self) -> int:
        return self._attempts_made

    @attempts_made.setter
    def attempts_made(self, value: int) -> None:
        self._attempts_made = max(0, int(value))

    def check_answer(self, answer: Optional[str]) -> bool:
        if self.locked or self.blocked or answer is None:
            return False
        text = answer.strip()
        if not text:
            return False
        # Accept "2" as well as phrases like "door 2"
        token = text if _INTEGER_RE.match(text) else text.split()[-1]
        if not _INTEGER_RE.match(token):
            return False
        choice = int(token)
        if choice < 1 or choice > self.num_doors:
            return False
        self._attempts_made += 1
        if self._attempts_allowed > 0 and self._attempts_made > self._attempts_allowed:
            return False
        return choice == self._correct_door

    def __repr__(self) -> str:
        return (
            f"DoorPuzzle(num_doors={self.num_doors}, correct_door={self._correct_door}, "
            f"attempts_allowed={self._attempts_allowed}, attempts_made={self._attempts_made}, "
            f"locked={self.locked}, blocked={self.blocked})"
        )
