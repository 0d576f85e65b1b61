from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .puzzles import Puzzle


@dataclass
class EscapeRoom:
    name: str = "Unnamed Room"
    description: str = ""
    level: int = 1
    solved: bool = False
    puzzles: List[Puzzle] = field(default_factory=list)

    def add_puzzle(self, puzzle: Optional[Puzzle]) -> None:
        if puzzle is not None:
            self.puzzles.append(puzzle)

    def first_puzzle(self) -> Optional[Puzzle]:
        return self.puzzles[0] if self.puzzles else None
