from __future__ import annotations

import logging
from typing import Dict, Iterable

from ..models.puzzles import Puzzle
from ..models.room import EscapeRoom

logger = logging.getLogger(__name__)


def flatten_puzzles(rooms: Iterable[EscapeRoom]) -> Dict[int, Puzzle]:
    """Index every puzzle of every room by id, assigning ids where missing.

    Rooms and puzzles are visited in order. An explicit id (>= 0) is kept as
    is and the first puzzle to claim it wins. A puzzle without an id gets the
    smallest positive integer not yet taken, and its ``id`` is updated in
    place.
    """
    by_id: Dict[int, Puzzle] = {}
    next_id = 1
    for room in rooms:
        for puzzle in room.puzzles:
            if puzzle.id >= 0:
                if puzzle.id in by_id:
                    logger.warning(
                        "Duplicate puzzle id %d in room %s; keeping the first occurrence",
                        puzzle.id,
                        room.name,
                    )
                    continue
                by_id[puzzle.id] = puzzle
                continue
            while next_id in by_id:
                next_id += 1
            puzzle.id = next_id
            by_id[next_id] = puzzle
            next_id += 1
    logger.debug("Flattened %d puzzle(s)", len(by_id))
    return by_id
