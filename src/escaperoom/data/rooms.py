from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from ..codec import parse
from ..errors import FieldError, SchemaError
from ..models.difficulty import Difficulty
from ..models.puzzles import DoorPuzzle, MathPuzzle, Puzzle, RiddlePuzzle, TriviaPuzzle
from ..models.room import EscapeRoom
from .fields import opt_bool, opt_int, opt_item_name, opt_str
from .sources import read_text

logger = logging.getLogger(__name__)

_DOOR_STATE_KEYS = ("correctDoor", "attempts", "difficulty")


class RoomLoader:
    """
    Builds EscapeRoom objects from the room catalog document.

    The document is either an array of room objects or one room object. Only
    the top-level shape is fatal: a room or puzzle that cannot be mapped is
    logged and skipped, and missing fields fall back to defaults.
    """

    def load_rooms(self, source: Union[str, Path]) -> List[EscapeRoom]:
        text = read_text(source)
        root = parse(text)
        if isinstance(root, list):
            rooms = []
            for element in root:
                if not isinstance(element, dict):
                    logger.debug("Ignoring non-object room entry")
                    continue
                room = self._try_parse_room(element)
                if room is not None:
                    rooms.append(room)
        elif isinstance(root, dict):
            rooms = [self.parse_room(root)]
        else:
            raise SchemaError("Top-level JSON must be array or object")
        logger.info("Loaded %d room(s) from %s", len(rooms), source)
        return rooms

    def _try_parse_room(self, obj: Mapping[str, Any]) -> Optional[EscapeRoom]:
        try:
            return self.parse_room(obj)
        except (FieldError, ValueError, TypeError) as e:
            logger.warning("Skipping room %r: %s", obj.get("name"), e)
            return None

    def parse_room(self, obj: Mapping[str, Any]) -> EscapeRoom:
        name = opt_str(obj, "name")
        if name is None:
            name = opt_str(obj, "roomName", "Unnamed Room")
        room = EscapeRoom(
            name=name,
            description=opt_str(obj, "description", ""),
            level=opt_int(obj, "level", 1),
            solved=opt_bool(obj, "isSolved", False),
        )

        raw = obj["puzzle"] if "puzzle" in obj else obj.get("puzzles")
        if isinstance(raw, list):
            for element in raw:
                if not isinstance(element, dict):
                    logger.debug("Ignoring non-object puzzle entry in room %s", name)
                    continue
                try:
                    room.add_puzzle(self.parse_puzzle(element))
                except (FieldError, ValueError, TypeError) as e:
                    logger.warning("Skipping puzzle in room %s: %s", name, e)
        return room

    def parse_puzzle(self, obj: Mapping[str, Any]) -> Puzzle:
        kind = (opt_str(obj, "type", "riddle") or "riddle").strip().lower()
        question = opt_str(obj, "question", "")
        difficulty = Difficulty.from_string(opt_str(obj, "difficulty"))

        puzzle: Puzzle
        if kind == MathPuzzle.kind:
            puzzle = MathPuzzle(question, opt_int(obj, "answer", 0), difficulty)
        elif kind == DoorPuzzle.kind:
            doors = max(1, opt_int(obj, "numDoors", 2))
            if any(k in obj for k in _DOOR_STATE_KEYS):
                door_difficulty = difficulty if "difficulty" in obj else Difficulty.MEDIUM
                puzzle = DoorPuzzle(
                    doors,
                    opt_int(obj, "correctDoor", 1),
                    opt_int(obj, "attempts", 0),
                    door_difficulty,
                )
            else:
                puzzle = DoorPuzzle.with_door_count(doors)
                puzzle.difficulty = difficulty
        elif kind == TriviaPuzzle.kind:
            puzzle = TriviaPuzzle(question, opt_str(obj, "answer"), opt_str(obj, "category"), difficulty)
        else:
            if kind != RiddlePuzzle.kind:
                logger.debug("Unknown puzzle type %r; treating as riddle", kind)
            puzzle = RiddlePuzzle(question, opt_str(obj, "answer"), opt_str(obj, "category"), difficulty)

        self._apply_shared_fields(puzzle, obj)
        return puzzle

    @staticmethod
    def _apply_shared_fields(puzzle: Puzzle, obj: Mapping[str, Any]) -> None:
        puzzle_id = opt_int(obj, "id", -1)
        if puzzle_id >= 0:
            puzzle.id = puzzle_id
        reward = opt_item_name(obj, "reward")
        if reward is not None:
            puzzle.reward = reward
        elif obj.get("reward") is not None:
            logger.debug("Ignoring unknown reward %r", obj.get("reward"))
        puzzle.locked = opt_bool(obj, "locked", False)
        hint = opt_str(obj, "hiddenHint")
        if hint is not None and hint.strip():
            puzzle.hidden_hint = hint


def load_rooms(source: Union[str, Path]) -> List[EscapeRoom]:
    return RoomLoader().load_rooms(source)
