import json
from pathlib import Path

import pytest

from escaperoom.data import RoomLoader, load_rooms
from escaperoom.errors import NotFoundError, ParseError, SchemaError
from escaperoom.models import Difficulty, DoorPuzzle, ItemName, MathPuzzle, RiddlePuzzle, TriviaPuzzle


@pytest.fixture()
def loader() -> RoomLoader:
    return RoomLoader()


def write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_loads_array_of_rooms(tmp_path: Path, loader: RoomLoader):
    src = write_json(
        tmp_path / "rooms.json",
        [
            {
                "name": "Foyer",
                "description": "Dark",
                "level": 2,
                "isSolved": True,
                "puzzles": [
                    {"type": "math", "question": "2 + 2", "answer": 4, "difficulty": "medium", "id": 5},
                    {"type": "Trivia", "question": "Capital?", "answer": "Paris", "category": "geo"},
                    {"question": "Riddle?", "answer": "echo", "reward": "key", "locked": True, "hiddenHint": "Listen"},
                ],
            },
            "not a room",
            {"roomName": "Cellar"},
        ],
    )
    rooms = loader.load_rooms(src)
    assert [r.name for r in rooms] == ["Foyer", "Cellar"]

    foyer = rooms[0]
    assert foyer.description == "Dark"
    assert foyer.level == 2
    assert foyer.solved is True
    math_p, trivia, riddle = foyer.puzzles
    assert isinstance(math_p, MathPuzzle)
    assert math_p.answer == 4
    assert math_p.difficulty is Difficulty.MEDIUM
    assert math_p.id == 5
    assert isinstance(trivia, TriviaPuzzle)
    assert trivia.category == "geo"
    assert trivia.id == -1
    assert isinstance(riddle, RiddlePuzzle)
    assert riddle.reward is ItemName.KEY
    assert riddle.locked
    assert riddle.hidden_hint == "Listen"
    assert riddle.difficulty is Difficulty.EASY

    cellar = rooms[1]
    assert cellar.description == ""
    assert cellar.level == 1
    assert cellar.puzzles == []


def test_single_room_object_and_puzzle_key(tmp_path: Path, loader: RoomLoader):
    src = write_json(
        tmp_path / "room.json",
        {"puzzle": [{"type": "riddle", "question": "q", "answer": "a"}, 7], "puzzles": [{"type": "math"}]},
    )
    rooms = loader.load_rooms(src)
    assert len(rooms) == 1
    assert rooms[0].name == "Unnamed Room"
    assert len(rooms[0].puzzles) == 1
    assert isinstance(rooms[0].puzzles[0], RiddlePuzzle)


def test_door_without_explicit_state(loader: RoomLoader):
    door = loader.parse_puzzle({"type": "door", "numDoors": 3})
    assert isinstance(door, DoorPuzzle)
    assert door.num_doors == 3
    assert door.correct_door == 1
    assert door.attempts_allowed == 0
    assert door.difficulty is Difficulty.EASY


def test_door_with_explicit_state(loader: RoomLoader):
    door = loader.parse_puzzle({"type": "door", "numDoors": 4, "correctDoor": 3, "attempts": 2})
    assert door.correct_door == 3
    assert door.attempts_allowed == 2
    assert door.difficulty is Difficulty.MEDIUM
    hard = loader.parse_puzzle({"type": "door", "difficulty": "HARD"})
    assert hard.num_doors == 2
    assert hard.difficulty is Difficulty.HARD
    clamped = loader.parse_puzzle({"type": "door", "numDoors": -3})
    assert clamped.num_doors == 1


def test_shared_fields_are_lenient(loader: RoomLoader):
    p = loader.parse_puzzle(
        {"type": "unknown", "question": 12, "id": "8", "reward": "sword", "locked": "true", "hiddenHint": "   "}
    )
    assert isinstance(p, RiddlePuzzle)
    assert p.question == "12"
    assert p.id == 8
    assert p.reward is None
    assert p.locked is True
    assert p.hidden_hint is None
    assert loader.parse_puzzle({"type": "math", "id": -4, "answer": "x"}).id == -1
    assert loader.parse_puzzle({"type": "math", "answer": "x"}).answer == 0


def test_missing_source_raises_not_found(tmp_path: Path, loader: RoomLoader):
    with pytest.raises(NotFoundError) as exc:
        loader.load_rooms(tmp_path / "nope.json")
    assert "Cannot open" in str(exc.value)
    assert isinstance(exc.value, FileNotFoundError)


def test_missing_path_does_not_fall_back_to_bundled_catalog(tmp_path: Path, loader: RoomLoader):
    with pytest.raises(NotFoundError):
        loader.load_rooms(tmp_path / "missing_dir" / "rooms.json")
    with pytest.raises(NotFoundError):
        loader.load_rooms(str(tmp_path / "rooms.json"))


def test_unknown_bare_name_raises_not_found(loader: RoomLoader):
    with pytest.raises(NotFoundError):
        loader.load_rooms("no_such_catalog.json")


def test_wrong_top_level_shape(tmp_path: Path, loader: RoomLoader):
    src = tmp_path / "rooms.json"
    src.write_text("42", encoding="utf-8")
    with pytest.raises(SchemaError, match="Top-level JSON must be array or object"):
        loader.load_rooms(src)


def test_malformed_json_surfaces_parse_error(tmp_path: Path, loader: RoomLoader):
    src = tmp_path / "rooms.json"
    src.write_text('[{"name": "Foyer",]', encoding="utf-8")
    with pytest.raises(ParseError):
        loader.load_rooms(src)


def test_bundled_catalog_is_found_by_name():
    rooms = load_rooms("rooms.json")
    assert len(rooms) == 3
    assert rooms[0].name == "Dark Foyer"
    door = rooms[1].puzzles[1]
    assert isinstance(door, DoorPuzzle)
    assert door.locked
