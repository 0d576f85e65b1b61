import pytest

from escaperoom.models import (
    Difficulty,
    DoorPuzzle,
    EscapeRoom,
    ItemName,
    MathPuzzle,
    RiddlePuzzle,
    TriviaPuzzle,
)


def test_difficulty_lookup():
    assert Difficulty.from_string("hard") is Difficulty.HARD
    assert Difficulty.from_string(" Medium ") is Difficulty.MEDIUM
    assert Difficulty.from_string("all") is Difficulty.ALL
    assert Difficulty.from_string("nightmare") is Difficulty.EASY
    assert Difficulty.from_string(None) is Difficulty.EASY


def test_base_defaults():
    p = RiddlePuzzle(None, "x", None, None)
    assert p.id == -1
    assert p.question == ""
    assert p.difficulty is Difficulty.EASY
    assert not p.locked
    assert p.reward is None
    assert p.reveal_hidden_hint() is None
    assert not p.hidden_hint_shown


def test_hidden_hint_reveal():
    p = MathPuzzle("1+1", 2)
    p.hidden_hint = "Count your fingers"
    assert p.reveal_hidden_hint() == "Count your fingers"
    assert p.hidden_hint_shown


def test_riddle_answer_is_trimmed_and_case_insensitive():
    p = RiddlePuzzle("A zombie stalks the halls", "brains", None, Difficulty.EASY)
    assert not p.check_answer("bones")
    assert not p.solved
    assert p.check_answer("  BRAINS ")
    assert p.solved
    assert not p.check_answer(None)
    assert not RiddlePuzzle("q", None).check_answer("anything")


def test_trivia_answer():
    p = TriviaPuzzle("Capital?", "Paris", "geo", Difficulty.EASY)
    assert p.check_answer("paris")
    assert not p.check_answer("London")
    assert not p.check_answer(None)
    assert p.kind == "trivia"


@pytest.mark.parametrize("reply, ok", [("4", True), (" 4 ", True), ("5", False), ("four", False), ("4.0", False), (None, False)])
def test_math_answer(reply, ok):
    assert MathPuzzle("2 + 2", 4, Difficulty.MEDIUM).check_answer(reply) is ok


def test_door_clamping_and_question():
    door = DoorPuzzle(0, correct_door=5, attempts_allowed=-2)
    assert door.num_doors == 1
    assert door.correct_door == 1
    assert door.attempts_allowed == 0
    assert door.question == "Choose a number (1-1). Answer carefully.."
    door = DoorPuzzle(3, correct_door=9)
    assert door.correct_door == 3
    door.attempts_made = -1
    assert door.attempts_made == 0


def test_door_count_constructor_defaults():
    door = DoorPuzzle.with_door_count(3)
    assert door.num_doors == 3
    assert door.correct_door == 1
    assert door.attempts_allowed == 0
    assert door.difficulty is Difficulty.MEDIUM
    assert door.kind == "door"


def test_door_answers():
    door = DoorPuzzle(3, correct_door=2)
    assert door.check_answer("2")
    assert door.check_answer("door 2")
    assert not door.check_answer("1")
    assert door.attempts_made == 3
    assert not door.check_answer("")
    assert not door.check_answer(None)
    assert not door.check_answer("7")
    assert not door.check_answer("door two")
    assert door.attempts_made == 3


def test_door_attempt_limit():
    door = DoorPuzzle(3, correct_door=3, attempts_allowed=2)
    assert not door.check_answer("1")
    assert not door.check_answer("2")
    assert not door.check_answer("3")
    assert door.attempts_made == 3


def test_locked_or_blocked_door_cannot_be_answered():
    door = DoorPuzzle(2, correct_door=1)
    door.locked = True
    assert not door.check_answer("1")
    door.locked = False
    door.blocked = True
    assert not door.check_answer("1")
    assert door.attempts_made == 0


def test_room_first_puzzle():
    room = EscapeRoom(name="Foyer")
    assert room.first_puzzle() is None
    p = MathPuzzle("1+1", 2)
    p.reward = ItemName.KEY
    room.add_puzzle(p)
    room.add_puzzle(None)
    assert room.first_puzzle() is p
    assert len(room.puzzles) == 1
