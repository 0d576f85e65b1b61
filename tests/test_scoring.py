import pytest

from escaperoom.models import Difficulty, MathPuzzle, Progress
from escaperoom.scoring import award_solve, format_seconds, hint_penalty_seconds, points_for_difficulty
from escaperoom.settings import ScoringSettings, Settings


@pytest.mark.parametrize("name, points", [("easy", 10), ("MEDIUM", 20), (" hard ", 30), (None, 10), ("ALL", 10)])
def test_points_for_difficulty(name, points):
    assert points_for_difficulty(name) == points


def test_hint_penalty():
    assert hint_penalty_seconds("hard") == 120
    assert hint_penalty_seconds("whatever") == 30


def test_custom_settings():
    settings = Settings(scoring=ScoringSettings(points={"EASY": 1, "Hard": 5}, fallback="easy"))
    assert points_for_difficulty("hard", settings) == 5
    assert points_for_difficulty("medium", settings) == 1


def test_unknown_fallback_is_rejected():
    with pytest.raises(ValueError):
        ScoringSettings(points={"easy": 1}, fallback="legendary")


@pytest.mark.parametrize("seconds, text", [(0, "0:00"), (59, "0:59"), (61, "1:01"), (3600, "60:00"), (-5, "0:00")])
def test_format_seconds(seconds, text):
    assert format_seconds(seconds) == text


def test_award_solve_once():
    progress = Progress()
    puzzle = MathPuzzle("2+2", 4, Difficulty.MEDIUM)
    puzzle.id = 7
    assert award_solve(progress, puzzle) == 20
    assert progress.score == 20
    assert progress.has_completed_puzzle_id(7)
    assert progress.completed_puzzles == ["2+2"]
    assert award_solve(progress, puzzle) == 0
    assert progress.score == 20
