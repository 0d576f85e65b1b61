from __future__ import annotations

import logging
from typing import Optional

from .models.progress import Progress
from .models.puzzles import Puzzle
from .settings import ScoringSettings, Settings

logger = logging.getLogger(__name__)


def _scoring(settings: Optional[Settings]) -> ScoringSettings:
    return settings.scoring if settings is not None else ScoringSettings()


def _lookup(table: dict, name: Optional[str], fallback: str) -> int:
    key = (name or "").strip().lower()
    if key in table:
        return table[key]
    return table.get(fallback, 0)


def points_for_difficulty(name: Optional[str], settings: Optional[Settings] = None) -> int:
    """Points for solving a puzzle of difficulty ``name``; unknown names score as the fallback."""
    scoring = _scoring(settings)
    return _lookup(scoring.points, name, scoring.fallback)


def hint_penalty_seconds(name: Optional[str], settings: Optional[Settings] = None) -> int:
    scoring = _scoring(settings)
    return _lookup(scoring.hint_penalty_seconds, name, scoring.fallback)


def format_seconds(seconds: int) -> str:
    """Render a duration as ``m:ss``. Negative values render as ``0:00``."""
    total = max(0, int(seconds))
    minutes, secs = divmod(total, 60)
    return f"{minutes}:{secs:02d}"


def award_solve(progress: Progress, puzzle: Puzzle, settings: Optional[Settings] = None) -> int:
    """Mark ``puzzle`` completed and add its points. Returns the points awarded.

    A puzzle already completed (by id or question) awards nothing.
    """
    if progress.has_completed_by_either(puzzle.id, puzzle.question):
        return 0
    progress.mark_completed_by_id(puzzle.id)
    progress.mark_completed_by_question(puzzle.question)
    points = points_for_difficulty(puzzle.difficulty.name, settings)
    progress.increase_score(points)
    logger.info("Puzzle %d solved for %d point(s)", puzzle.id, points)
    return points
