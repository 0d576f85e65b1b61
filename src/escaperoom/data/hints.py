from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

logger = logging.getLogger(__name__)


class HintList:
    """
    Hints per puzzle id, read from a text file of ``id|hint one, hint two``
    lines.

    Ids follow the global puzzle numbering produced by ``flatten_puzzles``.
    """

    def __init__(self) -> None:
        self._hints: Dict[int, List[str]] = {}

    def load(self, path: Union[str, Path, None]) -> Optional[Path]:
        """Replace the loaded hints with those in ``path``.

        Returns the path on success. Returns None (and keeps the current hints)
        when the file is missing, unreadable or has no usable entry.
        """
        if path is None:
            return None
        p = Path(path)
        if not p.is_file():
            logger.debug("Hints file not found: %s", p)
            return None
        try:
            lines = p.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            logger.warning("Could not read hints file %s: %s", p, e)
            return None

        parsed: Dict[int, List[str]] = {}
        for line in lines:
            line = line.strip()
            if not line or "|" not in line:
                continue
            raw_id, raw_hints = line.split("|", 1)
            try:
                puzzle_id = int(raw_id.strip())
            except ValueError:
                logger.debug("Skipping hint line with bad id: %r", line)
                continue
            hints = [h.strip() for h in raw_hints.split(",") if h.strip()]
            if hints:
                parsed[puzzle_id] = hints

        if not parsed:
            logger.warning("No hints parsed from %s", p)
            return None
        self._hints = parsed
        logger.info("Loaded hints for %d puzzle(s) from %s", len(parsed), p)
        return p

    def get(self, puzzle_id: int) -> Sequence[str]:
        return tuple(self._hints.get(puzzle_id, ()))

    def next_hint(self, puzzle_id: int, already_used: int) -> Optional[str]:
        hints = self._hints.get(puzzle_id)
        if not hints:
            return None
        index = max(0, already_used)
        if index >= len(hints):
            return None
        return hints[index]

    def available_count(self, puzzle_id: int) -> int:
        return len(self._hints.get(puzzle_id, ()))

    def __len__(self) -> int:
        return len(self._hints)
