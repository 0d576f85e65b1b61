from __future__ import annotations

import logging
import os
from importlib import resources
from pathlib import Path
from typing import Dict, Optional

import yaml
from platformdirs import PlatformDirs
from pydantic import BaseModel, Field, field_validator, model_validator

logger = logging.getLogger(__name__)

APP_NAME = "EscapeRoom"
ENV_DATA_DIR = "ESCAPEROOM_DATA_DIR"


class PathsSettings(BaseModel):
    """Where the save files live. File names are relative to ``data_dir``."""

    data_dir: Optional[Path] = Field(default=None, description="Override for the platform data directory")
    users_file: str = Field("users.json", description="User accounts and progress")
    rooms_file: str = Field("rooms.json", description="Room catalog; falls back to the bundled one")
    hints_file: str = Field("hints.txt", description="Hint lines in 'id|hint, hint' form")
    leaderboard_file: str = Field("leaderboard.json", description="Best scores per player")


class ScoringSettings(BaseModel):
    """Points awarded and hint penalties, keyed by lower-case difficulty name."""

    points: Dict[str, int] = Field(default_factory=lambda: {"easy": 10, "medium": 20, "hard": 30})
    hint_penalty_seconds: Dict[str, int] = Field(default_factory=lambda: {"easy": 30, "medium": 60, "hard": 120})
    fallback: str = Field("easy", description="Difficulty used for unknown names")

    @field_validator("points", "hint_penalty_seconds")
    @classmethod
    def lower_keys(cls, v: Dict[str, int]) -> Dict[str, int]:
        return {str(k).strip().lower(): int(n) for k, n in (v or {}).items()}

    @field_validator("fallback")
    @classmethod
    def lower_fallback(cls, v: str) -> str:
        return v.strip().lower()

    @model_validator(mode="after")
    def fallback_is_known(self) -> "ScoringSettings":
        if self.fallback not in self.points:
            raise ValueError(f"Fallback difficulty '{self.fallback}' has no points entry")
        return self


class Settings(BaseModel):
    paths: PathsSettings = Field(default_factory=PathsSettings)
    scoring: ScoringSettings = Field(default_factory=ScoringSettings)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def defaults(cls) -> dict:
        with resources.files("escaperoom.resources").joinpath("default_settings.yaml").open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Build settings from the bundled defaults plus an optional user YAML file."""
        user_data: dict = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)
        settings = cls.model_validate(cls._deep_merge(cls.defaults(), user_data))
        logger.debug("Settings merged: %s", settings)
        return settings

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(self.model_dump(mode="json"), f, sort_keys=False)
        logger.info("Saved settings to %s", path)

    # Resolved locations

    @property
    def data_dir(self) -> Path:
        """ESCAPEROOM_DATA_DIR, then ``paths.data_dir``, then the platform data dir."""
        env = os.getenv(ENV_DATA_DIR)
        if env:
            return Path(env).expanduser()
        if self.paths.data_dir is not None:
            return Path(self.paths.data_dir).expanduser()
        return PlatformDirs(APP_NAME, appauthor=False).user_data_path

    @property
    def users_path(self) -> Path:
        return self.data_dir / self.paths.users_file

    @property
    def rooms_path(self) -> Path:
        return self.data_dir / self.paths.rooms_file

    @property
    def hints_path(self) -> Path:
        return self.data_dir / self.paths.hints_file

    @property
    def leaderboard_path(self) -> Path:
        return self.data_dir / self.paths.leaderboard_file
