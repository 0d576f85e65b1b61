import logging
from pathlib import Path

import pytest

from escaperoom.logging_config import configure_logging, resolve_level
from escaperoom.settings import ENV_DATA_DIR, Settings


@pytest.fixture(autouse=True)
def no_data_dir_env(monkeypatch):
    monkeypatch.delenv(ENV_DATA_DIR, raising=False)


def test_defaults_from_packaged_yaml():
    s = Settings.load()
    assert s.paths.users_file == "users.json"
    assert s.paths.data_dir is None
    assert s.scoring.points == {"easy": 10, "medium": 20, "hard": 30}
    assert s.scoring.hint_penalty_seconds["hard"] == 120
    assert s.data_dir.name


def test_user_file_is_merged_over_defaults(tmp_path: Path):
    user = tmp_path / "settings.yaml"
    user.write_text("paths:\n  data_dir: %s\nscoring:\n  points:\n    hard: 99\n" % tmp_path, encoding="utf-8")
    s = Settings.load(user)
    assert s.scoring.points["hard"] == 99
    assert s.scoring.points["easy"] == 10
    assert s.users_path == tmp_path / "users.json"
    assert s.leaderboard_path == tmp_path / "leaderboard.json"


def test_missing_user_file_warns(tmp_path: Path, caplog):
    with caplog.at_level(logging.WARNING):
        s = Settings.load(tmp_path / "absent.yaml")
    assert s.paths.rooms_file == "rooms.json"
    assert "User settings file not found" in caplog.text


def test_env_overrides_data_dir(tmp_path: Path, monkeypatch):
    monkeypatch.setenv(ENV_DATA_DIR, str(tmp_path))
    s = Settings()
    assert s.data_dir == tmp_path
    assert s.hints_path == tmp_path / "hints.txt"
    assert s.rooms_path == tmp_path / "rooms.json"


def test_save_round_trip(tmp_path: Path):
    s = Settings.load()
    s.scoring.points["easy"] = 12
    out = tmp_path / "cfg" / "settings.yaml"
    s.save(out)
    assert Settings.load(out).scoring.points["easy"] == 12


@pytest.mark.parametrize(
    "name, level",
    [(None, logging.INFO), ("debug", logging.DEBUG), (" WARNING ", logging.WARNING), ("10", 10), ("chatty", logging.INFO)],
)
def test_resolve_level(name, level):
    assert resolve_level(name) == level


def test_configure_logging_respects_env(monkeypatch):
    monkeypatch.setenv("ESCAPEROOM_LOG_LEVEL", "debug")
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        configure_logging()
        assert root.level == logging.DEBUG
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
