"""
Escape room core package.

Headless domain logic for the escape-room game:
- A small JSON value engine (parse/serialize) used for every document
- Room and puzzle catalog loading with id assignment
- Player accounts, progress and inventory persistence

Presentation layers (windows, console menus, narration) should import and
compose these services rather than reach into the documents themselves.
"""
from importlib.metadata import version, PackageNotFoundError

from .codec import parse, serialize
from .data import HintList, RoomLoader, flatten_puzzles
from .persistence import Leaderboard, UserStore
from .settings import Settings

try:
    __version__ = version("escaperoom")
except PackageNotFoundError:  # pragma: no cover - during tests without packaging
    __version__ = "0.0.0"

__all__ = [
    "HintList",
    "Leaderboard",
    "RoomLoader",
    "Settings",
    "UserStore",
    "flatten_puzzles",
    "parse",
    "serialize",
    "__version__",
]
