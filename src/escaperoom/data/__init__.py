"""Room catalog loading, puzzle id assignment and hint files."""

from .flatten import flatten_puzzles
from .hints import HintList
from .rooms import RoomLoader, load_rooms
from .sources import read_text

__all__ = ["HintList", "RoomLoader", "flatten_puzzles", "load_rooms", "read_text"]
