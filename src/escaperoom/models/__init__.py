"""Domain entities: puzzles, rooms, items, inventories, progress and users."""

from .difficulty import Difficulty
from .inventory import Inventory
from .items import DEFAULT_ITEM_CATALOG, Item, ItemCatalog, ItemName
from .progress import Progress
from .puzzles import DoorPuzzle, MathPuzzle, Puzzle, RiddlePuzzle, TriviaPuzzle
from .room import EscapeRoom
from .user import User, UserList

__all__ = [
    "Difficulty",
    "DoorPuzzle",
    "DEFAULT_ITEM_CATALOG",
    "EscapeRoom",
    "Inventory",
    "Item",
    "ItemCatalog",
    "ItemName",
    "MathPuzzle",
    "Progress",
    "Puzzle",
    "RiddlePuzzle",
    "TriviaPuzzle",
    "User",
    "UserList",
]
