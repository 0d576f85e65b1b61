from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class ItemName(str, Enum):
    """Closed set of inventory item kinds."""

    KEY = "KEY"
    TORCH = "TORCH"
    POTION = "POTION"
    CROWBAR = "CROWBAR"
    MAP = "MAP"
    GOLD = "GOLD"

    @classmethod
    def from_string(cls, text: Optional[str]) -> Optional["ItemName"]:
        """Resolve ``text`` (trimmed, any case) to a member, or None if unknown."""
        if text is None:
            return None
        try:
            return cls[str(text).strip().upper()]
        except KeyError:
            return None


@dataclass(frozen=True)
class Item:
    """Immutable template shared by every unit of one ItemName.

    Quantities live in the Inventory; this only describes what the item is
    and how it behaves when used.
    """

    name: ItemName
    description: str = ""
    usable: bool = False
    consumable: bool = False
    use_text: str = ""

    def __post_init__(self) -> None:
        # Frozen dataclass: normalise through object.__setattr__
        if self.description is None:
            object.__setattr__(self, "description", "")
        if self.use_text is None:
            object.__setattr__(self, "use_text", "")

    def __str__(self) -> str:
        return (
            f"Item{{name={self.name.name}, usable={str(self.usable).lower()}, "
            f"consumable={str(self.consumable).lower()}, desc='{self.description}'}}"
        )


class ItemCatalog:
    """
    Built-in item templates used when rebuilding an inventory from a save.

    KEY, TORCH and POTION carry handcrafted text; every other name gets a
    generic template synthesized on first request.
    """

    def __init__(self) -> None:
        self._templates: Dict[ItemName, Item] = {}
        self._load_defaults()

    def _load_defaults(self) -> None:
        self.register(
            Item(
                ItemName.KEY,
                "A rusted iron key. It might open a locked door.",
                usable=True,
                consumable=True,
                use_text="You turn the key. Something unlocks with a heavy clunk.",
            )
        )
        self.register(
            Item(
                ItemName.TORCH,
                "A flickering torch that pushes back the dark.",
                usable=True,
                consumable=False,
                use_text="The torch lights up the room.",
            )
        )
        self.register(
            Item(
                ItemName.POTION,
                "A murky potion. Smells faintly of cinnamon.",
                usable=True,
                consumable=True,
                use_text="You drink the potion and feel your head clear.",
            )
        )

    def register(self, template: Item) -> None:
        self._templates[template.name] = template

    def get(self, name: ItemName) -> Item:
        template = self._templates.get(name)
        if template is None:
            template = Item(name, f"An item: {name.name}")
            self._templates[name] = template
            logger.debug("Synthesized generic template for %s", name.name)
        return template

    def has_handcrafted(self, name: ItemName) -> bool:
        return name in (ItemName.KEY, ItemName.TORCH, ItemName.POTION)


# A default, module-level catalog for convenience
DEFAULT_ITEM_CATALOG = ItemCatalog()
