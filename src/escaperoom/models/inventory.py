from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from .items import Item, ItemName

logger = logging.getLogger(__name__)


class Inventory:
    """
    Item quantities keyed by ItemName, plus the template each name was first
    added with.

    - Quantities are always positive; an entry that drops to zero is removed.
    - The first template recorded for a name wins for the inventory's lifetime.
    - Every mutator holds an internal lock, so concurrent add/remove calls
      on the same key never lose updates.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._quantities: Dict[ItemName, int] = {}
        self._templates: Dict[ItemName, Item] = {}

    def add_item_by_name(self, name: Optional[ItemName], qty: int, template: Optional[Item] = None) -> None:
        if name is None or qty <= 0:
            return
        with self._lock:
            total = self._quantities.get(name, 0) + qty
            self._quantities[name] = total
            if template is not None and name not in self._templates:
                self._templates[name] = template
        logger.debug('Added %d x %s (total=%d)', qty, name.name, total)

    def add_item(self, item: Item, qty: int = 1) -> None:
        self.add_item_by_name(item.name, qty, item)

    def remove(self, name: Optional[ItemName], qty: int) -> int:
        """Remove up to ``qty`` units and return how many were actually removed."""
        if name is None or qty <= 0:
            return 0
        with self._lock:
            current = self._quantities.get(name, 0)
            if current <= 0:
                return 0
            removed = min(current, qty)
            remaining = current - removed
            if remaining > 0:
                self._quantities[name] = remaining
            else:
                del self._quantities[name]
        logger.debug('Removed %d x %s (left=%d)', removed, name.name, remaining)
        return removed

    def use_item(self, name: Optional[ItemName]) -> bool:
        """
        Use one unit of ``name``.

        Returns False when nothing is in stock or the template is not usable.
        Without a template the item behaves as a plain, non-consumable thing.
        Consumable templates spend one unit.
        """
        if name is None:
            return False
        with self._lock:
            if self._quantities.get(name, 0) <= 0:
                return False
            template = self._templates.get(name)
            if template is None:
                return True
            if not template.usable:
                return False
            if template.consumable:
                remaining = self._quantities[name] - 1
                if remaining > 0:
                    self._quantities[name] = remaining
                else:
                    del self._quantities[name]
        logger.debug('Used %s', name.name)
        return True

    def has(self, name: Optional[ItemName]) -> bool:
        return self.get_quantity(name) > 0

    def get_quantity(self, name: Optional[ItemName]) -> int:
        if name is None:
            return 0
        with self._lock:
            return self._quantities.get(name, 0)

    def get_template(self, name: ItemName) -> Optional[Item]:
        with self._lock:
            return self._templates.get(name)

    def quantities(self) -> Mapping[ItemName, int]:
        """Read-only snapshot of the current quantities."""
        with self._lock:
            return MappingProxyType(dict(self._quantities))

    def sorted_names(self) -> List[ItemName]:
        with self._lock:
            return sorted(self._quantities, key=lambda n: n.name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, ItemName) and self.has(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._quantities)

    def __str__(self) -> str:
        with self._lock:
            snapshot = dict(self._quantities)
        if not snapshot:
            return "Inventory: (empty)"
        parts = [f"{n.name} x{snapshot[n]}" for n in sorted(snapshot, key=lambda n: n.name)]
        return "Inventory: " + ", ".join(parts)
