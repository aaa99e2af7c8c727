"""
Memory Item Pool

Catalog-backed item pool for hosts whose draftable things fit in memory, such
as a list of names loaded at startup.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..application.interfaces import IItemPool
from ..domain.entities.item import Item

logger = logging.getLogger(__name__)


class MemoryItemPool(IItemPool):
    """
    Item pool over a fixed catalog.

    The catalog is read-only after construction, so concurrent fetches need no
    locking. Each fetch builds a fresh Item; the League that allocates it owns
    that copy.
    """

    def __init__(self, catalog: Mapping[str, Mapping[str, Any]]):
        self._catalog: Dict[str, Dict[str, Any]] = {
            name: dict(data) for name, data in catalog.items()
        }
        logger.info(f"Loaded item pool with {len(self._catalog)} items")

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "MemoryItemPool":
        """Build a pool of data-less items"""
        catalog: Dict[str, Dict[str, Any]] = {}
        for name in names:
            if name in catalog:
                raise ValueError(f"Duplicate item name in pool: {name}")
            catalog[name] = {}
        return cls(catalog)

    def fetch(self, identifier: str) -> Optional[Item]:
        data = self._catalog.get(identifier)
        if data is None:
            return None
        return Item(name=identifier, data=dict(data))

    def list_available(self) -> List[str]:
        return list(self._catalog)

    def __len__(self) -> int:
        return len(self._catalog)

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._catalog
