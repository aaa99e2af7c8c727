"""
Pick Resolver Domain Service

Turns a queued identifier into an item that may be allocated.
"""

from typing import TYPE_CHECKING, AbstractSet

from ..entities.item import DraftItem
from ..exceptions import DuplicateAllocationError, ItemNotFoundError

if TYPE_CHECKING:
    from ...application.interfaces import IItemPool


class PickResolver:
    """
    Validates pick requests against the pool and a League's allocation set.

    Must be called inside the League's critical section: the allocation check
    and the caller's allocation-set update form one atomic step.
    """

    def __init__(self, pool: "IItemPool"):
        self._pool = pool

    @property
    def pool(self) -> "IItemPool":
        return self._pool

    def resolve(self, identifier: str, allocated: AbstractSet[str]) -> DraftItem:
        """Fetch the item for identifier, or raise why it can't be allocated"""
        if identifier in allocated:
            raise DuplicateAllocationError(f"{identifier} has already been allocated")

        item = self._pool.fetch(identifier)
        if item is None:
            raise ItemNotFoundError(f"{identifier} is not in the pool")
        return item
