"""
Participant Entity

A member of a League: a FIFO queue of pick requests and the roster of items
allocated so far. Participants are only mutated through their League, which
holds the lock.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Hashable, List, Optional

from ..exceptions import NotQueuedError, QueueFullError
from .item import DraftItem


@dataclass(eq=False)
class Participant:
    """Represents a participant in a League"""
    identity: Hashable
    max_queue_size: Optional[int] = None
    queue: Deque[str] = field(default_factory=deque)
    roster: List[DraftItem] = field(default_factory=list)
    on_the_clock: bool = False

    def __post_init__(self):
        """Validate participant data after initialization"""
        if self.max_queue_size is not None and self.max_queue_size < 1:
            raise ValueError("Max queue size must be positive")

    @property
    def roster_size(self) -> int:
        return len(self.roster)

    @property
    def has_queued_picks(self) -> bool:
        return bool(self.queue)

    # ===================
    # Queue
    # ===================

    def add_to_player_queue(self, identifier: str) -> None:
        """Append a pick request; it is validated only when dequeued"""
        if not identifier:
            raise ValueError("Identifier cannot be empty")
        if self.max_queue_size is not None and len(self.queue) >= self.max_queue_size:
            raise QueueFullError(
                f"Queue for {self.identity} is full ({self.max_queue_size} requests)"
            )
        self.queue.append(identifier)

    def delete_from_player_queue(self, identifier: str) -> None:
        """Remove the first queued request matching identifier"""
        try:
            self.queue.remove(identifier)
        except ValueError:
            raise NotQueuedError(f"{identifier} is not in the queue for {self.identity}") from None

    def discard_from_queue(self, identifier: str) -> int:
        """Drop every queued request for identifier; returns how many were dropped"""
        before = len(self.queue)
        kept = [queued for queued in self.queue if queued != identifier]
        if len(kept) != before:
            self.queue.clear()
            self.queue.extend(kept)
        return before - len(kept)

    def clear_player_queue(self) -> List[str]:
        """Empty the queue and return what was in it"""
        cleared = list(self.queue)
        self.queue.clear()
        return cleared

    def first_in_queue(self) -> Optional[str]:
        """Pop the front request, or None if the queue is empty"""
        if not self.queue:
            return None
        return self.queue.popleft()

    # ===================
    # Roster
    # ===================

    def lock_in(self, item: DraftItem) -> None:
        self.roster.append(item)

    def roster_index(self, name: str) -> Optional[int]:
        """Position of the item named `name` in the roster"""
        for index, item in enumerate(self.roster):
            if item.name == name:
                return index
        return None

    def owns(self, name: str) -> bool:
        return self.roster_index(name) is not None

    def replace_at(self, index: int, item: DraftItem) -> DraftItem:
        """Swap in `item` at `index` and return the item it replaced"""
        previous = self.roster[index]
        self.roster[index] = item
        return previous
