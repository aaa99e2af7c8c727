"""
Draft Item

Anything that can be drafted. The core only relies on a unique name; the
catalog items come from is the IItemPool port.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Protocol, runtime_checkable


@runtime_checkable
class DraftItem(Protocol):
    """
    Capability required from a drafted thing.

    `name` must be unique within the pool the item was fetched from; it is the
    identifier used in queues, the allocation set and roster lookups.
    """

    @property
    def name(self) -> str:
        ...


@dataclass(frozen=True)
class Item:
    """Plain item value for hosts that don't bring their own type"""
    name: str
    data: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self):
        if not self.name:
            raise ValueError("Item name cannot be empty")

    def __str__(self) -> str:
        return self.name

