"""
Outcome Value Objects

What a League mutation changed and who the host should notify. The core never
sends anything itself.
"""

from dataclasses import dataclass, field
from typing import Hashable, List, Optional, Tuple

from ..exceptions import LeagueDraftError
from .item import DraftItem


@dataclass(frozen=True)
class TurnAnnouncement:
    """A participant has just been put on the clock"""
    league_name: str
    participant: Hashable
    output: Optional[object] = None


@dataclass(frozen=True)
class PickOutcome:
    """
    Result of resolving a pick.

    `item` is None when nothing in the queue could be allocated; the participant
    then stays on the clock and `next_participant` names them again. When the
    pick filled the last roster `draft_finished` is set and there is no next
    participant.
    """
    league_name: str
    participant: Hashable
    item: Optional[DraftItem] = None
    next_participant: Optional[Hashable] = None
    draft_finished: bool = False
    pick_number: Optional[int] = None
    rejected: List[Tuple[str, LeagueDraftError]] = field(default_factory=list)

    @property
    def picked(self) -> bool:
        return self.item is not None

    @property
    def rejected_identifiers(self) -> List[str]:
        return [identifier for identifier, _ in self.rejected]


@dataclass(frozen=True)
class WaiverResult:
    """A roster item was exchanged for one from the pool"""
    league_name: str
    participant: Hashable
    dropped: DraftItem
    picked_up: DraftItem
    roster: Tuple[DraftItem, ...] = ()


@dataclass(frozen=True)
class TradeResult:
    """Two participants swapped one item each"""
    league_name: str
    participant_a: Hashable
    item_a: DraftItem
    participant_b: Hashable
    item_b: DraftItem
    roster_a: Tuple[DraftItem, ...] = ()
    roster_b: Tuple[DraftItem, ...] = ()
