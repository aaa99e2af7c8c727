"""
Domain Layer - Pure Business Logic

Draft state machine: lifecycle, turn order, pick resolution and exchanges.
No external dependencies allowed in this layer.
"""

from .entities.item import DraftItem, Item
from .entities.league import League
from .entities.league_state import LeagueState
from .entities.draft_guild import DraftGuild
from .entities.outcomes import PickOutcome, TradeResult, TurnAnnouncement, WaiverResult
from .exceptions import (
    LeagueDraftError,
    InvalidStateError,
    LeagueInactiveError,
    ItemNotFoundError,
    DuplicateAllocationError,
    NotOwnedError,
    NotQueuedError,
    QueueFullError,
    RosterFullError,
    ParticipantNotFoundError,
    DuplicateLeagueError,
    LeagueNotFoundError
)

__all__ = [
    "DraftItem",
    "Item",
    "League",
    "LeagueState",
    "DraftGuild",
    "PickOutcome",
    "TradeResult",
    "TurnAnnouncement",
    "WaiverResult",
    "LeagueDraftError",
    "InvalidStateError",
    "LeagueInactiveError",
    "ItemNotFoundError",
    "DuplicateAllocationError",
    "NotOwnedError",
    "NotQueuedError",
    "QueueFullError",
    "RosterFullError",
    "ParticipantNotFoundError",
    "DuplicateLeagueError",
    "LeagueNotFoundError"
]
