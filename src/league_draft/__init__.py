"""
League Draft System

Turn-based drafting of unique items from a shared pool for a Discord bot:
league lifecycle, pick queues, atomic pick resolution, waivers and trades.
The core reports outcomes; sending messages is up to the host bot.
"""

from .domain import (
    DraftGuild,
    DraftItem,
    Item,
    League,
    LeagueDraftError,
    LeagueState,
    PickOutcome,
    TradeResult,
    TurnAnnouncement,
    WaiverResult
)
from .application.draft_service import DraftApplicationService
from .application.interfaces import IItemPool
from .infrastructure.container import DraftContainer

__all__ = [
    "DraftGuild",
    "DraftItem",
    "Item",
    "IItemPool",
    "League",
    "LeagueDraftError",
    "LeagueState",
    "PickOutcome",
    "TradeResult",
    "TurnAnnouncement",
    "WaiverResult",
    "DraftApplicationService",
    "DraftContainer"
]
