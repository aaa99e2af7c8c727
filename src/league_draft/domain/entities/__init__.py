"""
Domain Entities

Core objects of the draft: items, participants, leagues and guilds.
"""

from .item import DraftItem, Item
from .league_state import LeagueState
from .participant import Participant
from .outcomes import PickOutcome, TradeResult, TurnAnnouncement, WaiverResult
from .league import League
from .draft_guild import DraftGuild

__all__ = [
    "DraftItem",
    "Item",
    "LeagueState",
    "Participant",
    "PickOutcome",
    "TradeResult",
    "TurnAnnouncement",
    "WaiverResult",
    "League",
    "DraftGuild"
]
