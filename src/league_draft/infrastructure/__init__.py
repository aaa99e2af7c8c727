"""
Infrastructure Layer

Adapters for external systems and services.
"""

from .storage_adapter import MemoryGuildRepository
from .memory_pool import MemoryItemPool
from .draft_config_adapter import DraftConfigurationAdapter
from .discord_adapter import DiscordIdentity, channel_destination, resolve_channel
from .container import DraftContainer

__all__ = [
    "MemoryGuildRepository",
    "MemoryItemPool",
    "DraftConfigurationAdapter",
    "DiscordIdentity",
    "channel_destination",
    "resolve_channel",
    "DraftContainer"
]
