"""
Application Layer Interfaces (Ports)

Defines contracts between application layer and infrastructure adapters.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from ..domain.entities.draft_guild import DraftGuild
from ..domain.entities.item import DraftItem


# Repository Interfaces
class IGuildRepository(ABC):
    """Repository for DraftGuilds, one per community"""

    @abstractmethod
    async def save_guild(self, guild: DraftGuild) -> None:
        """Save a guild"""
        pass

    @abstractmethod
    async def get_guild(self, guild_id: int) -> Optional[DraftGuild]:
        """Get guild by ID"""
        pass

    @abstractmethod
    async def delete_guild(self, guild_id: int) -> None:
        """Delete a guild"""
        pass

    @abstractmethod
    async def get_all_guilds(self) -> List[DraftGuild]:
        """Get all known guilds"""
        pass


# External Service Interfaces
class IItemPool(ABC):
    """Catalog the draftable items come from"""

    @abstractmethod
    def fetch(self, identifier: str) -> Optional[DraftItem]:
        """Build the item for identifier, or None if the catalog lacks it"""
        pass

    @abstractmethod
    def list_available(self) -> Sequence[str]:
        """List every identifier in the catalog"""
        pass


# Configuration Interfaces
class IDraftConfiguration(ABC):
    """Interface for draft configuration"""

    @abstractmethod
    def get_default_team_size(self) -> int:
        """Items each participant ends the draft with"""
        pass

    @abstractmethod
    def get_max_queue_size(self) -> Optional[int]:
        """Longest pick queue allowed, None for unbounded"""
        pass
