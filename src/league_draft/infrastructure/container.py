"""
Dependency Injection Configuration

Wires the league draft services together.
"""

from typing import Any, Dict, Iterable, Optional
from ..application.interfaces import IDraftConfiguration, IGuildRepository, IItemPool
from ..application.draft_service import DraftApplicationService
from .storage_adapter import MemoryGuildRepository
from .memory_pool import MemoryItemPool
from .draft_config_adapter import DraftConfigurationAdapter


class DraftContainer:
    """
    Dependency injection container for the league draft system.

    Centralizes dependency wiring; each host (bot instance, test) builds its own.
    """

    def __init__(
        self,
        item_pool: Optional[IItemPool] = None,
        configuration: Optional[IDraftConfiguration] = None,
        guild_repository: Optional[IGuildRepository] = None
    ):
        """
        Initialize container.

        Args:
            item_pool: Default pool for new Leagues (empty catalog if omitted)
            configuration: Draft settings (environment-driven if omitted)
            guild_repository: Guild storage (in-memory if omitted)
        """
        self._services: Dict[str, Any] = {}
        self._services['item_pool'] = item_pool if item_pool is not None else MemoryItemPool({})
        self._services['draft_configuration'] = configuration or DraftConfigurationAdapter()
        self._services['guild_repository'] = guild_repository or MemoryGuildRepository()

    @classmethod
    def from_item_names(cls, names: Iterable[str], **kwargs) -> "DraftContainer":
        """Container whose default pool is a plain list of item names"""
        return cls(item_pool=MemoryItemPool.from_names(names), **kwargs)

    def get_draft_service(self) -> DraftApplicationService:
        """Get configured draft application service"""
        if 'draft_service' not in self._services:
            self._services['draft_service'] = DraftApplicationService(
                guild_repository=self.get_guild_repository(),
                item_pool=self.get_item_pool(),
                configuration=self.get_draft_configuration()
            )
        return self._services['draft_service']

    def get_guild_repository(self) -> IGuildRepository:
        """Get guild repository"""
        return self._services['guild_repository']

    def get_item_pool(self) -> IItemPool:
        """Get default item pool"""
        return self._services['item_pool']

    def get_draft_configuration(self) -> IDraftConfiguration:
        """Get draft configuration"""
        return self._services['draft_configuration']

    def cleanup(self) -> None:
        """Cleanup resources"""
        repo = self._services.get('guild_repository')
        if hasattr(repo, 'clear_all_guilds'):
            repo.clear_all_guilds()
        self._services.pop('draft_service', None)
