"""
Storage Adapter

Keeps DraftGuilds in process memory, keyed by Discord guild ID. Everything is
lost on restart; a host that needs durable leagues supplies its own
IGuildRepository.
"""

from typing import Dict, List, Optional
from ..application.interfaces import IGuildRepository
from ..domain.entities.draft_guild import DraftGuild


class MemoryGuildRepository(IGuildRepository):
    """Process-local guild store; the DraftGuild objects are shared, not copied"""

    def __init__(self):
        self._guilds: Dict[int, DraftGuild] = {}

    async def save_guild(self, guild: DraftGuild) -> None:
        self._guilds[guild.guild_id] = guild

    async def get_guild(self, guild_id: int) -> Optional[DraftGuild]:
        return self._guilds.get(guild_id)

    async def delete_guild(self, guild_id: int) -> None:
        """Forget a guild; unknown IDs are ignored"""
        self._guilds.pop(guild_id, None)

    async def get_all_guilds(self) -> List[DraftGuild]:
        return list(self._guilds.values())

    def clear_all_guilds(self) -> None:
        """Drop every guild, used by DraftContainer.cleanup"""
        self._guilds.clear()
