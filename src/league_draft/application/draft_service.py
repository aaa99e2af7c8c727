"""
Draft Application Service

Facade the bot's command handlers call. Resolves the guild and League a command
is for, applies configured defaults, and hands back the domain outcome so the
caller can word the reply. Domain errors pass through unchanged.
"""

import asyncio
import logging
from typing import Dict, Hashable, Iterable, List, Optional

from ..domain.entities.draft_guild import DraftGuild
from ..domain.entities.league import League
from ..domain.entities.outcomes import PickOutcome, TradeResult, TurnAnnouncement, WaiverResult
from ..domain.exceptions import LeagueDraftError, LeagueNotFoundError
from .dto import LeagueStatusDTO
from .interfaces import IDraftConfiguration, IGuildRepository, IItemPool

logger = logging.getLogger(__name__)


class DraftApplicationService:
    """
    Main application service for league draft operations.

    Every League call is synchronous and short, so it runs directly on the event
    loop; the League's own lock serializes it against other callers.
    """

    def __init__(
        self,
        guild_repository: IGuildRepository,
        item_pool: IItemPool,
        configuration: IDraftConfiguration
    ):
        self._guild_repository = guild_repository
        self._item_pool = item_pool
        self._configuration = configuration
        self._setup_lock = asyncio.Lock()

    # ====================
    # Guild / League Setup
    # ====================

    async def setup_guild(self, guild_id: int, default_output: Optional[object] = None) -> DraftGuild:
        """Create the guild's DraftGuild, or update its default output when one is given"""
        async with self._setup_lock:
            guild = await self._guild_repository.get_guild(guild_id)
            if guild is None:
                guild = DraftGuild(guild_id, default_output)
                logger.info(f"Created DraftGuild for guild {guild_id}")
            elif default_output is not None:
                guild.default_output = default_output
                logger.info(f"Updated default output for guild {guild_id}")
            await self._guild_repository.save_guild(guild)
            return guild

    async def create_league(
        self,
        guild_id: int,
        name: str,
        participants: Iterable[Hashable],
        team_size: Optional[int] = None,
        output: Optional[object] = None,
        item_pool: Optional[IItemPool] = None
    ) -> League:
        """Create a League in a guild; the guild is set up on first use"""
        async with self._setup_lock:
            guild = await self._guild_repository.get_guild(guild_id)
            if guild is None:
                guild = DraftGuild(guild_id)
                await self._guild_repository.save_guild(guild)
                logger.info(f"Created DraftGuild for guild {guild_id}")

        league = League(
            participants,
            team_size if team_size is not None else self._configuration.get_default_team_size(),
            item_pool if item_pool is not None else self._item_pool,
            output,
            name=name,
            max_queue_size=self._configuration.get_max_queue_size()
        )
        guild.add_league(league)
        logger.info(
            f"Created League {name} in guild {guild_id} with "
            f"{len(league.participants)} participants, team size {league.target_count}"
        )
        return league

    async def remove_guild(self, guild_id: int) -> List[str]:
        """Forget a guild, e.g. when the bot leaves it; returns the dropped League names"""
        async with self._setup_lock:
            guild = await self._get_guild(guild_id)
            leagues = guild.clear_leagues()
            await self._guild_repository.delete_guild(guild_id)
        logger.info(f"Removed guild {guild_id} with {len(leagues)} leagues")
        return [league.name for league in leagues]

    async def delete_league(self, guild_id: int, name: str) -> League:
        guild = await self._get_guild(guild_id)
        league = guild.delete_league(name)
        logger.info(f"Deleted League {name} from guild {guild_id}")
        return league

    async def get_league(self, guild_id: int, name: str) -> League:
        guild = await self._get_guild(guild_id)
        return guild.get_league_or_raise(name)

    async def list_leagues(self, guild_id: int) -> List[str]:
        guild = await self._guild_repository.get_guild(guild_id)
        return guild.league_names() if guild else []

    async def get_league_status(self, guild_id: int, name: str) -> LeagueStatusDTO:
        guild = await self._get_guild(guild_id)
        return LeagueStatusDTO.from_domain(guild, guild.get_league_or_raise(name))

    # ====================
    # Draft Lifecycle
    # ====================

    async def start_league(self, guild_id: int, name: str) -> TurnAnnouncement:
        """Activate a League and announce who picks first"""
        guild, league = await self._resolve(guild_id, name)
        announcement = league.activate()
        return self._with_output(guild, league, announcement)

    async def lock_pick(self, guild_id: int, name: str, chain: bool = True) -> List[PickOutcome]:
        """
        Resolve the pick on the clock.

        With chain set, keeps going while following participants already have
        picks queued, like an auto-draft.
        """
        _, league = await self._resolve(guild_id, name)
        try:
            outcomes = league.lock_queued() if chain else [league.lock()]
        except LeagueDraftError as e:
            logger.warning(f"Lock failed in League {name} (guild {guild_id}): {e}")
            raise
        for outcome in outcomes:
            if outcome.draft_finished:
                logger.info(f"Draft finished in League {name} (guild {guild_id})")
        return outcomes

    async def skip_turn(self, guild_id: int, name: str) -> TurnAnnouncement:
        guild, league = await self._resolve(guild_id, name)
        return self._with_output(guild, league, league.skip_turn())

    # ====================
    # Queues
    # ====================

    async def queue_pick(self, guild_id: int, name: str, identity: Hashable, identifier: str) -> List[str]:
        _, league = await self._resolve(guild_id, name)
        return league.add_to_player_queue(identity, identifier)

    async def unqueue_pick(self, guild_id: int, name: str, identity: Hashable, identifier: str) -> List[str]:
        _, league = await self._resolve(guild_id, name)
        return league.delete_from_player_queue(identity, identifier)

    async def clear_queue(self, guild_id: int, name: str, identity: Hashable) -> List[str]:
        _, league = await self._resolve(guild_id, name)
        return league.clear_player_queue(identity)

    # ====================
    # Exchange
    # ====================

    async def waiver(
        self,
        guild_id: int,
        name: str,
        identity: Hashable,
        drop_identifier: str,
        pickup_identifier: str
    ) -> WaiverResult:
        _, league = await self._resolve(guild_id, name)
        try:
            return league.waiver(identity, drop_identifier, pickup_identifier)
        except LeagueDraftError as e:
            logger.warning(f"Waiver rejected in League {name} (guild {guild_id}): {e}")
            raise

    async def trade(
        self,
        guild_id: int,
        name: str,
        identity_a: Hashable,
        item_a: str,
        identity_b: Hashable,
        item_b: str
    ) -> TradeResult:
        _, league = await self._resolve(guild_id, name)
        try:
            return league.trade(identity_a, item_a, identity_b, item_b)
        except LeagueDraftError as e:
            logger.warning(f"Trade rejected in League {name} (guild {guild_id}): {e}")
            raise

    async def assign_pick(self, guild_id: int, name: str, identity: Hashable, identifier: str) -> PickOutcome:
        """Organizer override: give an item to a participant directly"""
        _, league = await self._resolve(guild_id, name)
        return league.assign_pick(identity, identifier)

    # ====================
    # Helpers
    # ====================

    async def _get_guild(self, guild_id: int) -> DraftGuild:
        guild = await self._guild_repository.get_guild(guild_id)
        if guild is None:
            raise LeagueNotFoundError(f"Guild {guild_id} has no leagues set up")
        return guild

    async def _resolve(self, guild_id: int, name: str):
        guild = await self._get_guild(guild_id)
        return guild, guild.get_league_or_raise(name)

    @staticmethod
    def _with_output(guild: DraftGuild, league: League, announcement: TurnAnnouncement) -> TurnAnnouncement:
        """Fill in the guild default when the League has no output of its own"""
        if announcement.output is not None:
            return announcement
        return TurnAnnouncement(
            league_name=announcement.league_name,
            participant=announcement.participant,
            output=guild.output_for(league)
        )

    async def get_guild_summary(self) -> Dict[int, List[str]]:
        """League names per guild, for admin views"""
        guilds = await self._guild_repository.get_all_guilds()
        return {guild.guild_id: guild.league_names() for guild in guilds}
