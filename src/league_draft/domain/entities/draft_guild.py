"""
DraftGuild Entity

Container for the Leagues of one community (a Discord server).
"""

import threading
from typing import Dict, List, Optional

from ..exceptions import DuplicateLeagueError, LeagueNotFoundError
from .league import League


class DraftGuild:
    """
    The Leagues of one community, keyed by League name.

    Each community the bot serves needs one DraftGuild; the host typically
    creates it from a setup command that also picks the default output.
    The collection lock is independent of the League locks since Leagues never
    touch each other.
    """

    def __init__(self, guild_id: int, default_output: Optional[object] = None):
        self.guild_id = guild_id
        self.default_output = default_output
        self._leagues: Dict[str, League] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._leagues)

    def __contains__(self, name: str) -> bool:
        return name in self._leagues

    def add_league(self, league: League) -> None:
        """Add a League; names are unique within a DraftGuild"""
        with self._lock:
            if league.name in self._leagues:
                raise DuplicateLeagueError(
                    f"A League named {league.name} already exists in guild {self.guild_id}"
                )
            self._leagues[league.name] = league

    def get_league(self, name: str) -> Optional[League]:
        with self._lock:
            return self._leagues.get(name)

    def get_league_or_raise(self, name: str) -> League:
        league = self.get_league(name)
        if league is None:
            raise LeagueNotFoundError(f"No League named {name} in guild {self.guild_id}")
        return league

    def delete_league(self, name: str) -> League:
        """Remove a League and hand it back"""
        with self._lock:
            league = self._leagues.pop(name, None)
        if league is None:
            raise LeagueNotFoundError(f"No League named {name} in guild {self.guild_id}")
        return league

    def clear_leagues(self) -> List[League]:
        """Remove every League and return them"""
        with self._lock:
            leagues = list(self._leagues.values())
            self._leagues.clear()
        return leagues

    def league_names(self) -> List[str]:
        with self._lock:
            return list(self._leagues)

    def output_for(self, league: League) -> Optional[object]:
        """Where messages about a League go: its own output, else the guild default"""
        if league.output is not None:
            return league.output
        return self.default_output
