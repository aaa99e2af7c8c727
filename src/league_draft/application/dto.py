"""
Data Transfer Objects

Snapshots of League state for the host's command handlers.
"""

from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional


@dataclass
class ParticipantDTO:
    """Participant data for display"""
    identity: Hashable
    roster: List[str]
    queue: List[str]
    on_the_clock: bool = False

    @property
    def roster_size(self) -> int:
        return len(self.roster)


@dataclass
class LeagueStatusDTO:
    """League data for display"""
    guild_id: int
    name: str
    state: str  # LeagueState.value
    target_count: int
    total_picks: int
    current_turn: Optional[Hashable]
    participants: List[ParticipantDTO]
    output: Optional[object]

    @property
    def is_active(self) -> bool:
        return self.state == "active"

    @property
    def is_complete(self) -> bool:
        return self.state == "complete"

    @property
    def picks_remaining(self) -> int:
        return sum(max(0, self.target_count - p.roster_size) for p in self.participants)

    @classmethod
    def from_domain(cls, guild, league) -> "LeagueStatusDTO":
        """Convert from domain DraftGuild/League entities"""
        with league.mutex:
            current = league.current_turn() if league.is_active else None
            queues: Dict[Hashable, List[str]] = {
                identity: league.player_queue(identity) for identity in league.participants
            }
            rosters = league.rosters()
            state = league.state.value
            total_picks = league.total_picks
        participants = [
            ParticipantDTO(
                identity=identity,
                roster=[item.name for item in roster],
                queue=queues[identity],
                on_the_clock=identity == current
            )
            for identity, roster in rosters.items()
        ]
        return cls(
            guild_id=guild.guild_id,
            name=league.name,
            state=state,
            target_count=league.target_count,
            total_picks=total_picks,
            current_turn=current,
            participants=participants,
            output=guild.output_for(league)
        )
