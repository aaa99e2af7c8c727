import pytest
from typing import List
from unittest.mock import MagicMock

import discord

from src.league_draft.domain.entities.league import League
from src.league_draft.infrastructure.container import DraftContainer
from src.league_draft.infrastructure.draft_config_adapter import DraftConfigurationAdapter
from src.league_draft.infrastructure.memory_pool import MemoryItemPool

POKEMON = ["Pikachu", "Quaxly", "Raichu", "Eldegoss", "Amoonguss", "Sprigatito", "Fuecoco"]


@pytest.fixture
def pool() -> MemoryItemPool:
    """Pool of pokemon names"""
    return MemoryItemPool.from_names(POKEMON)


@pytest.fixture
def make_league(pool):
    """Factory for Leagues over the shared pool"""
    def _make(participants: List = None, target_count: int = 2, **kwargs) -> League:
        if participants is None:
            participants = ["p1", "p2"]
        return League(participants, target_count, pool, **kwargs)
    return _make


@pytest.fixture
def active_league(make_league) -> League:
    """Two participants, two picks each, already activated"""
    league = make_league(name="Creenis")
    league.activate()
    return league


@pytest.fixture
def mock_member() -> discord.Member:
    """Create mock guild member"""
    member = MagicMock(spec=discord.Member)
    member.id = 69420
    member.name = "ash"
    member.display_name = "Ash Ketchum"
    return member


@pytest.fixture
def container(pool) -> DraftContainer:
    """Container with the pokemon pool and fixed settings"""
    configuration = DraftConfigurationAdapter(team_size=2, max_queue_size=5)
    return DraftContainer(item_pool=pool, configuration=configuration)


@pytest.fixture
def draft_service(container):
    return container.get_draft_service()
