"""
Application Layer

Coordinates between domain and infrastructure layers.
Contains the application service, ports (interfaces) and DTOs.
"""

from .draft_service import DraftApplicationService
from .dto import LeagueStatusDTO, ParticipantDTO

__all__ = [
    "DraftApplicationService",
    "LeagueStatusDTO",
    "ParticipantDTO"
]
