"""
Domain Services

Rules that operate on domain entities.
"""

from .pick_resolver import PickResolver
from .turn_order import TurnOrder

__all__ = [
    "PickResolver",
    "TurnOrder"
]
