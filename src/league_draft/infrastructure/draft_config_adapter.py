"""
Draft Configuration Adapter

Draft settings with environment overrides.
"""

import logging
import os
from typing import Optional
from ..application.interfaces import IDraftConfiguration

logger = logging.getLogger(__name__)

DEFAULT_TEAM_SIZE = 5
DEFAULT_MAX_QUEUE_SIZE = None  # unbounded


class DraftConfigurationAdapter(IDraftConfiguration):
    """
    Configuration adapter reading DRAFT_TEAM_SIZE and DRAFT_MAX_QUEUE_SIZE.

    Explicit constructor arguments win over the environment; unset or invalid
    environment values fall back to the defaults.
    """

    def __init__(self, team_size: Optional[int] = None, max_queue_size: Optional[int] = None):
        self._team_size = team_size if team_size is not None else self._read_int(
            "DRAFT_TEAM_SIZE", DEFAULT_TEAM_SIZE
        )
        self._max_queue_size = max_queue_size if max_queue_size is not None else self._read_int(
            "DRAFT_MAX_QUEUE_SIZE", DEFAULT_MAX_QUEUE_SIZE
        )
        if self._team_size < 1:
            raise ValueError("Team size must be positive")
        if self._max_queue_size is not None and self._max_queue_size < 1:
            raise ValueError("Max queue size must be positive")

    @staticmethod
    def _read_int(key: str, default: Optional[int]) -> Optional[int]:
        raw = os.getenv(key, "").strip()
        if not raw:
            return default
        try:
            return int(raw)
        except ValueError:
            logger.warning(f"Ignoring {key}={raw!r}: not an integer, using {default}")
            return default

    def get_default_team_size(self) -> int:
        """Get default number of items per roster"""
        return self._team_size

    def get_max_queue_size(self) -> Optional[int]:
        """Get the pick queue limit, None for unbounded"""
        return self._max_queue_size
