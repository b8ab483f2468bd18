"""Application settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

LOG_LEVEL_ENV = "GAMMIE_LOG_LEVEL"


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    tile_size: int = 48  # px per cell

    # Diagnostics
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> AppSettings:
        """Defaults, with the log level overridable from the environment."""
        settings = cls()
        level = os.environ.get(LOG_LEVEL_ENV)
        if level:
            settings.log_level = level.upper()
        return settings
