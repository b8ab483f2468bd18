"""Core enumerations."""

from __future__ import annotations

from enum import Enum


class MoveKind(str, Enum):
    """Kind of move, valued by its batch command letter."""

    NORMAL = "m"
    GOLDEN = "g"

    def __str__(self) -> str:
        return self.name.lower()
