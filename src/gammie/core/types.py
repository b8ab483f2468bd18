"""Cell, player and label aliases plus small coordinate helpers.

Coordinates are ``(x, y)`` with ``x`` the column (0 = left) and ``y`` the
row (0 = bottom).  Cells are stored row-major: ``index = y * width + x``.
"""

from __future__ import annotations

from typing import TypeAlias

Player: TypeAlias = int  # 1..players, NOBODY for empty cells
Label: TypeAlias = int  # region tag, NO_LABEL for empty cells
Cell: TypeAlias = tuple[int, int]

NOBODY: Player = 0
NO_LABEL: Label = 0

# left, right, down, up
NEIGHBOUR_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
SIDE_COUNT = len(NEIGHBOUR_OFFSETS)


def digit_count(n: int) -> int:
    """Number of decimal digits of a non-negative integer (0 has one)."""
    return len(str(n))


def is_valid_player(player: int, players: int) -> bool:
    """Check whether *player* is an id in ``1..players``."""
    return 1 <= player <= players
