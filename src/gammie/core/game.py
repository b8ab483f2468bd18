"""Game - board plus per-player statistics; the public rules facade."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gammie.core.board import Board
from gammie.core.claims import ClaimRules
from gammie.core.golden import GoldenMoveEngine
from gammie.core.notation import board_to_text
from gammie.core.queries import Queries
from gammie.core.types import NOBODY, Label, Player, is_valid_player

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class PlayerStats:
    """Running totals for one player."""

    areas: int = 0
    busy: int = 0
    used_golden: bool = False


class Game:
    """Full game state: board, statistics, free-cell and label counters.

    Every public operation is a complete transaction: it either applies all
    of its updates or leaves the game exactly as it was.  Invalid player ids
    and out-of-range coordinates are answered with ``False`` / ``0``.

    Raises:
        ValueError: if any dimension, the player count or the area limit is
            smaller than one.
    """

    __slots__ = (
        "board",
        "players",
        "area_limit",
        "free_count",
        "next_label",
        "_stats",
    )

    def __init__(self, width: int, height: int, players: int, area_limit: int) -> None:
        if players < 1:
            raise ValueError(f"Invalid player count: {players}")
        if area_limit < 1:
            raise ValueError(f"Invalid area limit: {area_limit}")
        self.board = Board(width, height)
        self.players = players
        self.area_limit = area_limit
        self.free_count = width * height
        self.next_label: Label = 1
        # index 0 (NOBODY) is unused so that stats[player] needs no offset
        self._stats: list[PlayerStats] = [PlayerStats() for _ in range(players + 1)]

    # -- Properties ---------------------------------------------------------

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    # -- Bookkeeping helpers used by the rules modules ----------------------

    def is_player(self, player: int) -> bool:
        return is_valid_player(player, self.players)

    def stats(self, player: Player) -> PlayerStats:
        return self._stats[player]

    def issue_label(self) -> Label:
        """Return a fresh region label; labels are never reused."""
        label = self.next_label
        self.next_label += 1
        return label

    # -- Read accessors -----------------------------------------------------

    def owner(self, x: int, y: int) -> Player:
        """Owner of (x, y); NOBODY for empty or out-of-range cells."""
        if not self.board.in_bounds(x, y):
            return NOBODY
        return self.board.owner(x, y)

    def areas(self, player: Player) -> int:
        """Number of regions *player* currently holds (0 for invalid ids)."""
        if not self.is_player(player):
            return 0
        return self._stats[player].areas

    def used_golden(self, player: Player) -> bool:
        if not self.is_player(player):
            return False
        return self._stats[player].used_golden

    # -- Operations ---------------------------------------------------------

    def move(self, player: Player, x: int, y: int) -> bool:
        """Claim the empty cell (x, y) for *player*."""
        return ClaimRules.apply(self, player, x, y)

    def golden_move(self, player: Player, x: int, y: int) -> bool:
        """Seize another player's cell (x, y); usable once per player."""
        return GoldenMoveEngine.apply(self, player, x, y)

    def golden_possible(self, player: Player) -> bool:
        """Whether *player* has at least one legal golden move right now."""
        return Queries.golden_possible(self, player)

    def busy_fields(self, player: Player) -> int:
        return Queries.busy_fields(self, player)

    def free_fields(self, player: Player) -> int:
        return Queries.free_fields(self, player)

    def board_text(self) -> str:
        return board_to_text(self)

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        return (
            f"Game({self.width}x{self.height}, players={self.players}, "
            f"area_limit={self.area_limit}, free={self.free_count})"
        )


def new_game(width: int, height: int, players: int, area_limit: int) -> Game | None:
    """Create a game, or return ``None`` when it cannot be created.

    Invalid parameters and boards too large to allocate both yield ``None``;
    nothing is left half-built.
    """
    try:
        game = Game(width, height, players, area_limit)
    except (ValueError, MemoryError, OverflowError) as exc:
        _LOGGER.debug(
            "Rejected game %dx%d players=%d areas=%d: %s",
            width,
            height,
            players,
            area_limit,
            exc,
        )
        return None
    _LOGGER.debug("Created %r", game)
    return game
