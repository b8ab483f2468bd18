"""Read-only queries: occupied and free cell counts, golden-move probe."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gammie.core.golden import GoldenMoveEngine
from gammie.core.regions import borders_player
from gammie.core.types import Cell, Player

if TYPE_CHECKING:
    from gammie.core.game import Game


class Queries:
    """Static query helpers operating on a :class:`Game`."""

    @staticmethod
    def busy_fields(game: Game, player: Player) -> int:
        if not game.is_player(player):
            return 0
        return game.stats(player).busy

    @staticmethod
    def free_fields(game: Game, player: Player) -> int:
        """Empty cells *player* could claim with a normal move."""
        if not game.is_player(player):
            return 0
        areas = game.stats(player).areas
        if areas < game.area_limit:
            return game.free_count
        if areas > game.area_limit:
            return 0
        return len(Queries.extendable_cells(game, player))

    @staticmethod
    def extendable_cells(game: Game, player: Player) -> list[Cell]:
        """Empty cells 4-adjacent to one of *player*'s regions."""
        board = game.board
        return [
            (x, y)
            for x, y in board.cells()
            if board.is_empty(x, y) and borders_player(board, player, x, y)
        ]

    @staticmethod
    def golden_possible(game: Game, player: Player) -> bool:
        """Whether some cell is a legal golden-move target for *player*.

        Every candidate is tried in probe mode, so neither the board nor the
        one-shot flag changes.
        """
        if not game.is_player(player) or game.stats(player).used_golden:
            return False
        return any(
            GoldenMoveEngine.is_legal(game, player, x, y) for x, y in game.board.cells()
        )
