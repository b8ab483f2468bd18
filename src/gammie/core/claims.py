"""Normal claims: legality check and application."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gammie.core.regions import bordering_label, merge_regions, neighbour_labels
from gammie.core.types import NO_LABEL, Player

if TYPE_CHECKING:
    from gammie.core.game import Game


class ClaimRules:
    """Static rule-checker for claiming an empty cell."""

    @staticmethod
    def is_legal(game: Game, player: Player, x: int, y: int) -> bool:
        if not game.is_player(player):
            return False
        board = game.board
        if not board.in_bounds(x, y) or not board.is_empty(x, y):
            return False
        # A cell touching none of the player's regions starts a new one.
        if bordering_label(board, player, x, y) == NO_LABEL:
            return game.stats(player).areas < game.area_limit
        return True

    @staticmethod
    def apply(game: Game, player: Player, x: int, y: int) -> bool:
        """Claim (x, y) for *player* if legal. Returns True if applied."""
        if not ClaimRules.is_legal(game, player, x, y):
            return False

        board = game.board
        labels = neighbour_labels(board, player, x, y)
        stats = game.stats(player)
        # k touching regions fuse into one: k - 1 fewer, or one more if k == 0
        stats.areas -= len(labels) - 1
        stats.busy += 1
        game.free_count -= 1

        board.set_owner(x, y, player)
        target = labels[0] if labels else game.issue_label()
        merge_regions(board, player, x, y, [target])
        return True
