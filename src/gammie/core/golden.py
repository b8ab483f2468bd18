"""Golden moves: seizing another player's cell as an atomic transaction.

Removing a cell from its owner can split the owner's region into up to four
fragments.  The engine finds out by tentatively handing the cell over,
relabeling the previous owner's surroundings with four fresh labels (one per
direction) and counting how many of those labels survive around the cell.
Rejected and probe-only attempts are rolled back from an explicit undo
record, so the game is left exactly as it was.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gammie.core.regions import bordering_label, merge_regions, neighbour_labels
from gammie.core.types import NO_LABEL, NOBODY, SIDE_COUNT, Cell, Label, Player

if TYPE_CHECKING:
    from gammie.core.game import Game

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class _GoldenTransaction:
    """Undo record captured before the tentative seizure."""

    x: int
    y: int
    previous_owner: Player
    previous_label: Label
    next_label: Label
    journal: dict[Cell, Label] = field(default_factory=dict)
    fragments: int = 0


class GoldenMoveEngine:
    """Static engine for golden-move legality, application and probing."""

    @staticmethod
    def check_parameters(game: Game, player: Player, x: int, y: int) -> bool:
        """Preconditions that need no tentative mutation."""
        if not game.is_player(player):
            return False
        board = game.board
        if not board.in_bounds(x, y):
            return False
        stats = game.stats(player)
        if stats.used_golden:
            return False
        owner = board.owner(x, y)
        if owner in (NOBODY, player):
            return False
        if bordering_label(board, player, x, y) == NO_LABEL:
            return stats.areas < game.area_limit
        return True

    @staticmethod
    def is_legal(game: Game, player: Player, x: int, y: int) -> bool:
        """Full legality check; the game is always left untouched."""
        return GoldenMoveEngine._attempt(game, player, x, y, commit=False)

    @staticmethod
    def apply(game: Game, player: Player, x: int, y: int) -> bool:
        """Perform the golden move if legal. Returns True if applied."""
        return GoldenMoveEngine._attempt(game, player, x, y, commit=True)

    # -- Transaction --------------------------------------------------------

    @staticmethod
    def _attempt(game: Game, player: Player, x: int, y: int, *, commit: bool) -> bool:
        if not GoldenMoveEngine.check_parameters(game, player, x, y):
            return False

        tx = GoldenMoveEngine._begin(game, player, x, y)
        previous = tx.previous_owner
        legal = game.stats(previous).areas + tx.fragments - 1 <= game.area_limit

        if not legal or not commit:
            GoldenMoveEngine._rollback(game, tx)
            if not legal:
                _LOGGER.debug(
                    "Golden move %d@(%d, %d) rejected: player %d would hold %d areas",
                    player,
                    x,
                    y,
                    previous,
                    game.stats(previous).areas + tx.fragments - 1,
                )
            return legal

        GoldenMoveEngine._commit(game, player, tx)
        return True

    @staticmethod
    def _begin(game: Game, player: Player, x: int, y: int) -> _GoldenTransaction:
        """Hand (x, y) to *player* and relabel what is left of the old region."""
        board = game.board
        tx = _GoldenTransaction(
            x=x,
            y=y,
            previous_owner=board.owner(x, y),
            previous_label=board.label(x, y),
            next_label=game.next_label,
        )
        board.set_owner(x, y, player)

        fresh = [game.issue_label() for _ in range(SIDE_COUNT)]
        # Flood i skips everything already claimed by floods 0..i-1.
        for i, (nx, ny) in enumerate(board.neighbours(x, y)):
            merge_regions(board, tx.previous_owner, nx, ny, fresh[: i + 1], tx.journal)
        tx.fragments = len(neighbour_labels(board, tx.previous_owner, x, y))
        return tx

    @staticmethod
    def _rollback(game: Game, tx: _GoldenTransaction) -> None:
        board = game.board
        for (cx, cy), label in tx.journal.items():
            board.set_label(cx, cy, label)
        board.set_owner(tx.x, tx.y, tx.previous_owner)
        board.set_label(tx.x, tx.y, tx.previous_label)
        game.next_label = tx.next_label

    @staticmethod
    def _commit(game: Game, player: Player, tx: _GoldenTransaction) -> None:
        board = game.board
        x, y = tx.x, tx.y
        mover = game.stats(player)
        previous = game.stats(tx.previous_owner)

        mover.areas -= len(neighbour_labels(board, player, x, y)) - 1
        previous.areas += tx.fragments - 1
        mover.busy += 1
        previous.busy -= 1
        mover.used_golden = True

        merge_regions(board, player, x, y, [game.issue_label()])
