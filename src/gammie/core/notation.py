"""Board text: the fixed-width snapshot printed by the ``p`` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gammie.core.types import NOBODY, digit_count

if TYPE_CHECKING:
    from gammie.core.game import Game

EMPTY_CHAR = "."


def cell_width(players: int) -> int:
    """Column width wide enough for the largest player id."""
    return digit_count(players)


def board_to_text(game: Game) -> str:
    """Render the board top row first, one line per row.

    Each cell is left-justified into ``cell_width(players)`` columns; empty
    cells show as ``.``.  Example for a 3x2 board with two players::

        1..
        .22
    """
    width = cell_width(game.players)
    board = game.board
    lines: list[str] = []
    for y in range(board.height - 1, -1, -1):
        row: list[str] = []
        for x in range(board.width):
            owner = board.owner(x, y)
            text = str(owner) if owner != NOBODY else EMPTY_CHAR
            row.append(text.ljust(width))
        lines.append("".join(row) + "\n")
    return "".join(lines)
