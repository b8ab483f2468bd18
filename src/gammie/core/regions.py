"""Region bookkeeping: flood relabeling and neighbour-label queries.

Regions are never stored explicitly.  Every owned cell carries a label, and
two cells of one player share a label iff they are 4-connected.  Whenever a
claim joins regions, or a seizure may split one, the affected sub-flood is
relabeled on demand by :func:`merge_regions`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from gammie.core.types import NO_LABEL, Cell, Label, Player

if TYPE_CHECKING:
    from gammie.core.board import Board


def merge_regions(
    board: Board,
    player: Player,
    x: int,
    y: int,
    skip_labels: Sequence[Label],
    journal: dict[Cell, Label] | None = None,
) -> int:
    """Relabel the *player* flood reachable from (x, y) to ``skip_labels[-1]``.

    A cell joins the flood when it is in bounds, owned by *player* and its
    label is not in *skip_labels*; the target label is always the last entry,
    so cells already relabeled stop the flood.  Cells with a skipped label are
    not entered, which lets several floods share territory without
    re-processing it.

    If *journal* is given, the label each cell had before its first
    relabeling is stored there so the caller can undo the merge.

    Returns the number of relabeled cells.
    """
    if not skip_labels:
        return 0
    target = skip_labels[-1]
    skip = frozenset(skip_labels)

    relabeled = 0
    stack: list[Cell] = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        if not board.in_bounds(cx, cy) or board.owner(cx, cy) != player:
            continue
        old = board.label(cx, cy)
        if old in skip:
            continue
        if journal is not None:
            journal.setdefault((cx, cy), old)
        board.set_label(cx, cy, target)
        relabeled += 1
        stack.extend(board.neighbours(cx, cy))
    return relabeled


def neighbour_labels(board: Board, player: Player, x: int, y: int) -> list[Label]:
    """Distinct labels of *player*'s regions touching (x, y), in neighbour order."""
    labels: list[Label] = []
    for nx, ny in board.neighbours(x, y):
        if board.owner(nx, ny) == player:
            label = board.label(nx, ny)
            if label not in labels:
                labels.append(label)
    return labels


def bordering_label(board: Board, player: Player, x: int, y: int) -> Label:
    """Label of some *player* region touching (x, y), or NO_LABEL."""
    for nx, ny in board.neighbours(x, y):
        if board.owner(nx, ny) == player:
            return board.label(nx, ny)
    return NO_LABEL


def borders_player(board: Board, player: Player, x: int, y: int) -> bool:
    """Whether (x, y) has a 4-neighbour owned by *player*."""
    return any(board.owner(nx, ny) == player for nx, ny in board.neighbours(x, y))
