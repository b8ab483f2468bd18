"""Core domain layer — pure rules engine with zero external dependencies.

Quick start::

    from gammie.core import new_game

    game = new_game(5, 4, players=2, area_limit=2)
    game.move(1, 0, 0)
    game.golden_move(2, 0, 0)
    print(game.board_text(), end="")
"""

from gammie.core.board import Board
from gammie.core.claims import ClaimRules
from gammie.core.enums import MoveKind
from gammie.core.game import Game, PlayerStats, new_game
from gammie.core.golden import GoldenMoveEngine
from gammie.core.move import Move
from gammie.core.notation import board_to_text, cell_width
from gammie.core.queries import Queries
from gammie.core.regions import (
    bordering_label,
    borders_player,
    merge_regions,
    neighbour_labels,
)
from gammie.core.types import (
    NO_LABEL,
    NOBODY,
    Cell,
    Label,
    Player,
    digit_count,
    is_valid_player,
)

__all__ = [
    # Enums / types
    "MoveKind",
    "Cell",
    "Label",
    "Player",
    "NO_LABEL",
    "NOBODY",
    "digit_count",
    "is_valid_player",
    # Domain objects
    "Board",
    "Game",
    "Move",
    "PlayerStats",
    "new_game",
    # Rules
    "ClaimRules",
    "GoldenMoveEngine",
    "Queries",
    "bordering_label",
    "borders_player",
    "merge_regions",
    "neighbour_labels",
    # Notation
    "board_to_text",
    "cell_width",
]
