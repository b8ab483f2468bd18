"""Game session layer — turn order, cursor and end-of-game detection.

Quick start::

    from gammie.core import new_game
    from gammie.game import GameController

    ctrl = GameController(new_game(4, 4, 2, 2))
    ctrl.start()
    ctrl.claim()
"""

from gammie.game.controller import GameController, GameEvents, PlayerStatus

__all__ = [
    "GameController",
    "GameEvents",
    "PlayerStatus",
]
