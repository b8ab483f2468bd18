"""GameController — turn order, cursor and end-of-game detection.

Holds the interactive session state that does not belong to the rules
engine: whose turn it is, where the cursor is, how many players in a row had
nothing to do.  Emits events via simple callbacks so the UI / tests can
subscribe.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from gammie.core.enums import MoveKind
from gammie.core.game import Game
from gammie.core.move import Move
from gammie.core.types import Cell, Player

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move], None]
TurnCallback = Callable[["PlayerStatus"], None]
GameOverCallback = Callable[[list[tuple[Player, int]]], None]  # scoreboard


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class PlayerStatus:
    """Summary line shown for the player to move."""

    player: Player
    busy: int
    free: int
    golden_possible: bool

    @property
    def can_act(self) -> bool:
        return self.free > 0 or self.golden_possible

    def __str__(self) -> str:
        text = f"PLAYER {self.player} {self.busy} {self.free}"
        return text + " G" if self.golden_possible else text


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates an interactive game on top of a :class:`Game`.

    Players move in order 1..P.  A player who can neither claim a cell nor
    make a golden move is skipped; once every player in a row has been
    skipped the game is over.  Claims and golden moves are made at the
    cursor; a failed attempt keeps the turn.
    """

    __slots__ = ("_game", "_player", "_cursor", "_skipped", "_over", "events")

    def __init__(self, game: Game) -> None:
        self._game = game
        self._player: Player = 1
        self._cursor: Cell = (0, 0)
        self._skipped = 0
        self._over = False
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def game(self) -> Game:
        return self._game

    @property
    def current_player(self) -> Player:
        return self._player

    @property
    def cursor(self) -> Cell:
        return self._cursor

    @property
    def is_over(self) -> bool:
        return self._over

    def status(self, player: Player | None = None) -> PlayerStatus:
        p = self._player if player is None else player
        return PlayerStatus(
            player=p,
            busy=self._game.busy_fields(p),
            free=self._game.free_fields(p),
            golden_possible=self._game.golden_possible(p),
        )

    def scoreboard(self) -> list[tuple[Player, int]]:
        """``(player, busy_fields)`` for every player."""
        game = self._game
        return [(p, game.busy_fields(p)) for p in range(1, game.players + 1)]

    # ── Session flow ─────────────────────────────────────────────────────

    def start(self) -> None:
        """Find the first player able to act (or end the game)."""
        self._settle()

    def move_cursor(self, dx: int, dy: int) -> bool:
        """Shift the cursor; moves that would leave the board are ignored."""
        x, y = self._cursor[0] + dx, self._cursor[1] + dy
        if not self._game.board.in_bounds(x, y):
            return False
        self._cursor = (x, y)
        return True

    def set_cursor(self, x: int, y: int) -> bool:
        if not self._game.board.in_bounds(x, y):
            return False
        self._cursor = (x, y)
        return True

    def claim(self) -> bool:
        """Normal move for the current player at the cursor."""
        return self._play(MoveKind.NORMAL)

    def golden(self) -> bool:
        """Golden move for the current player at the cursor."""
        return self._play(MoveKind.GOLDEN)

    def pass_turn(self) -> None:
        if self._over:
            return
        self._advance()

    def finish(self) -> None:
        """End the game immediately."""
        if self._over:
            return
        self._over = True
        self._emit_game_over()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _play(self, kind: MoveKind) -> bool:
        if self._over:
            return False
        move = Move(self._player, *self._cursor, kind=kind)
        if not move.play(self._game):
            return False
        self._emit_move(move)
        self._advance()
        return True

    def _advance(self) -> None:
        self._player = self._next_player(self._player)
        self._skipped = 0
        self._settle()

    def _settle(self) -> None:
        """Skip players with nothing to do, ending the game after a full lap."""
        players = self._game.players
        while self._skipped < players:
            status = self.status()
            if status.can_act:
                self._emit_turn(status)
                return
            self._player = self._next_player(self._player)
            self._skipped += 1
        self._over = True
        self._emit_game_over()

    def _next_player(self, player: Player) -> Player:
        return 1 if player == self._game.players else player + 1

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move)

    def _emit_turn(self, status: PlayerStatus) -> None:
        for cb in self.events.on_turn_changed:
            cb(status)

    def _emit_game_over(self) -> None:
        board = self.scoreboard()
        for cb in self.events.on_game_over:
            cb(board)
