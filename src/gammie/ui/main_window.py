"""MainWindow — top-level window for an interactive game."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent, QKeyEvent
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from gammie.core.game import Game
from gammie.core.move import Move
from gammie.core.notation import cell_width
from gammie.core.types import Player
from gammie.game.controller import GameController, PlayerStatus
from gammie.settings import AppSettings
from gammie.ui.board_view import BoardView
from gammie.ui.theme import BoardTheme

# arrow key code -> cursor shift (board y grows upwards)
_CURSOR_KEYS: dict[int, tuple[int, int]] = {
    Qt.Key.Key_Up.value: (0, 1),
    Qt.Key.Key_Down.value: (0, -1),
    Qt.Key.Key_Right.value: (1, 0),
    Qt.Key.Key_Left.value: (-1, 0),
}


class MainWindow(QMainWindow):
    """Board, status line and action buttons for one game.

    Keys: arrows move the cursor, Space claims, G makes a golden move,
    C passes, Ctrl+D ends the game.
    """

    def __init__(self, game: Game, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Gammie")
        self.setMinimumSize(480, 400)

        self._settings = settings if settings is not None else AppSettings()
        self._controller = GameController(game)

        self._setup_ui()
        self._connect_signals()
        self._connect_game_events()

        self._board_view.board_scene.set_game(game)
        self._controller.start()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._board_view = BoardView(tile=self._settings.tile_size)
        self._board_view.board_scene.set_theme(
            BoardTheme.named(self._settings.board_theme)
        )
        root.addWidget(self._board_view, stretch=1)

        self._status_label = QLabel()
        self._status_label.setObjectName("statusLine")
        root.addWidget(self._status_label)

        buttons = QHBoxLayout()
        self._btn_claim = QPushButton("Claim")
        self._btn_golden = QPushButton("Golden move")
        self._btn_pass = QPushButton("Pass")
        self._btn_quit = QPushButton("End game")
        for btn in (self._btn_claim, self._btn_golden, self._btn_pass, self._btn_quit):
            btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            buttons.addWidget(btn)
        root.addLayout(buttons)

        self._score_label = QLabel()
        self._score_label.setObjectName("statusLine")
        self._score_label.setVisible(False)
        root.addWidget(self._score_label)

    def _connect_signals(self) -> None:
        self._board_view.cell_clicked.connect(self._on_cell_clicked)
        self._btn_claim.clicked.connect(lambda: self._controller.claim())
        self._btn_golden.clicked.connect(lambda: self._controller.golden())
        self._btn_pass.clicked.connect(lambda: self._controller.pass_turn())
        self._btn_quit.clicked.connect(lambda: self._controller.finish())

    def _connect_game_events(self) -> None:
        ev = self._controller.events
        ev.on_move.append(self._on_move)
        ev.on_turn_changed.append(self._on_turn_changed)
        ev.on_game_over.append(self._on_game_over)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    # ── Input ────────────────────────────────────────────────────────────

    def keyPressEvent(self, event: QKeyEvent | None) -> None:
        if event is None or not self.handle_key(event.key(), event.modifiers()):
            super().keyPressEvent(event)

    def handle_key(
        self,
        key: int,
        modifiers: Qt.KeyboardModifier = Qt.KeyboardModifier.NoModifier,
    ) -> bool:
        """Dispatch one key press. Returns True if it was consumed."""
        ctrl = self._controller
        if ctrl.is_over:
            return False
        if key in _CURSOR_KEYS:
            if ctrl.move_cursor(*_CURSOR_KEYS[key]):
                self._board_view.board_scene.set_cursor(*ctrl.cursor)
            return True
        ctrl_held = bool(modifiers & Qt.KeyboardModifier.ControlModifier)
        if key == Qt.Key.Key_D.value and ctrl_held:
            ctrl.finish()
            return True
        if key == Qt.Key.Key_Space.value:
            ctrl.claim()
            return True
        if key == Qt.Key.Key_G.value:
            ctrl.golden()
            return True
        if key == Qt.Key.Key_C.value:
            ctrl.pass_turn()
            return True
        return False

    def _on_cell_clicked(self, x: int, y: int) -> None:
        if self._controller.set_cursor(x, y):
            self._board_view.board_scene.set_cursor(x, y)

    # ── Game events ──────────────────────────────────────────────────────

    def _on_move(self, _move: Move) -> None:
        self._board_view.board_scene.sync()

    def _on_turn_changed(self, status: PlayerStatus) -> None:
        self._status_label.setText(str(status))

    def _on_game_over(self, scoreboard: list[tuple[Player, int]]) -> None:
        width = cell_width(len(scoreboard))
        lines = [f"PLAYER {p:<{width}} {busy}" for p, busy in scoreboard]
        self._score_label.setText("\n".join(lines))
        self._score_label.setVisible(True)
        self._status_label.setText("Game over")
        self._board_view.board_scene.set_interactive(False)
        for btn in (self._btn_claim, self._btn_golden, self._btn_pass, self._btn_quit):
            btn.setEnabled(False)

    # ── Lifecycle ────────────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._controller.finish()
        super().closeEvent(event)
