"""BoardScene — QGraphicsScene that draws the grid, owners and cursor."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from gammie.core.notation import EMPTY_CHAR
from gammie.core.types import NOBODY, Cell
from gammie.ui.theme import BoardTheme

if TYPE_CHECKING:
    from gammie.core.game import Game


class BoardScene(QGraphicsScene):
    """Renders the checkerboard, owner ids and the cursor highlight.

    Signals:
        cell_clicked(int, int): Emitted with board coordinates on a left click.
    """

    cell_clicked = pyqtSignal(int, int)

    DEFAULT_TILE = 48

    def __init__(self, parent: QObject | None = None, tile: int = DEFAULT_TILE) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._tile = tile
        self._game: Game | None = None
        self._cursor: Cell = (0, 0)
        self._interactive = True

        self._tile_items: dict[Cell, QGraphicsRectItem] = {}
        self._text_items: dict[Cell, QGraphicsSimpleTextItem] = {}
        self._cursor_item: QGraphicsRectItem | None = None

    # ── Public API ───────────────────────────────────────────────────────

    def set_game(self, game: Game) -> None:
        """Show *game* (full redraw)."""
        self._game = game
        self._cursor = (0, 0)
        self._draw_board()
        self.sync()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        if self._game is not None:
            self._draw_board()
            self.sync()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable cell clicks."""
        self._interactive = interactive

    def set_cursor(self, x: int, y: int) -> None:
        self._cursor = (x, y)
        self._place_cursor()
        self._refresh_text_colors()

    def sync(self) -> None:
        """Refresh owner labels from the game."""
        if self._game is None:
            return
        for (x, y), item in self._text_items.items():
            owner = self._game.owner(x, y)
            item.setText(str(owner) if owner != NOBODY else EMPTY_CHAR)
        self._refresh_text_colors()

    def cell_text(self, x: int, y: int) -> str:
        item = self._text_items.get((x, y))
        return item.text() if item is not None else ""

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        self.clear()
        self._tile_items.clear()
        self._text_items.clear()
        self._cursor_item = None
        if self._game is None:
            return

        t = self._tile
        font = QFont("Adwaita Mono", max(8, t // 3))
        width, height = self._game.width, self._game.height

        for y in range(height):
            for x in range(width):
                vx, vy = self._visual_coords(x, y)
                rect = QGraphicsRectItem(vx * t, vy * t, t, t)
                rect.setBrush(QBrush(self._tile_color(x, y)))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._tile_items[(x, y)] = rect

                txt = QGraphicsSimpleTextItem(EMPTY_CHAR)
                txt.setFont(font)
                txt.setPos(vx * t + t // 4, vy * t + t // 6)
                txt.setZValue(2)
                self.addItem(txt)
                self._text_items[(x, y)] = txt

        cursor = QGraphicsRectItem(0, 0, t, t)
        cursor.setBrush(QBrush(self._theme.cursor))
        cursor.setPen(QPen(Qt.PenStyle.NoPen))
        cursor.setZValue(1)
        self.addItem(cursor)
        self._cursor_item = cursor
        self._place_cursor()

        self.setSceneRect(0, 0, width * t, height * t)

    def _place_cursor(self) -> None:
        if self._cursor_item is None:
            return
        vx, vy = self._visual_coords(*self._cursor)
        self._cursor_item.setPos(vx * self._tile, vy * self._tile)

    def _refresh_text_colors(self) -> None:
        for cell, item in self._text_items.items():
            if cell == self._cursor:
                color = self._theme.cursor_text
            elif sum(cell) % 2 == 0:
                color = self._theme.light_text
            else:
                color = self._theme.dark_text
            item.setBrush(QBrush(color))

    def _tile_color(self, x: int, y: int) -> QColor:
        return self._theme.dark_tile if (x + y) % 2 == 0 else self._theme.light_tile

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or self._game is None or event is None:
            return super().mousePressEvent(event)
        if event.button() == Qt.MouseButton.LeftButton:
            cell = self._pos_to_cell(event.scenePos())
            if cell is not None:
                self.cell_clicked.emit(*cell)
                return
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, x: int, y: int) -> tuple[int, int]:
        """Board (x, y) to visual column/row; row 0 is drawn at the bottom."""
        assert self._game is not None
        return x, self._game.height - 1 - y

    def _pos_to_cell(self, pos: QPointF) -> Cell | None:
        """Scene position → board cell."""
        if self._game is None:
            return None
        t = self._tile
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < self._game.width and 0 <= row < self._game.height):
            return None
        return col, self._game.height - 1 - row
