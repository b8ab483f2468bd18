"""Visual theme constants and QSS styles for Gammie."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the checkerboard grid."""

    light_tile: QColor
    dark_tile: QColor
    light_text: QColor  # owner ids on dark tiles
    dark_text: QColor  # owner ids on light tiles
    cursor: QColor  # selected cell overlay
    cursor_text: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_tile=QColor(64, 160, 200),  # cyan
            dark_tile=QColor(40, 70, 160),  # blue
            light_text=QColor(240, 240, 240),
            dark_text=QColor(20, 20, 20),
            cursor=QColor(240, 240, 240),
            cursor_text=QColor(0, 0, 0),
        )

    @classmethod
    def slate(cls) -> BoardTheme:
        return cls(
            light_tile=QColor(200, 204, 210),
            dark_tile=QColor(96, 106, 120),
            light_text=QColor(236, 236, 236),
            dark_text=QColor(30, 30, 30),
            cursor=QColor(255, 214, 0),
            cursor_text=QColor(0, 0, 0),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Preset by display name, falling back to the default."""
        presets = {"Classic": cls.default, "Slate": cls.slate}
        return presets.get(name, cls.default)()


APP_STYLE = """
QMainWindow, QWidget {
    background-color: #2b2b2b;
    color: #e0e0e0;
}
QPushButton {
    background-color: #3c3f41;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 12px;
}
QPushButton:hover {
    background-color: #4c5052;
}
QPushButton:disabled {
    color: #777;
}
QLabel#statusLine {
    font-family: "Adwaita Mono", monospace;
    font-size: 14px;
}
"""
