"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from gammie.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from gammie.core.game import Game

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from gammie.ui.theme import APP_STYLE

    app.setApplicationName("Gammie")
    if app.setStyle("Fusion") is None:
        _LOGGER.warning("Qt style %r unavailable, using the default", "Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    game: Game,
    settings: AppSettings | None = None,
    argv: list[str] | None = None,
) -> int:
    """Create the Qt application, show *game* and run the event loop."""
    from PyQt6.QtWidgets import QApplication

    from gammie.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(game, settings)
    window.show()
    _LOGGER.debug("Interactive session started for %r", game)

    return app.exec()
