"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from gammie.core.game import Game

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


def count_regions(game: Game, player: int) -> int:
    """Brute-force number of 4-connected components of *player*'s cells."""
    board = game.board
    seen: set[tuple[int, int]] = set()
    regions = 0
    for cell in board.cells_of(player):
        if cell in seen:
            continue
        regions += 1
        stack = [cell]
        seen.add(cell)
        while stack:
            x, y = stack.pop()
            for n in board.neighbours(x, y):
                if n not in seen and board.owner(*n) == player:
                    seen.add(n)
                    stack.append(n)
    return regions


def _check_invariants(game: Game) -> None:
    board = game.board
    total_busy = 0
    for p in range(1, game.players + 1):
        assert game.areas(p) == count_regions(game, p), f"area count of player {p}"
        assert game.busy_fields(p) == len(board.cells_of(p)), f"busy of player {p}"
        total_busy += game.busy_fields(p)
        labels = {board.label(x, y) for x, y in board.cells_of(p)}
        assert len(labels) == game.areas(p), f"labels of player {p}"
        # same label <=> same component, checked on neighbouring pairs
        for x, y in board.cells_of(p):
            for nx, ny in board.neighbours(x, y):
                if board.owner(nx, ny) == p:
                    assert board.label(x, y) == board.label(nx, ny)
    assert total_busy + game.free_count == board.size


@pytest.fixture
def check_invariants() -> Callable[[Game], None]:
    """Assert area counts, busy counts and conservation against brute force."""
    return _check_invariants


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()
