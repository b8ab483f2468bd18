"""Tests for Game construction, accessors and the new_game factory."""

import logging

import pytest

from gammie.core.game import Game, new_game
from gammie.core.types import NOBODY


class TestNewGame:
    def test_valid_parameters(self) -> None:
        game = new_game(5, 4, 3, 2)
        assert game is not None
        assert game.width == 5
        assert game.height == 4
        assert game.players == 3
        assert game.area_limit == 2
        assert game.free_count == 20
        for p in range(1, 4):
            assert game.areas(p) == 0
            assert game.busy_fields(p) == 0
            assert not game.used_golden(p)

    @pytest.mark.parametrize(
        ("width", "height", "players", "area_limit"),
        [(0, 1, 1, 1), (1, 0, 1, 1), (1, 1, 0, 1), (1, 1, 1, 0), (-1, 5, 2, 2)],
    )
    def test_invalid_parameters_yield_none(
        self, width: int, height: int, players: int, area_limit: int
    ) -> None:
        assert new_game(width, height, players, area_limit) is None

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="gammie.core.game"):
            assert new_game(1, 1, 0, 1) is None
        assert "Rejected game" in caplog.text

    def test_constructor_raises(self) -> None:
        with pytest.raises(ValueError, match="player count"):
            Game(2, 2, 0, 1)
        with pytest.raises(ValueError, match="area limit"):
            Game(2, 2, 1, 0)

    def test_single_cell_single_player(self) -> None:
        game = new_game(1, 1, 1, 1)
        assert game is not None
        assert game.move(1, 0, 0)
        assert game.free_count == 0
        assert not game.golden_possible(1)


class TestGameAccessors:
    def test_owner_out_of_range(self) -> None:
        game = Game(2, 2, 2, 1)
        assert game.owner(-1, 0) == NOBODY
        assert game.owner(0, 2) == NOBODY

    def test_issue_label_is_monotonic(self) -> None:
        game = Game(2, 2, 2, 1)
        assert [game.issue_label() for _ in range(3)] == [1, 2, 3]
        assert game.next_label == 4

    def test_repr(self) -> None:
        assert repr(Game(3, 2, 4, 1)) == "Game(3x2, players=4, area_limit=1, free=6)"

    def test_many_players_are_independent(self) -> None:
        game = Game(4, 4, 16, 1)
        for p in range(1, 17):
            x, y = (p - 1) % 4, (p - 1) // 4
            assert game.move(p, x, y)
            assert game.areas(p) == 1
        assert game.free_count == 0
