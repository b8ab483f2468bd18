"""Tests for normal claims."""

from collections.abc import Callable

import pytest

from gammie.core.claims import ClaimRules
from gammie.core.game import Game
from gammie.core.types import NOBODY


class TestClaim:
    def test_first_claim_opens_an_area(self) -> None:
        game = Game(3, 3, 2, 1)
        assert game.move(1, 1, 1)
        assert game.owner(1, 1) == 1
        assert game.areas(1) == 1
        assert game.busy_fields(1) == 1
        assert game.free_count == 8

    def test_two_by_two_scenario(
        self, check_invariants: Callable[[Game], None]
    ) -> None:
        game = Game(2, 2, 2, 1)
        assert game.move(1, 0, 0)
        assert game.move(2, 1, 1)
        assert game.move(1, 1, 0)
        assert game.areas(1) == 1
        # (0, 1) sits directly above (0, 0), so it extends player 1's area.
        assert game.move(1, 0, 1)
        assert game.areas(1) == 1
        check_invariants(game)

    def test_disjoint_claim_beyond_limit_rejected(self) -> None:
        game = Game(3, 3, 2, 1)
        assert game.move(1, 0, 0)
        assert not game.move(1, 2, 2)
        assert game.owner(2, 2) == NOBODY
        assert game.move(1, 1, 0)

    def test_diagonal_cell_is_not_adjacent(self) -> None:
        game = Game(2, 2, 2, 1)
        assert game.move(2, 1, 0)
        assert not game.move(2, 0, 1)
        assert game.areas(2) == 1

    def test_other_players_cells_do_not_extend(self) -> None:
        game = Game(3, 1, 2, 1)
        assert game.move(1, 0, 0)
        assert game.move(2, 2, 0)
        assert not game.move(2, 0, 0)
        assert game.move(2, 1, 0)
        assert game.areas(2) == 1

    def test_claim_merges_up_to_four_regions(
        self, check_invariants: Callable[[Game], None]
    ) -> None:
        game = Game(3, 3, 1, 4)
        for x, y in [(0, 1), (2, 1), (1, 0), (1, 2)]:
            assert game.move(1, x, y)
        assert game.areas(1) == 4
        assert game.move(1, 1, 1)
        assert game.areas(1) == 1
        check_invariants(game)

    def test_claim_at_limit_may_still_join_regions(self) -> None:
        game = Game(3, 1, 1, 2)
        assert game.move(1, 0, 0)
        assert game.move(1, 2, 0)
        assert game.areas(1) == 2
        assert game.move(1, 1, 0)
        assert game.areas(1) == 1

    def test_occupied_cell_rejected(self) -> None:
        game = Game(2, 2, 2, 2)
        assert game.move(1, 0, 0)
        assert not game.move(2, 0, 0)
        assert not game.move(1, 0, 0)
        assert game.busy_fields(1) == 1

    def test_fresh_labels_are_never_reused(self) -> None:
        game = Game(5, 1, 1, 5)
        game.move(1, 0, 0)
        game.move(1, 2, 0)
        first, second = game.board.label(0, 0), game.board.label(2, 0)
        assert first != second
        game.move(1, 1, 0)
        game.move(1, 4, 0)
        assert game.board.label(4, 0) not in (first, second)


class TestClaimRejection:
    @pytest.mark.parametrize(
        ("player", "x", "y"),
        [(0, 0, 0), (3, 0, 0), (-1, 0, 0), (1, -1, 0), (1, 2, 0), (1, 0, 2)],
    )
    def test_invalid_arguments_leave_game_unchanged(
        self, player: int, x: int, y: int
    ) -> None:
        game = Game(2, 2, 2, 1)
        game.move(2, 1, 1)
        before = game.board.copy()
        assert not ClaimRules.is_legal(game, player, x, y)
        assert not game.move(player, x, y)
        assert game.board == before
        assert game.free_count == 3
        assert game.next_label == 2
