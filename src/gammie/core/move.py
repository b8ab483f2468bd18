"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gammie.core.enums import MoveKind
from gammie.core.types import Player

if TYPE_CHECKING:
    from gammie.core.game import Game


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single claim or seizure."""

    player: Player
    x: int
    y: int
    kind: MoveKind = MoveKind.NORMAL

    @property
    def is_golden(self) -> bool:
        return self.kind is MoveKind.GOLDEN

    def play(self, game: Game) -> bool:
        """Apply this move to *game*. Returns True if it was legal."""
        if self.is_golden:
            return game.golden_move(self.player, self.x, self.y)
        return game.move(self.player, self.x, self.y)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Batch command form, e.g. ``m 1 0 2``."""
        return f"{self.kind.value} {self.player} {self.x} {self.y}"
