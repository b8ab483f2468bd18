"""Board - cell owners and region labels on a W x H grid."""

from __future__ import annotations

from collections.abc import Iterator

from gammie.core.types import NO_LABEL, NOBODY, NEIGHBOUR_OFFSETS, Cell, Label, Player


class Board:
    """Mutable rectangular grid with an owner and a region label per cell.

    The board knows nothing about players or area limits; it only stores what
    the rules layer writes into it.
    """

    __slots__ = ("_width", "_height", "_owners", "_labels")

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Invalid board size: {width}x{height}")
        self._width = width
        self._height = height
        size = width * height
        self._owners: list[Player] = [NOBODY] * size
        self._labels: list[Label] = [NO_LABEL] * size

    # -- Dimensions ---------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        return self._width * self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _index(self, x: int, y: int) -> int:
        return y * self._width + x

    # -- Element access -----------------------------------------------------

    def owner(self, x: int, y: int) -> Player:
        """Owner of (x, y), or NOBODY."""
        return self._owners[self._index(x, y)]

    def label(self, x: int, y: int) -> Label:
        """Region label of (x, y); only meaningful for owned cells."""
        return self._labels[self._index(x, y)]

    def set_owner(self, x: int, y: int, player: Player) -> None:
        self._owners[self._index(x, y)] = player

    def set_label(self, x: int, y: int, label: Label) -> None:
        self._labels[self._index(x, y)] = label

    def is_empty(self, x: int, y: int) -> bool:
        return self._owners[self._index(x, y)] == NOBODY

    # -- Iteration helpers --------------------------------------------------

    def neighbours(self, x: int, y: int) -> Iterator[Cell]:
        """In-bounds 4-neighbours of (x, y): left, right, down, up."""
        for dx, dy in NEIGHBOUR_OFFSETS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self._width and 0 <= ny < self._height:
                yield nx, ny

    def cells(self) -> Iterator[Cell]:
        """All cells in row-major order, bottom row first."""
        for y in range(self._height):
            for x in range(self._width):
                yield x, y

    def cells_of(self, player: Player) -> list[Cell]:
        """Cells currently owned by *player*."""
        w = self._width
        return [(i % w, i // w) for i, p in enumerate(self._owners) if p == player]

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board.__new__(Board)
        b._width = self._width
        b._height = self._height
        b._owners = self._owners.copy()
        b._labels = self._labels.copy()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._owners == other._owners
            and self._labels == other._labels
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for y in range(self._height - 1, -1, -1):
            row = []
            for x in range(self._width):
                p = self.owner(x, y)
                row.append(str(p) if p != NOBODY else ".")
            rows.append(f"{y:>2} {' '.join(row)}")
        return "\n".join(rows)
