from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

Cell = Tuple[int, int]
EMPTY = 0


@dataclass(frozen=True)
class Shape:
    """Block dimensions of a board; the grid side is their product."""
    block_rows: int
    block_cols: int

    @property
    def n(self) -> int:
        return self.block_rows * self.block_cols


@dataclass(frozen=True)
class Puzzle:
    """Immutable starting grid as read from a puzzle file."""
    shape: Shape
    cells: Tuple[int, ...]
    options: Dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def n(self) -> int:
        return self.shape.n

    def at(self, row: int, col: int) -> int:
        n = self.shape.n
        assert 0 <= row < n and 0 <= col < n, (row, col)
        return self.cells[n * row + col]

    def grid(self) -> Grid:
        return Grid(self.shape, list(self.cells))


@dataclass
class Grid:
    """Mutable row-major grid used as the working candidate during search."""
    shape: Shape
    cells: List[int]

    @property
    def n(self) -> int:
        return self.shape.n

    def at(self, row: int, col: int) -> int:
        n = self.shape.n
        assert 0 <= row < n and 0 <= col < n, (row, col)
        return self.cells[n * row + col]

    def put(self, row: int, col: int, value: int) -> None:
        n = self.shape.n
        assert 0 <= row < n and 0 <= col < n, (row, col)
        self.cells[n * row + col] = value

    def clear(self, row: int, col: int) -> None:
        self.put(row, col, EMPTY)

    def copy(self) -> Grid:
        return Grid(self.shape, list(self.cells))

    def rows(self) -> List[List[int]]:
        n = self.shape.n
        return [self.cells[r * n:(r + 1) * n] for r in range(n)]


@dataclass(frozen=True)
class Solution:
    """A complete grid together with its search statistics."""
    index: int
    nodes: int
    shape: Shape
    cells: Tuple[int, ...]

    def rows(self) -> List[List[int]]:
        n = self.shape.n
        return [list(self.cells[r * n:(r + 1) * n]) for r in range(n)]


@dataclass(frozen=True)
class Conflict:
    """Two peer cells holding the same value."""
    first: Cell
    second: Cell
    value: int

    def __str__(self) -> str:
        return "Same value in ({}, {}) and ({}, {})".format(*self.first, *self.second)
