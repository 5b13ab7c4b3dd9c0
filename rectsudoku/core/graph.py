"""Peer graph for rectangular-block Sudoku boards."""

from __future__ import annotations

from functools import lru_cache
from typing import List, Tuple

from .model import Cell, Shape


class ConstraintGraph:
    """For every cell, the cells that must hold a different value.

    The peers of ``(r, c)`` are listed as the row peers, then the column
    peers, then the block peers in row-major order. Cells appearing in more
    than one of those groups are listed once per group.

    ``block_rows`` and ``block_cols`` must both be positive; callers reject
    other shapes before building a graph.
    """

    def __init__(self, block_rows: int, block_cols: int) -> None:
        self.shape = Shape(block_rows, block_cols)
        self.n = n = self.shape.n
        adjacency: List[Tuple[Cell, ...]] = []
        for r in range(n):
            for c in range(n):
                peers: List[Cell] = [(r, x) for x in range(n) if x != c]
                peers.extend((x, c) for x in range(n) if x != r)
                start_row = r - r % block_rows
                start_col = c - c % block_cols
                for x in range(block_rows):
                    for y in range(block_cols):
                        if start_row + x != r or start_col + y != c:
                            peers.append((start_row + x, start_col + y))
                adjacency.append(tuple(peers))
        self._adjacency: Tuple[Tuple[Cell, ...], ...] = tuple(adjacency)

    @staticmethod
    def for_shape(shape: Shape) -> ConstraintGraph:
        """Return the shared graph for ``shape``."""
        return _graph_for(shape.block_rows, shape.block_cols)

    def neighbors(self, row: int, col: int) -> Tuple[Cell, ...]:
        assert 0 <= row < self.n, row
        assert 0 <= col < self.n, col
        return self._adjacency[self.n * row + col]

    def __repr__(self) -> str:
        return f"ConstraintGraph({self.shape.block_rows}, {self.shape.block_cols})"


@lru_cache(maxsize=None)
def _graph_for(block_rows: int, block_cols: int) -> ConstraintGraph:
    return ConstraintGraph(block_rows, block_cols)
