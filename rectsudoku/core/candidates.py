"""Legal values for a single cell given the current grid."""

from __future__ import annotations

from typing import Callable, List

from .graph import ConstraintGraph
from .model import Grid


def _possible(grid: Grid, graph: ConstraintGraph, row: int, col: int) -> List[bool]:
    possible = [True] * grid.n
    for r, c in graph.neighbors(row, col):
        val = grid.at(r, c)
        if val > 0:
            possible[val - 1] = False
    return possible


def count_candidates(grid: Grid, graph: ConstraintGraph, row: int, col: int) -> int:
    return sum(_possible(grid, graph, row, col))


def candidates(grid: Grid, graph: ConstraintGraph, row: int, col: int) -> List[int]:
    """Values not held by any peer of ``(row, col)``, ascending."""
    possible = _possible(grid, graph, row, col)
    return [val for val in range(1, grid.n + 1) if possible[val - 1]]


def for_each_candidate(
    grid: Grid,
    graph: ConstraintGraph,
    row: int,
    col: int,
    visit: Callable[[int], None],
) -> None:
    """Call ``visit`` once per candidate value, ascending.

    The candidate list is fixed before the first call, so ``visit`` may
    modify the grid.
    """
    for val in candidates(grid, graph, row, col):
        visit(val)
