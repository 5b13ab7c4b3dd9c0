"""Pre-solve validity check for the given values of a puzzle."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .graph import ConstraintGraph
from .model import Conflict, Puzzle

log = logging.getLogger(__name__)


def find_conflict(puzzle: Puzzle, graph: Optional[ConstraintGraph] = None) -> Optional[Conflict]:
    """Return the first pair of peers sharing a value, or ``None``.

    Cells are scanned row-major and each cell's peers in graph order, so the
    reported pair is deterministic.
    """
    if graph is None:
        graph = ConstraintGraph.for_shape(puzzle.shape)
    n = puzzle.n
    for row in range(n):
        for col in range(n):
            val = puzzle.at(row, col)
            if val == 0:
                continue
            for r, c in graph.neighbors(row, col):
                if puzzle.at(r, c) == val:
                    return Conflict((r, c), (row, col), val)
    return None


def check_puzzle(
    puzzle: Puzzle,
    graph: Optional[ConstraintGraph] = None,
    report: Optional[Callable[[Conflict], None]] = None,
) -> bool:
    """Return whether the givens are free of conflicts.

    The first conflict found, if any, is passed to ``report``.
    """
    conflict = find_conflict(puzzle, graph)
    if conflict is None:
        return True
    log.info("%s (value %d)", conflict, conflict.value)
    if report is not None:
        report(conflict)
    return False
