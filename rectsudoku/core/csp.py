"""Exhaustive backtracking search over a puzzle's empty cells."""

from __future__ import annotations

import logging
import sys
from typing import Callable, List, Optional

from .candidates import count_candidates, for_each_candidate
from .graph import ConstraintGraph
from .model import Puzzle, Solution

log = logging.getLogger(__name__)

SolutionSink = Callable[[Solution], None]

# each level of the search takes _search, for_each_candidate and assign
_FRAMES_PER_LEVEL = 3
_STACK_HEADROOM = 100


class PuzzleSolver:
    """Depth-first enumeration of every completion of ``puzzle``.

    At each node the empty cell with the fewest candidates is expanded
    (first one in row-major order on ties). ``nodes`` counts dead ends since
    the last reported solution; ``solutions`` is the index of the last one.

    The search never checks the givens for duplicates; run
    :func:`rectsudoku.core.constraints.check_puzzle` first.
    """

    def __init__(
        self,
        puzzle: Puzzle,
        graph: Optional[ConstraintGraph] = None,
        on_solution: Optional[SolutionSink] = None,
        max_solutions: Optional[int] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> None:
        self.puzzle = puzzle
        self.grid = puzzle.grid()
        self.graph = graph if graph is not None else ConstraintGraph.for_shape(puzzle.shape)
        self.on_solution = on_solution
        self.max_solutions = max_solutions
        self.should_stop = should_stop
        self.nodes = 0
        self.solutions = 0
        self._stopped = False

    @property
    def stopped(self) -> bool:
        return self._stopped

    def stop(self) -> None:
        """Ask the running search to unwind without exploring further."""
        self._stopped = True

    def solve(self) -> int:
        """Run the search and return the number of solutions reported.

        Counters start from zero on every call, so a solver can be re-run.
        """
        n = self.grid.n
        needed = _FRAMES_PER_LEVEL * n * n + _STACK_HEADROOM
        previous_limit = sys.getrecursionlimit()
        if previous_limit < needed:
            sys.setrecursionlimit(needed)
        self.nodes = 0
        self.solutions = 0
        self._stopped = False
        try:
            self._search()
        finally:
            sys.setrecursionlimit(previous_limit)
        log.debug(
            "search finished: %d solution(s), %d trailing dead end(s)%s",
            self.solutions,
            self.nodes,
            " (stopped)" if self._stopped else "",
        )
        return self.solutions

    def _search(self) -> None:
        if self._stopped or (self.should_stop is not None and self.should_stop()):
            self._stopped = True
            return

        grid, graph, n = self.grid, self.graph, self.grid.n
        lowest = n + 1
        row = col = -1
        for r in range(n):
            for c in range(n):
                if grid.at(r, c) != 0:
                    continue
                count = count_candidates(grid, graph, r, c)
                if count == 0:
                    self.nodes += 1
                    return
                if count < lowest:
                    lowest = count
                    row, col = r, c

        if row == -1:
            self._report()
            return

        def assign(val: int) -> None:
            if self._stopped:
                return
            grid.put(row, col, val)
            try:
                self._search()
            finally:
                grid.clear(row, col)

        for_each_candidate(grid, graph, row, col, assign)

    def _report(self) -> None:
        self.solutions += 1
        solution = Solution(self.solutions, self.nodes, self.grid.shape, tuple(self.grid.cells))
        self.nodes = 0
        if self.on_solution is not None:
            self.on_solution(solution)
        if self.max_solutions is not None and self.solutions >= self.max_solutions:
            self._stopped = True


def enumerate_solutions(puzzle: Puzzle, limit: Optional[int] = None) -> List[Solution]:
    """Collect all solutions of ``puzzle`` (at most ``limit`` of them)."""
    found: List[Solution] = []
    PuzzleSolver(puzzle, on_solution=found.append, max_solutions=limit).solve()
    return found
