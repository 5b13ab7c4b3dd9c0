"""Command-line interface: load, check, then enumerate solutions."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ..core.constraints import check_puzzle
from ..core.csp import PuzzleSolver
from ..core.graph import ConstraintGraph
from ..core.model import Puzzle, Solution
from . import parser, printer

log = logging.getLogger(__name__)


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Enumerate every solution of a rectangular-block Sudoku.")
    ap.add_argument("puzzle", type=Path, help="Path to a puzzle file (text, or YAML by .yaml/.yml suffix)")
    limit = ap.add_mutually_exclusive_group()
    limit.add_argument("--max-solutions", type=_positive_int, default=None, metavar="N",
                       help="Stop after N solutions (overrides the puzzle's options.max_solutions)")
    limit.add_argument("--first", action="store_const", const=1, dest="max_solutions",
                       help="Stop after the first solution")
    ap.add_argument("--yaml", action="store_true", help="Print solutions as YAML documents")
    ap.add_argument("--quiet", action="store_true", help="Only print the number of solutions")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return ap


def _max_solutions(args: argparse.Namespace, puzzle: Puzzle) -> int | None:
    if args.max_solutions is not None:
        return args.max_solutions
    value = puzzle.options.get("max_solutions")
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise parser.PuzzleFormatError(f"options.max_solutions must be an integer, got {value!r}")
    if value < 1:
        raise parser.PuzzleFormatError(f"options.max_solutions must be positive, got {value}")
    return value


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    try:
        puzzle = parser.load_puzzle(args.puzzle)
        limit = _max_solutions(args, puzzle)
    except (OSError, parser.PuzzleFormatError) as exc:
        print(exc, file=sys.stderr)
        return 1

    graph = ConstraintGraph.for_shape(puzzle.shape)
    if not check_puzzle(puzzle, graph, report=print):
        print("Puzzle is not OK")
        return 0
    print("Puzzle is OK")
    if not args.quiet:
        print(printer.format_grid(puzzle.shape, puzzle.cells))

    def emit(solution: Solution) -> None:
        if args.quiet:
            return
        if args.yaml:
            print("---")
            print(printer.format_solution_yaml(solution), end="")
        else:
            print(printer.format_solution_header(solution))
            print(printer.format_grid(solution.shape, solution.cells))

    solver = PuzzleSolver(puzzle, graph=graph, on_solution=emit, max_solutions=limit)
    count = solver.solve()
    log.info("%s: %d solution(s)", args.puzzle, count)
    if args.quiet:
        print(f"Solutions: {count}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
