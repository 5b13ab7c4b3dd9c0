from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List

import yaml

from ..core.model import Puzzle, Shape

log = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


class PuzzleFormatError(ValueError):
    """Raised when a puzzle file is missing tokens or holds bad values."""


def _read_int(tokens: Iterator[str], message: str) -> int:
    try:
        return int(next(tokens))
    except (StopIteration, ValueError):
        raise PuzzleFormatError(message) from None


def _as_int(value: Any, message: str) -> int:
    # YAML booleans load as bool, a subclass of int
    if isinstance(value, bool) or not isinstance(value, int):
        raise PuzzleFormatError(message)
    return value


def _check_shape(block_rows: int, block_cols: int) -> None:
    if block_rows < 1 or block_cols < 1:
        raise PuzzleFormatError(f"Invalid block shape {block_rows}x{block_cols}")


def _build(block_rows: int, block_cols: int, cells: List[int], options: Dict[str, Any] | None = None) -> Puzzle:
    _check_shape(block_rows, block_cols)
    shape = Shape(block_rows, block_cols)
    n = shape.n
    for i, val in enumerate(cells):
        if not 0 <= val <= n:
            r, c = divmod(i, n)
            raise PuzzleFormatError(f"Value {val} at ({r}, {c}) out of range 0..{n}")
    return Puzzle(shape=shape, cells=tuple(cells), options=dict(options or {}))


def parse_text(text: str) -> Puzzle:
    """Parse ``block_rows block_cols`` followed by the cells in row-major order."""
    tokens = iter(text.split())
    block_rows = _read_int(tokens, "Error reading rows")
    block_cols = _read_int(tokens, "Error reading cols")
    _check_shape(block_rows, block_cols)
    n = block_rows * block_cols
    cells = [_read_int(tokens, f"Error reading: {r} {c}") for r in range(n) for c in range(n)]
    return _build(block_rows, block_cols, cells)


def parse_yaml(text: str) -> Puzzle:
    """Parse a YAML mapping with ``block_rows``, ``block_cols`` and ``cells``.

    ``cells`` may be a list of rows or one flat row-major list. An optional
    ``options`` mapping is carried on the puzzle.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise PuzzleFormatError(f"Invalid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise PuzzleFormatError("Puzzle YAML must be a mapping")

    for key in ("block_rows", "block_cols"):
        if key not in data:
            raise PuzzleFormatError(f"Missing key {key!r}")
    block_rows = _as_int(data["block_rows"], "Block shape must be integers")
    block_cols = _as_int(data["block_cols"], "Block shape must be integers")

    raw = data.get("cells")
    if not isinstance(raw, list):
        raise PuzzleFormatError("Missing key 'cells'")
    flat: List[Any] = []
    for item in raw:
        if isinstance(item, list):
            flat.extend(item)
        else:
            flat.append(item)

    _check_shape(block_rows, block_cols)
    n = block_rows * block_cols
    if len(flat) != n * n:
        raise PuzzleFormatError(f"Expected {n * n} cells, found {len(flat)}")
    cells = [_as_int(v, "Cell values must be integers") for v in flat]

    options = data.get("options") or {}
    if not isinstance(options, dict):
        raise PuzzleFormatError("'options' must be a mapping")
    return _build(block_rows, block_cols, cells, options)


def load_puzzle(path: str | Path) -> Puzzle:
    """Load a puzzle file; YAML by suffix, whitespace-delimited text otherwise."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    if path.suffix.lower() in YAML_SUFFIXES:
        puzzle = parse_yaml(text)
    else:
        puzzle = parse_text(text)
    log.debug("loaded %s: %dx%d blocks, %d given(s)", path, puzzle.shape.block_rows,
              puzzle.shape.block_cols, sum(1 for v in puzzle.cells if v))
    return puzzle
