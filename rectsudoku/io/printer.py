"""Text and YAML rendering of grids."""

from __future__ import annotations

from typing import Sequence

import yaml

from ..core.model import Shape, Solution


def format_grid(shape: Shape, cells: Sequence[int]) -> str:
    """Render the shape line and one line per grid row.

    Values below 10 are padded with one leading space and every value is
    followed by a space, so rows keep the puzzle file's column layout.
    """
    n = shape.n
    lines = [f"{shape.block_rows} {shape.block_cols}"]
    for r in range(n):
        parts = []
        for val in cells[r * n:(r + 1) * n]:
            parts.append((" " if val < 10 else "") + f"{val} ")
        lines.append("".join(parts))
    return "\n".join(lines) + "\n"


def format_solution_header(solution: Solution) -> str:
    return f"Solution-{solution.index}, nodes={solution.nodes}"


def format_solution_yaml(solution: Solution) -> str:
    data = {
        "solution": solution.index,
        "nodes": solution.nodes,
        "block_rows": solution.shape.block_rows,
        "block_cols": solution.shape.block_cols,
        "cells": solution.rows(),
    }
    return yaml.safe_dump(data, default_flow_style=None, sort_keys=False)
