import yaml

from rectsudoku.core.model import Shape, Solution
from rectsudoku.io.printer import format_grid, format_solution_header, format_solution_yaml


def test_format_small_grid():
    assert format_grid(Shape(1, 2), (1, 0, 0, 2)) == "1 2\n 1  0 \n 0  2 \n"


def test_two_digit_values_are_not_padded():
    cells = [0] * 144
    cells[0] = 12
    cells[1] = 3
    first_row = format_grid(Shape(3, 4), cells).splitlines()[1]
    assert first_row.startswith("12  3  0 ")


def test_solution_header():
    assert format_solution_header(Solution(4, 17, Shape(1, 1), (1,))) == "Solution-4, nodes=17"


def test_solution_yaml_document():
    text = format_solution_yaml(Solution(2, 3, Shape(1, 2), (2, 1, 1, 2)))
    assert yaml.safe_load(text) == {
        "solution": 2,
        "nodes": 3,
        "block_rows": 1,
        "block_cols": 2,
        "cells": [[2, 1], [1, 2]],
    }
