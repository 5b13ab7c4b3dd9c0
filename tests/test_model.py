import pytest

from rectsudoku.core.model import Conflict, Grid, Puzzle, Shape, Solution


def test_shape_side_length():
    assert Shape(2, 3).n == 6
    assert Shape(1, 1).n == 1


def test_puzzle_grid_is_independent_copy():
    puzzle = Puzzle(Shape(1, 2), (1, 0, 0, 1))
    grid = puzzle.grid()
    grid.put(0, 1, 2)
    assert grid.at(0, 1) == 2
    assert puzzle.at(0, 1) == 0
    grid.clear(0, 1)
    assert grid.cells == list(puzzle.cells)


def test_grid_rows_and_copy():
    grid = Grid(Shape(1, 2), [1, 2, 2, 1])
    assert grid.rows() == [[1, 2], [2, 1]]
    clone = grid.copy()
    clone.put(0, 0, 0)
    assert grid.at(0, 0) == 1


def test_out_of_range_coordinates_fail_assertion():
    grid = Grid(Shape(1, 2), [0] * 4)
    with pytest.raises(AssertionError):
        grid.at(2, 0)
    with pytest.raises(AssertionError):
        grid.put(0, -1, 1)


def test_puzzle_equality_ignores_options():
    a = Puzzle(Shape(1, 1), (0,), {"max_solutions": 1})
    b = Puzzle(Shape(1, 1), (0,))
    assert a == b


def test_solution_rows_and_conflict_text():
    sol = Solution(1, 0, Shape(1, 2), (1, 2, 2, 1))
    assert sol.rows() == [[1, 2], [2, 1]]
    assert str(Conflict((0, 2), (0, 0), 1)) == "Same value in (0, 2) and (0, 0)"
