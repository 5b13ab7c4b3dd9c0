from rectsudoku.core.candidates import candidates, count_candidates, for_each_candidate
from rectsudoku.core.graph import ConstraintGraph
from rectsudoku.core.model import Grid, Shape

GRID = Grid(Shape(2, 2), [
    1, 0, 0, 0,
    0, 0, 3, 0,
    0, 2, 0, 0,
    0, 0, 0, 4,
])
GRAPH = ConstraintGraph(2, 2)


def test_candidates_exclude_peer_values():
    assert candidates(GRID, GRAPH, 0, 1) == [3, 4]
    assert candidates(GRID, GRAPH, 2, 3) == [1, 3]


def test_count_matches_enumeration_everywhere():
    for r in range(4):
        for c in range(4):
            seen = []
            for_each_candidate(GRID, GRAPH, r, c, seen.append)
            assert count_candidates(GRID, GRAPH, r, c) == len(seen)
            assert seen == sorted(seen)
            assert all(1 <= v <= 4 for v in seen)
            peer_values = {GRID.at(pr, pc) for pr, pc in GRAPH.neighbors(r, c)}
            assert not peer_values.intersection(seen)


def test_duplicate_peers_are_absorbed():
    graph = ConstraintGraph(1, 2)
    grid = Grid(Shape(1, 2), [0, 1, 0, 0])
    # (0, 1) is both a row and a block peer of (0, 0)
    assert count_candidates(grid, graph, 0, 0) == 1
    assert candidates(grid, graph, 0, 0) == [2]


def test_visit_may_modify_grid():
    grid = GRID.copy()
    seen = []

    def visit(val):
        seen.append(val)
        grid.put(0, 2, val)

    for_each_candidate(grid, GRAPH, 0, 1, visit)
    assert seen == [3, 4]
