import itertools

import pytest

from npuzzle.domains.errors import InvalidGridError
from npuzzle.domains.puzzlen import NPuzzle, count_inversions, is_solvable, make_unsolvable_variant
from npuzzle.domains.puzzles import get_puzzle


def test_count_inversions():
    assert count_inversions((1, 2, 3, 4, 5, 6, 7, 8, 0)) == 0
    assert count_inversions((1, 2, 3, 4, 5, 6, 8, 7, 0)) == 1
    assert count_inversions((0, 3, 2, 1)) == 3


@pytest.mark.parametrize("name,expected", [
    ("trivial", True),
    ("easy", True),
    ("wait_for_it", True),
    ("impossible", False),
    ("fifteen_trivial", True),
    ("fifteen_wait_for_it", True),
    ("fifteen_impossible", False),
])
def test_catalog_solvability(name, expected):
    assert NPuzzle(get_puzzle(name).tiles).solvable is expected


def test_brute_force_2x2(bfs_reachable):
    reachable = bfs_reachable(2)
    assert len(reachable) == 12
    for perm in itertools.permutations(range(4)):
        assert is_solvable(perm, 2) == (perm in reachable), perm


def test_brute_force_3x3(reachable_8):
    assert len(reachable_8) == 181440
    solvable = 0
    for perm in itertools.permutations(range(9)):
        ok = is_solvable(perm, 3)
        assert ok == (perm in reachable_8)
        solvable += ok
    assert solvable == 181440


def test_unsolvable_variant_flips_parity(reachable_8):
    for s in list(reachable_8)[:200]:
        assert not is_solvable(make_unsolvable_variant(s), 3)


def test_fifteen_blank_row_rule():
    # goal: no inversions, blank on row 1 from bottom
    assert is_solvable((1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 0), 4)
    # blank moved up one row without any tile order change is unreachable
    assert not is_solvable((1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 0, 12, 13, 14, 15), 4)


@pytest.mark.parametrize("grid", [
    [],
    [1, 2, 3],
    [0],
    [1, 2, 3, 4],
    [0, 0, 1, 2],
    [0, 1, 2, 5],
    ["a", 1, 2, 0],
])
def test_invalid_grids_fail_at_construction(grid):
    with pytest.raises(InvalidGridError):
        NPuzzle(grid)


def test_invalid_grid_is_a_value_error():
    with pytest.raises(ValueError):
        NPuzzle([1, 2, 3, 4, 5, 6, 7, 8])
