import pytest

from npuzzle.domains.puzzlen import NPuzzle
from npuzzle.domains.puzzles import PUZZLES, get_puzzle
from npuzzle.heuristics.selector import Heuristic


@pytest.mark.parametrize("name", sorted(PUZZLES))
def test_catalog_entries_are_valid(name):
    dp = PUZZLES[name]
    p = NPuzzle(dp.tiles)
    assert p.solvable == (dp.depth is not None)
    assert p.dim == (4 if name.startswith("fifteen") else 3)


@pytest.mark.parametrize("name", ["trivial", "easy", "doable", "fifteen_trivial", "fifteen_easy", "fifteen_doable"])
def test_small_catalog_depths(name):
    dp = get_puzzle(name)
    assert NPuzzle(dp.tiles).solve(Heuristic.LINEAR_CONFLICT, improve_frontier=True).goal_depth == dp.depth


def test_get_puzzle():
    assert get_puzzle(" Easy ").name == "easy"
    with pytest.raises(KeyError):
        get_puzzle("nope")
