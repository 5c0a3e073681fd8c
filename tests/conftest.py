from collections import deque

import pytest

from npuzzle.domains.state import goal_tiles


def reachable_from_goal(n):
    """Every configuration reachable from the goal by blank moves (plain BFS)."""
    start = goal_tiles(n)
    seen = {start}
    q = deque([start])
    while q:
        s = q.popleft()
        z = s.index(0)
        r, c = divmod(z, n)
        for ok, j in ((r > 0, z - n), (r < n - 1, z + n), (c > 0, z - 1), (c < n - 1, z + 1)):
            if not ok:
                continue
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            t = tuple(lst)
            if t not in seen:
                seen.add(t)
                q.append(t)
    return seen


@pytest.fixture(scope="session")
def reachable_8():
    return reachable_from_goal(3)


@pytest.fixture
def bfs_reachable():
    return reachable_from_goal
