from typing import List, Tuple
from npuzzle.domains.state import goal_positions
from npuzzle.heuristics.manhattan import manhattan

State = Tuple[int, ...]


def _conflicts(line: List[Tuple[int, int]], goal_axis: int, n: int) -> int:
    """2 per pair in ``line`` whose goal order is reversed.

    ``line`` holds (position, tile) for tiles already in their goal row/column,
    in board order; each tile is only compared with tiles after it.
    """
    goal_pos = goal_positions(n)
    extra = 0
    for i in range(len(line)):
        _, ti = line[i]
        gi = goal_pos[ti][goal_axis]
        for j in range(i + 1, len(line)):
            _, tj = line[j]
            if gi > goal_pos[tj][goal_axis]:
                extra += 2
    return extra


def linear_conflict(s: State, n: int) -> int:
    """Manhattan + 2 per pair of linearly-conflicting tiles (rows & cols)."""
    goal_pos = goal_positions(n)
    m = manhattan(s, n)
    # Row conflicts
    for r in range(n):
        row = s[r * n:(r + 1) * n]
        tiles = [(c, t) for c, t in enumerate(row) if t != 0 and goal_pos[t][0] == r]
        m += _conflicts(tiles, 1, n)
    # Column conflicts
    for c in range(n):
        col = [s[c + r * n] for r in range(n)]
        tiles = [(r, t) for r, t in enumerate(col) if t != 0 and goal_pos[t][1] == c]
        m += _conflicts(tiles, 0, n)
    return m
