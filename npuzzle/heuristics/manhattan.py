from typing import Tuple
from npuzzle.domains.state import goal_positions

State = Tuple[int, ...]

def manhattan(s: State, n: int) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    goal_pos = goal_positions(n)
    dist = 0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        r, c = divmod(idx, n)
        gr, gc = goal_pos[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist
