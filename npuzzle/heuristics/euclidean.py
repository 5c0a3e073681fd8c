from typing import Tuple
import math
from npuzzle.domains.state import goal_positions

State = Tuple[int, ...]

def euclidean(s: State, n: int) -> float:
    """Sum of straight-line distances to goal positions (blank ignored)."""
    goal_pos = goal_positions(n)
    dist = 0.0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        r, c = divmod(idx, n)
        gr, gc = goal_pos[tile]
        dist += math.hypot(r - gr, c - gc)
    return dist
