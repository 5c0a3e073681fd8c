from __future__ import annotations
from typing import List, Optional, Sequence, Tuple, Union
import math
import random

from npuzzle.domains.errors import InvalidGridError
from npuzzle.domains.state import Move, PuzzleState, State, goal_tiles
from npuzzle.heuristics.selector import Heuristic
from npuzzle.search.a_star import SearchResult, a_star

# Child generation order; equal-cost children keep this order in the frontier
MOVE_ORDER: Tuple[Move, ...] = (Move.UP, Move.DOWN, Move.LEFT, Move.RIGHT)


def validate_grid(grid: Sequence[int]) -> State:
    """Return the grid as a tuple or raise InvalidGridError."""
    try:
        tiles = tuple(int(x) for x in grid)
    except (TypeError, ValueError) as e:
        raise InvalidGridError(f"grid must contain integers: {e}") from None
    if not tiles:
        raise InvalidGridError("grid is empty")
    n = math.isqrt(len(tiles))
    if n * n != len(tiles):
        raise InvalidGridError(f"grid length {len(tiles)} is not a perfect square")
    if n < 2:
        raise InvalidGridError("grid must be at least 2x2")
    zeros = tiles.count(0)
    if zeros != 1:
        raise InvalidGridError(f"grid must contain exactly one blank (0), found {zeros}")
    if sorted(tiles) != list(range(len(tiles))):
        raise InvalidGridError(f"grid is not a permutation of 0..{len(tiles) - 1}")
    return tiles


def count_inversions(s: Sequence[int]) -> int:
    arr = [x for x in s if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i + 1, len(arr)):
            if arr[j] < arr[i]:
                inv += 1
    return inv


def is_solvable(s: Sequence[int], n: int) -> bool:
    """Solvability rules:
       - n odd: inversions must be even
       - n even: (inversions odd and blank row from bottom even) or
         (inversions even and blank row from bottom odd)
         (row count is 1-based from the bottom)
    """
    inv = count_inversions(s)
    if n % 2 == 1:
        return inv % 2 == 0
    blank_row_from_bottom = n - list(s).index(0) // n
    if inv % 2 == 1:
        return blank_row_from_bottom % 2 == 0
    return blank_row_from_bottom % 2 == 1


def is_goal(s: Sequence[int]) -> bool:
    return all(tile == idx + 1 for idx, tile in enumerate(s) if tile != 0)


def apply_move(state: PuzzleState, move: Move, n: int) -> Optional[PuzzleState]:
    """Slide the blank one cell; None if the move leaves the board."""
    z = state.blank_index
    r, c = divmod(z, n)
    if move == Move.UP and r > 0:
        j = z - n
    elif move == Move.DOWN and r < n - 1:
        j = z + n
    elif move == Move.LEFT and c > 0:
        j = z - 1
    elif move == Move.RIGHT and c < n - 1:
        j = z + 1
    else:
        return None
    lst = list(state.tiles)
    lst[z], lst[j] = lst[j], lst[z]
    return PuzzleState(tiles=tuple(lst), blank_index=j, move=move)


def children(state: PuzzleState, n: int) -> List[PuzzleState]:
    """Successors in UP, DOWN, LEFT, RIGHT order; costs left for the caller."""
    out: List[PuzzleState] = []
    for move in MOVE_ORDER:
        child = apply_move(state, move, n)
        if child is not None:
            out.append(child)
    return out


def scramble(n: int, depth: int, seed: int) -> State:
    """Depth-limited random walk from GOAL with no immediate backtrack."""
    rng = random.Random(seed)
    s = goal_tiles(n)
    last_blank = None
    for _ in range(depth):
        z = s.index(0)
        cand = list(_blank_targets(z, n))
        if last_blank in cand and len(cand) > 1:
            cand.remove(last_blank)
        j = rng.choice(cand)
        lst = list(s)
        lst[z], lst[j] = lst[j], lst[z]
        last_blank = z
        s = tuple(lst)
    return s


def make_unsolvable_variant(s: State) -> State:
    """Swap the first two non-blank tiles, flipping inversion parity."""
    lst = list(s)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)


def _blank_targets(i: int, n: int) -> Tuple[int, ...]:
    r, c = divmod(i, n)
    moves = []
    if r > 0:       moves.append(i - n)
    if r < n - 1:   moves.append(i + n)
    if c > 0:       moves.append(i - 1)
    if c < n - 1:   moves.append(i + 1)
    return tuple(moves)


class NPuzzle:
    """One N x N sliding-tile puzzle instance (0 is the blank).

    Construction validates the grid and runs the solvability check once.
    ``solve`` runs the search and keeps the last result for the read-only
    accessors.
    """
    def __init__(self, grid: Sequence[int]):
        tiles = validate_grid(grid)
        self.N = math.isqrt(len(tiles))
        self.length = len(tiles)
        self.GOAL: State = goal_tiles(self.N)
        self._start = PuzzleState.from_grid(tiles)
        self.solvable = is_solvable(tiles, self.N)
        self._result: Optional[SearchResult] = None

    def __repr__(self) -> str:
        return f"NPuzzle({list(self._start.tiles)!r})"

    # ---------- Accessors ----------
    @property
    def size(self) -> int:
        """Number of tiles N (the blank is not counted)."""
        return self.length - 1

    @property
    def dim(self) -> int:
        return self.N

    @property
    def start_state(self) -> PuzzleState:
        return self._start

    @property
    def result(self) -> Optional[SearchResult]:
        return self._result

    @property
    def nodes_expanded(self) -> int:
        return self._result.nodes_expanded if self._result else 0

    @property
    def max_frontier_size(self) -> int:
        return self._result.max_frontier_size if self._result else 0

    @property
    def goal_depth(self) -> int:
        return self._result.goal_depth if self._result else 0

    @property
    def solution(self) -> List[PuzzleState]:
        return list(self._result.path) if self._result else []

    # ---------- Core dynamics ----------
    def is_goal(self, state: PuzzleState) -> bool:
        return is_goal(state.tiles)

    def children(self, state: PuzzleState) -> List[PuzzleState]:
        return children(state, self.N)

    # ---------- Search ----------
    def solve(
        self,
        heuristic: Union[Heuristic, int, str] = Heuristic.MANHATTAN,
        tie_break: str = "h",
        improve_frontier: bool = False,
    ) -> SearchResult:
        self._result = a_star(self, heuristic, tie_break=tie_break, improve_frontier=improve_frontier)
        return self._result
