from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from functools import lru_cache
from typing import Dict, Optional, Sequence, Tuple
import math

State = Tuple[int, ...]  # flattened row-major grid, 0 is the blank


class Move(IntEnum):
    """Direction the blank slid to produce a state."""
    START = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4

    @property
    def inverse(self) -> "Move":
        return _INVERSE[self]

    @property
    def label(self) -> str:
        return self.name


_INVERSE = {
    Move.START: Move.START,
    Move.UP: Move.DOWN,
    Move.DOWN: Move.UP,
    Move.LEFT: Move.RIGHT,
    Move.RIGHT: Move.LEFT,
}


def state_key(tiles: Sequence[int]) -> int:
    """Pack a tile sequence into one integer (mixed radix, base = len(tiles))."""
    base = len(tiles)
    key = 0
    for t in tiles:
        key = key * base + t
    return key


def goal_tiles(n: int) -> State:
    return tuple(list(range(1, n * n)) + [0])


@lru_cache(maxsize=None)
def goal_positions(n: int) -> Dict[int, Tuple[int, int]]:
    """Goal (row, col) of every non-blank tile on an n x n board."""
    return {t: divmod(t - 1, n) for t in range(1, n * n)}


@dataclass(frozen=True)
class PuzzleState:
    """One board configuration plus the search bookkeeping attached to it.

    Only ``tiles`` takes part in equality and hashing; the cost fields and
    parent link are filled in by the search engine on a copy.
    """
    tiles: State
    blank_index: int = field(compare=False)
    g: int = field(default=0, compare=False)
    h: float = field(default=0.0, compare=False)
    move: Move = field(default=Move.START, compare=False)
    parent_key: Optional[int] = field(default=None, compare=False)

    @classmethod
    def from_grid(cls, grid: Sequence[int]) -> "PuzzleState":
        tiles = tuple(int(x) for x in grid)
        return cls(tiles=tiles, blank_index=tiles.index(0))

    @property
    def f(self) -> float:
        return self.g + self.h

    @property
    def dim(self) -> int:
        return math.isqrt(len(self.tiles))

    @property
    def key(self) -> int:
        return state_key(self.tiles)
