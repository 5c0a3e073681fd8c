from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

State = Tuple[int, ...]


@dataclass(frozen=True)
class DefaultPuzzle:
    name: str
    tiles: State
    depth: Optional[int]  # optimal number of moves, None when unsolvable


def _p(name: str, depth: Optional[int], *tiles: int) -> DefaultPuzzle:
    return DefaultPuzzle(name=name, tiles=tuple(tiles), depth=depth)


PUZZLES: Dict[str, DefaultPuzzle] = {p.name: p for p in (
    # ---------- 8-puzzles ----------
    _p("trivial", 0,
       1, 2, 3,
       4, 5, 6,
       7, 8, 0),
    _p("easy", 2,
       1, 2, 0,
       4, 5, 3,
       7, 8, 6),
    _p("doable", 4,
       0, 1, 2,
       4, 5, 3,
       7, 8, 6),
    _p("oh_boy", 22,
       8, 7, 1,
       6, 0, 2,
       5, 4, 3),
    _p("wait_for_it", 31,
       8, 6, 7,
       2, 5, 4,
       3, 0, 1),
    _p("impossible", None,
       1, 2, 3,
       4, 5, 6,
       8, 7, 0),
    # ---------- 15-puzzles ----------
    _p("fifteen_trivial", 0,
       1, 2, 3, 4,
       5, 6, 7, 8,
       9, 10, 11, 12,
       13, 14, 15, 0),
    _p("fifteen_easy", 3,
       1, 2, 3, 0,
       5, 6, 7, 4,
       9, 10, 11, 8,
       13, 14, 15, 12),
    _p("fifteen_doable", 9,
       2, 0, 3, 4,
       1, 10, 6, 8,
       5, 9, 7, 11,
       13, 14, 15, 12),
    _p("fifteen_wait_for_it", 35,
       1, 10, 15, 4,
       13, 6, 3, 8,
       2, 9, 12, 7,
       14, 5, 0, 11),
    _p("fifteen_impossible", None,
       1, 2, 3, 4,
       5, 6, 7, 8,
       9, 10, 11, 12,
       13, 15, 14, 0),
)}

DEFAULT_PUZZLE = "fifteen_wait_for_it"


def get_puzzle(name: str) -> DefaultPuzzle:
    try:
        return PUZZLES[name.strip().lower()]
    except KeyError:
        raise KeyError(f"unknown puzzle {name!r}; choose from {', '.join(PUZZLES)}") from None
