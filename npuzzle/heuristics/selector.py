from __future__ import annotations
from enum import IntEnum
from typing import Callable, Dict, Tuple, Union
import logging

from npuzzle.domains.errors import UnknownHeuristicError
from npuzzle.domains.state import PuzzleState
from npuzzle.heuristics.euclidean import euclidean
from npuzzle.heuristics.linear_conflict import linear_conflict
from npuzzle.heuristics.manhattan import manhattan
from npuzzle.heuristics.misplaced import misplaced_tiles

logger = logging.getLogger(__name__)

State = Tuple[int, ...]
HeuristicFn = Callable[[State, int], float]


class Heuristic(IntEnum):
    """Heuristic choices, numbered as in the interactive menu."""
    UNIFORM_COST = 1
    MISPLACED_TILE = 2
    EUCLIDEAN = 3
    MANHATTAN = 4
    LINEAR_CONFLICT = 5

    @property
    def title(self) -> str:
        return _TITLES[self]


_TITLES = {
    Heuristic.UNIFORM_COST: "Uniform Cost Search",
    Heuristic.MISPLACED_TILE: "A* with the Misplaced Tile heuristic",
    Heuristic.EUCLIDEAN: "A* with the Euclidean distance heuristic",
    Heuristic.MANHATTAN: "A* with the Manhattan distance heuristic",
    Heuristic.LINEAR_CONFLICT: "A* with Manhattan distance + Linear Conflict",
}

_ALIASES: Dict[str, Heuristic] = {
    "uniform_cost": Heuristic.UNIFORM_COST,
    "uniform": Heuristic.UNIFORM_COST,
    "ucs": Heuristic.UNIFORM_COST,
    "zero": Heuristic.UNIFORM_COST,
    "misplaced_tile": Heuristic.MISPLACED_TILE,
    "misplaced": Heuristic.MISPLACED_TILE,
    "euclidean": Heuristic.EUCLIDEAN,
    "manhattan": Heuristic.MANHATTAN,
    "m": Heuristic.MANHATTAN,
    "linear_conflict": Heuristic.LINEAR_CONFLICT,
    "linear": Heuristic.LINEAR_CONFLICT,
    "lc": Heuristic.LINEAR_CONFLICT,
}


def _zero(s: State, n: int) -> int:
    return 0


_FUNCTIONS: Dict[Heuristic, HeuristicFn] = {
    Heuristic.UNIFORM_COST: _zero,
    Heuristic.MISPLACED_TILE: misplaced_tiles,
    Heuristic.EUCLIDEAN: euclidean,
    Heuristic.MANHATTAN: manhattan,
    Heuristic.LINEAR_CONFLICT: linear_conflict,
}


def parse_heuristic(selector: Union[Heuristic, int, str]) -> Heuristic:
    """Strict lookup; raises UnknownHeuristicError for anything unrecognised."""
    if isinstance(selector, Heuristic):
        return selector
    if isinstance(selector, bool):
        raise UnknownHeuristicError(f"unknown heuristic: {selector!r}")
    if isinstance(selector, int):
        try:
            return Heuristic(selector)
        except ValueError:
            raise UnknownHeuristicError(f"unknown heuristic: {selector!r}") from None
    if isinstance(selector, str):
        name = selector.strip().lower().replace("-", "_").replace(" ", "_")
        if name.isdigit():
            return parse_heuristic(int(name))
        if name in _ALIASES:
            return _ALIASES[name]
        for h in Heuristic:
            if h.name.lower() == name:
                return h
    raise UnknownHeuristicError(f"unknown heuristic: {selector!r}")


def resolve_heuristic(selector: Union[Heuristic, int, str]) -> Heuristic:
    """Lenient lookup: unknown selectors fall back to uniform cost."""
    try:
        return parse_heuristic(selector)
    except UnknownHeuristicError as e:
        logger.warning("%s; falling back to %s", e, Heuristic.UNIFORM_COST.title)
        return Heuristic.UNIFORM_COST


def heuristic_function(selector: Union[Heuristic, int, str]) -> HeuristicFn:
    return _FUNCTIONS[resolve_heuristic(selector)]


def heuristic_cost(state: PuzzleState, selector: Union[Heuristic, int, str]) -> float:
    return heuristic_function(selector)(state.tiles, state.dim)
