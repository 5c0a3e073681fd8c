from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Dict, List, Tuple, Union
from time import perf_counter
import heapq
import itertools
import logging

from npuzzle.domains.state import PuzzleState
from npuzzle.heuristics.selector import Heuristic, heuristic_function, resolve_heuristic
from npuzzle.search.path import reconstruct_path

if TYPE_CHECKING:
    from npuzzle.domains.puzzlen import NPuzzle

logger = logging.getLogger(__name__)

TIE_BREAKS = ("h", "g", "fifo", "lifo")


@dataclass
class SearchResult:
    path: List[PuzzleState] = field(default_factory=list)
    nodes_expanded: int = 0
    max_frontier_size: int = 0
    goal_depth: int = 0
    generated: int = 0
    duplicates: int = 0
    time: float = 0.0
    heuristic: Heuristic = Heuristic.UNIFORM_COST
    tie_break: str = "h"
    termination: str = "ok"

    @property
    def solved(self) -> bool:
        return bool(self.path)

    @property
    def moves(self) -> List[str]:
        """Move labels from start to goal, START excluded."""
        return [s.move.label for s in self.path[1:]]

    def as_row(self) -> Dict[str, object]:
        return {
            "algorithm": "A*" if self.heuristic != Heuristic.UNIFORM_COST else "UCS",
            "heuristic": self.heuristic.name.lower(),
            "expanded": self.nodes_expanded,
            "generated": self.generated,
            "duplicates": self.duplicates,
            "g": self.goal_depth if self.solved else "",
            "time_sec": f"{self.time:.6f}",
            "peak_open": self.max_frontier_size,
            "tie_break": self.tie_break,
            "termination": self.termination,
        }


def a_star(
    puzzle: "NPuzzle",
    heuristic: Union[Heuristic, int, str] = Heuristic.MANHATTAN,
    tie_break: str = "h",
    improve_frontier: bool = False,
) -> SearchResult:
    """
    Best-first graph search over ``puzzle`` ordered by f = g + h.

    The goal test happens when a state is popped, so a start state that is
    already the goal is returned with zero expansions. Children already in the
    frontier or explored registries are discarded, keeping the first path
    found to each configuration; with ``improve_frontier`` a frontier entry is
    replaced when a strictly cheaper path to it turns up. Only uniform cost is
    guaranteed a shortest path under first-discovered pruning; informed
    heuristics (Manhattan and linear conflict included) need
    ``improve_frontier`` for that.

    tie_break orders equal-f entries: "h" (lower h first), "g" (higher g
    first), "fifo" or "lifo" by insertion.
    """
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"tie_break must be one of {TIE_BREAKS}, got {tie_break!r}")
    selector = resolve_heuristic(heuristic)
    hfun = heuristic_function(selector)
    n = puzzle.dim
    t0 = perf_counter()

    def finish(path: List[PuzzleState], termination: str, **stats) -> SearchResult:
        res = SearchResult(
            path=path,
            goal_depth=max(len(path) - 1, 0),
            time=perf_counter() - t0,
            heuristic=selector,
            tie_break=tie_break,
            termination=termination,
            **stats,
        )
        logger.info(
            "%s: %s, depth=%d expanded=%d max_frontier=%d (%.3fs)",
            selector.title, termination, res.goal_depth, res.nodes_expanded,
            res.max_frontier_size, res.time,
        )
        return res

    if not puzzle.solvable:
        logger.info("Puzzle %s is not solvable", puzzle.start_state.tiles)
        return finish([], "unsolvable")

    counter = itertools.count()

    def priority_tuple(f: float, g: int, h: float, ctr: int) -> Tuple[float, float, int]:
        if tie_break == "h":   return (f, h, ctr)
        if tie_break == "g":   return (f, -g, ctr)
        if tie_break == "fifo":return (f, 0,  ctr)
        return (f, 0, -ctr)

    open_heap: List[Tuple[Tuple[float, float, int], PuzzleState]] = []
    frontier: Dict[int, PuzzleState] = {}
    explored: Dict[int, PuzzleState] = {}

    def admit(state: PuzzleState, key: int) -> None:
        heapq.heappush(open_heap, (priority_tuple(state.f, state.g, state.h, next(counter)), state))
        frontier[key] = state

    start = puzzle.start_state
    h0 = hfun(start.tiles, n)
    start = replace(start, g=0, h=h0, parent_key=None)
    admit(start, start.key)

    expanded = 0
    generated = 0
    duplicates = 0
    max_frontier = 0

    while open_heap:
        _, node = heapq.heappop(open_heap)
        key = node.key
        if frontier.get(key) is node:
            del frontier[key]

        if puzzle.is_goal(node):
            return finish(
                reconstruct_path(node, explored), "ok",
                nodes_expanded=expanded, max_frontier_size=max_frontier,
                generated=generated, duplicates=duplicates,
            )

        if key in explored:
            continue

        expanded += 1
        explored[key] = node
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Expanding state with g(n) = %d and h(n) = %s: %s", node.g, node.h, node.tiles)

        for child in puzzle.children(node):
            generated += 1
            child_key = child.key
            g2 = node.g + 1
            if child_key in explored:
                duplicates += 1
                continue
            queued = frontier.get(child_key)
            if queued is not None and not (improve_frontier and g2 < queued.g):
                duplicates += 1
                continue
            h2 = queued.h if queued is not None else hfun(child.tiles, n)
            admit(replace(child, g=g2, h=h2, parent_key=key), child_key)

        max_frontier = max(max_frontier, len(frontier))

    # Open exhausted without finding goal
    return finish(
        [], "exhausted",
        nodes_expanded=expanded, max_frontier_size=max_frontier,
        generated=generated, duplicates=duplicates,
    )
