from __future__ import annotations
from typing import List, Sequence

from npuzzle.domains.state import Move, PuzzleState
from npuzzle.search.a_star import SearchResult

_BANNERS = {
    Move.UP: "MOVE UP -----",
    Move.DOWN: "MOVE DOWN ---",
    Move.LEFT: "MOVE LEFT ---",
    Move.RIGHT: "MOVE RIGHT --",
}


def format_state(tiles: Sequence[int], n: int) -> str:
    """Aligned n x n grid, each cell padded to the widest tile number."""
    width = len(str(n * n - 1))
    lines = []
    for r in range(n):
        row = tiles[r * n:(r + 1) * n]
        lines.append(" ".join(str(t).ljust(width) for t in row).rstrip())
    return "\n".join(lines)


def move_banner(index: int, state: PuzzleState) -> str:
    if state.move == Move.START:
        return "------ START ------"
    return f"-- {index}: {_BANNERS[state.move]}"


def format_path(path: List[PuzzleState], n: int) -> str:
    blocks = [f"{move_banner(i, s)}\n{format_state(s.tiles, n)}" for i, s in enumerate(path)]
    return "\n\n".join(blocks)


def format_summary(result: SearchResult) -> str:
    if not result.solved:
        if result.termination == "unsolvable":
            return "PUZZLE IS NOT SOLVABLE"
        return "The search exhausted the frontier without reaching the goal."
    return (
        f"To solve this problem, the search algorithm expanded a total of {result.nodes_expanded} nodes.\n"
        f"The maximum number of nodes in the queue at any one time was {result.max_frontier_size}.\n"
        f"The depth of the goal node was {result.goal_depth}."
    )


def format_solution(result: SearchResult, n: int) -> str:
    rule = "*" * 41
    parts = ["*************** SOLUTION ****************", ""]
    if result.solved:
        parts.append(format_path(result.path, n))
    else:
        parts.append("-- NO SOLUTION --")
    parts += ["", rule, "", format_summary(result)]
    return "\n".join(parts)
