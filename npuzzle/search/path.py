from __future__ import annotations
from typing import Dict, List

from npuzzle.domains.state import PuzzleState


def reconstruct_path(goal: PuzzleState, explored: Dict[int, PuzzleState]) -> List[PuzzleState]:
    """Walk parent keys through the explored registry back to the start.

    Every ancestor of ``goal`` must already be in ``explored``; a missing key
    raises KeyError.
    """
    path: List[PuzzleState] = [goal]
    parent_key = goal.parent_key
    while parent_key is not None:
        parent = explored[parent_key]
        path.append(parent)
        parent_key = parent.parent_key
    path.reverse()
    return path
