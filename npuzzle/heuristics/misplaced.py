from typing import Tuple

State = Tuple[int, ...]

def misplaced_tiles(s: State, n: int) -> int:
    """Number of non-blank tiles not sitting on their goal index."""
    return sum(1 for idx, tile in enumerate(s) if tile != 0 and tile != idx + 1)
