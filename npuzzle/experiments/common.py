from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple
import logging
import re

from npuzzle.domains.errors import InvalidGridError
from npuzzle.domains.puzzlen import is_solvable, scramble

State = Tuple[int, ...]

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)


def parse_grid(text: str) -> List[int]:
    """Parse '1 2 0 4 ...' (spaces and/or commas) into a flat integer grid."""
    tokens = [t for t in re.split(r"[\s,]+", text.strip()) if t]
    if not tokens:
        raise InvalidGridError("no numbers entered")
    try:
        return [int(t) for t in tokens]
    except ValueError as e:
        raise InvalidGridError(f"grid must contain integers: {e}") from None


def choose_dim(args) -> int:
    """
    Domain selection precedence: --n  >  --domain (p8|p15).
    """
    if getattr(args, "n", None) is not None:
        return args.n
    return 4 if getattr(args, "domain", "p8") == "p15" else 3


@dataclass
class Instance:
    seed: int
    depth: int
    state: State


def generate_instances(n: int, depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            s = scramble(n, d, seed)
            attempts += 1
            if is_solvable(s, n):
                out.append(Instance(seed=seed, depth=d, state=s))
                made += 1
            seed += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out
