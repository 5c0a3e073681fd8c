from __future__ import annotations
import argparse, csv
import logging
from pathlib import Path
from typing import List, Optional

from npuzzle.domains.puzzlen import NPuzzle, make_unsolvable_variant
from npuzzle.experiments.common import Instance, choose_dim, configure_logging, generate_instances
from npuzzle.experiments.solve import heuristic_arg
from npuzzle.heuristics.selector import Heuristic
from npuzzle.search.a_star import TIE_BREAKS, SearchResult

logger = logging.getLogger(__name__)

HEADER = [
    "algorithm", "heuristic", "n", "depth", "seed",
    "expanded", "generated", "duplicates", "g", "time_sec",
    "peak_open", "tie_break", "termination", "solvable",
]


def write_row(w, res: SearchResult, n: int, inst: Instance, solvable_flag: int) -> None:
    row = res.as_row()
    row.update({"n": n, "depth": inst.depth, "seed": inst.seed, "solvable": solvable_flag})
    w.writerow([row[k] for k in HEADER])


def run(
    n: int,
    depths: List[int],
    per_depth: int,
    heuristics: List[Heuristic],
    out: Path,
    tie_break: str = "h",
    improve_frontier: bool = False,
    include_unsolvable: bool = False,
    start_seed: int = 0,
) -> int:
    """Solve generated instances with every heuristic and write one CSV row per run."""
    insts = generate_instances(n, depths, per_depth, start_seed=start_seed)
    out.parent.mkdir(parents=True, exist_ok=True)
    rows = 0
    with out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            variants = [(inst.state, 1)]
            # Optional unsolvable variants (flip parity).
            if include_unsolvable:
                variants.append((make_unsolvable_variant(inst.state), 0))
            for tiles, flag in variants:
                puzzle = NPuzzle(tiles)
                for h in heuristics:
                    r = puzzle.solve(h, tie_break=tie_break, improve_frontier=improve_frontier)
                    write_row(w, r, n, inst, flag)
                    rows += 1
            logger.debug("Finished instance depth=%d seed=%d", inst.depth, inst.seed)
    return rows


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="A* N-puzzle heuristic comparison runner")
    ap.add_argument("--heuristics", type=heuristic_arg, nargs="+",
                    default=[Heuristic.MISPLACED_TILE, Heuristic.MANHATTAN, Heuristic.LINEAR_CONFLICT])
    ap.add_argument("--depths", type=int, nargs="+", default=[6, 10, 14, 18])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--tie_break", choices=TIE_BREAKS, default="h")
    ap.add_argument("--improve_frontier", action="store_true",
                    help="Replace frontier entries when a cheaper path is found (optimal g with informed heuristics)")
    ap.add_argument("--seed", type=int, default=0, help="First scramble seed")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))

    # domain selection
    ap.add_argument("--domain", choices=["p8", "p15"], default="p8", help="3x3 or 4x4 shortcut")
    ap.add_argument("--n", type=int, default=None, help="Square board size (N×N)")

    ap.add_argument("--include_unsolvable", action="store_true", help="Also run unsolvable variants")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    configure_logging(args.verbose)
    n = choose_dim(args)
    rows = run(n, args.depths, args.per_depth, args.heuristics, args.out,
               tie_break=args.tie_break, improve_frontier=args.improve_frontier,
               include_unsolvable=args.include_unsolvable, start_seed=args.seed)
    print(f"Wrote {args.out} ({rows} runs)")


if __name__ == "__main__":
    main()
