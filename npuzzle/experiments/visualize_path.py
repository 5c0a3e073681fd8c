#!/usr/bin/env python3
import argparse, os
from pathlib import Path
from typing import List, Optional, Sequence

import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from npuzzle.domains.puzzlen import NPuzzle, scramble
from npuzzle.domains.puzzles import PUZZLES, get_puzzle
from npuzzle.domains.state import PuzzleState
from npuzzle.experiments.common import choose_dim, configure_logging
from npuzzle.experiments.solve import heuristic_arg
from npuzzle.heuristics.selector import Heuristic


def draw_board(state: PuzzleState, n: int, out_path: Path, title: Optional[str] = None):
    plt.figure(figsize=(3, 3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n + 1):
        ax.plot([0, n], [i, i], linewidth=1)
        ax.plot([i, i], [0, n], linewidth=1)
    # tiles
    for idx, t in enumerate(state.tiles):
        if t == 0: continue
        r, c = divmod(idx, n)
        ax.text(c + 0.5, r + 0.6, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()


def save_frames(path: Sequence[PuzzleState], n: int, outdir: Path) -> List[Path]:
    out = []
    for i, s in enumerate(path):
        p = outdir / f"step_{i:03d}.png"
        draw_board(s, n, p, title=s.move.label)
        out.append(p)
    return out


def main(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--heuristic", type=heuristic_arg, default=Heuristic.LINEAR_CONFLICT)
    p.add_argument("--puzzle", choices=sorted(PUZZLES), default=None, help="Named default puzzle")
    p.add_argument("--domain", choices=["p8", "p15"], default="p8")
    p.add_argument("--n", type=int, default=None)
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", default="results/figs/example_path")
    args = p.parse_args(argv)

    configure_logging()
    if args.puzzle:
        start = get_puzzle(args.puzzle).tiles
    else:
        start = scramble(choose_dim(args), args.depth, args.seed)
    puzzle = NPuzzle(start)
    res = puzzle.solve(args.heuristic)

    if not res.solved:
        print(f"No path ({res.termination}).")
        return

    frames = save_frames(res.path, puzzle.dim, Path(args.outdir))
    print(f"Saved {len(frames)} frames to {args.outdir}")


if __name__ == "__main__":
    main()
