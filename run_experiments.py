#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("8-puzzle, all heuristics",
        "python -m npuzzle.experiments.runner --domain p8 --depths 6 10 14 18 --per_depth 10 "
        "--heuristics 1 2 3 4 5 --out results/p8_heuristics.csv")
    run("15-puzzle, informed heuristics",
        "python -m npuzzle.experiments.runner --domain p15 --depths 6 10 14 18 --per_depth 10 "
        "--heuristics manhattan linear_conflict --out results/p15_heuristics.csv")
    run("Plots", "python -m npuzzle.experiments.plot results/p8_heuristics.csv --save results/plots")
    run("Plots", "python -m npuzzle.experiments.plot results/p15_heuristics.csv --save results/plots")

if __name__ == "__main__":
    main()
