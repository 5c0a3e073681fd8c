#!/usr/bin/env python3
"""Solve one N-puzzle from the catalog, the command line, or a prompt."""
from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from npuzzle.domains.errors import InvalidGridError, UnknownHeuristicError
from npuzzle.domains.puzzlen import NPuzzle
from npuzzle.domains.puzzles import DEFAULT_PUZZLE, PUZZLES, get_puzzle
from npuzzle.experiments.common import configure_logging, parse_grid
from npuzzle.experiments.display import format_solution, format_state
from npuzzle.heuristics.selector import Heuristic, parse_heuristic
from npuzzle.search.a_star import TIE_BREAKS


def heuristic_arg(value: str) -> Heuristic:
    try:
        return parse_heuristic(value)
    except UnknownHeuristicError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def heuristic_menu() -> str:
    return "\n".join(f"{h.value}. {h.title}" for h in Heuristic)


def prompt_puzzle(read=input) -> List[int]:
    """Ask for a default puzzle or a hand-entered one, like the original console program."""
    choice = read('Type "1" to use a default puzzle, or "2" to enter your own puzzle: ').strip()
    if choice == "1":
        return list(get_puzzle(DEFAULT_PUZZLE).tiles)
    if choice != "2":
        raise InvalidGridError(f"invalid choice {choice!r}")
    print("Enter your puzzle on one line. Use space between numbers,")
    print("and 0 to represent the blank. Press ENTER/RETURN when done.")
    return parse_grid(read("Enter puzzle: "))


def prompt_heuristic(read=input) -> Heuristic:
    # Menu choices are strict; the uniform-cost fallback for unknown values
    # only applies when the engine is called directly.
    print(heuristic_menu())
    return parse_heuristic(read("Enter your choice of algorithm: "))


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Solve one N-puzzle and print the move sequence.")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--puzzle", choices=sorted(PUZZLES), help="Named default puzzle")
    src.add_argument("--grid", help='Flat grid, e.g. "1 2 0 4 5 3 7 8 6"')
    src.add_argument("--interactive", action="store_true", help="Prompt for the puzzle and heuristic")
    p.add_argument("--heuristic", type=heuristic_arg, default=Heuristic.LINEAR_CONFLICT,
                   help="1-5 or a name (ucs, misplaced, euclidean, manhattan, linear_conflict)")
    p.add_argument("--tie_break", choices=TIE_BREAKS, default="h")
    p.add_argument("--improve_frontier", action="store_true",
                   help="Replace frontier entries when a cheaper path to them is found; "
                        "required for shortest paths with an informed heuristic")
    p.add_argument("--list", action="store_true", help="List the default puzzles and exit")
    p.add_argument("--verbose", action="store_true", help="Log every expansion")
    args = p.parse_args(argv)

    configure_logging(args.verbose)

    if args.list:
        for name, dp in PUZZLES.items():
            depth = "unsolvable" if dp.depth is None else f"{dp.depth} moves"
            print(f"{name:<22} {depth}")
        return 0

    heuristic = args.heuristic
    try:
        if args.interactive:
            print("Welcome to the N-puzzle solver.")
            grid = prompt_puzzle()
            heuristic = prompt_heuristic()
        elif args.grid:
            grid = parse_grid(args.grid)
        else:
            grid = list(get_puzzle(args.puzzle or DEFAULT_PUZZLE).tiles)
        puzzle = NPuzzle(grid)
    except (InvalidGridError, UnknownHeuristicError) as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    print(f"{heuristic.title}\n")
    print(format_state(puzzle.start_state.tiles, puzzle.dim))
    print("\nSOLVING PUZZLE...\n")
    result = puzzle.solve(heuristic, tie_break=args.tie_break, improve_frontier=args.improve_frontier)
    print(format_solution(result, puzzle.dim))
    return 0 if result.solved else 1


if __name__ == "__main__":
    sys.exit(main())
