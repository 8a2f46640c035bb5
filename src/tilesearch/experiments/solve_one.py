#!/usr/bin/env python3
from __future__ import annotations
import argparse, sys
from time import perf_counter
from typing import Callable, List, Optional, TextIO

from tilesearch.domains.board import check_same_shape, parse_board
from tilesearch.heuristics.selector import Heuristic
from tilesearch.search.a_star import solve
from tilesearch.search.result import Cutoff, Found, SolveResult

DEFAULT_INITIAL = "8 6 7 2 5 4 3 0 1"
DEFAULT_GOAL = "1 2 3 4 5 6 7 8 0"


def ask_heuristic(read: Callable[[str], str] = input, out: TextIO = sys.stdout) -> Heuristic:
    """Menu prompt; re-asks until the answer is 1 or 2."""
    print("Choose heuristic:", file=out)
    print("1 - Misplaced Tiles", file=out)
    print("2 - Manhattan Distance", file=out)
    answer = read("Enter 1 or 2: ").strip()
    while answer not in ("1", "2"):
        answer = read("Invalid choice! Please enter 1 or 2: ").strip()
    return Heuristic.parse(answer)


def render(res: SolveResult, order: str = "forward") -> List[str]:
    lines: List[str] = []
    if isinstance(res, Found):
        steps = res.path if order == "forward" else list(reversed(res.path))
        for step in steps:
            lines.append("------------")
            lines.append(f"Node {step.cost}")
            lines.append("shape: ")
            lines.extend(str(step.board).splitlines())
            lines.append(f"Previous direction from parent: {step.move or '-'}")
        lines.append("------------")
        lines.append(f"Path Cost: {res.total_cost}")
        lines.append(f"Moves: {res.moves or '(none)'}")
    elif isinstance(res, Cutoff):
        lines.append(f"Search stopped ({res.reason}) after {res.stats.expanded} expansions.")
    else:
        lines.append("No Solution Found!")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Solve one sliding-tile instance with A* and print the path.")
    p.add_argument("--heuristic", default=None, help="misplaced|manhattan (or 1|2); prompts when omitted")
    p.add_argument("--initial", default=DEFAULT_INITIAL, help="cells in reading order, 0 = blank")
    p.add_argument("--goal", default=DEFAULT_GOAL)
    p.add_argument("--order", choices=["forward", "backward"], default="forward",
                   help="forward = start to goal, backward = goal to start")
    p.add_argument("--tie_break", choices=["h", "g", "fifo", "lifo"], default="h")
    p.add_argument("--check_solvable", action="store_true", help="Run the parity test before searching")
    p.add_argument("--max_expansions", type=int, default=None)
    p.add_argument("--timeout_sec", type=float, default=None)
    args = p.parse_args(argv)

    try:
        initial = parse_board(args.initial)
        goal = parse_board(args.goal)
        check_same_shape(initial, goal)
        heuristic = Heuristic.parse(args.heuristic) if args.heuristic else ask_heuristic()
    except ValueError as e:
        p.error(str(e))

    print(f"Using heuristic: {heuristic.label}")
    t0 = perf_counter()
    res = solve(initial, goal, heuristic, tie_break=args.tie_break,
                max_expansions=args.max_expansions, timeout_sec=args.timeout_sec,
                check_solvable=args.check_solvable)
    elapsed_ms = (perf_counter() - t0) * 1000.0

    for line in render(res, args.order):
        print(line)
    print(f"Expanded: {res.stats.expanded}  Generated: {res.stats.generated}  Stale pops: {res.stats.stale}")
    print(f"Time taken to solve the puzzle: {elapsed_ms:.0f} milliseconds")
    return 0 if isinstance(res, Found) else 1


if __name__ == "__main__":
    sys.exit(main())
