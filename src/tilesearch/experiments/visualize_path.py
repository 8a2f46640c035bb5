#!/usr/bin/env python3
import argparse, os
from pathlib import Path
from typing import List, Optional

import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from tilesearch.domains.board import Board, parse_board, scramble
from tilesearch.search.a_star import solve
from tilesearch.search.result import Found


def draw_board(board: Board, out_path: Path, title: str = ""):
    n = board.n
    plt.figure(figsize=(3, 3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n + 1):
        ax.plot([0, n], [i, i], linewidth=1)
        ax.plot([i, i], [0, n], linewidth=1)
    # tiles
    for idx, t in enumerate(board.flat):
        if t == 0: continue
        r, c = divmod(idx, n)
        ax.text(c + 0.5, r + 0.6, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title, fontsize=10)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()


def main(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--heuristic", choices=["misplaced", "manhattan"], default="manhattan")
    p.add_argument("--initial", default=None, help="cells in reading order; scrambles the goal when omitted")
    p.add_argument("--goal", default=None, help="defaults to the solved N×N board")
    p.add_argument("--n", type=int, default=3)
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", type=Path, default=Path("results/figs/example_path"))
    args = p.parse_args(argv)

    goal = parse_board(args.goal) if args.goal else Board.solved(args.n)
    start = parse_board(args.initial) if args.initial else scramble(goal, args.depth, args.seed)

    res = solve(start, goal, args.heuristic)
    if not isinstance(res, Found):
        print(f"No path ({res.termination}). Try smaller depth.")
        return

    for i, step in enumerate(res.path):
        title = f"g={step.cost}" + (f"  move {step.move}" if step.move else "")
        draw_board(step.board, args.outdir / f"step_{i:03d}.png", title)
    print(f"Saved {len(res.path)} frames to {args.outdir}")


if __name__ == "__main__":
    main()
