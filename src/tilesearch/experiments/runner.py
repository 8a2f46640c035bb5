from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from tilesearch.domains.board import Board, scramble, make_unsolvable_variant
from tilesearch.heuristics.selector import Heuristic
from tilesearch.search.a_star import solve
from tilesearch.search.bfs import bfs
from tilesearch.search.result import Found, SolveResult

HEADER = [
    "algorithm", "heuristic", "n", "depth", "seed",
    "expanded", "generated", "duplicates", "stale", "g", "time_sec",
    "peak_open", "visited", "tie_break", "termination", "solvable",
]


@dataclass
class Instance:
    seed: int
    depth: int
    board: Board


def gen_instances(goal: Board, depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    """Scrambled instances; random walks from the goal are always solvable."""
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        for _ in range(per_depth):
            out.append(Instance(seed=seed, depth=d, board=scramble(goal, d, seed)))
            seed += 1
    return out


def result_row(res: SolveResult, inst: Instance, n: int, solvable_flag: int) -> list:
    st = res.stats
    g = res.total_cost if isinstance(res, Found) else ""
    return [
        st.algorithm, st.heuristic, n, inst.depth, inst.seed,
        st.expanded, st.generated, st.duplicates, st.stale, g, f"{st.time_sec:.6f}",
        st.peak_open, st.visited, st.tie_break, res.termination, solvable_flag,
    ]


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="A* sliding-tile experiment runner")
    ap.add_argument("--n", type=int, default=3, help="Board size (N×N)")
    ap.add_argument("--heuristics", nargs="+", choices=[h.value for h in Heuristic],
                    default=[h.value for h in Heuristic])
    ap.add_argument("--depths", type=int, nargs="+", default=[4, 8, 12, 16, 20])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--start_seed", type=int, default=0)
    ap.add_argument("--tie_break", choices=["h", "g", "fifo", "lifo"], default="h")
    ap.add_argument("--max_expansions", type=int, default=None, help="Per-instance A* expansion cap")
    ap.add_argument("--max_states", type=int, default=None,
                    help="Per-instance cap on states discovered by the BFS baseline")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-instance wall time")
    ap.add_argument("--bfs", action="store_true", help="Also run breadth-first search as a baseline")
    ap.add_argument("--include_unsolvable", action="store_true",
                    help="Also run parity-flipped variants (small boards recommended)")
    ap.add_argument("--check_solvable", action="store_true",
                    help="Reject unsolvable instances with the parity test instead of searching")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    args = ap.parse_args(argv)

    goal = Board.solved(args.n)
    insts = gen_instances(goal, args.depths, args.per_depth, args.start_seed)
    args.out.parent.mkdir(parents=True, exist_ok=True)

    def run_all(w, board: Board, inst: Instance, solvable_flag: int):
        for heur in args.heuristics:
            r = solve(board, goal, heur, tie_break=args.tie_break,
                      max_expansions=args.max_expansions, timeout_sec=args.timeout_sec,
                      check_solvable=args.check_solvable)
            w.writerow(result_row(r, inst, args.n, solvable_flag))
        if args.bfs:
            r = bfs(board, goal, max_states=args.max_states)
            w.writerow(result_row(r, inst, args.n, solvable_flag))

    with args.out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for i, inst in enumerate(insts, 1):
            run_all(w, inst.board, inst, 1)
            if args.include_unsolvable:
                run_all(w, make_unsolvable_variant(inst.board), inst, 0)
            if i % 10 == 0:
                print(f"  {i}/{len(insts)} instances done")

    print(f"Wrote {args.out} ({len(insts)} instances)")


if __name__ == "__main__":
    main()
