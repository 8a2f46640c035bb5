#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

PY = sys.executable


def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)


def main():
    Path("results").mkdir(exist_ok=True)
    run("8-puzzle, both heuristics + BFS",
        f"{PY} -m tilesearch.experiments.runner --n 3 --depths 4 8 12 16 20 --per_depth 10 --bfs --out results/p8.csv")
    run("8-puzzle unsolvable variants (parity pre-check)",
        f"{PY} -m tilesearch.experiments.runner --n 3 --depths 8 --per_depth 5 --include_unsolvable --check_solvable --out results/p8_unsolvable.csv")
    run("15-puzzle, Manhattan only",
        f"{PY} -m tilesearch.experiments.runner --n 4 --depths 10 20 30 --per_depth 10 --heuristics manhattan --timeout_sec 30 --out results/p15.csv")
    run("Plots", f"{PY} -m tilesearch.experiments.plot results/p8.csv --save results/plots")


if __name__ == "__main__":
    main()
