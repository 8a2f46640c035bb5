#!/usr/bin/env python3
import argparse, os
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd
import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

METRICS = ["expanded", "generated", "time_sec"]
LABEL = {"misplaced": "Misplaced Tiles", "manhattan": "Manhattan", "": "BFS"}


def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1) / np.sqrt(n)


def load(paths: List[Path]) -> pd.DataFrame:
    frames = []
    for p in paths:
        df = pd.read_csv(p)
        if not {"algorithm", "depth", "g", *METRICS}.issubset(df.columns):
            print(f"Skipping {p}: not a runner CSV")
            continue
        frames.append(df)
    if not frames:
        return pd.DataFrame()
    df = pd.concat(frames, ignore_index=True)
    if "heuristic" not in df:
        df["heuristic"] = ""
    df["heuristic"] = df["heuristic"].fillna("").astype(str)
    return df


def aggregate(df: pd.DataFrame) -> pd.DataFrame:
    """mean ± SEM per (algorithm, heuristic, depth) over solved, solvable rows."""
    if df.empty:
        return df
    # older CSVs predate the termination and solvable columns
    termination = df["termination"].fillna("ok") if "termination" in df else pd.Series("ok", index=df.index)
    solvable = df["solvable"].fillna(1) if "solvable" in df else pd.Series(1, index=df.index)
    ok = df[(termination == "ok") & (solvable == 1)]
    named = {}
    for m in METRICS:
        named[f"{m}_mean"] = (m, "mean")
        named[f"{m}_sem"] = (m, sem)
    g = (ok.groupby(["algorithm", "heuristic", "depth"], as_index=False)
           .agg(n=("expanded", "count"), g_mean=("g", "mean"), **named))
    return g.sort_values(["algorithm", "heuristic", "depth"]).reset_index(drop=True)


def plot_metric(ax, g: pd.DataFrame, metric: str):
    for (algo, heur), part in g.groupby(["algorithm", "heuristic"]):
        label = f"{algo} | {LABEL.get(heur, heur)}"
        ax.errorbar(part["depth"], part[f"{metric}_mean"], yerr=part[f"{metric}_sem"],
                    marker="o", capsize=3, label=label)
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel(metric)
    ax.set_yscale("log")
    ax.set_title(f"{metric} vs depth (mean ± SEM)")
    ax.grid(True, alpha=0.25, ls=":")
    ax.legend()


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Aggregate runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", type=Path, help="One or more CSV result files")
    ap.add_argument("--save", type=Path, default=Path("results/plots"), help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    g = aggregate(load(args.csv))
    if g.empty:
        print("No solved rows to plot. Are your CSVs empty?")
        return

    print(g[["algorithm", "heuristic", "depth", "n", "g_mean", "expanded_mean", "time_sec_mean"]]
          .to_string(index=False))

    args.save.mkdir(parents=True, exist_ok=True)
    base = "combo" if len(args.csv) > 1 else args.csv[0].stem
    fig, axes = plt.subplots(1, len(METRICS), figsize=(15, 5))
    for ax, metric in zip(axes, METRICS):
        plot_metric(ax, g, metric)
    fig.tight_layout()
    out = args.save / f"{base}_combined.png"
    fig.savefig(out, dpi=200, bbox_inches="tight")
    print(f"Saved: {out}")

    if args.show:
        plt.show()
    plt.close(fig)


if __name__ == "__main__":
    main()
