#!/usr/bin/env python3
from __future__ import annotations
import argparse, os, sys
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd
import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

METRICS = ["expanded", "peak_open", "time_sec"]


def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1) / np.sqrt(n)


def read_rows(paths: List[str]) -> pd.DataFrame:
    frames = [pd.read_csv(p) for p in paths]
    if not frames:
        return pd.DataFrame()
    df = pd.concat(frames, ignore_index=True)
    # Only solved runs carry meaningful search statistics
    if "termination" in df.columns:
        df = df[df["termination"].fillna("ok") == "ok"]
    return df


def aggregate(df: pd.DataFrame, metric: str) -> pd.DataFrame:
    """Mean and standard error of ``metric`` per (heuristic, depth)."""
    return (df.groupby(["heuristic", "depth"])[metric]
              .agg(mean="mean", sem=sem)
              .reset_index()
              .sort_values(["heuristic", "depth"]))


def plot_metric(ax, df: pd.DataFrame, metric: str):
    agg = aggregate(df, metric)
    for heur, g in agg.groupby("heuristic"):
        ax.errorbar(g["depth"], g["mean"], yerr=g["sem"], marker="o", capsize=3, label=heur)
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs depth (mean ± sem)")
    if metric != "time_sec":
        ax.set_yscale("log")
    ax.grid(True)
    ax.legend()


def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Plot runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    df = read_rows(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        sys.exit(0)

    outdir = Path(args.save)
    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem

    fig, axes = plt.subplots(1, len(METRICS), figsize=(15, 5))
    for ax, metric in zip(axes, METRICS):
        plot_metric(ax, df, metric)
    plt.tight_layout()
    save_fig(fig, outdir, f"{base}_combined")

    if args.show:
        plt.show()
    plt.close(fig)


if __name__ == "__main__":
    main()
