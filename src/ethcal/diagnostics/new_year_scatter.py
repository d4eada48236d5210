#!/usr/bin/env python3
from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

import argparse

import ethcal


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "ethcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "ethcal[diagnostics]"') from e


def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """
    Ethiopian years start_year..end_year -> (Gregorian year, day-of-year of
    Meskerem 1, leap flag of the preceding Ethiopian year).
    """
    years = np.arange(start_year, end_year + 1, dtype=int)
    x = np.empty_like(years)
    y = np.empty_like(years, dtype=float)
    shifted = np.zeros_like(years, dtype=bool)

    for i, Y in enumerate(years):
        ny = ethcal.new_year_info(int(Y))
        d = ny["date"]
        x[i] = d.year
        y[i] = float(day_of_year(d))
        shifted[i] = ny["leap_pagume"]

    return x, y, shifted


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Meskerem 1 (day-of-year) across Gregorian years.")
    p.add_argument("--start-year", type=int, default=1600, help="First Ethiopian year.")
    p.add_argument("--end-year", type=int, default=2200, help="Last Ethiopian year.")
    p.add_argument("--outbase", default="new_year_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    x, y, shifted = build_series(np, args.start_year, args.end_year)

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
        "axes.linewidth": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Day-of-year (Jan 1 = 1)")
    ax.set_title("Ethiopian new year (Meskerem 1) in the Gregorian calendar")

    ax.scatter(x[~shifted], y[~shifted], s=10, marker="o", c="tab:blue", alpha=0.5, label="regular")
    ax.scatter(x[shifted], y[shifted], s=14, marker="o", facecolors="none",
               edgecolors="tab:red", linewidths=1.0, alpha=0.7, label="after 6-day Pagume")

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=200)
    plt.close(fig)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
