#!/usr/bin/env python3
from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

import argparse

import calnep


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calnep[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calnep[diagnostics]"') from e


def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1


def rolling_median(np, y, win: int = 11):
    """Centered rolling median with edge padding."""
    if win < 3:
        return y.astype(float)
    if win % 2 == 0:
        win += 1
    k = win // 2
    ypad = np.pad(y, (k, k), mode="edge")
    out = np.empty_like(y, dtype=float)
    for i in range(len(y)):
        out[i] = float(np.median(ypad[i : i + win]))
    return out


def build_series(np, table: str, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """BS years, Gregorian day-of-year of Baishakh 1, and BS year lengths."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    doy = np.empty_like(years, dtype=float)
    length = np.empty_like(years, dtype=float)

    for i, Y in enumerate(years):
        ny = calnep.new_year_day(int(Y), table=table)
        doy[i] = float(day_of_year(ny["date"]))
        length[i] = float(calnep.days_in_year(int(Y), table=table))

    return years, doy, length


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of BS New Year (Baishakh 1) across the table.")
    p.add_argument("--table", default="nepal")
    p.add_argument("--from-year", type=int, default=None)
    p.add_argument("--to-year", type=int, default=None)
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=11, help="Rolling median window (odd recommended).")
    p.add_argument("--outbase", default="bs_new_year_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    lo, hi = calnep.year_range(table=args.table)
    Y0 = args.from_year if args.from_year is not None else lo
    Y1 = args.to_year if args.to_year is not None else hi

    np = _need_numpy()
    plt = _need_matplotlib()

    years, doy, length = build_series(np, args.table, Y0, Y1)

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.set_xlabel("BS year")
    ax.set_ylabel("Gregorian day-of-year of Baishakh 1 (Jan 1 = 1)")
    ax.set_title(f"BS New Year drift ({args.table}, {Y0}-{Y1})")

    long_years = length > 365
    ax.scatter(years[~long_years], doy[~long_years], s=14, c="tab:blue", alpha=0.6, label="365-day year")
    ax.scatter(years[long_years], doy[long_years], s=14, c="tab:red", alpha=0.6, label="366-day year")

    if args.show_trend:
        ax.plot(years, rolling_median(np, doy, win=int(args.trend_win)), color="0.30", linewidth=1.8)

    ax.legend(loc="upper left", frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    print(f"Mean year length: {float(np.mean(length)):.4f} days")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
