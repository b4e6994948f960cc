#!/usr/bin/env python3
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple, Optional, List

import argparse

import religcal
from religcal.core.time import day_of_year


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "religcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "religcal[diagnostics]"') from e


def days_since_equinox(np, years, doy):
    """Days after Mar 21 (Mar 21 = 0), the fixed ecclesiastical equinox."""
    leap = ((years % 4 == 0) & (years % 100 != 0)) | (years % 400 == 0)
    return doy - (80 + leap.astype(float))


@dataclass(frozen=True)
class Style:
    label: str
    color: str
    marker: str
    size: float = 16.0
    hollow: bool = False


def build_series(np, denomination: str, start_year: int, end_year: int, *, metric: str) -> Tuple["np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)

    for i, Y in enumerate(years):
        y[i] = float(day_of_year(religcal.easter(int(Y), denomination)))

    if metric == "since-equinox":
        y = days_since_equinox(np, years, y)
    elif metric != "doy":
        raise ValueError("metric must be 'doy' or 'since-equinox'")
    return years, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Western and Orthodox Easter dates.")
    p.add_argument("--start-year", type=int, default=1900)
    p.add_argument("--end-year", type=int, default=2099)
    p.add_argument("--outbase", default="easter_scatter", help="Output base name (writes .png)")
    p.add_argument(
        "--metric",
        choices=("since-equinox", "doy"),
        default="since-equinox",
        help="Y-axis metric (default: days after Mar 21).",
    )
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    styles: Dict[str, Style] = {
        "catholic": Style("Western", "tab:blue", "o", size=12),
        "orthodox": Style("Orthodox", "tab:red", "o", size=18, hollow=True),
    }

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.set_xlabel("Gregorian year")
    if args.metric == "doy":
        ax.set_ylabel("Day-of-year (Jan 1 = 1)")
    else:
        ax.set_ylabel("Days after March 21")
    ax.set_title("Easter Sunday, Western and Orthodox")

    for denom, st in styles.items():
        x, y = build_series(np, denom, args.start_year, args.end_year, metric=args.metric)
        if st.hollow:
            ax.scatter(x, y, s=st.size, marker=st.marker, facecolors="none", edgecolors=st.color,
                       linewidths=1.0, alpha=0.6, label=st.label)
        else:
            ax.scatter(x, y, s=st.size, marker=st.marker, c=st.color, linewidths=0.0, alpha=0.5, label=st.label)

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=200)
    plt.close(fig)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
