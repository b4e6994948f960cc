from __future__ import annotations

import argparse
from datetime import date, timedelta
from typing import Dict, List, Optional

from religcal.core.time import check_range
from religcal.engines.islamic import gregorian_to_hijri, hijri_to_gregorian


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "religcal[diagnostics]"') from e


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def drift_samples(np, start: date, end: date, N: int, seed: int):
    """Signed drift in days of gregorian -> hijri -> gregorian for N random dates in [start, end]."""
    check_range(start, end)
    rng = np.random.default_rng(seed)
    offsets = rng.integers(0, (end - start).days + 1, size=N)

    out = np.empty(N, dtype=int)
    for i, k in enumerate(offsets):
        d0 = start + timedelta(days=int(k))
        out[i] = (hijri_to_gregorian(gregorian_to_hijri(d0)) - d0).days
    return out


def summarize(np, drift) -> Dict[str, float]:
    a = np.abs(drift)
    return {
        "N": int(drift.size),
        "mean": float(np.mean(drift)),
        "std": float(np.std(drift)),
        "max_abs": int(a.max()) if drift.size else 0,
        "exact_share": float(np.mean(drift == 0)) if drift.size else 1.0,
    }


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Hijri round-trip drift: gregorian -> hijri -> gregorian.")
    p.add_argument("--N", type=int, default=5000, help="Random trials.")
    p.add_argument("--start", type=str, default="1900-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2100-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--tolerance", type=int, default=2, help="Largest acceptable |drift| in days.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)
    if end < start:
        raise SystemExit("--end must be >= --start")

    np = _need_numpy()
    drift = drift_samples(np, start, end, args.N, args.seed)
    s = summarize(np, drift)

    print(f"Samples      : {s['N']}")
    print(f"Mean drift   : {s['mean']:+.4f} d")
    print(f"Std drift    : {s['std']:.4f} d")
    print(f"Max |drift|  : {s['max_abs']} d")
    print(f"Exact share  : {100 * s['exact_share']:.2f} %")

    values, counts = np.unique(drift, return_counts=True)
    print("\nHistogram:")
    for v, c in zip(values, counts):
        print(f"  {int(v):+d} d  {int(c)}")

    if s["max_abs"] > args.tolerance:
        print(f"\nDrift exceeds tolerance of {args.tolerance} d")
        return 1
    print("\nDrift within tolerance.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
