from __future__ import annotations

from datetime import date
import argparse
from typing import List, Tuple

import religcal


DEFAULT_DENOMINATIONS: List[Tuple[str, str]] = [
    ("Western", "catholic"),
    ("Orthodox", "orthodox"),
]


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def parse_denominations(arg: str) -> List[Tuple[str, str]]:
    """
    Parse denominations list from CLI.
    Example:
      --denominations "Rome=catholic,East=orthodox"
    Bare keys are capitalized for the column header:
      --denominations "protestant,orthodox"
    """
    items = [x.strip() for x in arg.split(",") if x.strip()]
    out: List[Tuple[str, str]] = []
    for it in items:
        if "=" in it:
            name, key = it.split("=", 1)
            out.append((name.strip(), key.strip()))
        else:
            out.append((it.capitalize(), it))
    return out


def easter_rows(from_year: int, to_year: int, denominations: List[Tuple[str, str]]) -> List[Tuple[int, List[date]]]:
    return [
        (Y, [religcal.easter(Y, key) for _, key in denominations])
        for Y in range(from_year, to_year + 1)
    ]


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print Easter Sunday table for several denominations.")
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--denominations",
        type=str,
        default="",
        help='Comma list like "Western=catholic,Orthodox=orthodox" (default: Western and Orthodox).',
    )
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    denominations = parse_denominations(args.denominations) if args.denominations else DEFAULT_DENOMINATIONS

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year"] + [name for name, _ in denominations] + (["Gap"] if len(denominations) == 2 else [])
    colw = [5] + [max(10, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    coincide = []
    for Y, dates in easter_rows(Y0, Y1, denominations):
        row = [str(Y).ljust(colw[0])]
        row += [fmt(d).ljust(w) for d, w in zip(dates, colw[1:])]
        if len(dates) == 2:
            gap = (dates[1] - dates[0]).days
            row.append(f"{gap:+d}d".ljust(colw[-1]))
            if gap == 0:
                coincide.append(Y)
        print("  ".join(row))

    if len(denominations) == 2:
        print(f"\nYears with a common Easter: {', '.join(map(str, coincide)) if coincide else '(none)'}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
