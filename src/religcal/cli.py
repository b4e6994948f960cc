from __future__ import annotations

import argparse
from datetime import date, datetime
import logging
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _add_location(p: argparse.ArgumentParser) -> None:
    p.add_argument("--lat", type=float, required=True, help="Latitude in degrees (north positive)")
    p.add_argument("--lon", type=float, required=True, help="Longitude in degrees (east positive)")
    p.add_argument("--name", default=None, help="Optional place name")


def _location(args):
    from religcal.core.types import Location
    return Location(latitude=args.lat, longitude=args.lon, name=args.name)


def _hhmm(t: datetime) -> str:
    return t.strftime("%Y-%m-%d %H:%M")


def cmd_day(argv: list[str]) -> int:
    import religcal

    p = argparse.ArgumentParser(prog="religcal day", description="Hijri / Hebrew labels, season and observances for a day")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--denomination", default="catholic")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    info = religcal.day_info(_parse_ymd(args.date), denomination=args.denomination, attributes=tuple(args.attr))
    h, hb = info.hijri, info.hebrew
    print(f"Date     : {info.civil_date.isoformat()}")
    print(f"Hijri    : {h.day} {h.month_name} {h.year} AH")
    print(f"Hebrew   : year {hb.year}")
    print(f"Season   : {info.liturgical_season}")
    for ev in info.events:
        print(f"  [{ev.tradition}] {ev.name} ({ev.observance_type})")
    if info.attributes:
        for k, v in info.attributes.items():
            print(f"  {k} = {v}")
    return 0


def cmd_prayers(argv: list[str]) -> int:
    import religcal
    from religcal.core.types import IslamicCalculationConfig, JewishCalculationConfig

    p = argparse.ArgumentParser(prog="religcal prayers", description="Daily prayer schedule for one tradition")
    p.add_argument("date", help="YYYY-MM-DD")
    _add_location(p)
    p.add_argument("--tradition", choices=["islam", "judaism", "christianity"], default="islam")
    p.add_argument("--method", default=None, help="Islamic method name or Jewish method key")
    p.add_argument("--madhab", choices=["shafi", "hanafi"], default="shafi")
    p.add_argument(
        "--high-lat",
        choices=["middle_of_the_night", "seventh_of_the_night", "twilight_angle"],
        default="middle_of_the_night",
    )
    args = p.parse_args(argv)

    config = None
    if args.tradition == "islam":
        config = IslamicCalculationConfig(
            method=args.method or "MuslimWorldLeague", madhab=args.madhab, high_latitude_rule=args.high_lat
        )
    elif args.tradition == "judaism":
        config = JewishCalculationConfig(method=args.method or "standard")

    rows = religcal.prayer_times(_parse_ymd(args.date), _location(args), tradition=args.tradition, config=config)
    for pt in rows:
        extra = ""
        if pt.fard is not None:
            extra = f"  rak'ah {pt.sunnah_before}+{pt.fard}+{pt.sunnah_after}"
            if pt.witr:
                extra += f" witr {pt.witr}"
        print(f"{pt.name:<10} {_hhmm(pt.time)}{extra}")
    return 0


def cmd_qibla(argv: list[str]) -> int:
    import religcal

    p = argparse.ArgumentParser(prog="religcal qibla", description="Bearing to the Kaaba")
    _add_location(p)
    args = p.parse_args(argv)

    print(f"Qibla: {religcal.qibla(_location(args)):.2f} deg from true north")
    return 0


def cmd_zmanim(argv: list[str]) -> int:
    import religcal

    p = argparse.ArgumentParser(prog="religcal zmanim", description="Halachic times for a day")
    p.add_argument("date", help="YYYY-MM-DD")
    _add_location(p)
    args = p.parse_args(argv)

    z = religcal.zmanim(_parse_ymd(args.date), _location(args))
    for k, t in z.as_dict().items():
        print(f"{k:<16} {_hhmm(t)}")
    print(f"{'shaah_zmanis':<16} {z.shaah_zmanis.total_seconds() / 60:.1f} min")
    return 0


def cmd_shabbat(argv: list[str]) -> int:
    import religcal
    from religcal.core.types import JewishCalculationConfig

    p = argparse.ArgumentParser(prog="religcal shabbat", description="Candle lighting and havdalah for the week of a date")
    p.add_argument("date", help="YYYY-MM-DD")
    _add_location(p)
    p.add_argument("--candle-minutes", type=float, default=18)
    p.add_argument("--havdalah-minutes", type=float, default=42)
    args = p.parse_args(argv)

    config = JewishCalculationConfig(
        candle_lighting_minutes=args.candle_minutes, havdalah_minutes=args.havdalah_minutes
    )
    st = religcal.sabbath_times(_parse_ymd(args.date), _location(args), config)
    print(f"Candle lighting: {_hhmm(st.candle_lighting)}")
    print(f"Havdalah       : {_hhmm(st.havdalah)}")
    return 0


def cmd_easter(argv: list[str]) -> int:
    import religcal

    p = argparse.ArgumentParser(prog="religcal easter", description="Easter Sunday for a year")
    p.add_argument("year", type=int)
    p.add_argument("--denomination", choices=["catholic", "protestant", "orthodox"], default="catholic")
    args = p.parse_args(argv)

    print(religcal.easter(args.year, args.denomination).isoformat())
    return 0


def cmd_season(argv: list[str]) -> int:
    from religcal.engines.christian import liturgical_season

    p = argparse.ArgumentParser(prog="religcal season", description="Liturgical season of a date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--denomination", choices=["catholic", "protestant", "orthodox"], default="catholic")
    args = p.parse_args(argv)

    print(liturgical_season(_parse_ymd(args.date), args.denomination))
    return 0


def cmd_events(argv: list[str]) -> int:
    import religcal

    p = argparse.ArgumentParser(prog="religcal events", description="Observances in a date range")
    p.add_argument("start", help="YYYY-MM-DD")
    p.add_argument("end", help="YYYY-MM-DD")
    p.add_argument(
        "--tradition",
        action="append",
        choices=["islam", "judaism", "christianity"],
        default=[],
        help="tradition to include (repeatable; default: all)",
    )
    p.add_argument("--denomination", choices=["catholic", "protestant", "orthodox"], default="catholic")
    p.add_argument("--no-shabbat", action="store_true", help="hide the weekly Shabbat entries")
    args = p.parse_args(argv)

    traditions = tuple(args.tradition) or ("islam", "judaism", "christianity")
    evs = religcal.events(
        _parse_ymd(args.start), _parse_ymd(args.end), traditions=traditions, denomination=args.denomination
    )
    for ev in evs:
        if args.no_shabbat and ev.observance_type == "sabbath":
            continue
        print(f"{ev.date.isoformat()}  {ev.tradition:<12}  {ev.name}  ({ev.observance_type})")
    return 0


_COMMANDS = {
    "day": cmd_day,
    "prayers": cmd_prayers,
    "qibla": cmd_qibla,
    "zmanim": cmd_zmanim,
    "shabbat": cmd_shabbat,
    "easter": cmd_easter,
    "season": cmd_season,
    "events": cmd_events,
}

_DIAGNOSTICS = {
    "easter-table": "religcal.diagnostics.easter_table",
    "easter-scatter": "religcal.diagnostics.easter_scatter",
    "hijri-drift": "religcal.diagnostics.hijri_drift",
}


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if argv and argv[0] in ("-v", "--verbose"):
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        argv = argv[1:]

    # Shorthand: `religcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="religcal", description="Religious observance calendar CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Hijri / Hebrew labels, season and observances for a day")
    sub.add_parser("prayers", help="Daily prayer schedule for one tradition")
    sub.add_parser("qibla", help="Bearing to the Kaaba")
    sub.add_parser("zmanim", help="Halachic times for a day")
    sub.add_parser("shabbat", help="Candle lighting and havdalah")
    sub.add_parser("easter", help="Easter Sunday for a year")
    sub.add_parser("season", help="Liturgical season of a date")
    sub.add_parser("events", help="Observances in a date range")

    # diagnostics
    sub.add_parser("easter-table", help="Print Western / Orthodox Easter table (diagnostics)")
    sub.add_parser("easter-scatter", help="Scatter plot of Easter dates (requires matplotlib)")
    sub.add_parser("hijri-drift", help="Hijri round-trip drift statistics (requires numpy)")

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd in _COMMANDS:
        return _COMMANDS[args.cmd](rest)

    if args.cmd in _DIAGNOSTICS:
        return _run_module_main(_DIAGNOSTICS[args.cmd], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
