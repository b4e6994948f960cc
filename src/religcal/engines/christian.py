"""
religcal.engines.christian
--------------------------
Easter computus, liturgical seasons, fixed and moveable feasts, and the
canonical hours.

Western Easter uses the anonymous Gregorian algorithm (Meeus/Jones/Butcher).
Orthodox Easter uses the Julian computus shifted by the 13-day Julian/Gregorian
difference, which holds only for 1900-2099.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from ..core.time import check_range, next_weekday, previous_weekday, years_overlapping
from ..core.types import DENOMINATIONS, Location, PrayerTime, ReligiousEvent, require_key
from .solar import SOLAR
from .tables import ADVENT_START, CHRIST_THE_KING, FIXED_FEASTS, MOVEABLE_FEASTS, FixedHoliday, MoveableFeast

logger = logging.getLogger(__name__)

SUNDAY = 6

JULIAN_OFFSET_DAYS = 13
JULIAN_OFFSET_VALID = (1900, 2099)

ASH_WEDNESDAY_OFFSET = -46
HOLY_SATURDAY_OFFSET = -1
PENTECOST_OFFSET = 49
TRINITY_OFFSET = 56


# ============================================================
# Computus
# ============================================================

def _western_easter(year: int) -> date:
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)


def _orthodox_easter(year: int) -> date:
    lo, hi = JULIAN_OFFSET_VALID
    if not lo <= year <= hi:
        logger.warning(
            "Orthodox Easter %d: the %d-day Julian offset is exact only for %d-%d",
            year, JULIAN_OFFSET_DAYS, lo, hi,
        )
    a = year % 4
    b = year % 7
    c = year % 19
    d = (19 * c + 15) % 30
    e = (2 * a + 4 * b - d + 34) % 7
    month, day = divmod(d + e + 114, 31)
    return date(year, month, day + 1) + timedelta(days=JULIAN_OFFSET_DAYS)


def easter_date(year: int, denomination: str = "catholic") -> date:
    """Easter Sunday as a Gregorian date."""
    require_key("denomination", denomination, DENOMINATIONS)
    if denomination == "orthodox":
        return _orthodox_easter(year)
    return _western_easter(year)


def advent_start(year: int) -> date:
    """First Sunday of Advent: the fourth Sunday strictly before Christmas."""
    last_sunday = previous_weekday(date(year, 12, 24), SUNDAY)
    return last_sunday - timedelta(weeks=3)


def baptism_of_the_lord(year: int) -> date:
    """Sunday after Epiphany (Jan 6) in `year`; closes the Christmas season."""
    return next_weekday(date(year, 1, 6), SUNDAY)


# ============================================================
# Seasons
# ============================================================

def liturgical_season(d: date, denomination: str = "catholic") -> str:
    """
    Season for `d`. Advent and Christmas are checked first, then the
    Easter-relative windows; everything else is ordinary time.
    """
    easter = easter_date(d.year, denomination)

    if advent_start(d.year) <= d <= date(d.year, 12, 24):
        return "advent"
    if d >= date(d.year, 12, 25) or d <= baptism_of_the_lord(d.year):
        return "christmas"

    ash = easter + timedelta(days=ASH_WEDNESDAY_OFFSET)
    if ash <= d <= easter + timedelta(days=HOLY_SATURDAY_OFFSET):
        return "lent"
    pentecost = easter + timedelta(days=PENTECOST_OFFSET)
    if easter <= d <= pentecost:
        return "easter"
    if pentecost < d <= easter + timedelta(days=TRINITY_OFFSET):
        return "pentecost"
    return "ordinary_time"


# ============================================================
# Feasts
# ============================================================

def _event(row, d: date, event_id: str) -> ReligiousEvent:
    return ReligiousEvent(
        id=event_id,
        name=row.name,
        tradition="christianity",
        date=d,
        description=row.description,
        significance=row.significance,
        observance_type=row.observance_type,
        astronomical_basis=row.astronomical_basis,
    )


def _fixed(row: FixedHoliday, year: int) -> ReligiousEvent:
    return _event(row, date(year, row.month, row.day), f"christian-{year}-{row.month}-{row.day}")


def _moveable(row: MoveableFeast, anchor: date) -> ReligiousEvent:
    return _event(row, anchor + timedelta(days=row.offset), f"christian-{anchor.year}-{row.slug}")


def yearly_feasts(year: int, denomination: str = "catholic") -> List[ReligiousEvent]:
    """All 22 table observances of one Gregorian year, unsorted."""
    easter = easter_date(year, denomination)
    advent = advent_start(year)

    out = [_fixed(row, year) for row in FIXED_FEASTS]
    out.extend(_moveable(row, easter) for row in MOVEABLE_FEASTS)
    out.append(_moveable(CHRIST_THE_KING, advent))
    out.append(_moveable(ADVENT_START, advent))
    return out


def liturgical_events(start: date, end: date, denomination: str = "catholic") -> List[ReligiousEvent]:
    """Fixed feasts, moveable feasts and season markers in [start, end], sorted by date."""
    check_range(start, end)
    require_key("denomination", denomination, DENOMINATIONS)

    events: List[ReligiousEvent] = []
    for year in years_overlapping(start, end):
        events.extend(ev for ev in yearly_feasts(year, denomination) if start <= ev.date <= end)
    events.sort(key=lambda ev: ev.date)
    logger.debug("%d %s events between %s and %s", len(events), denomination, start, end)
    return events


# ============================================================
# Canonical hours
# ============================================================

# (name, hours of daylight after sunrise); Vespers and Compline follow sunset
_DAY_HOURS = (("Lauds", 0), ("Prime", 1), ("Terce", 3), ("Sext", 6), ("None", 9))

COMPLINE_AFTER_SUNSET = timedelta(minutes=120)


def canonical_hours(d: date, location: Location) -> List[PrayerTime]:
    """Seven offices on temporal hours: one hour is (sunset - sunrise) / 12."""
    solar = SOLAR.times(d, location)
    hour = solar.day_length / 12

    rows = [(name, solar.sunrise + hour * n) for name, n in _DAY_HOURS]
    rows.append(("Vespers", solar.sunset))
    rows.append(("Compline", solar.sunset + COMPLINE_AFTER_SUNSET))
    return [
        PrayerTime(name=name, time=t, tradition="christianity", calculation_method="canonical-hours")
        for name, t in rows
    ]


class ChristianCalendarEngine:
    """Stateless orchestrator for the Christian tradition."""
    tradition = "christianity"

    def info(self) -> Dict[str, Any]:
        return {
            "tradition": self.tradition,
            "denominations": list(DENOMINATIONS),
            "fixed_feasts": len(FIXED_FEASTS),
            "moveable_feasts": len(MOVEABLE_FEASTS),
            "orthodox_valid_years": JULIAN_OFFSET_VALID,
        }

    def events(self, start: date, end: date, *, location: Optional[Location] = None, **options: Any) -> List[ReligiousEvent]:
        return liturgical_events(start, end, options.get("denomination", "catholic"))

    def prayer_times(self, d: date, location: Location, config: Any = None) -> List[PrayerTime]:
        return canonical_hours(d, location)

    easter_date = staticmethod(easter_date)
    advent_start = staticmethod(advent_start)
    liturgical_season = staticmethod(liturgical_season)
    liturgical_events = staticmethod(liturgical_events)
    canonical_hours = staticmethod(canonical_hours)
