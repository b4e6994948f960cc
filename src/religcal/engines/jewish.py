"""
religcal.engines.jewish
-----------------------
Zmanim by proportional ("halachic") hours, the three daily prayers, Shabbat
candle lighting / havdalah, and a fixed-date observance table.

The Hebrew date conversion here is a plain year offset and the holiday table
uses fixed Gregorian anchors. Both are coarse stand-ins for the lunisolar
calendar.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from ..core.errors import PolarRegionError
from ..core.time import check_range, next_weekday, previous_weekday, years_overlapping
from ..core.types import (
    HebrewDate,
    JewishCalculationConfig,
    Location,
    PrayerTime,
    ReligiousEvent,
    SabbathTimes,
    Zmanim,
)
from .solar import SOLAR
from .tables import JEWISH_HOLIDAYS, SHABBAT, FixedHoliday

logger = logging.getLogger(__name__)

HEBREW_YEAR_OFFSET = 3760

FRIDAY = 4
SATURDAY = 5

_DEFAULT_CONFIG = JewishCalculationConfig()


def _minutes(m: float) -> timedelta:
    return timedelta(minutes=m)


def zmanim(d: date, location: Location) -> Zmanim:
    """
    Halachic times for `d`. One shaah zmanis is (sunset - sunrise) / 12; the
    marks are offsets from sunrise, solar noon or sunset in fixed minutes or
    multiples of it.

    Raises PolarRegionError when the sun does not rise or set, or when the day
    is too short for the marks to stay in chronological order.
    """
    solar = SOLAR.times(d, location)
    sunrise, sunset, noon = solar.sunrise, solar.sunset, solar.solar_noon
    sz = (sunset - sunrise) / 12

    z = Zmanim(
        alos=sunrise - _minutes(72),
        misheyakir=sunrise - _minutes(60),
        sunrise=sunrise,
        sof_zman_shma=sunrise + sz * 3,
        sof_zman_tfilla=sunrise + sz * 4,
        chatzos=noon,
        mincha_gedola=noon + _minutes(30),
        mincha_ketana=sunset - sz * 2.5,
        plag_hamincha=sunset - sz * 1.25,
        sunset=sunset,
        tzais=sunset + _minutes(42),
        tzais72=sunset + _minutes(72),
        solar_noon=noon,
        shaah_zmanis=sz,
    )

    marks = list(z.as_dict().values())
    if any(a >= b for a, b in zip(marks, marks[1:])):
        raise PolarRegionError(
            f"daylight on {d.isoformat()} at latitude {location.latitude} is too short to order the zmanim"
        )
    return z


def prayer_times(d: date, location: Location, config: Optional[JewishCalculationConfig] = None) -> List[PrayerTime]:
    """Shacharit at sunrise, Mincha at solar noon + 30 min, Maariv at sunset + 50 min."""
    config = config or _DEFAULT_CONFIG
    config.validate()
    solar = SOLAR.times(d, location)

    rows = (
        ("Shacharit", solar.sunrise),
        ("Mincha", solar.solar_noon + _minutes(30)),
        ("Maariv", solar.sunset + _minutes(50)),
    )
    return [
        PrayerTime(name=name, time=t, tradition="judaism", calculation_method=config.method)
        for name, t in rows
    ]


def sabbath_friday(d: date) -> date:
    """Friday of the Sunday-Saturday week containing `d`."""
    if d.weekday() == SATURDAY:
        return d - timedelta(days=1)
    return next_weekday(d - timedelta(days=1), FRIDAY)


def sabbath_times(d: date, location: Location, config: Optional[JewishCalculationConfig] = None) -> SabbathTimes:
    """Candle lighting before Friday sunset and havdalah after Saturday sunset."""
    config = config or _DEFAULT_CONFIG
    config.validate()

    friday = sabbath_friday(d)
    saturday = friday + timedelta(days=1)
    return SabbathTimes(
        candle_lighting=SOLAR.times(friday, location).sunset - _minutes(config.candle_lighting_minutes),
        havdalah=SOLAR.times(saturday, location).sunset + _minutes(config.havdalah_minutes),
    )


# ============================================================
# Hebrew date (year offset only)
# ============================================================

def gregorian_to_hebrew(d: date) -> HebrewDate:
    return HebrewDate(year=d.year + HEBREW_YEAR_OFFSET, month=1, day=d.day, month_name="Tishrei")


def hebrew_to_gregorian(h: HebrewDate) -> date:
    return date(h.year - HEBREW_YEAR_OFFSET, 1, 1) + timedelta(days=h.day - 1)


def current_hebrew_date(today: Optional[date] = None) -> HebrewDate:
    return gregorian_to_hebrew(today or date.today())


# ============================================================
# Observances
# ============================================================

def _event(row: FixedHoliday, d: date, event_id: str) -> ReligiousEvent:
    return ReligiousEvent(
        id=event_id,
        name=row.name,
        tradition="judaism",
        date=d,
        description=row.description,
        significance=row.significance,
        observance_type=row.observance_type,
        astronomical_basis=row.astronomical_basis,
    )


def yearly_holidays(year: int) -> List[ReligiousEvent]:
    return [
        _event(row, date(year, row.month, row.day), f"jewish-{row.slug}-{year}")
        for row in JEWISH_HOLIDAYS
    ]


def shabbat_dates(start: date, end: date) -> List[date]:
    check_range(start, end)
    out = []
    d = previous_weekday(end, SATURDAY)
    while d >= start:
        out.append(d)
        d -= timedelta(days=7)
    out.reverse()
    return out


def jewish_observances(start: date, end: date, location: Optional[Location] = None) -> List[ReligiousEvent]:
    """
    Table holidays for every year overlapping [start, end] plus each Saturday
    as Shabbat, sorted by date. `location` is accepted for symmetry with the
    other engines; the fixed table does not depend on it.
    """
    events: List[ReligiousEvent] = []
    for year in years_overlapping(start, end):
        events.extend(ev for ev in yearly_holidays(year) if start <= ev.date <= end)

    for d in shabbat_dates(start, end):
        events.append(_event(SHABBAT, d, f"jewish-shabbat-{d.isoformat()}"))

    events.sort(key=lambda ev: ev.date)
    logger.debug("%d Jewish observances between %s and %s", len(events), start, end)
    return events


def is_shabbat(d: date) -> bool:
    return d.weekday() == SATURDAY


def is_holiday(d: date) -> bool:
    return any((row.month, row.day) == (d.month, d.day) for row in JEWISH_HOLIDAYS)


class JewishCalendarEngine:
    """Stateless orchestrator for the Jewish tradition."""
    tradition = "judaism"

    def info(self) -> Dict[str, Any]:
        return {
            "tradition": self.tradition,
            "holidays": [row.name for row in JEWISH_HOLIDAYS],
            "hebrew_year_offset": HEBREW_YEAR_OFFSET,
        }

    def events(self, start: date, end: date, *, location: Optional[Location] = None, **options: Any) -> List[ReligiousEvent]:
        return jewish_observances(start, end, location)

    def prayer_times(self, d: date, location: Location, config: Optional[JewishCalculationConfig] = None) -> List[PrayerTime]:
        return prayer_times(d, location, config)

    zmanim = staticmethod(zmanim)
    sabbath_times = staticmethod(sabbath_times)
    gregorian_to_hebrew = staticmethod(gregorian_to_hebrew)
    hebrew_to_gregorian = staticmethod(hebrew_to_gregorian)
    current_hebrew_date = staticmethod(current_hebrew_date)
    is_shabbat = staticmethod(is_shabbat)
    is_holiday = staticmethod(is_holiday)
