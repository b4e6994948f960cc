"""
religcal.engines.islamic
------------------------
Hijri date conversion, the five daily prayers, Qibla bearing and the Hijri
holiday lookup.

The Hijri conversion is a mean-motion approximation (mean lunar year and
mean synodic month counted from the epoch), not a sighting-based calendar.
Expect differences of a day or two against published calendars.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional, Tuple

from ..core.errors import PolarRegionError
from ..core.time import check_range, from_jdn, iter_days, to_jdn
from ..core.types import (
    HijriDate,
    IslamicCalculationConfig,
    Location,
    PrayerTime,
    ReligiousEvent,
)
from .methods import ASR_SHADOW_FACTOR, ISLAMIC_METHODS, CalculationMethod, get_method
from .solar import SOLAR, declination
from .tables import HIJRI_MONTH_NAMES, ISLAMIC_HOLIDAYS

logger = logging.getLogger(__name__)

# JDN of the Hijri epoch (civil reckoning, 622 CE)
HIJRI_EPOCH_JDN = 1948439
MEAN_LUNAR_YEAR = 354.36707   # days
MEAN_LUNAR_MONTH = 29.530589  # days

KAABA_LAT = 21.4225
KAABA_LON = 39.8262

# (sunnah before, fard, sunnah after, witr)
RAKAH: Dict[str, Tuple[int, int, int, int]] = {
    "Fajr": (2, 2, 0, 0),
    "Dhuhr": (4, 4, 2, 0),
    "Asr": (4, 4, 0, 0),
    "Maghrib": (2, 3, 2, 0),
    "Isha": (2, 4, 2, 3),
}
PRAYER_ORDER = ("Fajr", "Dhuhr", "Asr", "Maghrib", "Isha")

_DEFAULT_CONFIG = IslamicCalculationConfig()


# ============================================================
# Hijri calendar
# ============================================================

def gregorian_to_hijri(d: date) -> HijriDate:
    """Mean-motion Gregorian -> Hijri. Month is clamped to 1..12 and day to 1..30."""
    days = to_jdn(d) - HIJRI_EPOCH_JDN

    year = math.floor(days / MEAN_LUNAR_YEAR) + 1
    rem = days - (year - 1) * MEAN_LUNAR_YEAR

    month = math.floor(rem / MEAN_LUNAR_MONTH) + 1
    day = math.floor(rem - (month - 1) * MEAN_LUNAR_MONTH) + 1

    if month > 12:
        year += 1
        month -= 12
    month = min(max(month, 1), 12)
    day = min(max(day, 1), 30)

    return HijriDate(year=year, month=month, day=day, month_name=HIJRI_MONTH_NAMES[month - 1])


def hijri_to_gregorian(h: HijriDate) -> date:
    """
    Inverse mean-motion Hijri -> Gregorian.

    Rounds to the nearest civil day, so gregorian_to_hijri followed by this
    function lands within a day or two of the starting date rather than on it.
    """
    days = (h.year - 1) * MEAN_LUNAR_YEAR + (h.month - 1) * MEAN_LUNAR_MONTH + (h.day - 1)
    return from_jdn(HIJRI_EPOCH_JDN + math.floor(days + 0.5))


def hijri_date(year: int, month: int, day: int) -> HijriDate:
    """Build a HijriDate with its month name filled in."""
    name = HIJRI_MONTH_NAMES[month - 1] if 1 <= month <= 12 else ""
    return HijriDate(year, month, day, name)


# ============================================================
# Qibla
# ============================================================

def qibla_direction(location: Location) -> float:
    """
    Initial great-circle bearing from `location` to the Kaaba, degrees
    clockwise from true north in [0, 360).

    At the Kaaba itself (and at its antipode) every direction is equivalent;
    the bearing is defined as 0.0 there.
    """
    lat1 = math.radians(location.latitude)
    lat2 = math.radians(KAABA_LAT)
    dlon = math.radians(KAABA_LON - location.longitude)

    y = math.sin(dlon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
    if abs(x) < 1e-12 and abs(y) < 1e-12:
        return 0.0

    bearing = math.degrees(math.atan2(y, x)) % 360.0
    # a tiny negative angle wraps to 360.0 in float arithmetic
    return 0.0 if bearing >= 360.0 else bearing


# ============================================================
# Prayer times
# ============================================================

def _night_portions(method: CalculationMethod, rule: str) -> Tuple[float, float]:
    if rule == "middle_of_the_night":
        return 1 / 2, 1 / 2
    if rule == "seventh_of_the_night":
        return 1 / 7, 1 / 7
    isha_angle = method.isha_angle if method.isha_angle is not None else method.fajr_angle
    return method.fajr_angle / 60.0, isha_angle / 60.0


def _asr_altitude(lat_deg: float, decl_rad: float, shadow: int) -> float:
    """Sun altitude (deg) at which an object's shadow is `shadow` times its length plus the noon shadow."""
    z = abs(math.radians(lat_deg) - decl_rad)
    return math.degrees(math.atan(1.0 / (shadow + math.tan(z))))


def _raw_prayer_times(d: date, location: Location, method: CalculationMethod, config: IslamicCalculationConfig) -> Dict[str, datetime]:
    solar = SOLAR.times(d, location)
    sunrise, sunset = solar.sunrise, solar.sunset

    # Night length from this sunset to the next sunrise bounds Fajr/Isha
    try:
        night = SOLAR.times(d + timedelta(days=1), location).sunrise - sunset
    except PolarRegionError:
        # next day is polar; use the complement of this day's daylight
        night = timedelta(hours=24) - solar.day_length
    fajr_portion, isha_portion = _night_portions(method, config.high_latitude_rule)

    fajr = SOLAR.time_at_altitude(d, location, -method.fajr_angle, rising=True)
    safe_fajr = sunrise - night * fajr_portion
    if fajr is None or fajr < safe_fajr:
        logger.warning("Fajr on %s at lat %.4f bounded by %s", d, location.latitude, config.high_latitude_rule)
        fajr = safe_fajr

    asr_alt = _asr_altitude(location.latitude, declination(d), ASR_SHADOW_FACTOR[config.madhab])
    asr = SOLAR.time_at_altitude(d, location, asr_alt, rising=False)
    if asr is None:
        raise PolarRegionError(f"Asr altitude not reached on {d.isoformat()} at latitude {location.latitude}")

    if method.isha_interval is not None:
        isha = sunset + timedelta(minutes=method.isha_interval)
    else:
        isha = SOLAR.time_at_altitude(d, location, -method.isha_angle, rising=False)
        safe_isha = sunset + night * isha_portion
        if isha is None or isha > safe_isha:
            logger.warning("Isha on %s at lat %.4f bounded by %s", d, location.latitude, config.high_latitude_rule)
            isha = safe_isha

    maghrib = sunset
    if method.maghrib_angle is not None:
        angle_time = SOLAR.time_at_altitude(d, location, -method.maghrib_angle, rising=False)
        if angle_time is not None and angle_time < isha:
            maghrib = angle_time

    return {"Fajr": fajr, "Dhuhr": solar.solar_noon, "Asr": asr, "Maghrib": maghrib, "Isha": isha}


def prayer_times(d: date, location: Location, config: Optional[IslamicCalculationConfig] = None) -> List[PrayerTime]:
    """Fajr, Dhuhr, Asr, Maghrib, Isha for `d`, in that order."""
    config = config or _DEFAULT_CONFIG
    config.validate()
    method = get_method(config.method)

    raw = _raw_prayer_times(d, location, method, config)
    qibla = qibla_direction(location)

    out: List[PrayerTime] = []
    for name in PRAYER_ORDER:
        key = name.lower()
        shift = method.adjustments.get(key, 0) + config.adjustments.get(key)
        before, fard, after, witr = RAKAH[name]
        out.append(PrayerTime(
            name=name,
            time=raw[name] + timedelta(minutes=shift),
            tradition="islam",
            calculation_method=config.method,
            qibla_direction=qibla,
            sunnah_before=before,
            fard=fard,
            sunnah_after=after,
            witr=witr,
        ))
    return out


# ============================================================
# Holidays
# ============================================================

def holiday_for(d: date, h: Optional[HijriDate] = None) -> Optional[ReligiousEvent]:
    h = h or gregorian_to_hijri(d)
    row = ISLAMIC_HOLIDAYS.get(f"{h.month}-{h.day}")
    if row is None:
        return None
    return ReligiousEvent(
        id=f"islamic-{h.year}-{h.month}-{h.day}",
        name=row.name,
        tradition="islam",
        date=d,
        description=row.description,
        significance=row.significance,
        observance_type=row.observance_type,
        astronomical_basis=row.astronomical_basis,
    )


def islamic_holidays(start: date, end: date) -> List[ReligiousEvent]:
    """Table holidays whose Hijri (month, day) falls on a day in [start, end]."""
    check_range(start, end)
    out: List[ReligiousEvent] = []
    seen = set()
    for d in iter_days(start, end):
        ev = holiday_for(d)
        if ev is None:
            continue
        # a month-13 year rollover can repeat the 1-1 label on the next civil day
        if ev.id in seen:
            logger.debug("dropping repeated Hijri label %s on %s", ev.id, d)
            continue
        seen.add(ev.id)
        out.append(ev)
    return out


def is_ramadan(d: date) -> bool:
    return gregorian_to_hijri(d).month == 9


def ramadan_dates(gregorian_year: int) -> Tuple[date, date]:
    """Approximate first and last day of Ramadan in the Hijri year current on July 1."""
    hy = gregorian_to_hijri(date(gregorian_year, 7, 1)).year
    start = hijri_to_gregorian(hijri_date(hy, 9, 1))
    return start, start + timedelta(days=29)


def current_hijri_date(today: Optional[date] = None) -> HijriDate:
    return gregorian_to_hijri(today or date.today())


class IslamicCalendarEngine:
    """Stateless orchestrator for the Islamic tradition."""
    tradition = "islam"

    def info(self) -> Dict[str, Any]:
        return {
            "tradition": self.tradition,
            "methods": sorted(ISLAMIC_METHODS),
            "hijri_epoch_jdn": HIJRI_EPOCH_JDN,
            "kaaba": (KAABA_LAT, KAABA_LON),
        }

    def events(self, start: date, end: date, *, location: Optional[Location] = None, **options: Any) -> List[ReligiousEvent]:
        return islamic_holidays(start, end)

    def prayer_times(self, d: date, location: Location, config: Optional[IslamicCalculationConfig] = None) -> List[PrayerTime]:
        return prayer_times(d, location, config)

    qibla_direction = staticmethod(qibla_direction)
    gregorian_to_hijri = staticmethod(gregorian_to_hijri)
    hijri_to_gregorian = staticmethod(hijri_to_gregorian)
    islamic_holidays = staticmethod(islamic_holidays)
    is_ramadan = staticmethod(is_ramadan)
    ramadan_dates = staticmethod(ramadan_dates)
    current_hijri_date = staticmethod(current_hijri_date)
