from __future__ import annotations
from datetime import date, datetime, timedelta
from typing import Iterator

from .errors import InvalidDateRangeError


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return date(year, month, day)

def day_of_year(d: date) -> int:
    """Ordinal day within the Gregorian year, Jan 1 = 1."""
    return (d - date(d.year, 1, 1)).days + 1


def check_range(start: date, end: date) -> None:
    if start > end:
        raise InvalidDateRangeError(f"start {start.isoformat()} is after end {end.isoformat()}")

def iter_days(start: date, end: date) -> Iterator[date]:
    """Every calendar day in [start, end], inclusive."""
    check_range(start, end)
    d = start
    one = timedelta(days=1)
    while True:
        yield d
        if d == end:
            break
        d += one

def years_overlapping(start: date, end: date) -> range:
    check_range(start, end)
    return range(start.year, end.year + 1)


def clock_time(d: date, hours: float) -> datetime:
    """
    Place a fractional clock hour on the civil day `d`.

    Hours outside [0, 24) roll into the neighbouring day, which happens for
    sunrise/sunset far from the Greenwich meridian.
    """
    return datetime(d.year, d.month, d.day) + timedelta(hours=hours)

def previous_weekday(d: date, weekday: int) -> date:
    """Latest date on or before `d` whose weekday() == weekday (Mon=0..Sun=6)."""
    return d - timedelta(days=(d.weekday() - weekday) % 7)

def next_weekday(d: date, weekday: int) -> date:
    """Earliest date strictly after `d` whose weekday() == weekday."""
    return d + timedelta(days=(weekday - d.weekday() - 1) % 7 + 1)
