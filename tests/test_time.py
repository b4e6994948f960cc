# tests/test_time.py

import pytest
import random
from datetime import date, datetime, timedelta

from religcal.core.errors import InvalidDateRangeError
from religcal.core.time import (
    clock_time,
    day_of_year,
    from_jdn,
    iter_days,
    next_weekday,
    previous_weekday,
    to_jdn,
    years_overlapping,
)

def test_jdn_date_roundtrip():
    random.seed(42)
    # year 1 - 9999 keeps datetime.date in range
    for _ in range(5000):
        jdn_in = random.randint(1721426, 5373484)
        assert to_jdn(from_jdn(jdn_in)) == jdn_in

def test_known_epochs():
    assert to_jdn(date(2000, 1, 1)) == 2451545
    assert to_jdn(date(2025, 3, 1)) == 2460736
    assert from_jdn(2451545) == date(2000, 1, 1)

def test_day_of_year():
    assert day_of_year(date(2025, 1, 1)) == 1
    assert day_of_year(date(2024, 12, 31)) == 366
    assert day_of_year(date(2025, 12, 31)) == 365

def test_iter_days_is_inclusive():
    days = list(iter_days(date(2025, 2, 27), date(2025, 3, 2)))
    assert days == [date(2025, 2, 27), date(2025, 2, 28), date(2025, 3, 1), date(2025, 3, 2)]
    assert list(iter_days(date(2025, 1, 1), date(2025, 1, 1))) == [date(2025, 1, 1)]

def test_inverted_range_raises():
    with pytest.raises(InvalidDateRangeError):
        list(iter_days(date(2025, 1, 2), date(2025, 1, 1)))
    with pytest.raises(ValueError):
        years_overlapping(date(2026, 1, 1), date(2025, 1, 1))

def test_years_overlapping():
    assert list(years_overlapping(date(2024, 12, 31), date(2026, 1, 1))) == [2024, 2025, 2026]

def test_weekday_helpers():
    wed = date(2025, 6, 18)
    assert previous_weekday(wed, 2) == wed
    assert previous_weekday(wed, 6) == date(2025, 6, 15)
    assert next_weekday(wed, 2) == date(2025, 6, 25)
    assert next_weekday(wed, 4) == date(2025, 6, 20)

def test_clock_time_rolls_over():
    d = date(2025, 3, 1)
    assert clock_time(d, 6.5) == datetime(2025, 3, 1, 6, 30)
    assert clock_time(d, 25.0) == datetime(2025, 3, 2, 1, 0)
    assert clock_time(d, -1.0) == datetime(2025, 2, 28, 23, 0)

def test_iter_days_stops_at_last_representable_date():
    assert list(iter_days(date.max - timedelta(days=1), date.max)) == [date(9999, 12, 30), date(9999, 12, 31)]
