# tests/test_solar.py

import math
import pytest
from datetime import date, datetime, timedelta

from religcal.core.errors import InvalidLocationError, PolarRegionError
from religcal.core.types import Location
from religcal.engines.solar import SOLAR, cos_hour_angle, declination, hour_angle_hours

def _close(a: datetime, b: datetime, seconds: float = 1.0) -> bool:
    return abs((a - b).total_seconds()) <= seconds

def test_declination_extremes():
    assert declination(date(2025, 6, 21)) == pytest.approx(0.4095, abs=1e-3)
    assert declination(date(2025, 12, 21)) == pytest.approx(-0.4095, abs=2e-3)
    assert abs(declination(date(2025, 3, 21))) < 0.01

def test_equator_day_is_twelve_hours():
    st = SOLAR.times(date(2025, 6, 21), Location(0.0, 0.0))
    assert _close(st.sunrise, datetime(2025, 6, 21, 6, 0))
    assert _close(st.sunset, datetime(2025, 6, 21, 18, 0))
    assert st.solar_noon == datetime(2025, 6, 21, 12, 0)

def test_longitude_shifts_clock():
    d = date(2025, 3, 20)
    greenwich = SOLAR.times(d, Location(40.0, 0.0))
    east = SOLAR.times(d, Location(40.0, 15.0))
    assert greenwich.solar_noon - east.solar_noon == timedelta(hours=1)
    assert _close(greenwich.sunrise - timedelta(hours=1), east.sunrise)

def test_summer_longer_than_winter():
    loc = Location(40.7128, -74.0060)
    assert SOLAR.times(date(2025, 6, 21), loc).day_length > SOLAR.times(date(2025, 12, 21), loc).day_length

def test_southern_hemisphere_is_reversed():
    loc = Location(-33.8688, 151.2093)
    assert SOLAR.times(date(2025, 6, 21), loc).day_length < SOLAR.times(date(2025, 12, 21), loc).day_length

def test_sunrise_before_noon_before_sunset():
    st = SOLAR.times(date(2025, 9, 1), Location(51.5074, -0.1278))
    assert st.sunrise < st.solar_noon < st.sunset

@pytest.mark.parametrize("d", [date(2025, 6, 21), date(2025, 12, 21)])
def test_polar_day_and_night_raise(d):
    with pytest.raises(PolarRegionError):
        SOLAR.times(d, Location(80.0, 15.0))

def test_polar_error_is_arithmetic_error():
    with pytest.raises(ArithmeticError):
        SOLAR.times(date(2025, 6, 21), Location(-85.0, 0.0))

def test_altitude_formula_reduces_to_horizon_case():
    lat, decl = 40.0, 0.3
    expected = -math.tan(math.radians(lat)) * math.tan(decl)
    assert cos_hour_angle(lat, decl, 0.0) == pytest.approx(expected)

def test_unreachable_altitude_is_none():
    # sun never gets 18 deg below the horizon at 60N around the June solstice
    assert hour_angle_hours(60.0, declination(date(2025, 6, 21)), -18.0) is None
    assert SOLAR.time_at_altitude(date(2025, 6, 21), Location(60.0, 10.0), -18.0, rising=True) is None

def test_time_at_altitude_brackets_horizon():
    d, loc = date(2025, 3, 20), Location(30.0, 31.0)
    st = SOLAR.times(d, loc)
    dawn = SOLAR.time_at_altitude(d, loc, -18.0, rising=True)
    dusk = SOLAR.time_at_altitude(d, loc, -18.0, rising=False)
    assert dawn < st.sunrise and dusk > st.sunset

@pytest.mark.parametrize("lat,lon", [(91.0, 0.0), (-90.5, 0.0), (0.0, 180.5), (float("nan"), 0.0), (0.0, float("inf"))])
def test_invalid_location(lat, lon):
    with pytest.raises(InvalidLocationError):
        Location(lat, lon)

def test_invalid_location_is_value_error():
    with pytest.raises(ValueError):
        Location(100.0, 0.0)
