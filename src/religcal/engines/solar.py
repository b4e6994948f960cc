"""
religcal.engines.solar
----------------------
Sunrise, sunset and solar noon from a single-harmonic declination model.

All results are clock hours on the civil day, placed with `clock_time`.
The longitude correction is -lon/15 hours and no equation of time is
applied, so times follow local mean solar time as the formula defines it.
No timezone database is consulted.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.errors import PolarRegionError
from ..core.time import clock_time, day_of_year
from ..core.types import Location, SolarTimes

# declination = DECL_AMP * sin(DECL_RATE * (doy - DECL_PHASE)), radians
DECL_AMP = 0.4095
DECL_RATE = 0.016906
DECL_PHASE = 80.086


def declination(d: date) -> float:
    """Solar declination in radians for the civil day `d`."""
    return DECL_AMP * math.sin(DECL_RATE * (day_of_year(d) - DECL_PHASE))


def cos_hour_angle(lat_deg: float, decl_rad: float, altitude_deg: float = 0.0) -> float:
    """
    Spherical law of cosines for the hour angle at which the sun stands at
    `altitude_deg`:

        cos H = (sin h - sin(phi) sin(delta)) / (cos(phi) cos(delta))

    At h = 0 this is -tan(phi) tan(delta). The value is returned unclamped;
    callers decide what |cos H| >= 1 means.
    """
    phi = math.radians(lat_deg)
    h = math.radians(altitude_deg)
    den = math.cos(phi) * math.cos(decl_rad)
    if den == 0.0:
        return math.inf
    return (math.sin(h) - math.sin(phi) * math.sin(decl_rad)) / den


def hour_angle_hours(lat_deg: float, decl_rad: float, altitude_deg: float = 0.0) -> Optional[float]:
    """Half-arc in hours between meridian transit and the altitude crossing, or None if never reached."""
    c = cos_hour_angle(lat_deg, decl_rad, altitude_deg)
    if not -1.0 < c < 1.0:
        return None
    return math.acos(c) * 12.0 / math.pi


def solar_noon_hours(lon_deg: float) -> float:
    return 12.0 - lon_deg / 15.0


@dataclass(frozen=True)
class SolarTimeProvider:
    """Stateless provider; one shared instance serves every engine."""

    def declination(self, d: date) -> float:
        return declination(d)

    def times(self, d: date, location: Location) -> SolarTimes:
        """
        Sunrise, sunset and solar noon for `d` at `location`.

        Raises PolarRegionError when -tan(lat) tan(decl) leaves (-1, 1), i.e.
        the sun stays up or stays down all day.
        """
        half = hour_angle_hours(location.latitude, declination(d))
        if half is None:
            raise PolarRegionError(
                f"sun does not rise or set on {d.isoformat()} at latitude {location.latitude}"
            )
        noon = solar_noon_hours(location.longitude)
        return SolarTimes(
            sunrise=clock_time(d, noon - half),
            sunset=clock_time(d, noon + half),
            solar_noon=clock_time(d, noon),
        )

    def time_at_altitude(self, d: date, location: Location, altitude_deg: float, *, rising: bool) -> Optional[datetime]:
        """
        Time at which the sun crosses `altitude_deg` before (rising) or after
        solar noon. None when the sun never reaches that altitude on `d`.
        """
        half = hour_angle_hours(location.latitude, declination(d), altitude_deg)
        if half is None:
            return None
        noon = solar_noon_hours(location.longitude)
        return clock_time(d, noon - half if rising else noon + half)


SOLAR = SolarTimeProvider()
