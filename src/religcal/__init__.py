"""religcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    prayer_times,
    next_prayer,
    current_prayer,
    events,
    upcoming_events,
    day_info,
    qibla,
    easter,
    zmanim,
    sabbath_times,
    list_engines,
    engine_info,
    register_engine,
)
from .core.errors import (
    ReligcalError,
    InvalidLocationError,
    InvalidDateRangeError,
    InvalidCalendarDateError,
    PolarRegionError,
    UnsupportedConfigurationError,
)
from .core.types import (
    Location,
    ReligiousEvent,
    PrayerTime,
    HijriDate,
    HebrewDate,
    PrayerAdjustments,
    IslamicCalculationConfig,
    JewishCalculationConfig,
    DayInfo,
)

__all__ = [
    "prayer_times",
    "next_prayer",
    "current_prayer",
    "events",
    "upcoming_events",
    "day_info",
    "qibla",
    "easter",
    "zmanim",
    "sabbath_times",
    "list_engines",
    "engine_info",
    "register_engine",
    "ReligcalError",
    "InvalidLocationError",
    "InvalidDateRangeError",
    "InvalidCalendarDateError",
    "PolarRegionError",
    "UnsupportedConfigurationError",
    "Location",
    "ReligiousEvent",
    "PrayerTime",
    "HijriDate",
    "HebrewDate",
    "PrayerAdjustments",
    "IslamicCalculationConfig",
    "JewishCalculationConfig",
    "DayInfo",
]
