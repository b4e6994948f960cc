from __future__ import annotations
import math
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, Dict, Literal, Optional, Tuple

from .errors import InvalidCalendarDateError, InvalidLocationError, UnsupportedConfigurationError

Tradition = Literal["islam", "judaism", "christianity"]
ObservanceType = Literal["holiday", "feast", "fast", "sabbath", "prayer"]
LiturgicalSeason = Literal["advent", "christmas", "lent", "easter", "pentecost", "ordinary_time"]
Denomination = Literal["catholic", "protestant", "orthodox"]
Madhab = Literal["shafi", "hanafi"]
HighLatitudeRule = Literal["middle_of_the_night", "seventh_of_the_night", "twilight_angle"]
JewishMethod = Literal["standard", "geonim", "magen_avraham"]

TRADITIONS: Tuple[str, ...] = ("islam", "judaism", "christianity")
DENOMINATIONS: Tuple[str, ...] = ("catholic", "protestant", "orthodox")
MADHABS: Tuple[str, ...] = ("shafi", "hanafi")
HIGH_LATITUDE_RULES: Tuple[str, ...] = ("middle_of_the_night", "seventh_of_the_night", "twilight_angle")
JEWISH_METHODS: Tuple[str, ...] = ("standard", "geonim", "magen_avraham")


def require_key(kind: str, value: str, allowed) -> None:
    if value not in allowed:
        raise UnsupportedConfigurationError(f"Unknown {kind} '{value}'. Available: {sorted(allowed)}")


@dataclass(frozen=True)
class Location:
    latitude: float     # degrees, north positive
    longitude: float    # degrees, east positive
    elevation: Optional[float] = None  # metres
    timezone: Optional[str] = None     # carried for callers; never looked up
    name: Optional[str] = None

    def __post_init__(self):
        lat, lon = self.latitude, self.longitude
        if not (isinstance(lat, (int, float)) and math.isfinite(lat) and -90.0 <= lat <= 90.0):
            raise InvalidLocationError(f"latitude must be within [-90, 90], got {lat!r}")
        if not (isinstance(lon, (int, float)) and math.isfinite(lon) and -180.0 <= lon <= 180.0):
            raise InvalidLocationError(f"longitude must be within [-180, 180], got {lon!r}")
        if self.elevation is not None and not math.isfinite(self.elevation):
            raise InvalidLocationError(f"elevation must be finite, got {self.elevation!r}")


@dataclass(frozen=True)
class ReligiousEvent:
    id: str
    name: str
    tradition: Tradition
    date: date
    description: str
    significance: str
    observance_type: ObservanceType
    astronomical_basis: Optional[str] = None


@dataclass(frozen=True)
class PrayerTime:
    name: str
    time: datetime
    tradition: Tradition
    calculation_method: str
    qibla_direction: Optional[float] = None
    # Rak'ah breakdown, Islamic prayers only
    sunnah_before: Optional[int] = None
    fard: Optional[int] = None
    sunnah_after: Optional[int] = None
    witr: Optional[int] = None


@dataclass(frozen=True)
class HijriDate:
    year: int
    month: int
    day: int
    month_name: str

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise InvalidCalendarDateError(f"Hijri month must be 1..12, got {self.month}")
        if not 1 <= self.day <= 30:
            raise InvalidCalendarDateError(f"Hijri day must be 1..30, got {self.day}")


@dataclass(frozen=True)
class HebrewDate:
    year: int
    month: int
    day: int
    month_name: str

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise InvalidCalendarDateError(f"Hebrew month must be 1..12, got {self.month}")
        if not 1 <= self.day <= 31:
            raise InvalidCalendarDateError(f"Hebrew day must be 1..31, got {self.day}")


@dataclass(frozen=True)
class SolarTimes:
    sunrise: datetime
    sunset: datetime
    solar_noon: datetime

    @property
    def day_length(self) -> timedelta:
        return self.sunset - self.sunrise


@dataclass(frozen=True)
class Zmanim:
    """Halachic time marks for one civil day, in chronological field order."""
    alos: datetime
    misheyakir: datetime
    sunrise: datetime
    sof_zman_shma: datetime
    sof_zman_tfilla: datetime
    chatzos: datetime
    mincha_gedola: datetime
    mincha_ketana: datetime
    plag_hamincha: datetime
    sunset: datetime
    tzais: datetime
    tzais72: datetime
    solar_noon: datetime
    shaah_zmanis: timedelta

    ORDER = (
        "alos", "misheyakir", "sunrise", "sof_zman_shma", "sof_zman_tfilla", "chatzos",
        "mincha_gedola", "mincha_ketana", "plag_hamincha", "sunset", "tzais", "tzais72",
    )

    def as_dict(self) -> Dict[str, datetime]:
        return {k: getattr(self, k) for k in self.ORDER}


@dataclass(frozen=True)
class SabbathTimes:
    candle_lighting: datetime
    havdalah: datetime


# ============================================================
# Per-tradition configuration
# ============================================================

@dataclass(frozen=True)
class PrayerAdjustments:
    """Additive per-prayer shifts, in minutes."""
    fajr: float = 0
    dhuhr: float = 0
    asr: float = 0
    maghrib: float = 0
    isha: float = 0

    def get(self, prayer: str) -> float:
        return getattr(self, prayer.lower(), 0)


@dataclass(frozen=True)
class IslamicCalculationConfig:
    method: str = "MuslimWorldLeague"
    madhab: Madhab = "shafi"
    adjustments: PrayerAdjustments = field(default_factory=PrayerAdjustments)
    high_latitude_rule: HighLatitudeRule = "middle_of_the_night"

    def validate(self) -> None:
        from ..engines.methods import ISLAMIC_METHODS
        require_key("calculation method", self.method, ISLAMIC_METHODS)
        require_key("madhab", self.madhab, MADHABS)
        require_key("high-latitude rule", self.high_latitude_rule, HIGH_LATITUDE_RULES)


@dataclass(frozen=True)
class JewishCalculationConfig:
    method: JewishMethod = "standard"
    candle_lighting_minutes: float = 18
    havdalah_minutes: float = 42

    def validate(self) -> None:
        require_key("calculation method", self.method, JEWISH_METHODS)


@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    hijri: HijriDate
    hebrew: HebrewDate
    liturgical_season: LiturgicalSeason
    events: Tuple[ReligiousEvent, ...] = ()
    attributes: Optional[Dict[str, Any]] = None
