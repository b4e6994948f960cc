from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional, Sequence

from .attributes.registry import compute_attributes
from .core.engine import EngineRegistry, ObservanceEngine
from .core.types import (
    TRADITIONS,
    DayInfo,
    JewishCalculationConfig,
    Location,
    PrayerTime,
    ReligiousEvent,
    SabbathTimes,
    Zmanim,
    require_key,
)
from .engines import christian, islamic, jewish

_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

def register_engine(name: str, engine: ObservanceEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

def _engine(tradition: str) -> ObservanceEngine:
    require_key("tradition", tradition, _reg().list())
    return _reg().get(tradition)

# ============================================================
# Daily schedules
# ============================================================

def prayer_times(d: date, location: Location, *, tradition: str = "islam", config: Any = None) -> List[PrayerTime]:
    """Daily schedule of `tradition`: five prayers, three services or seven canonical hours."""
    return _engine(tradition).prayer_times(d, location, config)

def next_prayer(now: datetime, location: Location, *, tradition: str = "islam", config: Any = None) -> PrayerTime:
    """First prayer strictly after `now`; rolls over to the first prayer of the next day."""
    today = now.date()
    for p in prayer_times(today, location, tradition=tradition, config=config):
        if p.time > now:
            return p
    return prayer_times(today + timedelta(days=1), location, tradition=tradition, config=config)[0]

def current_prayer(now: datetime, location: Location, *, tradition: str = "islam", config: Any = None) -> PrayerTime:
    """Latest prayer at or before `now`; before the first one of the day, the previous day's last."""
    today = now.date()
    past = [p for p in prayer_times(today, location, tradition=tradition, config=config) if p.time <= now]
    if past:
        return past[-1]
    return prayer_times(today - timedelta(days=1), location, tradition=tradition, config=config)[-1]

def qibla(location: Location) -> float:
    return islamic.qibla_direction(location)

def zmanim(d: date, location: Location) -> Zmanim:
    return jewish.zmanim(d, location)

def sabbath_times(d: date, location: Location, config: Optional[JewishCalculationConfig] = None) -> SabbathTimes:
    return jewish.sabbath_times(d, location, config)

def easter(year: int, denomination: str = "catholic") -> date:
    return christian.easter_date(year, denomination)

# ============================================================
# Calendar observances
# ============================================================

def events(
    start: date,
    end: date,
    *,
    traditions: Sequence[str] = TRADITIONS,
    location: Optional[Location] = None,
    denomination: str = "catholic",
) -> List[ReligiousEvent]:
    """Merge the observances of several traditions over [start, end], sorted by date then tradition order."""
    out: List[ReligiousEvent] = []
    for rank, tradition in enumerate(traditions):
        evs = _engine(tradition).events(start, end, location=location, denomination=denomination)
        out.extend((ev.date, rank, i, ev) for i, ev in enumerate(evs))
    out.sort(key=lambda row: row[:3])
    return [row[3] for row in out]

def upcoming_events(
    today: Optional[date] = None,
    *,
    tradition: str = "islam",
    days: int = 30,
    limit: int = 5,
    denomination: str = "catholic",
) -> List[ReligiousEvent]:
    """The first `limit` observances of `tradition` in the `days` days starting at `today`."""
    start = today or date.today()
    evs = events(start, start + timedelta(days=days), traditions=(tradition,), denomination=denomination)
    return evs[:limit]

def day_info(
    d: date,
    *,
    denomination: str = "catholic",
    attributes: Sequence[str] = (),
    with_events: bool = True,
) -> DayInfo:
    info = DayInfo(
        civil_date=d,
        hijri=islamic.gregorian_to_hijri(d),
        hebrew=jewish.gregorian_to_hebrew(d),
        liturgical_season=christian.liturgical_season(d, denomination),
        events=tuple(events(d, d, denomination=denomination)) if with_events else (),
    )
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info
