from __future__ import annotations
from typing import Any, Dict

from ..engines.islamic import is_ramadan
from ..engines.jewish import is_holiday, is_shabbat
from .registry import register_attribute, jdn

def weekday(info) -> Dict[str, Any]:
    # 0=Mon..6=Sun, same convention as date.weekday()
    return {"weekday": int(jdn(info) % 7)}

def julian_day(info) -> Dict[str, Any]:
    return {"jdn": jdn(info)}

def hijri(info) -> Dict[str, Any]:
    h = info.hijri
    return {"hijri": f"{h.year}-{h.month:02d}-{h.day:02d}", "hijri_month_name": h.month_name}

def hebrew(info) -> Dict[str, Any]:
    h = info.hebrew
    return {"hebrew_year": h.year}

def ramadan(info) -> Dict[str, Any]:
    return {"is_ramadan": is_ramadan(info.civil_date)}

def shabbat(info) -> Dict[str, Any]:
    d = info.civil_date
    return {"is_shabbat": is_shabbat(d), "is_jewish_holiday": is_holiday(d)}

def season(info) -> Dict[str, Any]:
    return {"liturgical_season": info.liturgical_season}

register_attribute("weekday", weekday)
register_attribute("jdn", julian_day)
register_attribute("hijri", hijri)
register_attribute("hebrew", hebrew)
register_attribute("ramadan", ramadan)
register_attribute("shabbat", shabbat)
register_attribute("season", season)
