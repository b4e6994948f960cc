from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional, Protocol

from .types import Location, PrayerTime, ReligiousEvent

class ObservanceEngine(Protocol):
    tradition: str

    def info(self) -> Dict[str, Any]: ...
    def events(self, start: date, end: date, *, location: Optional[Location] = None, **options: Any) -> List[ReligiousEvent]: ...
    def prayer_times(self, d: date, location: Location, config: Any = None) -> List[PrayerTime]: ...

@dataclass
class EngineRegistry:
    _engines: Dict[str, ObservanceEngine]

    def get(self, name: str) -> ObservanceEngine:
        if name not in self._engines:
            raise KeyError(f"Unknown engine '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: ObservanceEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Engine '{name}' already exists. Use overwrite=True to replace.")
        self._engines[name] = engine
