"""
religcal.engines.factory
------------------------
Builds the default registry: one stateless engine per tradition.
"""

from __future__ import annotations
from religcal.core.engine import EngineRegistry, ObservanceEngine
from religcal.core.types import TRADITIONS
from religcal.engines.christian import ChristianCalendarEngine
from religcal.engines.islamic import IslamicCalendarEngine
from religcal.engines.jewish import JewishCalendarEngine


def make_engine(tradition: str) -> ObservanceEngine:
    """Instantiate the engine serving `tradition`."""
    if tradition == "islam":
        return IslamicCalendarEngine()
    if tradition == "judaism":
        return JewishCalendarEngine()
    if tradition == "christianity":
        return ChristianCalendarEngine()
    raise KeyError(f"Unknown tradition '{tradition}'")

def build_registry() -> EngineRegistry:
    return EngineRegistry({name: make_engine(name) for name in TRADITIONS})
