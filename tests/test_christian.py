# tests/test_christian.py

import logging
import pytest
from datetime import date, timedelta

from religcal.core.errors import UnsupportedConfigurationError
from religcal.core.types import Location
from religcal.engines import christian

ROME = Location(41.9028, 12.4964, name="Rome")

# --- Computus ---

@pytest.mark.parametrize("year,expected", [
    (2000, date(2000, 4, 23)),
    (2024, date(2024, 3, 31)),
    (2025, date(2025, 4, 20)),
    (2026, date(2026, 4, 5)),
])
def test_western_easter_known(year, expected):
    assert christian.easter_date(year) == expected
    assert christian.easter_date(year, "protestant") == expected

@pytest.mark.parametrize("year,expected", [
    (2000, date(2000, 4, 30)),
    (2024, date(2024, 5, 5)),
    (2025, date(2025, 4, 20)),
])
def test_orthodox_easter_known(year, expected):
    assert christian.easter_date(year, "orthodox") == expected

def test_easter_is_always_sunday():
    for y in range(1900, 2100):
        w = christian.easter_date(y)
        o = christian.easter_date(y, "orthodox")
        assert w.weekday() == 6 and o.weekday() == 6
        assert date(y, 3, 22) <= w <= date(y, 4, 25)
        assert o >= w

def test_orthodox_outside_valid_years_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="religcal.engines.christian"):
        d = christian.easter_date(2150, "orthodox")
    assert d.year == 2150
    assert any("2150" in r.getMessage() for r in caplog.records)

def test_orthodox_inside_valid_years_is_quiet(caplog):
    with caplog.at_level(logging.WARNING, logger="religcal.engines.christian"):
        christian.easter_date(2030, "orthodox")
    assert not caplog.records

def test_unknown_denomination():
    with pytest.raises(UnsupportedConfigurationError):
        christian.easter_date(2025, "coptic")
    with pytest.raises(KeyError):
        christian.liturgical_events(date(2025, 1, 1), date(2025, 2, 1), "coptic")

# --- Seasons ---

@pytest.mark.parametrize("year,expected", [
    (2022, date(2022, 11, 27)),  # Christmas on a Sunday
    (2023, date(2023, 12, 3)),   # Christmas on a Monday
    (2024, date(2024, 12, 1)),
    (2025, date(2025, 11, 30)),
])
def test_advent_start(year, expected):
    assert christian.advent_start(year) == expected

def test_baptism_of_the_lord():
    assert christian.baptism_of_the_lord(2025) == date(2025, 1, 12)
    # Jan 6 on a Sunday: the following Sunday
    assert christian.baptism_of_the_lord(2019) == date(2019, 1, 13)

@pytest.mark.parametrize("d,season", [
    (date(2025, 1, 12), "christmas"),
    (date(2025, 1, 13), "ordinary_time"),
    (date(2025, 3, 4), "ordinary_time"),
    (date(2025, 3, 5), "lent"),
    (date(2025, 4, 19), "lent"),
    (date(2025, 4, 20), "easter"),
    (date(2025, 6, 8), "easter"),
    (date(2025, 6, 9), "pentecost"),
    (date(2025, 6, 15), "pentecost"),
    (date(2025, 6, 16), "ordinary_time"),
    (date(2025, 11, 29), "ordinary_time"),
    (date(2025, 11, 30), "advent"),
    (date(2025, 12, 24), "advent"),
    (date(2025, 12, 25), "christmas"),
    (date(2025, 12, 31), "christmas"),
])
def test_liturgical_season(d, season):
    assert christian.liturgical_season(d) == season

def test_orthodox_season_follows_orthodox_easter():
    # 2024: Western Easter Mar 31, Orthodox May 5
    assert christian.liturgical_season(date(2024, 4, 15)) == "easter"
    assert christian.liturgical_season(date(2024, 4, 15), "orthodox") == "lent"

# --- Feasts ---

@pytest.fixture
def events_2025():
    return christian.liturgical_events(date(2025, 1, 1), date(2025, 12, 31))

def test_full_year_count(events_2025):
    assert len(events_2025) == 22

def test_events_sorted_and_unique(events_2025):
    assert [e.date for e in events_2025] == sorted(e.date for e in events_2025)
    assert len({e.id for e in events_2025}) == len(events_2025)
    assert all(e.tradition == "christianity" for e in events_2025)

def test_moveable_offsets(events_2025):
    by_slug = {e.id.rsplit("2025-", 1)[-1]: e for e in events_2025}
    easter = by_slug["easter"].date
    assert easter == date(2025, 4, 20)
    assert easter - by_slug["ash-wednesday"].date == timedelta(days=46)
    assert by_slug["pentecost"].date - easter == timedelta(days=49)
    assert by_slug["ascension"].date.weekday() == 3
    assert by_slug["corpus-christi"].date.weekday() == 3
    assert by_slug["ash-wednesday"].observance_type == "fast"
    assert by_slug["good-friday"].observance_type == "fast"

def test_season_markers(events_2025):
    by_name = {e.name: e for e in events_2025}
    assert by_name["First Sunday of Advent"].date == date(2025, 11, 30)
    assert by_name["Christ the King"].date == date(2025, 11, 23)

def test_fixed_feast_ids(events_2025):
    by_name = {e.name: e for e in events_2025}
    assert by_name["Christmas"].id == "christian-2025-12-25"
    assert by_name["Epiphany"].date == date(2025, 1, 6)

def test_range_filters_events():
    evs = christian.liturgical_events(date(2025, 2, 1), date(2025, 3, 31))
    assert [e.name for e in evs] == [
        "Presentation of the Lord (Candlemas)",
        "Ash Wednesday",
        "Annunciation",
    ]

def test_multi_year_range():
    evs = christian.liturgical_events(date(2024, 12, 20), date(2025, 1, 10))
    assert [(e.name, e.date) for e in evs] == [
        ("Christmas", date(2024, 12, 25)),
        ("Solemnity of Mary, Mother of God", date(2025, 1, 1)),
        ("Epiphany", date(2025, 1, 6)),
    ]

# --- Canonical hours ---

def test_canonical_hours_order():
    hours = christian.canonical_hours(date(2025, 3, 20), ROME)
    assert [h.name for h in hours] == ["Lauds", "Prime", "Terce", "Sext", "None", "Vespers", "Compline"]
    times = [h.time for h in hours]
    assert all(a < b for a, b in zip(times, times[1:]))
    assert {h.calculation_method for h in hours} == {"canonical-hours"}

def test_sext_is_solar_noon():
    hours = christian.canonical_hours(date(2025, 3, 20), ROME)
    from religcal.engines.solar import SOLAR
    noon = SOLAR.times(date(2025, 3, 20), ROME).solar_noon
    assert abs((hours[3].time - noon).total_seconds()) < 1

def test_summer_span_exceeds_winter():
    june = christian.canonical_hours(date(2025, 6, 21), ROME)
    dec = christian.canonical_hours(date(2025, 12, 21), ROME)
    assert june[-1].time - june[0].time > dec[-1].time - dec[0].time
