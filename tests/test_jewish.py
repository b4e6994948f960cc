# tests/test_jewish.py

import pytest
from datetime import date, timedelta

from religcal.core.errors import PolarRegionError, UnsupportedConfigurationError
from religcal.core.types import JewishCalculationConfig, Location, Zmanim
from religcal.engines import jewish
from religcal.engines.solar import SOLAR

NYC = Location(40.7128, -74.0060, name="New York")

@pytest.fixture
def june_zmanim():
    return jewish.zmanim(date(2025, 6, 21), NYC)

def test_zmanim_strictly_increasing(june_zmanim):
    marks = list(june_zmanim.as_dict().values())
    assert len(marks) == 12
    assert all(a < b for a, b in zip(marks, marks[1:]))

def test_zmanim_field_order_matches_as_dict(june_zmanim):
    assert list(june_zmanim.as_dict()) == list(Zmanim.ORDER)

def test_shaah_zmanis_is_twelfth_of_day(june_zmanim):
    st = SOLAR.times(date(2025, 6, 21), NYC)
    assert june_zmanim.shaah_zmanis == (st.sunset - st.sunrise) / 12
    assert june_zmanim.shaah_zmanis > timedelta(hours=1)

def test_fixed_offsets(june_zmanim):
    z = june_zmanim
    assert z.sunrise - z.alos == timedelta(minutes=72)
    assert z.sunrise - z.misheyakir == timedelta(minutes=60)
    assert z.mincha_gedola - z.chatzos == timedelta(minutes=30)
    assert z.tzais - z.sunset == timedelta(minutes=42)
    assert z.tzais72 - z.sunset == timedelta(minutes=72)
    assert z.chatzos == z.solar_noon

def test_winter_hour_is_shorter():
    summer = jewish.zmanim(date(2025, 6, 21), NYC).shaah_zmanis
    winter = jewish.zmanim(date(2025, 12, 21), NYC).shaah_zmanis
    assert winter < timedelta(hours=1) < summer

def test_short_day_breaks_order():
    # the sun rises, but mincha ketana falls before mincha gedola
    d, loc = date(2025, 12, 21), Location(66.3, 25.0)
    SOLAR.times(d, loc)
    with pytest.raises(PolarRegionError):
        jewish.zmanim(d, loc)

def test_polar_zmanim_raise():
    with pytest.raises(PolarRegionError):
        jewish.zmanim(date(2025, 6, 21), Location(78.2, 15.6))

def test_three_daily_prayers():
    d = date(2025, 6, 21)
    st = SOLAR.times(d, NYC)
    prayers = jewish.prayer_times(d, NYC)
    assert [p.name for p in prayers] == ["Shacharit", "Mincha", "Maariv"]
    assert prayers[0].time == st.sunrise
    assert prayers[1].time == st.solar_noon + timedelta(minutes=30)
    assert prayers[2].time == st.sunset + timedelta(minutes=50)
    assert {p.calculation_method for p in prayers} == {"standard"}
    assert all(p.fard is None for p in prayers)

def test_unknown_jewish_method():
    with pytest.raises(UnsupportedConfigurationError):
        jewish.prayer_times(date(2025, 6, 21), NYC, JewishCalculationConfig(method="chabad"))

@pytest.mark.parametrize("d,friday", [
    (date(2025, 6, 18), date(2025, 6, 20)),  # Wednesday
    (date(2025, 6, 20), date(2025, 6, 20)),  # Friday
    (date(2025, 6, 21), date(2025, 6, 20)),  # Saturday
    (date(2025, 6, 22), date(2025, 6, 27)),  # Sunday starts a new week
])
def test_sabbath_friday(d, friday):
    assert jewish.sabbath_friday(d) == friday

def test_sabbath_times_default_offsets():
    st = jewish.sabbath_times(date(2025, 6, 18), NYC)
    assert st.candle_lighting == SOLAR.times(date(2025, 6, 20), NYC).sunset - timedelta(minutes=18)
    assert st.havdalah == SOLAR.times(date(2025, 6, 21), NYC).sunset + timedelta(minutes=42)

def test_sabbath_times_custom_offsets():
    cfg = JewishCalculationConfig(candle_lighting_minutes=40, havdalah_minutes=72)
    st = jewish.sabbath_times(date(2025, 6, 18), NYC, cfg)
    assert st.candle_lighting == SOLAR.times(date(2025, 6, 20), NYC).sunset - timedelta(minutes=40)
    assert st.havdalah == SOLAR.times(date(2025, 6, 21), NYC).sunset + timedelta(minutes=72)

def test_hebrew_year_offset():
    h = jewish.gregorian_to_hebrew(date(2025, 3, 5))
    assert (h.year, h.month, h.day, h.month_name) == (5785, 1, 5, "Tishrei")
    assert jewish.hebrew_to_gregorian(h) == date(2025, 1, 5)
    assert jewish.current_hebrew_date(date(2024, 7, 31)).year == 5784

def test_observances_for_a_year():
    evs = jewish.jewish_observances(date(2025, 1, 1), date(2025, 12, 31))
    holidays = [e for e in evs if e.observance_type != "sabbath"]
    shabbats = [e for e in evs if e.observance_type == "sabbath"]
    assert len(holidays) == 7
    assert len(shabbats) == 52
    assert all(e.date.weekday() == 5 for e in shabbats)
    assert [e.date for e in evs] == sorted(e.date for e in evs)
    assert len({e.id for e in evs}) == len(evs)

def test_observance_types_and_ids():
    evs = jewish.jewish_observances(date(2025, 9, 20), date(2025, 9, 30))
    by_name = {e.name: e for e in evs}
    assert by_name["Yom Kippur"].observance_type == "fast"
    assert by_name["Yom Kippur"].id == "jewish-yom-kippur-2025"
    assert by_name["Sukkot"].date == date(2025, 9, 29)
    shabbat_ids = [e.id for e in evs if e.name == "Shabbat"]
    assert shabbat_ids == ["jewish-shabbat-2025-09-20", "jewish-shabbat-2025-09-27"]

def test_range_spanning_years():
    evs = jewish.jewish_observances(date(2024, 9, 1), date(2025, 4, 30))
    names = {(e.name, e.date.year) for e in evs}
    assert ("Rosh Hashana", 2024) in names
    assert ("Pesach (Passover)", 2025) in names
    assert ("Shavuot", 2025) not in names

def test_inverted_range():
    with pytest.raises(ValueError):
        jewish.jewish_observances(date(2025, 2, 1), date(2025, 1, 1))

def test_day_predicates():
    assert jewish.is_shabbat(date(2025, 6, 21))
    assert not jewish.is_shabbat(date(2025, 6, 20))
    assert jewish.is_holiday(date(2025, 9, 24))
    assert not jewish.is_holiday(date(2025, 9, 25))
