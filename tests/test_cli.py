# tests/test_cli.py

import pytest

from religcal.cli import main

def test_easter(capsys):
    assert main(["easter", "2025"]) == 0
    assert capsys.readouterr().out.strip() == "2025-04-20"

def test_orthodox_easter(capsys):
    assert main(["easter", "2024", "--denomination", "orthodox"]) == 0
    assert capsys.readouterr().out.strip() == "2024-05-05"

def test_date_shorthand(capsys):
    assert main(["2025-03-01"]) == 0
    out = capsys.readouterr().out
    assert "Ramadan" in out
    assert "Shabbat" in out

def test_day_with_attribute(capsys):
    assert main(["day", "2025-03-01", "--attr", "weekday"]) == 0
    assert "weekday = 5" in capsys.readouterr().out

def test_qibla_at_kaaba(capsys):
    assert main(["qibla", "--lat", "21.4225", "--lon", "39.8262"]) == 0
    assert "0.00" in capsys.readouterr().out

def test_prayers_negative_longitude(capsys):
    assert main(["prayers", "2025-03-20", "--lat", "40.7128", "--lon", "-74.006"]) == 0
    out = capsys.readouterr().out
    for name in ("Fajr", "Dhuhr", "Asr", "Maghrib", "Isha"):
        assert name in out
    assert "witr 3" in out

def test_prayers_other_traditions(capsys):
    assert main(["prayers", "2025-03-20", "--lat", "41.9", "--lon", "12.5", "--tradition", "christianity"]) == 0
    assert "Compline" in capsys.readouterr().out

def test_zmanim_and_shabbat(capsys):
    assert main(["zmanim", "2025-06-21", "--lat", "40.7", "--lon", "-74.0"]) == 0
    assert "plag_hamincha" in capsys.readouterr().out
    assert main(["shabbat", "2025-06-18", "--lat", "40.7", "--lon", "-74.0"]) == 0
    assert "Havdalah" in capsys.readouterr().out

def test_season(capsys):
    assert main(["season", "2025-03-05"]) == 0
    assert capsys.readouterr().out.strip() == "lent"

def test_events_filters(capsys):
    assert main(["events", "2025-09-01", "2025-09-30", "--tradition", "judaism", "--no-shabbat"]) == 0
    out = capsys.readouterr().out
    assert "Yom Kippur" in out
    assert "Shabbat" not in out

def test_verbose_flag(capsys):
    assert main(["-v", "easter", "2025"]) == 0
    assert "2025-04-20" in capsys.readouterr().out

def test_easter_table(capsys):
    assert main(["easter-table", "--from-year", "2024", "--to-year", "2025"]) == 0
    out = capsys.readouterr().out
    assert "03-31" in out and "05-05" in out
    assert "Years with a common Easter: 2025" in out

def test_polar_location_surfaces_error():
    from religcal.core.errors import PolarRegionError
    with pytest.raises(PolarRegionError):
        main(["zmanim", "2025-06-21", "--lat", "80", "--lon", "15"])
