# tests/test_solar.py

import re

import pytest

from wallcal.core.types import CivilDate
from wallcal.engines.solar import (
    compute_equinoxes_and_solstices,
    compute_sunrise,
    compute_sunset,
    format_clock,
    jde_to_utc_ms,
    season_jdes,
    sun_event_hours,
)

SEATTLE = (47.67, -122.38)
CLOCK_RE = re.compile(r"^(1[0-2]|[1-9]):[0-5]\d (AM|PM)$")


def test_season_polynomials_at_2000():
    name, jde = season_jdes(2000)[0]
    assert name == "Spring Equinox"
    assert jde == pytest.approx(2451623.80984)
    assert jde_to_utc_ms(2440587.5) == 0


def test_2024_seasons_local_dates():
    markers = compute_equinoxes_and_solstices(2024)
    assert [(m.name, m.date) for m in markers] == [
        ("Spring Equinox", CivilDate(2024, 2, 19)),
        ("Summer Solstice", CivilDate(2024, 5, 20)),
        ("Fall Equinox", CivilDate(2024, 8, 22)),
        ("Winter Solstice", CivilDate(2024, 11, 21)),
    ]


@pytest.mark.parametrize(
    "hours,expected",
    [
        (5.5, "5:30 AM"),
        (12.999, "1:00 PM"),
        (0.25, "12:15 AM"),
        (20.75, "8:45 PM"),
        (12.0, "12:00 PM"),
        (23.9999, "12:00 AM"),
    ],
)
def test_format_clock(hours, expected):
    assert format_clock(hours) == expected


def test_seattle_midsummer_sunset():
    assert compute_sunset(2024, 5, 21, *SEATTLE) == "9:11 PM"
    rise = compute_sunrise(2024, 5, 21, *SEATTLE)
    assert CLOCK_RE.match(rise) and rise.endswith("AM")


def test_clock_format_through_the_year():
    for month in range(12):
        rise = compute_sunrise(2025, month, 15, *SEATTLE)
        sset = compute_sunset(2025, month, 15, *SEATTLE)
        assert CLOCK_RE.match(rise) and rise.endswith("AM")
        assert CLOCK_RE.match(sset) and sset.endswith("PM")


def test_summer_days_are_longer():
    summer = sun_event_hours(2024, 5, 21, *SEATTLE, "sunset") - sun_event_hours(2024, 5, 21, *SEATTLE, "sunrise")
    winter = sun_event_hours(2024, 11, 21, *SEATTLE, "sunset") - sun_event_hours(2024, 11, 21, *SEATTLE, "sunrise")
    assert summer > 15.5
    assert winter < 8.75


def test_dst_switch_moves_clock_time_by_an_hour():
    before = sun_event_hours(2024, 2, 9, *SEATTLE, "sunset")
    after = sun_event_hours(2024, 2, 10, *SEATTLE, "sunset")
    assert 0.95 < after - before < 1.1


def test_polar_night_and_midnight_sun():
    assert sun_event_hours(2024, 11, 21, 89.0, 0.0, "sunrise") is None
    assert compute_sunrise(2024, 11, 21, 89.0, 0.0) == "No sunrise"
    assert compute_sunset(2024, 11, 21, 89.0, 0.0) == "No sunset"
    assert compute_sunrise(2024, 11, 21, -89.0, 0.0) == "No sunrise"


def test_bad_kind():
    with pytest.raises(ValueError):
        sun_event_hours(2024, 0, 1, *SEATTLE, "noon")
