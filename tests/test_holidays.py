# tests/test_holidays.py

import pytest

from wallcal.core.time import SUNDAY, day_of_week
from wallcal.core.tz import dst_end_day, dst_start_day
from wallcal.core.types import CivilDate
from wallcal.engines.holidays import (
    FEDERAL_HOLIDAYS,
    OBSERVANCES,
    compute_easter,
    election_day,
    lunar_new_year,
    observed_date,
    resolve_catalog,
)


@pytest.mark.parametrize(
    "year,expected",
    [
        (2019, CivilDate(2019, 3, 21)),
        (2024, CivilDate(2024, 2, 31)),
        (2025, CivilDate(2025, 3, 20)),
    ],
)
def test_easter(year, expected):
    assert compute_easter(year) == expected


def test_easter_is_a_sunday_in_spring():
    for y in range(1990, 2100):
        d = compute_easter(y)
        assert day_of_week(d.year, d.month, d.day) == SUNDAY
        assert (2, 22) <= (d.month, d.day) <= (3, 25)


def test_lunar_new_year_table():
    assert lunar_new_year(2026) == CivilDate(2026, 1, 17)
    assert lunar_new_year(2023) is None
    assert lunar_new_year(2041) is None


def test_election_day():
    assert election_day(2024) == CivilDate(2024, 10, 5)
    for y in range(2000, 2041):
        d = election_day(y)
        assert day_of_week(d.year, d.month, d.day) == 2
        assert 2 <= d.day <= 8


def test_catalog_sizes_and_order():
    assert len(FEDERAL_HOLIDAYS) == 11
    assert len(OBSERVANCES) == 16
    assert FEDERAL_HOLIDAYS[0].name == "New Year's Day"
    assert OBSERVANCES[-1].name == "DST Ends"


def test_rule_based_federal_dates_2024():
    got = dict((label, d) for d, label in resolve_catalog(FEDERAL_HOLIDAYS, 2024))
    assert got["MLK Jr. Day"] == CivilDate(2024, 0, 15)
    assert got["Memorial Day"] == CivilDate(2024, 4, 27)
    assert got["Thanksgiving"] == CivilDate(2024, 10, 28)
    assert got["Christmas Day"] == CivilDate(2024, 11, 25)


def test_dst_observances_match_timezone_rule():
    for y in range(2007, 2041):
        got = dict((label, d) for d, label in resolve_catalog(OBSERVANCES, y))
        assert got["DST Starts"] == CivilDate(y, 2, dst_start_day(y))
        assert got["DST Ends"] == CivilDate(y, 10, dst_end_day(y))


def test_observed_shift():
    # Saturday -> Friday, across the year boundary
    assert observed_date(CivilDate(2022, 0, 1)) == CivilDate(2021, 11, 31)
    # Sunday -> Monday
    assert observed_date(CivilDate(2022, 11, 25)) == CivilDate(2022, 11, 26)
    # weekday: no shift
    assert observed_date(CivilDate(2024, 6, 4)) is None


def test_observed_follows_its_holiday():
    pairs = list(resolve_catalog(FEDERAL_HOLIDAYS, 2026, with_observed=True))
    labels = [label for _, label in pairs]
    i = labels.index("Independence Day")
    assert pairs[i] == (CivilDate(2026, 6, 4), "Independence Day")
    assert pairs[i + 1] == (CivilDate(2026, 6, 3), "Independence Day (Observed)")


def test_no_observed_without_flag():
    labels = [label for _, label in resolve_catalog(FEDERAL_HOLIDAYS, 2026)]
    assert not any(label.endswith("(Observed)") for label in labels)


def test_missing_formula_dates_are_skipped():
    labels = [label for _, label in resolve_catalog(OBSERVANCES, 2050)]
    assert "Lunar New Year" not in labels
    assert len(labels) == len(OBSERVANCES) - 1
