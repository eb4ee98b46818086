# tests/test_timezone.py

from wallcal.core.time import SUNDAY, day_of_week
from wallcal.core.tz import (
    dst_end_day,
    dst_start_day,
    is_dst,
    utc_ms,
    utc_offset_hours,
    utc_to_local_civil_date,
)
from wallcal.core.types import CivilDate


def test_utc_ms_epochs():
    assert utc_ms(1970, 0, 1) == 0
    assert utc_ms(2000, 0, 1) == 946684800000
    assert utc_ms(2000, 0, 1, 0, 0, 1) == 946684801000


def test_dst_starts_second_sunday_of_march_at_10_utc():
    assert is_dst(utc_ms(2024, 2, 10, 9, 59)) is False
    assert is_dst(utc_ms(2024, 2, 10, 10, 0)) is True


def test_dst_ends_first_sunday_of_november_at_09_utc():
    assert is_dst(utc_ms(2024, 10, 3, 8, 59)) is True
    assert is_dst(utc_ms(2024, 10, 3, 9, 0)) is False


def test_whole_months():
    assert is_dst(utc_ms(2024, 0, 15, 12)) is False
    assert is_dst(utc_ms(2024, 1, 29, 23)) is False
    assert is_dst(utc_ms(2024, 3, 1)) is True
    assert is_dst(utc_ms(2024, 9, 31, 23)) is True
    assert is_dst(utc_ms(2024, 11, 25)) is False


def test_offsets():
    assert utc_offset_hours(utc_ms(2024, 0, 1)) == -8
    assert utc_offset_hours(utc_ms(2024, 6, 1)) == -7


def test_transition_days():
    assert dst_start_day(2024) == 10
    assert dst_end_day(2024) == 3
    # March 1, 2026 is a Sunday
    assert dst_start_day(2026) == 8
    for y in range(2000, 2041):
        assert day_of_week(y, 2, dst_start_day(y)) == SUNDAY
        assert 8 <= dst_start_day(y) <= 14
        assert day_of_week(y, 10, dst_end_day(y)) == SUNDAY
        assert 1 <= dst_end_day(y) <= 7


def test_local_date_can_precede_utc_date():
    assert utc_to_local_civil_date(utc_ms(2024, 6, 4, 6, 59)) == CivilDate(2024, 6, 3)
    assert utc_to_local_civil_date(utc_ms(2024, 6, 4, 7, 0)) == CivilDate(2024, 6, 4)
    assert utc_to_local_civil_date(utc_ms(2025, 0, 1, 7, 59)) == CivilDate(2024, 11, 31)
    assert utc_to_local_civil_date(utc_ms(2025, 0, 1, 8, 0)) == CivilDate(2025, 0, 1)


def test_fractional_instants():
    assert utc_to_local_civil_date(utc_ms(2024, 0, 1, 8) - 0.5) == CivilDate(2023, 11, 31)
