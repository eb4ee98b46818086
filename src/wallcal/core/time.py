from __future__ import annotations

from .types import CivilDate

SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = range(7)

# JDN of 1970-01-01, the Unix epoch day.
UNIX_EPOCH_JDN = 2440588


def to_jdn(year: int, month: int, day: int) -> int:
    """Gregorian (year, 0-based month, day) -> Julian Day Number.

    Linear in ``day``, so day 0 or day 32 land on the neighbouring months.
    """
    m = month + 1
    a = (14 - m) // 12
    y2 = year + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def from_jdn(jdn: int) -> CivilDate:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian, 0-based month)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return CivilDate(year, month - 1, day)


def days_in_month(year: int, month: int) -> int:
    return to_jdn(year, month + 1, 1) - to_jdn(year, month, 1)


def day_of_week(year: int, month: int, day: int) -> int:
    """0 = Sunday .. 6 = Saturday."""
    return (to_jdn(year, month, day) + 1) % 7


def day_of_year(year: int, month: int, day: int) -> int:
    return to_jdn(year, month, day) - to_jdn(year, 0, 1) + 1


def add_days(d: CivilDate, n: int) -> CivilDate:
    return from_jdn(to_jdn(d.year, d.month, d.day) + n)


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> int:
    """Day of month of the n-th (1-indexed) ``weekday``. Callers keep n in range."""
    first = day_of_week(year, month, 1)
    return 1 + ((weekday - first + 7) % 7) + (n - 1) * 7


def last_weekday_of_month(year: int, month: int, weekday: int) -> int:
    last = days_in_month(year, month)
    last_dow = day_of_week(year, month, last)
    return last - ((last_dow - weekday + 7) % 7)
