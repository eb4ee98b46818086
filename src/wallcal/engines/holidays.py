"""
wallcal.engines.holidays
------------------------
US federal holidays and popular observances as rule tables.

Rules are data: a fixed date, the n-th or last weekday of a month, or (only
where no such rule exists) a named formula. Months are 0-based.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Optional, Sequence, Tuple, Union

from ..core.time import (
    MONDAY,
    SATURDAY,
    SUNDAY,
    THURSDAY,
    add_days,
    day_of_week,
    last_weekday_of_month,
    nth_weekday_of_month,
)
from ..core.types import CivilDate


@dataclass(frozen=True)
class FixedDate:
    month: int
    day: int

    def resolve(self, year: int) -> Optional[CivilDate]:
        return CivilDate(year, self.month, self.day)


@dataclass(frozen=True)
class NthWeekday:
    month: int
    weekday: int
    n: int

    def resolve(self, year: int) -> Optional[CivilDate]:
        return CivilDate(year, self.month, nth_weekday_of_month(year, self.month, self.weekday, self.n))


@dataclass(frozen=True)
class LastWeekday:
    month: int
    weekday: int

    def resolve(self, year: int) -> Optional[CivilDate]:
        return CivilDate(year, self.month, last_weekday_of_month(year, self.month, self.weekday))


@dataclass(frozen=True)
class Formula:
    fn: Callable[[int], Optional[CivilDate]]

    def resolve(self, year: int) -> Optional[CivilDate]:
        return self.fn(year)


HolidayRule = Union[FixedDate, NthWeekday, LastWeekday, Formula]


@dataclass(frozen=True)
class Holiday:
    name: str
    rule: HolidayRule
    observed_eligible: bool = False


# ============================================================
# Formulas
# ============================================================

def compute_easter(year: int) -> CivilDate:
    """Western Easter Sunday (Anonymous Gregorian algorithm)."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    n = h + l - 7 * m + 114
    return CivilDate(year, n // 31 - 1, n % 31 + 1)


# Chinese New Year, (month, day) with 0-based month.
LUNAR_NEW_YEAR: Dict[int, Tuple[int, int]] = {
    2024: (1, 10),
    2025: (0, 29),
    2026: (1, 17),
    2027: (1, 6),
    2028: (0, 26),
    2029: (1, 13),
    2030: (1, 3),
    2031: (0, 23),
    2032: (1, 11),
    2033: (0, 31),
    2034: (1, 19),
    2035: (1, 8),
    2036: (0, 28),
    2037: (1, 15),
    2038: (1, 4),
    2039: (0, 24),
    2040: (1, 12),
}


def lunar_new_year(year: int) -> Optional[CivilDate]:
    """None outside the tabulated years."""
    if year not in LUNAR_NEW_YEAR:
        return None
    month, day = LUNAR_NEW_YEAR[year]
    return CivilDate(year, month, day)


def election_day(year: int) -> CivilDate:
    """The Tuesday after the first Monday of November."""
    return CivilDate(year, 10, nth_weekday_of_month(year, 10, MONDAY, 1) + 1)


# ============================================================
# Catalogs
# ============================================================

FEDERAL_HOLIDAYS: Tuple[Holiday, ...] = (
    Holiday("New Year's Day", FixedDate(0, 1), observed_eligible=True),
    Holiday("MLK Jr. Day", NthWeekday(0, MONDAY, 3)),
    Holiday("Presidents' Day", NthWeekday(1, MONDAY, 3)),
    Holiday("Memorial Day", LastWeekday(4, MONDAY)),
    Holiday("Juneteenth", FixedDate(5, 19), observed_eligible=True),
    Holiday("Independence Day", FixedDate(6, 4), observed_eligible=True),
    Holiday("Labor Day", NthWeekday(8, MONDAY, 1)),
    Holiday("Indigenous People's Day", NthWeekday(9, MONDAY, 2)),
    Holiday("Veteran's Day", FixedDate(10, 11), observed_eligible=True),
    Holiday("Thanksgiving", NthWeekday(10, THURSDAY, 4)),
    Holiday("Christmas Day", FixedDate(11, 25), observed_eligible=True),
)

# DST rows must agree with wallcal.core.tz.dst_start_day / dst_end_day.
OBSERVANCES: Tuple[Holiday, ...] = (
    Holiday("Groundhog Day", FixedDate(1, 2)),
    Holiday("Valentine's Day", FixedDate(1, 14)),
    Holiday("St. Patrick's Day", FixedDate(2, 17)),
    Holiday("April Fool's Day", FixedDate(3, 1)),
    Holiday("Earth Day", FixedDate(3, 22)),
    Holiday("Cinco de Mayo", FixedDate(4, 5)),
    Holiday("Mother's Day", NthWeekday(4, SUNDAY, 2)),
    Holiday("Father's Day", NthWeekday(5, SUNDAY, 3)),
    Holiday("Halloween", FixedDate(9, 31)),
    Holiday("Christmas Eve", FixedDate(11, 24)),
    Holiday("New Year's Eve", FixedDate(11, 31)),
    Holiday("Easter", Formula(compute_easter)),
    Holiday("Lunar New Year", Formula(lunar_new_year)),
    Holiday("Election Day", Formula(election_day)),
    Holiday("DST Starts", NthWeekday(2, SUNDAY, 2)),
    Holiday("DST Ends", NthWeekday(10, SUNDAY, 1)),
)


def observed_date(d: CivilDate) -> Optional[CivilDate]:
    """Saturday -> preceding Friday, Sunday -> following Monday, else None."""
    dow = day_of_week(d.year, d.month, d.day)
    if dow == SATURDAY:
        return add_days(d, -1)
    if dow == SUNDAY:
        return add_days(d, 1)
    return None


def resolve_catalog(
    catalog: Sequence[Holiday], year: int, *, with_observed: bool = False
) -> Iterator[Tuple[CivilDate, str]]:
    """Yield (date, label) in catalog order; observed days follow their holiday."""
    for h in catalog:
        d = h.rule.resolve(year)
        if d is None:
            continue
        yield d, h.name
        if with_observed and h.observed_eligible:
            obs = observed_date(d)
            if obs is not None:
                yield obs, f"{h.name} (Observed)"


# ============================================================
# Decorative images anchored to a holiday's cell
# ============================================================

@dataclass(frozen=True)
class HolidayImage:
    image_name: str
    month: int
    rule: HolidayRule


HOLIDAY_IMAGES: Tuple[HolidayImage, ...] = (
    HolidayImage("pumpkin", 9, FixedDate(9, 31)),
    HolidayImage("turkey", 10, NthWeekday(10, THURSDAY, 4)),
    HolidayImage("santa", 11, FixedDate(11, 25)),
)
