from __future__ import annotations

from typing import List, Optional

from .aggregate import compute_events as _compute_events
from .birthdays import parse_birthdays
from .core.types import CalendarOptions, EventMap, FullMoonRecord, Location
from .engines.lunar import compute_full_moon_dates
from .engines.solar import SeasonMarker, compute_equinoxes_and_solstices

DEFAULT_LOCATION = Location()


def compute_events(
    year: int,
    lat: Optional[float] = None,
    lng: Optional[float] = None,
    options: Optional[CalendarOptions] = None,
) -> EventMap:
    """All calendar events for ``year`` keyed by (year, month0, day).

    Missing location falls back to DEFAULT_LOCATION; missing options enable
    every category with no birthdays.
    """
    lat = DEFAULT_LOCATION.lat if lat is None else lat
    lng = DEFAULT_LOCATION.lng if lng is None else lng
    return _compute_events(year, lat, lng, options if options is not None else CalendarOptions())


def full_moons(year: int) -> List[FullMoonRecord]:
    return compute_full_moon_dates(year)


def seasons(year: int) -> List[SeasonMarker]:
    return compute_equinoxes_and_solstices(year)


def options_from_text(
    birthday_text: str = "",
    *,
    federal_holidays: bool = True,
    observances: bool = True,
    sunrise_sunset: bool = True,
    full_moons: bool = True,
    equinoxes_solstices: bool = True,
) -> CalendarOptions:
    return CalendarOptions(
        federal_holidays=federal_holidays,
        observances=observances,
        sunrise_sunset=sunrise_sunset,
        full_moons=full_moons,
        equinoxes_solstices=equinoxes_solstices,
        birthdays=tuple(parse_birthdays(birthday_text)),
    )
