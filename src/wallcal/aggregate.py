"""
wallcal.aggregate
-----------------
Merge every event category for one year into a single EventMap.

Categories are applied in a fixed order, and the order of labels within a
date is what the renderer shows:

    federal holidays (+ observed) -> observances -> equinoxes/solstices
    -> full moons -> birthdays -> sunrise/sunset
"""

from __future__ import annotations

import logging
from typing import Dict, List, Set

from .birthdays import birthday_label
from .core.types import CalendarEvent, CalendarOptions, DateKey, EventMap
from .engines.grid import compute_month_grid, grid_corners
from .engines.holidays import FEDERAL_HOLIDAYS, OBSERVANCES, resolve_catalog
from .engines.lunar import compute_full_moon_dates, full_moon_labels
from .engines.solar import compute_equinoxes_and_solstices, compute_sun_event

logger = logging.getLogger(__name__)


class EventMapBuilder:
    """Append-only accumulator; ``freeze()`` hands out the immutable result once."""

    def __init__(self) -> None:
        self._events: Dict[DateKey, List[CalendarEvent]] = {}
        self._frozen = False

    def add(self, year: int, month: int, day: int, event: CalendarEvent) -> None:
        if self._frozen:
            raise RuntimeError("EventMapBuilder already frozen")
        self._events.setdefault((year, month, day), []).append(event)

    def __len__(self) -> int:
        return sum(len(v) for v in self._events.values())

    def freeze(self) -> EventMap:
        self._frozen = True
        return EventMap({k: tuple(v) for k, v in self._events.items()})


def add_federal_holidays(b: EventMapBuilder, year: int) -> None:
    for d, label in resolve_catalog(FEDERAL_HOLIDAYS, year, with_observed=True):
        b.add(d.year, d.month, d.day, CalendarEvent(label))


def add_observances(b: EventMapBuilder, year: int) -> None:
    for d, label in resolve_catalog(OBSERVANCES, year):
        b.add(d.year, d.month, d.day, CalendarEvent(label))


def add_seasons(b: EventMapBuilder, year: int) -> None:
    for marker in compute_equinoxes_and_solstices(year):
        d = marker.date
        b.add(d.year, d.month, d.day, CalendarEvent(marker.name))


def add_full_moons(b: EventMapBuilder, year: int) -> None:
    for fm, label in full_moon_labels(compute_full_moon_dates(year)):
        b.add(year, fm.month, fm.day, CalendarEvent(label, is_moon=True))


def add_birthdays(b: EventMapBuilder, year: int, options: CalendarOptions) -> None:
    for bday in options.birthdays:
        b.add(year, bday.month, bday.day, CalendarEvent(birthday_label(bday, year)))


def add_sun_events(b: EventMapBuilder, year: int, lat: float, lng: float) -> None:
    """Sunrise/sunset on the four corner cells of each month's grid, once per date and kind."""
    done: Dict[str, Set[DateKey]] = {"sunrise": set(), "sunset": set()}
    for month in range(12):
        for cell, kind in grid_corners(compute_month_grid(year, month)):
            if cell.key in done[kind]:
                continue
            done[kind].add(cell.key)
            text = compute_sun_event(cell.year, cell.month, cell.date, lat, lng, kind)
            # Polar days read "Sunrise No sunrise".
            label = f"{'Sunrise' if kind == 'sunrise' else 'Sunset'} {text}"
            b.add(cell.year, cell.month, cell.date, CalendarEvent(label))


def compute_events(year: int, lat: float, lng: float, options: CalendarOptions) -> EventMap:
    b = EventMapBuilder()

    steps = [
        ("federal holidays", options.federal_holidays, lambda: add_federal_holidays(b, year)),
        ("observances", options.observances, lambda: add_observances(b, year)),
        ("equinoxes/solstices", options.equinoxes_solstices, lambda: add_seasons(b, year)),
        ("full moons", options.full_moons, lambda: add_full_moons(b, year)),
        ("birthdays", True, lambda: add_birthdays(b, year, options)),
        ("sunrise/sunset", options.sunrise_sunset, lambda: add_sun_events(b, year, lat, lng)),
    ]
    for name, enabled, step in steps:
        if not enabled:
            logger.debug("skipping %s", name)
            continue
        before = len(b)
        step()
        logger.debug("%s: %d events", name, len(b) - before)

    events = b.freeze()
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("events for %d:", year)
        for (y, m, d), evts in events.items():
            logger.debug("  %d-%d-%d: %s", y, m, d, ", ".join(e.label for e in evts))
    return events
