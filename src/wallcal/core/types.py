from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterator, Optional, Tuple

DateKey = Tuple[int, int, int]

@dataclass(frozen=True)
class CivilDate:
    year: int
    month: int  # 0..11
    day: int

    @property
    def key(self) -> DateKey:
        return (self.year, self.month, self.day)

    def to_date(self) -> date:
        return date(self.year, self.month + 1, self.day)

    @classmethod
    def from_date(cls, d: date) -> "CivilDate":
        return cls(d.year, d.month - 1, d.day)

@dataclass(frozen=True)
class DayCell:
    date: int
    month: int
    year: int
    is_current_month: bool

    @property
    def key(self) -> DateKey:
        return (self.year, self.month, self.date)

@dataclass(frozen=True)
class FullMoonRecord:
    month: int
    day: int
    is_super: bool
    ordinal: int  # 1-indexed within the year

@dataclass(frozen=True)
class Birthday:
    month: int
    day: int
    birth_year: Optional[int]
    name: str

@dataclass(frozen=True)
class CalendarEvent:
    label: str
    is_moon: bool = False

@dataclass(frozen=True)
class Location:
    lat: float = 47.67
    lng: float = -122.38

@dataclass(frozen=True)
class CalendarOptions:
    """Category switches for one computation. Birthdays are always applied."""
    federal_holidays: bool = True
    observances: bool = True
    sunrise_sunset: bool = True
    full_moons: bool = True
    equinoxes_solstices: bool = True
    birthdays: Tuple[Birthday, ...] = ()


class EventMap(Mapping):
    """Read-only mapping (year, month, day) -> ordered tuple of events."""

    __slots__ = ("_events",)

    def __init__(self, events: Dict[DateKey, Tuple[CalendarEvent, ...]]):
        self._events = dict(events)

    def __getitem__(self, key: DateKey) -> Tuple[CalendarEvent, ...]:
        return self._events[key]

    def __iter__(self) -> Iterator[DateKey]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __repr__(self) -> str:
        return f"EventMap({len(self._events)} dates)"

    def on(self, year: int, month: int, day: int) -> Tuple[CalendarEvent, ...]:
        return self._events.get((year, month, day), ())

    def labels(self, year: int, month: int, day: int) -> Tuple[str, ...]:
        return tuple(e.label for e in self.on(year, month, day))
