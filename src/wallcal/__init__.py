"""wallcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    DEFAULT_LOCATION,
    compute_events,
    full_moons,
    seasons,
    options_from_text,
)
from .birthdays import parse_birthdays
from .config import StoredConfig, load_config, save_config
from .core.types import (
    Birthday,
    CalendarEvent,
    CalendarOptions,
    CivilDate,
    DayCell,
    EventMap,
    FullMoonRecord,
    Location,
)
from .engines.grid import compute_month_grid

__all__ = [
    "DEFAULT_LOCATION",
    "compute_events",
    "compute_month_grid",
    "full_moons",
    "seasons",
    "options_from_text",
    "parse_birthdays",
    "StoredConfig",
    "load_config",
    "save_config",
    "Birthday",
    "CalendarEvent",
    "CalendarOptions",
    "CivilDate",
    "DayCell",
    "EventMap",
    "FullMoonRecord",
    "Location",
]
