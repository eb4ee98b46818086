"""
wallcal.config
--------------
Persisted calendar settings.

The stored shape is the host's camelCase JSON object::

    {"federalHolidays": true, "observances": true, "sunriseSunset": true,
     "fullMoons": true, "equinoxesSolstices": true, "birthdayText": "..."}

kept under the ``calendarConfig`` key of a JSON document. Older files may
also carry ``eventsConfig``; it is dropped on the next save.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from .birthdays import parse_birthdays
from .core.errors import ConfigError
from .core.types import CalendarOptions

CONFIG_KEY = "calendarConfig"
LEGACY_CONFIG_KEY = "eventsConfig"
CONFIG_ENV = "WALLCAL_CONFIG"


class StoredConfig(BaseModel):
    """Persisted settings; camelCase on disk, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    federal_holidays: StrictBool = True
    observances: StrictBool = True
    sunrise_sunset: StrictBool = True
    full_moons: StrictBool = True
    equinoxes_solstices: StrictBool = True
    birthday_text: StrictStr = ""

    @model_validator(mode="before")
    @classmethod
    def _null_means_default(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def to_options(self) -> CalendarOptions:
        return CalendarOptions(
            federal_holidays=self.federal_holidays,
            observances=self.observances,
            sunrise_sunset=self.sunrise_sunset,
            full_moons=self.full_moons,
            equinoxes_solstices=self.equinoxes_solstices,
            birthdays=tuple(parse_birthdays(self.birthday_text)),
        )


def config_from_dict(data: Any) -> StoredConfig:
    """Validate a stored ``calendarConfig`` object; missing or null fields take defaults."""
    try:
        return StoredConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"invalid {CONFIG_KEY}: {e}") from e


PathLike = Union[str, "os.PathLike[str]"]


def default_config_path() -> Path:
    env = os.environ.get(CONFIG_ENV)
    if env:
        return Path(env)
    return Path.home() / ".config" / "wallcal" / "config.json"


def _read_document(path: Path) -> Dict[str, Any]:
    try:
        doc = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path}: invalid JSON ({e})") from e
    except OSError as e:
        raise ConfigError(f"{path}: cannot read ({e})") from e
    if not isinstance(doc, dict):
        raise ConfigError(f"{path}: top level must be an object")
    return doc


def load_config(path: Optional[PathLike] = None) -> StoredConfig:
    """Stored settings, or defaults when nothing has been saved yet."""
    p = Path(path) if path is not None else default_config_path()
    if not p.exists():
        return StoredConfig()
    doc = _read_document(p)
    if CONFIG_KEY not in doc:
        return StoredConfig()
    return config_from_dict(doc[CONFIG_KEY])


def save_config(config: StoredConfig, path: Optional[PathLike] = None) -> Path:
    p = Path(path) if path is not None else default_config_path()
    doc = _read_document(p) if p.exists() else {}
    doc.pop(LEGACY_CONFIG_KEY, None)
    doc[CONFIG_KEY] = config.model_dump(by_alias=True)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(doc, indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"{p}: cannot write ({e})") from e
    return p
