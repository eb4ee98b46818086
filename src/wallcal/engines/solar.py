# engines/solar.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Literal, Optional, Tuple

from ..core.time import day_of_year
from ..core.tz import MS_PER_DAY, utc_ms, utc_offset_hours, utc_to_local_civil_date
from ..core.types import CivilDate

SunEventKind = Literal["sunrise", "sunset"]

# JDE of 1970-01-01T00:00Z
JDE_UNIX_EPOCH = 2440587.5

# Sun's upper limb at the horizon, with standard refraction.
H0_DEG = -0.833

NO_SUN_EVENT = {"sunrise": "No sunrise", "sunset": "No sunset"}


@dataclass(frozen=True)
class SeasonMarker:
    name: str
    date: CivilDate


# Meeus, Astronomical Algorithms, table 27.b (years +1000..+3000):
# JDE = c0 + c1*Y + c2*Y^2 + c3*Y^3 + c4*Y^4, Y = (year - 2000) / 1000
_SEASON_POLYS: Tuple[Tuple[str, Tuple[float, float, float, float, float]], ...] = (
    ("Spring Equinox", (2451623.80984, 365242.37404, 0.05169, -0.00411, -0.00057)),
    ("Summer Solstice", (2451716.56767, 365241.62603, 0.00325, 0.00888, -0.00030)),
    ("Fall Equinox", (2451810.21715, 365242.01767, -0.11575, 0.00337, 0.00078)),
    ("Winter Solstice", (2451900.05952, 365242.74049, -0.06223, -0.00823, 0.00032)),
)


def season_jdes(year: int) -> List[Tuple[str, float]]:
    Y = (year - 2000) / 1000
    out = []
    for name, (c0, c1, c2, c3, c4) in _SEASON_POLYS:
        out.append((name, c0 + c1 * Y + c2 * Y * Y + c3 * Y * Y * Y + c4 * Y * Y * Y * Y))
    return out


def jde_to_utc_ms(jde: float) -> float:
    return (jde - JDE_UNIX_EPOCH) * MS_PER_DAY


def compute_equinoxes_and_solstices(year: int) -> List[SeasonMarker]:
    """March equinox, June solstice, September equinox, December solstice, as local dates."""
    return [
        SeasonMarker(name, utc_to_local_civil_date(jde_to_utc_ms(jde)))
        for name, jde in season_jdes(year)
    ]


def solar_declination_rad(doy: int) -> float:
    # Mean longitude with a flat 2 deg equation-of-centre correction.
    lam = math.radians(280.46646 + 0.9856474 * (doy - 1)) - math.radians(2.0)
    return math.asin(0.39779 * math.sin(lam))


def equation_of_time_minutes(doy: int) -> float:
    B = (2 * math.pi * (doy - 81)) / 365
    return 9.87 * math.sin(2 * B) - 7.53 * math.cos(B) - 1.5 * math.sin(B)


def sun_event_hours(
    year: int, month: int, day: int,
    lat: float, lng: float,
    kind: SunEventKind,
) -> Optional[float]:
    """
    Local clock time of sunrise or sunset in decimal hours, wrapped to [0, 24).
    None when the sun does not cross the horizon that day.
    """
    if kind not in NO_SUN_EVENT:
        raise ValueError(f"kind must be 'sunrise' or 'sunset', got {kind!r}")

    doy = day_of_year(year, month, day)
    decl = solar_declination_rad(doy)
    lat_rad = math.radians(lat)

    cos_ha = (math.sin(math.radians(H0_DEG)) - math.sin(lat_rad) * math.sin(decl)) / (
        math.cos(lat_rad) * math.cos(decl)
    )
    if cos_ha > 1 or cos_ha < -1:
        return None

    ha_hours = math.degrees(math.acos(cos_ha)) / 15
    solar_noon_utc = 12 - (lng / 15) - (equation_of_time_minutes(doy) / 60)
    event_utc = solar_noon_utc + ha_hours if kind == "sunset" else solar_noon_utc - ha_hours

    # Offset from the date's noon, not the event itself.
    offset = utc_offset_hours(utc_ms(year, month, day, 12))
    return (event_utc + offset) % 24


def format_clock(hours: float) -> str:
    """Decimal hours -> 'H:MM AM' on a 12-hour clock."""
    h = math.floor(hours)
    minutes = math.floor((hours - h) * 60 + 0.5)  # half-up, not banker's
    if minutes == 60:
        h += 1
        minutes = 0
    h %= 24

    ampm = "PM" if h >= 12 else "AM"
    display = h - 12 if h > 12 else (12 if h == 0 else h)
    return f"{display}:{minutes:02d} {ampm}"


def compute_sun_event(
    year: int, month: int, day: int,
    lat: float, lng: float,
    kind: SunEventKind,
) -> str:
    hours = sun_event_hours(year, month, day, lat, lng, kind)
    if hours is None:
        return NO_SUN_EVENT[kind]
    return format_clock(hours)


def compute_sunrise(year: int, month: int, day: int, lat: float, lng: float) -> str:
    return compute_sun_event(year, month, day, lat, lng, "sunrise")


def compute_sunset(year: int, month: int, day: int, lat: float, lng: float) -> str:
    return compute_sun_event(year, month, day, lat, lng, "sunset")
