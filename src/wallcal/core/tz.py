"""
wallcal.core.tz
---------------
UTC instant -> local civil date for the calendar's one timezone (US Pacific).

Instants are float milliseconds since 1970-01-01T00:00Z. DST follows the
post-2007 US rule: from the second Sunday of March at 02:00 local until the
first Sunday of November at 02:00 local.
"""

from __future__ import annotations

import math

from .time import UNIX_EPOCH_JDN, day_of_week, from_jdn, to_jdn
from .types import CivilDate

TZ_STANDARD_OFFSET = -8  # PST
TZ_DST_OFFSET = -7       # PDT

MS_PER_HOUR = 3_600_000
MS_PER_DAY = 86_400_000


def utc_ms(year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0) -> int:
    days = to_jdn(year, month, day) - UNIX_EPOCH_JDN
    return days * MS_PER_DAY + ((hour * 60 + minute) * 60 + second) * 1000


def utc_civil_date(ms: float) -> CivilDate:
    return from_jdn(UNIX_EPOCH_JDN + math.floor(ms / MS_PER_DAY))


def dst_start_day(year: int) -> int:
    """Second Sunday of March."""
    first = day_of_week(year, 2, 1)
    return 8 + ((7 - first) % 7)


def dst_end_day(year: int) -> int:
    """First Sunday of November."""
    first = day_of_week(year, 10, 1)
    return 1 + ((7 - first) % 7)


def is_dst(ms: float) -> bool:
    d = utc_civil_date(ms)
    if d.month < 2 or d.month > 10:
        return False
    if 2 < d.month < 10:
        return True
    if d.month == 2:
        # 02:00 PST == 10:00 UTC
        return ms >= utc_ms(d.year, 2, dst_start_day(d.year), 10)
    # 02:00 PDT == 09:00 UTC
    return ms < utc_ms(d.year, 10, dst_end_day(d.year), 9)


def utc_offset_hours(ms: float) -> int:
    return TZ_DST_OFFSET if is_dst(ms) else TZ_STANDARD_OFFSET


def utc_to_local_civil_date(ms: float) -> CivilDate:
    return utc_civil_date(ms + utc_offset_hours(ms) * MS_PER_HOUR)
