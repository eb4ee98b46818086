"""
wallcal.engines.lunar
---------------------
Full moons from a mean synodic month.

Phase is taken as linear in time from one reference new moon, so instants can
be off by up to about half a day from the true syzygy. Dates are reported in
local civil time (see wallcal.core.tz). Supermoon status is looked up, not
computed.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, FrozenSet, List, Sequence, Tuple

import numpy as np

from ..core.time import UNIX_EPOCH_JDN, to_jdn
from ..core.tz import MS_PER_DAY, MS_PER_HOUR, utc_ms, utc_to_local_civil_date
from ..core.types import FullMoonRecord

# 2000-01-06 18:14 UTC
KNOWN_NEW_MOON_MS = (to_jdn(2000, 0, 6) - UNIX_EPOCH_JDN) * MS_PER_DAY + (18 * 60 + 14) * 60_000
SYNODIC_MONTH = 29.53058770576  # days

# 6 h is well under the shortest real lunation, so no crossing is skipped.
STEP_MS = 6 * MS_PER_HOUR
SCAN_LEAD_DAYS = 35
SCAN_TAIL_DAYS = 5

MOON_NAMES: Tuple[str, ...] = (
    "Wolf Moon",
    "Snow Moon",
    "Crow Moon",
    "Pink Moon",
    "Flower Moon",
    "Strawberry Moon",
    "Raspberry Moon",
    "Blackberry Moon",
    "Harvest Moon",
    "Falling Leaf Moon",
    "Frost Moon",
    "Cold Moon",
)

# Year -> 1-indexed ordinals of that year's full moons that are supermoons.
SUPERMOONS: Dict[int, FrozenSet[int]] = {
    2024: frozenset({10, 11, 12, 13}),
    2025: frozenset({10, 11, 12}),
    2026: frozenset({1, 12, 13}),
    2027: frozenset({1, 2, 12, 13}),
    2028: frozenset({1, 2, 13}),
    2029: frozenset({2, 3}),
    2030: frozenset({2, 3, 4}),
    2031: frozenset({3, 4, 5}),
    2032: frozenset({5, 6, 7}),
    2033: frozenset({6, 7, 8}),
    2034: frozenset({7, 8, 9}),
    2035: frozenset({8, 9, 10}),
    2036: frozenset({9, 10, 11}),
    2037: frozenset({10, 11, 12}),
    2038: frozenset({10, 11, 12}),
    2039: frozenset({1, 11, 12, 13}),
    2040: frozenset({1, 2, 12, 13}),
}


def moon_phase(ms):
    """Phase in [0, 1): 0 = new, 0.5 = full. Accepts a scalar or an array of UTC ms."""
    diff_days = (ms - KNOWN_NEW_MOON_MS) / MS_PER_DAY
    cycle_pos = np.mod(diff_days, SYNODIC_MONTH)
    return cycle_pos / SYNODIC_MONTH


def _scan_window(year: int) -> np.ndarray:
    start = utc_ms(year, 0, 1) - SCAN_LEAD_DAYS * MS_PER_DAY
    end = utc_ms(year + 1, 0, 1) + SCAN_TAIL_DAYS * MS_PER_DAY
    n = (end - start) // STEP_MS + 1
    return start + np.arange(n, dtype=np.int64) * STEP_MS


def full_moon_instants(year: int) -> List[float]:
    """UTC ms of every full moon in the scan window around ``year``, ascending.

    A full moon is an upward crossing of phase 0.5 between consecutive
    samples, refined by linear interpolation.
    """
    ms = _scan_window(year)
    phase = moon_phase(ms)
    prev, cur = phase[:-1], phase[1:]
    hits = np.nonzero((prev < 0.5) & (cur >= 0.5))[0]

    out: List[float] = []
    for i in hits:
        prev_dist = 0.5 - float(prev[i])
        cur_dist = float(cur[i]) - 0.5
        ratio = prev_dist / (prev_dist + cur_dist)
        out.append(float(ms[i]) + ratio * STEP_MS)
    return out


def compute_full_moon_dates(year: int) -> List[FullMoonRecord]:
    local = [utc_to_local_civil_date(t) for t in full_moon_instants(year)]
    kept = [d for d in local if d.year == year]
    supers = SUPERMOONS.get(year, frozenset())
    return [
        FullMoonRecord(month=d.month, day=d.day, is_super=(i in supers), ordinal=i)
        for i, d in enumerate(kept, start=1)
    ]


def full_moon_label(month: int, *, is_super: bool, is_blue: bool) -> str:
    base = MOON_NAMES[month]
    if is_super and is_blue:
        return f"Super Blue {base}"
    if is_super:
        return f"Super {base}"
    if is_blue:
        return f"Blue {base}"
    return base


def full_moon_labels(moons: Sequence[FullMoonRecord]) -> List[Tuple[FullMoonRecord, str]]:
    """Pair each moon with its display label; the second moon in a month is blue."""
    seen: Counter = Counter()
    out: List[Tuple[FullMoonRecord, str]] = []
    for fm in moons:
        seen[fm.month] += 1
        label = full_moon_label(fm.month, is_super=fm.is_super, is_blue=(seen[fm.month] == 2))
        out.append((fm, label))
    return out
