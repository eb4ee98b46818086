#ephemeris/de421.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Tuple

from ..core.errors import EphemerisUnavailableError


def wrap180(deg: float) -> float:
    return (deg + 180.0) % 360.0 - 180.0


@dataclass
class ReferenceSky:
    """
    Moon/Sun geometry from JPL DE421 via skyfield.

    Requires optional deps:
      pip install "wallcal[ephemeris]"
    The kernel (~17 MB) is downloaded into ``data_dir`` on first use.
    """
    ts: object
    eph: object

    @classmethod
    def load(cls, data_dir: str = "~/.skyfield", kernel: str = "de421.bsp") -> "ReferenceSky":
        try:
            from skyfield.api import Loader  # type: ignore
        except ImportError as e:
            raise EphemerisUnavailableError(
                "skyfield not available. Install extras:\n"
                "  pip install \"wallcal[ephemeris]\""
            ) from e

        load = Loader(data_dir)
        return cls(ts=load.timescale(), eph=load(kernel))

    def time_from_ms(self, ms: float):
        return self.ts.from_datetime(datetime.fromtimestamp(ms / 1000.0, tz=timezone.utc))

    def elongation_deg(self, ms: float) -> float:
        """Moon minus Sun ecliptic longitude, degrees in [0, 360)."""
        from skyfield import almanac  # type: ignore

        return float(almanac.moon_phase(self.eph, self.time_from_ms(ms)).degrees) % 360.0

    def refine_full_moon(self, ms_guess: float, halfwidth_days: float = 3.0) -> float:
        """Solve elongation(t) = 180 deg near ``ms_guess`` (UTC ms) with Brent's method."""
        try:
            from scipy.optimize import brentq  # type: ignore
        except ImportError as e:
            raise EphemerisUnavailableError('Need scipy. Install: pip install "wallcal[ephemeris]"') from e

        def f(ms: float) -> float:
            return wrap180(self.elongation_deg(ms) - 180.0)

        w = halfwidth_days * 86_400_000.0
        return brentq(f, ms_guess - w, ms_guess + w, xtol=1000.0)

    def full_moons(self, ms_start: float, ms_end: float) -> List[float]:
        """Full moon instants (UTC ms) in [ms_start, ms_end), from skyfield's phase search."""
        from skyfield import almanac  # type: ignore

        t, phase = almanac.find_discrete(
            self.time_from_ms(ms_start), self.time_from_ms(ms_end), almanac.moon_phases(self.eph)
        )
        return [ti.utc_datetime().timestamp() * 1000.0 for ti, y in zip(t, phase) if int(y) == 2]

    def seasons(self, year: int) -> List[Tuple[int, float]]:
        """(index, UTC ms) with index 0..3 = March equinox, June solstice, September equinox, December solstice."""
        from skyfield import almanac  # type: ignore

        t0 = self.ts.utc(year, 1, 1)
        t1 = self.ts.utc(year + 1, 1, 1)
        t, y = almanac.find_discrete(t0, t1, almanac.seasons(self.eph))
        return [(int(yi), ti.utc_datetime().timestamp() * 1000.0) for ti, yi in zip(t, y)]
