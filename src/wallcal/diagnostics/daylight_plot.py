#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

from wallcal.api import DEFAULT_LOCATION
from wallcal.core.time import days_in_month
from wallcal.engines.solar import sun_event_hours


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "wallcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "wallcal[diagnostics]"') from e


def build_series(np, year: int, lat: float, lng: float):
    """Day-of-year array plus local sunrise/sunset hours (NaN where the sun does not cross)."""
    rise, sset = [], []
    for month in range(12):
        for day in range(1, days_in_month(year, month) + 1):
            r = sun_event_hours(year, month, day, lat, lng, "sunrise")
            s = sun_event_hours(year, month, day, lat, lng, "sunset")
            rise.append(np.nan if r is None else r)
            sset.append(np.nan if s is None else s)
    doy = np.arange(1, len(rise) + 1)
    return doy, np.asarray(rise, dtype=float), np.asarray(sset, dtype=float)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot local sunrise/sunset times across a year.")
    p.add_argument("--year", type=int, default=2026)
    p.add_argument("--lat", type=float, default=DEFAULT_LOCATION.lat)
    p.add_argument("--lng", type=float, default=DEFAULT_LOCATION.lng)
    p.add_argument("--out-png", default="daylight.png")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    doy, rise, sset = build_series(np, args.year, args.lat, args.lng)
    daylight = sset - rise

    print(f"{args.year} at ({args.lat:.2f}, {args.lng:.2f})")
    if np.all(np.isnan(daylight)):
        print("  Sun never rises or sets on the model.")
    else:
        i_max = int(np.nanargmax(daylight))
        i_min = int(np.nanargmin(daylight))
        print(f"  Longest day : doy {doy[i_max]}  {daylight[i_max]:.2f} h")
        print(f"  Shortest day: doy {doy[i_min]}  {daylight[i_min]:.2f} h")

    fig, ax = plt.subplots(figsize=(12, 5))
    ax.plot(doy, rise, color="orange", label="Sunrise")
    ax.plot(doy, sset, color="purple", label="Sunset")
    ax.fill_between(doy, rise, sset, color="gold", alpha=0.15)
    ax.set_xlim(1, doy[-1])
    ax.set_ylim(0, 24)
    ax.set_yticks(range(0, 25, 3))
    ax.set_xlabel("Day of year")
    ax.set_ylabel("Local time (h, US Pacific)")
    ax.grid(True, alpha=0.3)
    ax.legend()
    ax.set_title(f"Sunrise and sunset {args.year}  (lat {args.lat:.2f}, lng {args.lng:.2f})")
    plt.tight_layout()
    plt.savefig(args.out_png, dpi=150)
    plt.close(fig)
    print(f"Plot saved to {args.out_png}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
