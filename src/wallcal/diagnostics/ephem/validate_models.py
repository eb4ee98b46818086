#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

from wallcal.core.tz import MS_PER_DAY, utc_ms, utc_to_local_civil_date
from wallcal.engines.lunar import full_moon_instants
from wallcal.engines.solar import jde_to_utc_ms, season_jdes
from wallcal.ephemeris import require_ephemeris
from wallcal.ephemeris.de421 import ReferenceSky


def _fmt(d) -> str:
    return f"{d.year:04d}-{d.month + 1:02d}-{d.day:02d}"


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Compare the mean-phase full moons and polynomial seasons against DE421."
    )
    p.add_argument("--year-start", type=int, default=2024)
    p.add_argument("--year-end", type=int, default=2030)
    p.add_argument("--data-dir", default="~/.skyfield", help="Where skyfield keeps de421.bsp")
    p.add_argument("--all", action="store_true", help="Print every event, not only local-date mismatches")
    args = p.parse_args(argv)

    require_ephemeris()
    import numpy as np

    print("Loading DE421 ephemeris...")
    sky = ReferenceSky.load(args.data_dir)

    moon_err_h: List[float] = []
    season_err_h: List[float] = []
    moon_miss = season_miss = 0

    for Y in range(args.year_start, args.year_end + 1):
        ref_moons = sky.full_moons(utc_ms(Y - 1, 11, 31), utc_ms(Y + 1, 0, 2))
        ref_count = sum(1 for t in ref_moons if utc_to_local_civil_date(t).year == Y)
        model_count = sum(1 for t in full_moon_instants(Y) if utc_to_local_civil_date(t).year == Y)
        print(f"== {Y}  full moons: model {model_count}, ref {ref_count}")
        for ms in full_moon_instants(Y):
            model = utc_to_local_civil_date(ms)
            if model.year != Y:
                continue
            ref_ms = sky.refine_full_moon(ms)
            ref = utc_to_local_civil_date(ref_ms)
            err_h = (ms - ref_ms) / MS_PER_DAY * 24.0
            moon_err_h.append(err_h)
            same = model == ref
            moon_miss += not same
            if args.all or not same:
                tag = "ok " if same else "MISS"
                print(f"  full moon  {tag} model {_fmt(model)}  ref {_fmt(ref)}  dt {err_h:+6.1f} h")

        ref_seasons = dict(sky.seasons(Y))
        for i, (name, jde) in enumerate(season_jdes(Y)):
            ms = jde_to_utc_ms(jde)
            model = utc_to_local_civil_date(ms)
            ref = utc_to_local_civil_date(ref_seasons[i])
            err_h = (ms - ref_seasons[i]) / MS_PER_DAY * 24.0
            season_err_h.append(err_h)
            same = model == ref
            season_miss += not same
            if args.all or not same:
                tag = "ok " if same else "MISS"
                print(f"  {name:<16} {tag} model {_fmt(model)}  ref {_fmt(ref)}  dt {err_h * 60:+6.1f} min")

    m = np.asarray(moon_err_h)
    s = np.asarray(season_err_h)
    print()
    print(f"Full moons: {len(m)}  local-date misses {moon_miss}  |dt| max {np.abs(m).max():.1f} h  rms {np.sqrt(np.mean(m ** 2)):.1f} h")
    print(f"Seasons   : {len(s)}  local-date misses {season_miss}  |dt| max {np.abs(s).max() * 60:.1f} min")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
