from __future__ import annotations

import argparse
from typing import List, Optional

from wallcal.engines.lunar import SUPERMOONS, compute_full_moon_dates, full_moon_labels


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the full moon table (local dates, super/blue flags) for a range of years."
    )
    p.add_argument("--from-year", type=int, default=2024)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument("--only-special", action="store_true", help="List only super and blue moons")
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    for Y in range(Y0, Y1 + 1):
        moons = compute_full_moon_dates(Y)
        note = "" if Y in SUPERMOONS else "  (no supermoon data)"
        print(f"{Y}: {len(moons)} full moons{note}")
        for fm, label in full_moon_labels(moons):
            is_blue = label.startswith(("Blue ", "Super Blue "))
            if args.only_special and not (fm.is_super or is_blue):
                continue
            flags = ("S" if fm.is_super else "-") + ("B" if is_blue else "-")
            print(f"  {fm.ordinal:2d}  {fm.month + 1:02d}-{fm.day:02d}  {flags}  {label}")
        print()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
