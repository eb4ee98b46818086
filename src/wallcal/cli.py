from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from datetime import date
from pathlib import Path

from .core.errors import ConfigError, WallcalError

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    if not _DATE_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _add_location_args(p: argparse.ArgumentParser) -> None:
    from .api import DEFAULT_LOCATION

    p.add_argument("--lat", type=float, default=DEFAULT_LOCATION.lat, help="Observer latitude in degrees")
    p.add_argument("--lng", type=float, default=DEFAULT_LOCATION.lng, help="Observer longitude in degrees (positive East)")


def cmd_events(argv: list[str]) -> int:
    import wallcal
    from .birthdays import format_birthdays, parse_birthdays
    from .config import StoredConfig, load_config, save_config

    p = argparse.ArgumentParser(prog="wallcal events", description="List every calendar event for a year.")
    p.add_argument("year", type=int)
    _add_location_args(p)
    p.add_argument("--config", default=None, help="Stored settings file (default: $WALLCAL_CONFIG or ~/.config/wallcal/config.json)")
    p.add_argument("--defaults", action="store_true", help="Ignore stored settings")
    p.add_argument("--birthdays", default=None, help="Birthday list file, one 'Mon D [YYYY] Name' per line")
    p.add_argument("--no-federal", action="store_true")
    p.add_argument("--no-observances", action="store_true")
    p.add_argument("--no-sun", action="store_true")
    p.add_argument("--no-moons", action="store_true")
    p.add_argument("--no-seasons", action="store_true")
    p.add_argument("--save-config", action="store_true", help="Store the resulting settings")
    args = p.parse_args(argv)

    cfg = StoredConfig() if args.defaults else load_config(args.config)
    overrides = {}
    if args.birthdays is not None:
        try:
            text = Path(args.birthdays).read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"{args.birthdays}: cannot read ({e})") from e
        overrides["birthday_text"] = format_birthdays(parse_birthdays(text))
    for flag, field in (
        ("no_federal", "federal_holidays"),
        ("no_observances", "observances"),
        ("no_sun", "sunrise_sunset"),
        ("no_moons", "full_moons"),
        ("no_seasons", "equinoxes_solstices"),
    ):
        if getattr(args, flag):
            overrides[field] = False
    cfg = cfg.model_copy(update=overrides)

    if args.save_config:
        path = save_config(cfg, args.config)
        print(f"Saved settings to {path}", file=sys.stderr)

    events = wallcal.compute_events(args.year, args.lat, args.lng, cfg.to_options())
    for (y, m, d) in sorted(events):
        labels = ", ".join(e.label for e in events[(y, m, d)])
        print(f"{y:04d}-{m + 1:02d}-{d:02d}: {labels}")
    return 0


def cmd_grid(argv: list[str]) -> int:
    import wallcal
    from .render import format_month, holiday_image_cells

    p = argparse.ArgumentParser(prog="wallcal grid", description="Print one month's grid with its events.")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int, choices=range(1, 13), metavar="MONTH", help="1-12")
    _add_location_args(p)
    p.add_argument("--width", type=int, default=12, help="Cell width in characters")
    args = p.parse_args(argv)

    month = args.month - 1
    events = wallcal.compute_events(args.year, args.lat, args.lng)
    print(format_month(args.year, month, events, w=args.width))
    for name, row, col in holiday_image_cells(args.year, month):
        print(f"[{name}] row {row + 1}, column {col + 1}")
    return 0


def cmd_moons(argv: list[str]) -> int:
    from .engines.lunar import compute_full_moon_dates, full_moon_labels

    p = argparse.ArgumentParser(prog="wallcal moons", description="Full moons of a year (local dates).")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    for fm, label in full_moon_labels(compute_full_moon_dates(args.year)):
        print(f"{fm.ordinal:2d}  {args.year:04d}-{fm.month + 1:02d}-{fm.day:02d}  {label}")
    return 0


def cmd_seasons(argv: list[str]) -> int:
    from .engines.solar import compute_equinoxes_and_solstices

    p = argparse.ArgumentParser(prog="wallcal seasons", description="Equinoxes and solstices (local dates).")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    for marker in compute_equinoxes_and_solstices(args.year):
        print(f"{marker.date.to_date().isoformat()}  {marker.name}")
    return 0


def cmd_sun(argv: list[str]) -> int:
    from .engines.solar import compute_sunrise, compute_sunset

    p = argparse.ArgumentParser(prog="wallcal sun", description="Sunrise and sunset for one date.")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    _add_location_args(p)
    args = p.parse_args(argv)

    d = args.date
    print(f"Sunrise: {compute_sunrise(d.year, d.month - 1, d.day, args.lat, args.lng)}")
    print(f"Sunset : {compute_sunset(d.year, d.month - 1, d.day, args.lat, args.lng)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="wallcal", description="Twelve-month wall calendar event toolkit.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    for name, help_text in (
        ("events", "List every event for a year"),
        ("grid", "Print one month's grid with events"),
        ("moons", "Full moons of a year"),
        ("seasons", "Equinoxes and solstices of a year"),
        ("sun", "Sunrise and sunset for a date"),
    ):
        sub.add_parser(name, help=help_text, add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools (no ephemeris required)")
    p_diag.add_argument("tool", choices=["moon-table", "daylight-plot"], help="Which diagnostic to run")

    p_ephem = sub.add_parser("ephem", help="Ephemeris-based diagnostics")
    p_ephem.add_argument("tool", choices=["validate"], help="Which ephemeris diagnostic to run")

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "events": cmd_events,
        "grid": cmd_grid,
        "moons": cmd_moons,
        "seasons": cmd_seasons,
        "sun": cmd_sun,
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "diag":
            tool_map = {
                "moon-table": "wallcal.diagnostics.moon_table",
                "daylight-plot": "wallcal.diagnostics.daylight_plot",
            }
            return _run_module_main(tool_map[args.tool], rest)

        if args.cmd == "ephem":
            tool_map = {
                "validate": "wallcal.diagnostics.ephem.validate_models",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except WallcalError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
