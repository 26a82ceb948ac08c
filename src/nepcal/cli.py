from __future__ import annotations

import argparse
import sys
import re
import importlib
import inspect
from dataclasses import asdict


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


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


def _parser(prog: str, description: str) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=prog, description=description)
    p.add_argument("--start-year", type=int, default=None, help="earliest supported BS year (clamped to the table)")
    return p


def _add_calendar(p: argparse.ArgumentParser, default: str = "ad") -> None:
    p.add_argument("--calendar", choices=["ad", "bs"], default=default, help="calendar of the input date(s)")


def _converter(args: argparse.Namespace):
    import nepcal

    if args.start_year is None:
        return nepcal.get_default_converter()
    try:
        return nepcal.make_converter(args.start_year)
    except ValueError as e:
        raise SystemExit(f"error: {e}")


def cmd_convert(argv: list[str], *, direction: str) -> int:
    from nepcal.core.errors import NepcalError

    src = "BS" if direction == "bs2ad" else "AD"
    p = _parser(f"nepcal {direction}", f"{src} date -> {'AD' if src == 'BS' else 'BS'} date")
    p.add_argument("date", help="YYYY-MM-DD (loose digit input accepted)")
    args = p.parse_args(argv)

    conv = _converter(args)
    try:
        out = conv.bs_to_ad(args.date) if direction == "bs2ad" else conv.ad_to_bs(args.date)
    except NepcalError as e:
        raise SystemExit(f"error: {e}")
    print(out)
    return 0


def cmd_validate(argv: list[str]) -> int:
    p = _parser("nepcal validate", "Check a YYYY-MM-DD date (exit status 0 when valid)")
    p.add_argument("date")
    _add_calendar(p)
    args = p.parse_args(argv)

    ok = _converter(args).is_valid(args.date, args.calendar)
    print("valid" if ok else "invalid")
    return 0 if ok else 1


def cmd_info(argv: list[str]) -> int:
    p = _parser("nepcal info", "Both calendars, weekday and day-of-year for a date")
    p.add_argument("date", help="YYYY-MM-DD")
    _add_calendar(p)
    args = p.parse_args(argv)

    conv = _converter(args)
    info = conv.get_bs_info(args.date) if args.calendar == "bs" else conv.get_ad_info(args.date)
    if info is None:
        raise SystemExit(f"error: invalid {args.calendar.upper()} date {args.date!r}")
    for k, v in asdict(info).items():
        print(f"{k:22s} {v}")
    return 0


def cmd_format(argv: list[str]) -> int:
    from nepcal.core.errors import NepcalError
    from nepcal import formatting

    p = _parser("nepcal format", "Render a date through a Y/m/d/F/l template")
    p.add_argument("date")
    _add_calendar(p)
    p.add_argument("--format", dest="template", default="Y-m-d", help="template, e.g. 'd F Y, l'")
    p.add_argument("--locale", choices=["en", "np"], default="en")
    args = p.parse_args(argv)

    conv = _converter(args)
    fn = formatting.formatted_nepali_date if args.calendar == "bs" else formatting.formatted_english_date
    try:
        print(fn(conv, args.date, args.template, args.locale))
    except NepcalError as e:
        raise SystemExit(f"error: {e}")
    return 0


def cmd_diff(argv: list[str]) -> int:
    from nepcal.core.errors import NepcalError
    from nepcal.diff import UNITS, diff, human_diff

    p = _parser("nepcal diff", "Difference between two dates of the same calendar")
    p.add_argument("date1")
    p.add_argument("date2")
    _add_calendar(p)
    p.add_argument("--unit", choices=list(UNITS), default=None, help="print a single total")
    p.add_argument("--human", action="store_true", help="approximate summary (365-day years, 30-day months)")
    p.add_argument("--locale", choices=["en", "np"], default="en")
    args = p.parse_args(argv)

    conv = _converter(args)
    try:
        if args.human:
            print(human_diff(conv, args.date1, args.date2, args.calendar, args.locale))
            return 0
        out = diff(conv, args.date1, args.date2, args.calendar, args.unit)
    except NepcalError as e:
        raise SystemExit(f"error: {e}")

    if args.unit is not None:
        print(out)
    else:
        for k, v in asdict(out).items():
            print(f"{k:10s} {v}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `nepcal YYYY-MM-DD ...` describes an AD date
    if argv and _DATE_RE.match(argv[0]):
        return cmd_info(argv)

    p = argparse.ArgumentParser(prog="nepcal", description="Bikram Sambat / Gregorian date toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("bs2ad", help="BS -> AD", add_help=False)
    sub.add_parser("ad2bs", help="AD -> BS", add_help=False)
    sub.add_parser("validate", help="Validate an AD or BS date", add_help=False)
    sub.add_parser("info", help="Describe an AD or BS date", add_help=False)
    sub.add_parser("format", help="Format a date in English or Nepali", add_help=False)
    sub.add_parser("diff", help="Difference between two dates", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "table", "year-lengths"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd in ("bs2ad", "ad2bs"):
        return cmd_convert(rest, direction=args.cmd)

    if args.cmd == "validate":
        return cmd_validate(rest)

    if args.cmd == "info":
        return cmd_info(rest)

    if args.cmd == "format":
        return cmd_format(rest)

    if args.cmd == "diff":
        return cmd_diff(rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "nepcal.diagnostics.round_trip",
            "table": "nepcal.diagnostics.table_check",
            "year-lengths": "nepcal.diagnostics.year_lengths",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
