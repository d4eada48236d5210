from __future__ import annotations

import argparse
from datetime import date
import sys
import re
import importlib
import inspect

from .core.errors import InvalidDateError


_DATE_RE = re.compile(r"^\d{1,4}-\d{1,2}-\d{1,2}$")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    try:
        return date(y, m, d)
    except ValueError as e:
        raise InvalidDateError(f"Not a Gregorian date: {s} ({e})") from e


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


def cmd_to_eth(argv: list[str]) -> int:
    import ethcal

    p = argparse.ArgumentParser(prog="ethcal to-eth", description="Gregorian -> Ethiopian date")
    p.add_argument("date", help="YYYY-MM-DD (Gregorian)")
    p.add_argument("--script", choices=["ethiopic", "latin"], default="latin")
    args = p.parse_args(argv)

    if not _DATE_RE.match(args.date):
        p.error(f"expected YYYY-MM-DD, got {args.date!r}")

    g = _parse_ymd(args.date)
    t = ethcal.to_ethiopian(g.year, g.month, g.day)
    print(f"{t[0]}-{t[1]:02d}-{t[2]:02d}  {ethcal.format_ethiopian(t, script=args.script)}")
    return 0


def cmd_to_greg(argv: list[str]) -> int:
    import ethcal

    p = argparse.ArgumentParser(prog="ethcal to-greg", description="Ethiopian -> Gregorian date")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int, help="1..13 (13 = Pagume)")
    p.add_argument("day", type=int)
    args = p.parse_args(argv)

    d = ethcal.date_from_ethiopian(args.year, args.month, args.day)
    print(d.isoformat())
    return 0


def cmd_today(argv: list[str]) -> int:
    import ethcal

    p = argparse.ArgumentParser(prog="ethcal today", description="Today's date in the Ethiopian calendar")
    p.add_argument("--script", choices=["ethiopic", "latin"], default="latin")
    args = p.parse_args(argv)

    g = date.today()
    print(f"{g.isoformat()}  {ethcal.to_ethiopian_date_string(g, script=args.script)}")
    return 0


def _dispatch(argv: list[str]) -> int:
    # Backward compatibility: `ethcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_to_eth(argv)

    p = argparse.ArgumentParser(prog="ethcal", description="Ethiopian/Gregorian calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("to-eth", help="Gregorian -> Ethiopian date", add_help=False)
    sub.add_parser("to-greg", help="Ethiopian -> Gregorian date", add_help=False)
    sub.add_parser("today", help="Today's date in the Ethiopian calendar", add_help=False)

    sub.add_parser("pretty-month", help="Print Ethiopian/Gregorian month calendars (diagnostics)", add_help=False)
    sub.add_parser("new-years", help="Print New Year table (diagnostics)", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "new-year-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "to-eth":
        return cmd_to_eth(rest)

    if args.cmd == "to-greg":
        return cmd_to_greg(rest)

    if args.cmd == "today":
        return cmd_today(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("ethcal.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("ethcal.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "ethcal.diagnostics.round_trip",
            "new-year-scatter": "ethcal.diagnostics.new_year_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        return _dispatch(argv)
    except InvalidDateError as e:
        print(f"ethcal: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
