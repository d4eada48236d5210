from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import ethcal


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def weeks_from(first: date, cells: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(first.weekday())]  # Monday=0
    for c in cells:
        wk.append(c)
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def ethiopian_month_calendar(Y: int, M: int) -> None:
    rows = ethcal.month_days(Y, M)
    d0 = rows[0]["date"]
    d1 = rows[-1]["date"]
    cells = [cell(f"{r['day']:2d}", f"{r['date'].month:02d}-{r['date'].day:02d}") for r in rows]

    name = ethcal.month_name(M, script="latin")
    title = f"Ethiopian month  Y={Y}  M={M} ({name})   ({d0} .. {d1})"
    print_grid(title, weeks_from(d0, cells))


def gregorian_month_calendar(gy: int, gm: int) -> None:
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    cells = []
    d = first
    while d <= last:
        _, em, ed = ethcal.to_ethiopian(d.year, d.month, d.day)
        cells.append(cell(f"{d.day:2d}", f"{em:02d}-{ed:02d}"))
        d += timedelta(days=1)

    title = f"Gregorian month  {gy}-{gm:02d}"
    print_grid(title, weeks_from(first, cells))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print an Ethiopian-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--eth", nargs=2, type=int, metavar=("Y", "M"),
                   help="Ethiopian month to print: Y M (e.g. 2017 1)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2024 9)")
    args = p.parse_args(argv)

    if not args.eth and not args.greg:
        # sensible default demo
        ethiopian_month_calendar(Y=2017, M=1)
        gregorian_month_calendar(gy=2024, gm=9)
        return 0

    if args.eth:
        Y, M = args.eth
        ethiopian_month_calendar(Y=Y, M=M)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(gy=gy, gm=gm)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
