from __future__ import annotations

from datetime import date
import argparse

import ethcal


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Gregorian date of Meskerem 1 (Enkutatash) for a range of Ethiopian years."
    )
    p.add_argument("--from-year", type=int, default=2010)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the date column (default: iso).",
    )
    args = p.parse_args(argv)

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Meskerem 1", "Weekday", "Pagume"]
    colw = [5, 10, 9, 6]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    shifted: list[tuple[int, date]] = []

    for Y in range(Y0, Y1 + 1):
        ny = ethcal.new_year_info(Y)
        d = ny["date"]
        pagume = ethcal.days_in_month(Y, 13)
        row = [
            str(Y).ljust(colw[0]),
            fmt(d).ljust(colw[1]),
            d.strftime("%A").ljust(colw[2]),
            str(pagume).ljust(colw[3]),
        ]
        print("  ".join(row))
        if ny["leap_pagume"]:
            shifted.append((Y, d))

    print("\nYears following a 6-day Pagume (new year one day later):")
    if not shifted:
        print("(none)")
        return 0

    for Y, d in shifted:
        print(f"{d.isoformat()}  (Y={Y})")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
