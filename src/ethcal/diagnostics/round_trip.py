from __future__ import annotations

import argparse
import random
from datetime import date, timedelta

import ethcal


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def roundtrip_test(
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)

        e = ethcal.to_ethiopian(d0.year, d0.month, d0.day)
        back = ethcal.to_gregorian(e)
        if back != (d0.year, d0.month, d0.day):
            failures += 1
            print("\nFAIL (gregorian -> ethiopian -> gregorian)")
            print("d0:", d0)
            print("eth:", e)
            print("back:", back)
            if failures >= max_failures:
                return failures

        try:
            ethcal.validate_ethiopian(e)
        except ethcal.InvalidDateError as exc:
            failures += 1
            print("\nFAIL (out-of-range ethiopian label)")
            print("d0:", d0)
            print("eth:", e)
            print("error:", exc)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> ethiopian -> gregorian.")
    p.add_argument("--N", type=int, default=2000, help="Trials.")
    p.add_argument("--start", type=str, default="1910-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2099-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    print(f"Testing {args.N} dates in {start} .. {end} ...")
    failures = roundtrip_test(args.N, start, end, args.seed, max_failures=args.max_failures)

    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
