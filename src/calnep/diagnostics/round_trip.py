from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List

import calnep


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def parse_tables(s: str) -> List[str]:
    # "nepal,revised" -> ["nepal", "revised"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    table: str,
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0
    eng = calnep.get_engine(table)

    for _ in range(N):
        d0 = random_date(start, end)

        bs = calnep.ad_to_bs(d0, table=table)
        back = calnep.bs_to_ad(*bs, table=table)
        if back != d0:
            failures += 1
            print("\nFAIL (ad -> bs -> ad)")
            print("table:", table)
            print("d0:", d0)
            print("bs:", bs)
            print("back:", back)
            print("explain:", calnep.explain(d0, table=table))
            if failures >= max_failures:
                return failures

        year = random.randint(eng.min_year, eng.max_year)
        month_index = random.randint(0, 11)
        day = random.randint(1, eng.month_length(year, month_index))
        again = calnep.ad_to_bs(calnep.bs_to_ad(year, month_index, day, table=table), table=table)
        if again != (year, month_index, day):
            failures += 1
            print("\nFAIL (bs -> ad -> bs)")
            print("table:", table)
            print("bs:", (year, month_index, day))
            print("again:", again)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> BS -> gregorian and back.")
    p.add_argument("--tables", type=str, default="nepal", help="Comma-separated table list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per table.")
    p.add_argument("--start", type=str, default="", help="Start date YYYY-MM-DD (default: table start).")
    p.add_argument("--end", type=str, default="", help="End date YYYY-MM-DD (default: table end).")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per table.")
    args = p.parse_args(argv)

    total_fail = 0
    for table in parse_tables(args.tables):
        eng = calnep.get_engine(table)
        start = parse_date(args.start) if args.start else eng.min_ad
        end = parse_date(args.end) if args.end else eng.max_ad
        if end < start:
            raise SystemExit("--end must be >= --start")

        print(f"Testing {table} ...")
        total_fail += roundtrip_test(table, N=args.N, start=start, end=end, seed=args.seed, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
