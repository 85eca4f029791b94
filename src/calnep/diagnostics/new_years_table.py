from __future__ import annotations

from datetime import date
import argparse

import calnep
from calnep.formatting import weekday_name


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Gregorian date of Baishakh 1 (BS New Year) over a range of years."
    )
    p.add_argument("--from-year", type=int, default=2070)
    p.add_argument("--to-year", type=int, default=2090)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the Gregorian date (default: iso).",
    )
    p.add_argument("--table", default="nepal", help="Registered month table (default: nepal)")
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    headers = ["Year", "Baishakh 1", "Weekday", "Days"]
    colw = [5, 10, 9, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        ny = calnep.new_year_day(Y, table=args.table)
        row = [
            str(Y),
            fmt(ny["date"]),
            weekday_name(ny["weekday"]),
            str(calnep.days_in_year(Y, table=args.table)),
        ]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)).rstrip())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
