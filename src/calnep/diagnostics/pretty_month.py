from __future__ import annotations

import argparse

from calnep.calendar import NepaliCalendar
from calnep.formatting import weekday_name


def dow_header(locale: str = "en") -> str:
    return " ".join(weekday_name(i, locale, short=True)[:6].ljust(6) for i in range(7)).rstrip()


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]], locale: str = "en") -> None:
    header = dow_header(locale)
    print(title)
    print(header)
    print("-" * len(header))
    for wk in weeks:
        print(" ".join(c[0] for c in wk).rstrip())
        print(" ".join(c[1] for c in wk).rstrip())
    print()


def bs_month_calendar(year: int, month_index: int, *, locale: str = "en") -> None:
    grid = NepaliCalendar(year).get_month(month_index)

    weeks: list[list[tuple[str, str]]] = []
    for row in grid.weeks():
        wk: list[tuple[str, str]] = []
        for c in row:
            if c is None:
                wk.append(cell("", ""))
                continue
            top = c.label if locale == "ne" else f"{c.day:2d}"
            bot = f"{c.ad_date.month:02d}-{c.ad_day:02d}"
            wk.append(cell(top, bot))
        weeks.append(wk)

    name = grid.month.ne if locale == "ne" else grid.month.en
    first = grid.days[grid.leading_blanks].ad_date
    title = f"BS {year} {name} ({month_index + 1:02d})  [{grid.month.ad} {first.year}]"
    print_grid(title, weeks, locale)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a BS month calendar with the Gregorian date under each day."
    )
    p.add_argument("year", type=int, help="BS year, e.g. 2081")
    p.add_argument("month", type=int, help="BS month number 1-12 (1 = Baishakh)")
    p.add_argument("--locale", choices=("en", "ne"), default="en")
    args = p.parse_args(argv)

    bs_month_calendar(args.year, args.month - 1, locale=args.locale)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
