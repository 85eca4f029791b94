from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from calnep.core.errors import CalnepError


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


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


def _fail(e: CalnepError) -> int:
    print(f"error: {e}", file=sys.stderr)
    return 2


def cmd_to_bs(argv: list[str]) -> int:
    import calnep

    p = argparse.ArgumentParser(prog="calnep to-bs", description="Gregorian -> BS date")
    p.add_argument("date", help="Gregorian date, YYYY-MM-DD")
    p.add_argument("--format", default="YYYY-MM-DD", help="Output format (default: YYYY-MM-DD)")
    p.add_argument("--locale", choices=("en", "ne"), default="en")
    p.add_argument("--debug", action="store_true", help="Also print the conversion details")
    args = p.parse_args(argv)

    try:
        nd = calnep.NepaliDate.from_ad(args.date, order="YMD")
        print(nd.format(args.format, locale=args.locale))
        if args.debug:
            print(calnep.explain(nd.to_ad()))
    except CalnepError as e:
        return _fail(e)
    return 0


def cmd_to_ad(argv: list[str]) -> int:
    import calnep

    p = argparse.ArgumentParser(prog="calnep to-ad", description="BS -> Gregorian date")
    p.add_argument("date", help="BS date, YYYY-MM-DD with 1-based month (e.g. 2081-01-01)")
    p.add_argument("--format", default="YYYY-MM-DD", help="Output format (default: YYYY-MM-DD)")
    p.add_argument("--locale", choices=("en", "ne"), default="en")
    args = p.parse_args(argv)

    try:
        nd = calnep.NepaliDate.from_bs(args.date, order="YMD")
        print(nd.format(args.format, calendar="AD", locale=args.locale))
    except CalnepError as e:
        return _fail(e)
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `calnep YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_to_bs(argv)

    p = argparse.ArgumentParser(prog="calnep", description="Bikram Sambat calendar toolkit CLI.")
    p.add_argument("--log-level", choices=_LOG_LEVELS, default="WARNING", help="Logging level (default: WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("to-bs", help="Gregorian -> BS date")
    sub.add_parser("to-ad", help="BS -> Gregorian date")
    sub.add_parser("month", help="Print a BS month calendar")
    sub.add_parser("new-years", help="Print the BS New Year table")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "new-year-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        if args.cmd == "to-bs":
            return cmd_to_bs(rest)

        if args.cmd == "to-ad":
            return cmd_to_ad(rest)

        if args.cmd == "month":
            return _run_module_main("calnep.diagnostics.pretty_month", rest)

        if args.cmd == "new-years":
            return _run_module_main("calnep.diagnostics.new_years_table", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "calnep.diagnostics.round_trip",
                "new-year-scatter": "calnep.diagnostics.new_year_scatter",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except CalnepError as e:
        return _fail(e)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
