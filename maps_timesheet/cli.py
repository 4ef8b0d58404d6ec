"""Command-line interface for maps_timesheet.

Run:
    python -m maps_timesheet report --file "Semantic Location History" --workload 8 --range 2023-03-01 2023-03-31
"""

from __future__ import annotations

import argparse
import logging
import sys

from maps_timesheet.config import TimesheetConfig, load_config, zone_for
from maps_timesheet.errors import TimesheetError
from maps_timesheet.report import format_verdict, write_days_csv
from maps_timesheet.resolver import work_location_candidates
from maps_timesheet.takeout import load_takeout
from maps_timesheet.timesheet import compute_timesheet
from maps_timesheet.timeutils import format_hhmmss


def _config_from_args(args: argparse.Namespace) -> TimesheetConfig:
    start, end = args.range if args.range is not None else (None, None)
    return load_config(
        root=args.file,
        workload_hours=args.workload,
        start_date=start,
        end_date=end,
        tz_name=args.tz,
        env_file=args.env_file,
    )


def _cmd_report(args: argparse.Namespace) -> int:
    report = compute_timesheet(_config_from_args(args))
    print(f"Work location: {report.work_location.name} ({report.work_location.place_id})")
    print(f"Counted days: {len(report.result.days)}, balance={format_hhmmss(report.result.total)}")
    print(format_verdict(report.verdict))
    return 0


def _cmd_export_days(args: argparse.Namespace) -> int:
    report = compute_timesheet(_config_from_args(args))
    write_days_csv(report.result.days, args.out)
    print(format_verdict(report.verdict))
    print(f"Exported: {args.out} ({len(report.result.days)} days)")
    return 0


def _cmd_places(args: argparse.Namespace) -> int:
    config = _config_from_args(args)
    data = load_takeout(config.root, config.start_date, config.end_date, zone_for(config.tz_name))
    candidates = work_location_candidates(data.mentions())
    if not candidates:
        print("No place labeled as 'Work' found.")
        return 0
    for i, loc in enumerate(candidates):
        marker = "*" if i == len(candidates) - 1 else " "
        print(f"{marker} {loc.place_id}  {loc.name}")
    return 0


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--file",
        type=str,
        default=None,
        help="Path of the 'Semantic Location History' folder of your Takeout data",
    )
    p.add_argument("--workload", type=int, default=None, help="Hours you should be working daily")
    p.add_argument(
        "--range",
        nargs=2,
        metavar=("START", "END"),
        default=None,
        help="Start and end dates to analyze, in YYYY-MM-DD format",
    )
    p.add_argument("--tz", type=str, default=None, help="Time zone (IANA); defaults to the system time zone")
    p.add_argument("--env-file", type=str, default=".env", help="dotenv file with TIMESHEET_* defaults")
    p.add_argument("-v", "--verbose", action="store_true", help="Log progress and skipped records")


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""

    p = argparse.ArgumentParser(
        prog="maps_timesheet",
        description="Calculate your work timesheet from your Google Maps Location History (Google Takeout).",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    p_rep = sub.add_parser("report", help="Print how many workdays are pending or earned as bonus")
    _add_common(p_rep)
    p_rep.set_defaults(func=_cmd_report)

    p_exp = sub.add_parser("export-days", help="Export the per-day balance to CSV")
    _add_common(p_exp)
    p_exp.add_argument("--out", type=str, default="days.csv", help="Output CSV path")
    p_exp.set_defaults(func=_cmd_export_days)

    p_pl = sub.add_parser("places", help="List places labeled as work; '*' marks the one used")
    _add_common(p_pl)
    p_pl.set_defaults(func=_cmd_places)

    return p


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""

    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return int(args.func(args))
    except TimesheetError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
