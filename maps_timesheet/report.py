"""Verdict computation and timesheet output."""

from __future__ import annotations

import csv
from datetime import timedelta
from pathlib import Path
from typing import Iterable

from maps_timesheet.models import DayBalance, Verdict
from maps_timesheet.timeutils import format_hhmmss, to_millis


def build_verdict(total: timedelta, expected: timedelta) -> Verdict:
    """Express the aggregate balance in whole expected workdays.

    Both durations are converted to milliseconds and divided with
    truncation; the remainder is dropped.

    Args:
        total: Aggregate of ``expected - actual`` over the range.
        expected: Expected daily workload, positive.

    Returns:
        "bonus" when the total is negative (worked more than required),
        "pending" otherwise.
    """

    expected_ms = to_millis(expected)
    if expected_ms <= 0:
        raise ValueError(f"Expected workload must be positive, got {expected}")
    factor = abs(to_millis(total)) // expected_ms
    if total < timedelta(0):
        return Verdict(kind="bonus", magnitude_days=factor)
    return Verdict(kind="pending", magnitude_days=factor)


def format_verdict(verdict: Verdict) -> str:
    return f"{verdict.magnitude_days} days {verdict.kind}"


def write_days_csv(days: Iterable[DayBalance], out_path: str | Path) -> None:
    """Write the per-day breakdown to CSV."""

    p = Path(out_path)
    with p.open("w", encoding="utf-8", newline="") as f:
        w = csv.DictWriter(
            f,
            fieldnames=[
                "date",
                "weekday",
                "actual_hhmmss",
                "balance_hhmmss",
                "balance_seconds",
            ],
        )
        w.writeheader()
        for d in days:
            w.writerow(
                {
                    "date": d.day.isoformat(),
                    "weekday": d.day.strftime("%a"),
                    "actual_hhmmss": format_hhmmss(d.actual),
                    "balance_hhmmss": format_hhmmss(d.balance),
                    "balance_seconds": int(d.balance.total_seconds()),
                }
            )
