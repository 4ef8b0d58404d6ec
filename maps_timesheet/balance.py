"""Attendance policy and workload balance accumulation."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Iterable, Sequence

from maps_timesheet.models import DayBalance, Location, ReconcileResult, Visit, YearMonth
from maps_timesheet.segmenter import group_by_day

logger = logging.getLogger(__name__)

WEEKEND_DAYS = frozenset({5, 6})  # date.weekday(): Saturday, Sunday


def is_weekend(day: date) -> bool:
    return day.weekday() in WEEKEND_DAYS


def did_visit_work(visits: Iterable[Visit], work: Location) -> bool:
    """True if any visit of the day took place at the work location."""

    return any(v.location == work for v in visits)


def actual_workload(visits: Sequence[Visit], work: Location) -> timedelta:
    """Time from the first arrival at work to the last departure from it.

    Visits are taken to be in chronological order. Time spent elsewhere
    between two work visits of the same day is not subtracted.

    Raises:
        ValueError: If none of the visits is at the work location.
    """

    at_work = [v for v in visits if v.location == work]
    if not at_work:
        raise ValueError(f"No visit to {work!r} in the given visits")
    return at_work[-1].end - at_work[0].start


def day_balance(
    day: date,
    visits: Sequence[Visit],
    work: Location,
    expected: timedelta,
) -> DayBalance | None:
    """Balance of one day bucket, or None if the day does not count.

    Weekends and days without a work visit are skipped.
    """

    if is_weekend(day):
        return None
    # Absences contribute nothing for now; counting them needs holidays and
    # justified absences to be known first.
    if not did_visit_work(visits, work):
        logger.debug("%s: no visit to work, skipped", day)
        return None
    actual = actual_workload(visits, work)
    return DayBalance(day=day, actual=actual, balance=expected - actual)


def reconcile(
    months: Iterable[tuple[YearMonth, Sequence[Visit]]],
    work: Location,
    expected: timedelta,
) -> ReconcileResult:
    """Sum the daily balances of every month.

    Args:
        months: (month, visits) pairs, visits in file order. Each visit is
            bucketed by the day of its end time within that month.
        work: Resolved work location.
        expected: Expected daily workload.

    Returns:
        ReconcileResult with the signed total (``expected - actual`` summed).
    """

    total = timedelta(0)
    days: list[DayBalance] = []
    for month, visits in months:
        for day_of_month, daily_visits in group_by_day(visits).items():
            balance = day_balance(month.at_day(day_of_month), daily_visits, work, expected)
            if balance is None:
                continue
            days.append(balance)
            total += balance.balance
    return ReconcileResult(total=total, days=days)
