"""Month selection and per-day grouping of visits."""

from __future__ import annotations

from datetime import date
from typing import Iterable

from maps_timesheet.models import Visit, YearMonth


def year_in_range(year: int, start: date, end: date) -> bool:
    """Whether a year folder may hold months of the range.

    Only folders after both boundary years are skipped here; earlier years
    are left to :func:`month_in_range`.
    """

    return not (year > start.year and year > end.year)


def month_in_range(month: YearMonth, start: date, end: date) -> bool:
    """Whether a month file takes part in the reconciliation.

    A month is kept when it is at or after the start month of the start
    year, or at or before the end month of the end year. Years strictly
    between the two boundary years match neither clause and are left out;
    within a single year with ``start.month <= end.month`` every month matches.
    """

    return (month.year == start.year and start.month <= month.month) or (
        month.year == end.year and month.month <= end.month
    )


def group_by_day(visits: Iterable[Visit]) -> dict[int, list[Visit]]:
    """Group visits by the day-of-month of their end time.

    A visit that starts late on one day and ends on the next is attributed
    to the day it ends. Visit order within a day is preserved, and days
    appear in the order they are first seen.
    """

    by_day: dict[int, list[Visit]] = {}
    for v in visits:
        by_day.setdefault(v.end.day, []).append(v)
    return by_day
