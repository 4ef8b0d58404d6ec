"""End-to-end timesheet computation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable, Sequence

from maps_timesheet.balance import reconcile
from maps_timesheet.config import TimesheetConfig, zone_for
from maps_timesheet.models import Location, PlaceMention, ReconcileResult, Verdict, Visit, YearMonth
from maps_timesheet.report import build_verdict
from maps_timesheet.resolver import resolve_work_location
from maps_timesheet.takeout import load_takeout

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TimesheetReport:
    """Everything a front-end needs to show the outcome of a run."""

    work_location: Location
    result: ReconcileResult
    verdict: Verdict


def run_engine(
    months: Sequence[tuple[YearMonth, Sequence[Visit]]],
    mentions: Iterable[PlaceMention],
    expected: timedelta,
) -> TimesheetReport:
    """Resolve the work location, reconcile every month and build the verdict.

    No I/O; the same inputs always give the same report.

    Raises:
        NoWorkLocationFound: If no mention is labeled as work.
    """

    work = resolve_work_location(mentions)
    result = reconcile(months, work, expected)
    verdict = build_verdict(result.total, expected)
    logger.debug("Counted %s days, total balance %s", len(result.days), result.total)
    return TimesheetReport(work_location=work, result=result, verdict=verdict)


def compute_timesheet(config: TimesheetConfig) -> TimesheetReport:
    """Load the Takeout folder described by ``config`` and run the engine."""

    tz = zone_for(config.tz_name)
    data = load_takeout(config.root, config.start_date, config.end_date, tz)
    return run_engine(data.monthly_visits(), data.mentions(), config.expected_workload)
