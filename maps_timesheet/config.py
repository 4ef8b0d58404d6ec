"""Run configuration, from command-line values and a ``.env`` file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date, timedelta, tzinfo
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

from maps_timesheet.errors import ConfigError
from maps_timesheet.timeutils import parse_date, tzinfo_from_name

ENV_ROOT: Final[str] = "TIMESHEET_LOCATION_HISTORY_FILE"
ENV_WORKLOAD: Final[str] = "TIMESHEET_WORKLOAD"
ENV_START_DATE: Final[str] = "TIMESHEET_START_DATE"
ENV_END_DATE: Final[str] = "TIMESHEET_END_DATE"
ENV_TZ: Final[str] = "TIMESHEET_TZ"


@dataclass(frozen=True, slots=True)
class TimesheetConfig:
    """Inputs of one timesheet run.

    Attributes:
        root: The "Semantic Location History" folder of a Takeout export.
        expected_workload: Time that should be spent at work each weekday.
        start_date: First date of the range.
        end_date: Last date of the range.
        tz_name: IANA time zone used to bucket visits into days. None means
            the system local time zone.
    """

    root: Path
    expected_workload: timedelta
    start_date: date
    end_date: date
    tz_name: str | None = None


def zone_for(tz_name: str | None) -> tzinfo:
    """Look up a time zone by IANA name (None = system zone).

    Raises:
        ConfigError: If the name is unknown.
    """

    try:
        return tzinfo_from_name(tz_name)
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc


def _pick(value: object | None, env_name: str) -> str | None:
    if value is not None:
        return str(value)
    env = os.environ.get(env_name)
    return env if env else None


def _require(value: str | None, flag: str, env_name: str) -> str:
    if value is None:
        raise ConfigError(f"Missing {flag} (or {env_name} in the environment / .env file)")
    return value


def load_config(
    *,
    root: str | Path | None = None,
    workload_hours: int | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
    tz_name: str | None = None,
    env_file: str | Path | None = ".env",
) -> TimesheetConfig:
    """Build a TimesheetConfig.

    Explicit arguments win over environment variables. Variables from
    ``env_file`` are loaded first without overriding the real environment.

    Raises:
        ConfigError: If a value is missing from both sources or invalid.
    """

    if env_file is not None and Path(env_file).is_file():
        load_dotenv(env_file, override=False)

    root_s = _require(_pick(root, ENV_ROOT), "--file", ENV_ROOT)
    workload_s = _require(_pick(workload_hours, ENV_WORKLOAD), "--workload", ENV_WORKLOAD)
    start_s = _require(_pick(start_date, ENV_START_DATE), "--range START", ENV_START_DATE)
    end_s = _require(_pick(end_date, ENV_END_DATE), "--range END", ENV_END_DATE)

    zone_name = _pick(tz_name, ENV_TZ)
    try:
        hours = int(workload_s)
        start = parse_date(start_s)
        end = parse_date(end_s)
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc
    zone_for(zone_name)
    if hours <= 0:
        raise ConfigError(f"Workload must be a positive number of hours, got {hours}")

    return TimesheetConfig(
        root=Path(root_s),
        expected_workload=timedelta(hours=hours),
        start_date=start,
        end_date=end,
        tz_name=zone_name,
    )
