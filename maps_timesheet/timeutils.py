"""Time parsing and formatting utilities."""

from __future__ import annotations

import logging
import os
from datetime import UTC, date, datetime, timedelta, tzinfo
from pathlib import Path

from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

_ONE_MS = timedelta(milliseconds=1)
_LOCALTIME = Path("/etc/localtime")


def local_zone() -> tzinfo:
    """Return the system time zone as a DST-aware ZoneInfo.

    Looks at the ``TZ`` environment variable first, then ``/etc/localtime``.
    Falls back to UTC when neither names a known zone.
    """

    tz_env = os.environ.get("TZ", "").lstrip(":").strip()
    if tz_env:
        try:
            return ZoneInfo(tz_env)
        except Exception:  # not an IANA key (e.g. a POSIX rule string); try the system file
            logger.debug("TZ=%r is not an IANA zone name", tz_env)

    if _LOCALTIME.exists():
        # usually a symlink into .../zoneinfo/<Area>/<City>
        target = str(_LOCALTIME.resolve())
        _, sep, key = target.partition("zoneinfo/")
        if sep:
            try:
                return ZoneInfo(key)
            except Exception:
                logger.debug("Unknown zone key %r from %s", key, _LOCALTIME)
        try:
            with _LOCALTIME.open("rb") as f:
                return ZoneInfo.from_file(f, key="localtime")
        except (OSError, ValueError):
            logger.debug("Cannot read %s", _LOCALTIME)

    logger.warning("System time zone not found, using UTC")
    return UTC


def tzinfo_from_name(tz_name: str | None) -> tzinfo:
    """Create tzinfo from an IANA timezone name.

    Args:
        tz_name: Timezone name like "Europe/Lisbon". None means the system
            local time zone.

    Returns:
        tzinfo instance.

    Raises:
        ValueError: If timezone name is invalid on this system.
    """

    if tz_name is None:
        return local_zone()
    try:
        return ZoneInfo(tz_name)
    except Exception as exc:  # ZoneInfo raises KeyError / ZoneInfoNotFoundError (platform dependent)
        raise ValueError(f"Invalid time zone: {tz_name!r}. Example: Europe/Lisbon") from exc


def parse_instant(text: str, tz: tzinfo) -> datetime:
    """Parse an ISO-8601 instant and convert it to ``tz``.

    Takeout writes instants like "2023-03-01T08:58:12.345Z" (fraction optional).
    A string without offset is taken as UTC.

    Raises:
        ValueError: If the text is not an ISO-8601 timestamp.
    """

    s = text.strip()
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    dt = datetime.fromisoformat(s)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(tz)


def parse_date(text: str) -> date:
    """Parse a "YYYY-MM-DD" date.

    Raises:
        ValueError: If cannot parse.
    """

    try:
        return date.fromisoformat(text.strip())
    except ValueError as exc:
        raise ValueError(f"Cannot parse date: {text!r}. Expected format: 2023-03-01") from exc


def to_millis(delta: timedelta) -> int:
    """Whole milliseconds in ``delta``, truncated toward zero."""

    ms = abs(delta) // _ONE_MS
    return -ms if delta < timedelta(0) else ms


def format_hhmmss(delta: timedelta) -> str:
    """Format a duration as HH:MM:SS, with a leading '-' when negative."""

    s = int(abs(delta).total_seconds())
    h = s // 3600
    m = (s % 3600) // 60
    sec = s % 60
    sign = "-" if delta < timedelta(0) else ""
    return f"{sign}{h:02d}:{m:02d}:{sec:02d}"
