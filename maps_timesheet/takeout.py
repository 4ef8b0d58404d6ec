"""Reader for the Google Takeout "Semantic Location History" folder.

Observed layout::

    Semantic Location History/
        2023/
            2023_JANUARY.json
            2023_FEBRUARY.json
            ...

Each month file holds ``{"timelineObjects": [{"placeVisit": {...}}, {"activitySegment": {...}}]}``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import date, tzinfo
from pathlib import Path
from typing import Any, Iterable, Iterator, Sequence

from maps_timesheet.errors import TakeoutFormatError
from maps_timesheet.models import Location, PlaceMention, Visit, YearMonth
from maps_timesheet.segmenter import month_in_range, year_in_range
from maps_timesheet.timeutils import parse_instant

logger = logging.getLogger(__name__)

MONTH_NAMES: tuple[str, ...] = (
    "JANUARY",
    "FEBRUARY",
    "MARCH",
    "APRIL",
    "MAY",
    "JUNE",
    "JULY",
    "AUGUST",
    "SEPTEMBER",
    "OCTOBER",
    "NOVEMBER",
    "DECEMBER",
)


@dataclass(frozen=True, slots=True)
class MonthData:
    """Place visits of one month file, in file order."""

    month: YearMonth
    path: Path
    place_visits: list[dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class TakeoutData:
    """All in-range months of a Takeout folder, ordered by month."""

    months: list[MonthData]
    tz: tzinfo

    def mentions(self) -> Iterator[PlaceMention]:
        return iter_place_mentions(self.months)

    def monthly_visits(self) -> list[tuple[YearMonth, list[Visit]]]:
        return [(m.month, build_visits(m.place_visits, self.tz)) for m in self.months]


def parse_month_file_name(path: str | Path) -> YearMonth:
    """Parse "2023_MARCH.json" into YearMonth(2023, 3).

    Raises:
        TakeoutFormatError: If the name does not follow the pattern.
    """

    stem = Path(path).stem
    year_s, _, month_s = stem.partition("_")
    try:
        year = int(year_s)
        month = MONTH_NAMES.index(month_s.upper()) + 1
    except ValueError as exc:
        raise TakeoutFormatError(f"Unexpected month file name: {Path(path).name!r}. Example: 2023_MARCH.json") from exc
    return YearMonth(year, month)


def discover_month_files(root: str | Path, start: date, end: date) -> list[tuple[YearMonth, Path]]:
    """List the month files that take part in the range.

    Args:
        root: The "Semantic Location History" folder.
        start: First date of the range.
        end: Last date of the range.

    Returns:
        (month, path) pairs, years ascending and months ascending within a year.

    Raises:
        TakeoutFormatError: If root is not a directory or a file name is unexpected.
    """

    p = Path(root)
    if not p.is_dir():
        raise TakeoutFormatError(f"Location history folder not found: {str(p)!r}")

    found: list[tuple[YearMonth, Path]] = []
    for year_dir in sorted(p.iterdir()):
        if not year_dir.is_dir():
            continue
        try:
            year = int(year_dir.name)
        except ValueError:
            logger.debug("Ignoring non-year folder %s", year_dir)
            continue
        if not year_in_range(year, start, end):
            continue

        yearly: list[tuple[YearMonth, Path]] = []
        for f in year_dir.iterdir():
            if not f.is_file() or f.suffix.lower() != ".json":
                continue
            month = parse_month_file_name(f)
            if month_in_range(month, start, end):
                yearly.append((month, f))
        yearly.sort(key=lambda item: item[0])
        found.extend(yearly)

    found.sort(key=lambda item: item[0].year)
    return found


def load_place_visits(path: str | Path) -> list[dict[str, Any]]:
    """Load the ``placeVisit`` objects of one month file, in file order.

    Raises:
        TakeoutFormatError: If the file has no ``timelineObjects`` list.
    """

    p = Path(path)
    data = json.loads(p.read_text(encoding="utf-8"))
    objects = data.get("timelineObjects") if isinstance(data, dict) else None
    if not isinstance(objects, list):
        raise TakeoutFormatError(f"{p.name}: missing 'timelineObjects' list")

    out: list[dict[str, Any]] = []
    for obj in objects:
        if not isinstance(obj, dict) or len(obj) != 1:
            raise TakeoutFormatError(f"{p.name}: timeline object must have exactly one key")
        kind, value = next(iter(obj.items()))
        if kind == "placeVisit":
            out.append(value)
    return out


def _mention(place_visit: dict[str, Any]) -> PlaceMention:
    loc = place_visit.get("location") or {}
    return PlaceMention(
        place_id=loc.get("placeId"),
        name=loc.get("name"),
        semantic_type=loc.get("semanticType"),
    )


def iter_place_mentions(months: Iterable[MonthData]) -> Iterator[PlaceMention]:
    """Yield the location mention of every place visit, month by month."""

    for m in months:
        for pv in m.place_visits:
            yield _mention(pv)


def build_visits(place_visits: Sequence[dict[str, Any]], tz: tzinfo) -> list[Visit]:
    """Convert raw place visits into Visit objects.

    Records whose location has no place id or name are dropped. Timestamps
    are not validated beyond parsing; a malformed one raises ValueError.
    """

    visits: list[Visit] = []
    dropped = 0
    for pv in place_visits:
        duration = pv["duration"]
        start = parse_instant(duration["startTimestamp"], tz)
        end = parse_instant(duration["endTimestamp"], tz)
        location: Location | None = _mention(pv).to_location()
        if location is None:
            dropped += 1
            continue
        visits.append(Visit(location=location, start=start, end=end))
    if dropped:
        logger.debug("Dropped %s place visits without place id or name", dropped)
    return visits


def load_takeout(root: str | Path, start: date, end: date, tz: tzinfo) -> TakeoutData:
    """Read every in-range month file under ``root`` into memory."""

    months = [
        MonthData(month=month, path=path, place_visits=load_place_visits(path))
        for month, path in discover_month_files(root, start, end)
    ]
    logger.info("Loaded %s month files from %s", len(months), root)
    return TakeoutData(months=months, tz=tz)


def latest_mtime(root: str | Path, start: date, end: date) -> float:
    """Newest modification time among the in-range month files (0.0 if none)."""

    return max((path.stat().st_mtime for _, path in discover_month_files(root, start, end)), default=0.0)
