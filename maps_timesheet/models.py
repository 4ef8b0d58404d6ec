"""Data models for places, visits and timesheet results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Final, Literal


WORK_SEMANTIC_TYPE: Final[str] = "TYPE_WORK"


@dataclass(frozen=True, slots=True, eq=False)
class Location:
    """A Google Maps place.

    Two locations are the same place when their ``place_id`` matches; the
    display name is metadata only and does not take part in equality.
    """

    place_id: str
    name: str

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Location):
            return NotImplemented
        return self.place_id == other.place_id

    def __hash__(self) -> int:
        return hash(self.place_id)

    def __repr__(self) -> str:
        return f"Location({self.name!r})"


@dataclass(frozen=True, slots=True)
class PlaceMention:
    """A raw location mention as found in a ``placeVisit`` record.

    Attributes:
        place_id: Stable place identifier. May be missing in the export.
        name: Display name. May be missing in the export.
        semantic_type: Semantic tag, e.g. "TYPE_WORK" or "TYPE_HOME".
    """

    place_id: str | None
    name: str | None
    semantic_type: str | None = None

    @property
    def is_work(self) -> bool:
        return self.semantic_type == WORK_SEMANTIC_TYPE

    def to_location(self) -> Location | None:
        """Return a Location, or None if id or name is missing."""

        if self.place_id is None or self.name is None:
            return None
        return Location(self.place_id, self.name)


@dataclass(frozen=True, slots=True)
class Visit:
    """A stay at ``location``, entering at ``start`` and leaving at ``end``.

    Note:
        Start/end are timezone-aware datetimes in the run-wide time zone, so
        ``end.day`` is the local calendar day used for bucketing.
    """

    location: Location
    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start


@dataclass(frozen=True, slots=True, order=True)
class YearMonth:
    """A calendar month, ordered by (year, month)."""

    year: int
    month: int

    def at_day(self, day: int) -> date:
        return date(self.year, self.month, day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True, slots=True)
class DayBalance:
    """Balance of a single attended working day.

    Attributes:
        day: Calendar date of the bucket.
        actual: Time between first arrival at and last departure from work.
        balance: ``expected - actual``. Negative means overtime.
    """

    day: date
    actual: timedelta
    balance: timedelta


@dataclass(frozen=True, slots=True)
class ReconcileResult:
    """Aggregate balance over the whole range plus the per-day breakdown."""

    total: timedelta
    days: list[DayBalance] = field(default_factory=list)


VerdictKind = Literal["bonus", "pending"]


@dataclass(frozen=True, slots=True)
class Verdict:
    """Final verdict, in whole multiples of the expected daily workload."""

    kind: VerdictKind
    magnitude_days: int
