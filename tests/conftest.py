"""Shared fixtures: in-memory visits and a temporary Takeout folder."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

import pytest
from zoneinfo import ZoneInfo

from maps_timesheet.models import Location, Visit

UTC_ZONE = ZoneInfo("UTC")


@pytest.fixture
def tz() -> ZoneInfo:
    return UTC_ZONE


@pytest.fixture
def office() -> Location:
    return Location("place-office", "Office")


@pytest.fixture
def home() -> Location:
    return Location("place-home", "Home")


@pytest.fixture
def make_visit() -> Callable[[Location, str, str], Visit]:
    """Build a visit from "YYYY-MM-DD HH:MM" local (UTC) strings."""

    def _make(location: Location, start: str, end: str) -> Visit:
        return Visit(
            location=location,
            start=datetime.fromisoformat(start).replace(tzinfo=UTC_ZONE),
            end=datetime.fromisoformat(end).replace(tzinfo=UTC_ZONE),
        )

    return _make


def place_visit(
    place_id: str | None,
    name: str | None,
    start: str,
    end: str,
    semantic_type: str | None = None,
) -> dict[str, Any]:
    """A raw ``timelineObjects`` entry as written by Google Takeout."""

    location: dict[str, Any] = {}
    if place_id is not None:
        location["placeId"] = place_id
    if name is not None:
        location["name"] = name
    if semantic_type is not None:
        location["semanticType"] = semantic_type
    return {"placeVisit": {"location": location, "duration": {"startTimestamp": start, "endTimestamp": end}}}


@pytest.fixture
def takeout_root(tmp_path: Path) -> Callable[[dict[str, list[dict[str, Any]]]], Path]:
    """Write month files like {"2023/2023_MARCH.json": [objects...]} and return the root."""

    def _write(files: dict[str, list[dict[str, Any]]]) -> Path:
        root = tmp_path / "Semantic Location History"
        for rel, objects in files.items():
            p = root / rel
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_text(json.dumps({"timelineObjects": objects}), encoding="utf-8")
        return root

    return _write
