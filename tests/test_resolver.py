"""Tests for work location resolution."""

from __future__ import annotations

import pytest

from maps_timesheet.errors import NoWorkLocationFound
from maps_timesheet.models import Location, PlaceMention
from maps_timesheet.resolver import resolve_work_location, work_location_candidates


def _work(place_id: str | None, name: str | None = "Some place") -> PlaceMention:
    return PlaceMention(place_id=place_id, name=name, semantic_type="TYPE_WORK")


def test_location_equality_ignores_name() -> None:
    a = Location("p1", "Office")
    b = Location("p1", "Office (renamed)")
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != Location("p2", "Office")


def test_single_work_location() -> None:
    mentions = [
        PlaceMention("home", "Home", "TYPE_HOME"),
        _work("office", "Office"),
        PlaceMention("cafe", "Cafe"),
    ]
    assert resolve_work_location(mentions).place_id == "office"


def test_last_distinct_work_location_wins() -> None:
    mentions = [_work("old"), _work("new")]
    assert resolve_work_location(mentions).place_id == "new"


def test_repeated_mention_does_not_move_position() -> None:
    # "old" comes back after "new" was added, but "new" is still the last distinct id
    mentions = [_work("old"), _work("new"), _work("old"), _work("old")]
    assert resolve_work_location(mentions).place_id == "new"


def test_repeated_mention_refreshes_name() -> None:
    mentions = [_work("office", "Office"), _work("office", "HQ")]
    work = resolve_work_location(mentions)
    assert work.name == "HQ"


def test_mentions_without_id_or_name_are_skipped() -> None:
    mentions = [_work("office", "Office"), _work(None, "No id"), _work("noname", None)]
    assert resolve_work_location(mentions).place_id == "office"
    assert [loc.place_id for loc in work_location_candidates(mentions)] == ["office"]


def test_non_work_tags_are_ignored() -> None:
    mentions = [_work("office"), PlaceMention("home", "Home", "TYPE_HOME")]
    assert resolve_work_location(mentions).place_id == "office"


def test_no_work_location_raises() -> None:
    with pytest.raises(NoWorkLocationFound):
        resolve_work_location([PlaceMention("home", "Home", "TYPE_HOME")])


def test_no_mentions_raises() -> None:
    with pytest.raises(NoWorkLocationFound):
        resolve_work_location(iter([]))


def test_accepts_lazy_iterables() -> None:
    mentions = (_work(pid) for pid in ["a", "b", "c"])
    assert resolve_work_location(mentions).place_id == "c"


def test_empty_id_and_name_are_still_usable() -> None:
    # only missing values are skipped; empty strings are kept as-is
    assert PlaceMention("", "Office", "TYPE_WORK").to_location() == Location("", "Office")
    assert PlaceMention("office", "", "TYPE_WORK").to_location() == Location("office", "")
    assert resolve_work_location([_work("office"), _work("", "Blank id")]).place_id == ""
