"""Tests for the command-line interface."""

from __future__ import annotations

import csv
from pathlib import Path

import pytest
from conftest import place_visit

from maps_timesheet.cli import main


@pytest.fixture
def history(takeout_root) -> Path:
    return takeout_root(
        {
            "2023/2023_MARCH.json": [
                place_visit("old", "Old office", "2023-03-01T09:00:00Z", "2023-03-01T17:00:00Z", "TYPE_WORK"),
                place_visit("office", "Office", "2023-03-06T09:00:00Z", "2023-03-06T16:00:00Z", "TYPE_WORK"),
                place_visit("office", "Office", "2023-03-07T08:00:00Z", "2023-03-07T19:00:00Z", "TYPE_WORK"),
            ]
        }
    )


def _args(history: Path, tmp_path: Path, *extra: str) -> list[str]:
    return [
        "--file",
        str(history),
        "--workload",
        "8",
        "--range",
        "2023-03-01",
        "2023-03-31",
        "--tz",
        "UTC",
        "--env-file",
        str(tmp_path / "missing.env"),
        *extra,
    ]


def test_report(history: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["report", *_args(history, tmp_path)])
    out = capsys.readouterr().out
    assert code == 0
    assert "Work location: Office (office)" in out
    assert "balance=-02:00:00" in out
    assert out.strip().endswith("0 days bonus")


def test_export_days(history: Path, tmp_path: Path) -> None:
    out_csv = tmp_path / "days.csv"
    code = main(["export-days", *_args(history, tmp_path, "--out", str(out_csv))])
    assert code == 0
    with out_csv.open(encoding="utf-8", newline="") as f:
        rows = list(csv.DictReader(f))
    assert [r["date"] for r in rows] == ["2023-03-06", "2023-03-07"]
    assert [r["balance_hhmmss"] for r in rows] == ["01:00:00", "-03:00:00"]


def test_places_marks_resolved_location(history: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["places", *_args(history, tmp_path)])
    lines = capsys.readouterr().out.splitlines()
    assert code == 0
    assert lines == ["  old  Old office", "* office  Office"]


def test_no_work_location_exit_code(takeout_root, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    root = takeout_root(
        {"2023/2023_MARCH.json": [place_visit("home", "Home", "2023-03-06T09:00:00Z", "2023-03-06T16:00:00Z")]}
    )
    code = main(["report", *_args(root, tmp_path)])
    assert code == 2
    assert "Work" in capsys.readouterr().err


def test_missing_config_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch) -> None:
    monkeypatch.delenv("TIMESHEET_LOCATION_HISTORY_FILE", raising=False)
    code = main(["report", "--workload", "8", "--env-file", str(tmp_path / "missing.env")])
    assert code == 2
    assert "--file" in capsys.readouterr().err


def test_unknown_time_zone_exit_code(history: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    args = _args(history, tmp_path)
    args[args.index("UTC")] = "Not/AZone"
    code = main(["report", *args])
    assert code == 2
    assert "Invalid time zone: 'Not/AZone'" in capsys.readouterr().err
