"""Module entry point: python -m maps_timesheet ..."""

from __future__ import annotations

from maps_timesheet.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
