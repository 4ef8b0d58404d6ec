"""Exceptions raised by maps_timesheet."""

from __future__ import annotations


class TimesheetError(Exception):
    """Base class for all errors reported to the user."""


class NoWorkLocationFound(TimesheetError, LookupError):
    """No place in the loaded history was ever labeled as work."""

    def __init__(self, message: str = "No place labeled as 'Work' found in the location history.") -> None:
        super().__init__(message)


class TakeoutFormatError(TimesheetError, ValueError):
    """The Takeout folder or one of its month files has an unexpected shape."""


class ConfigError(TimesheetError, ValueError):
    """Missing or invalid configuration value."""
