"""Work location resolution from the semantic tags of place visits."""

from __future__ import annotations

import logging
from typing import Iterable

from maps_timesheet.errors import NoWorkLocationFound
from maps_timesheet.models import Location, PlaceMention

logger = logging.getLogger(__name__)


def work_location_candidates(mentions: Iterable[PlaceMention]) -> list[Location]:
    """Collect distinct work-labeled locations in first-seen order.

    Mentions without a place id or a name are skipped. Seeing an id again
    refreshes its name but keeps its position.

    Args:
        mentions: Place mentions in history order (month, then file order).

    Returns:
        Work locations, oldest first.
    """

    found: dict[str, Location] = {}
    skipped = 0
    for mention in mentions:
        location = mention.to_location()
        if location is None:
            skipped += 1
            continue
        if mention.is_work:
            found[location.place_id] = location
    if skipped:
        logger.debug("Skipped %s place mentions without id or name", skipped)
    return list(found.values())


def resolve_work_location(mentions: Iterable[PlaceMention]) -> Location:
    """Return the work location for this run.

    This is the most recently *added* distinct work-labeled place, which is
    not necessarily the most recently mentioned one nor the most frequent.

    Raises:
        NoWorkLocationFound: If no mention is labeled as work.
    """

    candidates = work_location_candidates(mentions)
    if not candidates:
        raise NoWorkLocationFound()
    work = candidates[-1]
    if len(candidates) > 1:
        logger.info("Found %s work locations, using %r", len(candidates), work)
    return work
