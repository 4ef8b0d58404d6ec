from __future__ import annotations

import argparse
import json
import random
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from pathlib import Path
from typing import Any, Final

from zoneinfo import ZoneInfo


TZ: Final[str] = "Europe/Lisbon"
MONTH_NAMES: Final[tuple[str, ...]] = (
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
class Place:
    place_id: str
    name: str
    semantic_type: str | None = None


def _instant(d: date, t: time) -> str:
    local = datetime.combine(d, t).replace(tzinfo=ZoneInfo(TZ))
    return local.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _place_visit(place: Place, d: date, start: time, end: time) -> dict[str, Any]:
    location: dict[str, Any] = {"placeId": place.place_id, "name": place.name}
    if place.semantic_type is not None:
        location["semanticType"] = place.semantic_type
    return {
        "placeVisit": {
            "location": location,
            "duration": {"startTimestamp": _instant(d, start), "endTimestamp": _instant(d, end)},
        }
    }


def generate_month(*, year: int, month: int, seed: int, places: dict[str, Place]) -> dict[str, Any]:
    """Generate a fake month file with realistic-ish days."""

    rng = random.Random(seed * 100 + month)
    objects: list[dict[str, Any]] = []
    d = date(year, month, 1)
    while d.month == month:
        if d.weekday() < 5 and rng.random() > 0.05:
            arrive = time(rng.randint(7, 9), rng.choice([0, 15, 30, 45]))
            leave = time(rng.randint(16, 19), rng.choice([0, 15, 30, 45]))
            if rng.random() < 0.3:
                # lunch break elsewhere
                objects.append(_place_visit(places["work"], d, arrive, time(12, 0)))
                objects.append({"activitySegment": {"activityType": "WALKING"}})
                objects.append(_place_visit(places["lunch"], d, time(12, 10), time(12, 50)))
                objects.append(_place_visit(places["work"], d, time(13, 0), leave))
            else:
                objects.append(_place_visit(places["work"], d, arrive, leave))
        elif rng.random() < 0.3:
            objects.append(_place_visit(places["park"], d, time(10, 0), time(12, 30)))
        objects.append(_place_visit(places["home"], d, time(20, 0), time(23, 30)))
        d += timedelta(days=1)
    return {"timelineObjects": objects}


def main() -> int:
    p = argparse.ArgumentParser(description="Generate a fake Semantic Location History folder (privacy-safe).")
    p.add_argument("--out", type=str, default="sample_data/Semantic Location History", help="Output folder")
    p.add_argument("--year", type=int, default=2023, help="Year to generate")
    p.add_argument("--months", type=int, nargs="+", default=[1, 2, 3], help="Months to generate (1-12)")
    p.add_argument("--seed", type=int, default=42, help="Random seed (reproducible)")
    args = p.parse_args()

    places = {
        "work": Place("ChIJ-sample-office", "Sample Office", "TYPE_WORK"),
        "home": Place("ChIJ-sample-home", "Home", "TYPE_HOME"),
        "lunch": Place("ChIJ-sample-cafe", "Corner Cafe"),
        "park": Place("ChIJ-sample-park", "City Park"),
    }

    year_dir = Path(args.out) / str(args.year)
    year_dir.mkdir(parents=True, exist_ok=True)
    for month in args.months:
        data = generate_month(year=args.year, month=month, seed=args.seed, places=places)
        out_path = year_dir / f"{args.year}_{MONTH_NAMES[month - 1]}.json"
        out_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        print(f"Generated: {out_path} (objects={len(data['timelineObjects'])})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
