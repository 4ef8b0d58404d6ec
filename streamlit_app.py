from __future__ import annotations

from datetime import date, timedelta
from pathlib import Path

import streamlit as st

from maps_timesheet.config import zone_for
from maps_timesheet.errors import TimesheetError
from maps_timesheet.report import format_verdict
from maps_timesheet.resolver import work_location_candidates
from maps_timesheet.takeout import latest_mtime, load_takeout
from maps_timesheet.timesheet import TimesheetReport, run_engine
from maps_timesheet.timeutils import format_hhmmss


@st.cache_data(show_spinner=False)
def _load_report(
    root: str,
    start_d: date,
    end_d: date,
    tz_name: str | None,
    workload_hours: int,
    mtime: float,
) -> tuple[TimesheetReport, list[str]]:
    _ = mtime  # part of cache key so an edited month file reloads automatically
    data = load_takeout(root, start_d, end_d, zone_for(tz_name))
    candidates = [f"{loc.name} ({loc.place_id})" for loc in work_location_candidates(data.mentions())]
    report = run_engine(data.monthly_visits(), data.mentions(), timedelta(hours=workload_hours))
    return report, candidates


def main() -> None:
    st.set_page_config(page_title="Google Maps Timesheet", layout="wide")
    st.title("Google Maps Timesheet: hours at work vs. expected workload")

    with st.sidebar:
        st.subheader("Data and time zone")
        root = st.text_input("'Semantic Location History' folder", value="Semantic Location History")
        tz_input = st.text_input("Time zone (IANA, empty = system)", value="")
        tz_name = tz_input.strip() or None

        st.subheader("Workload")
        workload_hours = int(st.number_input("Hours per weekday", value=8, min_value=1, max_value=24, step=1))

        st.subheader("Date range")
        today = date.today()
        start_d = st.date_input("Start date", value=today.replace(day=1))
        end_d = st.date_input("End date", value=today)

    p = Path(root)
    if not p.is_dir():
        st.error(f"Folder not found: {root!r}")
        return

    if start_d > end_d:
        st.error("Start date must not be after end date.")
        return

    try:
        zone_for(tz_name)
        mtime = latest_mtime(root, start_d, end_d)
        report, candidates = _load_report(root, start_d, end_d, tz_name, workload_hours, mtime)
    except TimesheetError as exc:
        st.error(str(exc))
        return

    st.subheader("Summary")
    c1, c2, c3 = st.columns(3)
    c1.metric("Verdict", format_verdict(report.verdict))
    c2.metric("Balance (expected - actual)", format_hhmmss(report.result.total))
    c3.metric("Counted days", str(len(report.result.days)))

    st.caption(f"Work location: {report.work_location.name} ({report.work_location.place_id})")
    if len(candidates) > 1:
        with st.expander("Other places labeled as work", expanded=False):
            st.write(candidates[:-1])

    st.subheader("Per day")
    rows = [
        {
            "date": d.day.isoformat(),
            "weekday": d.day.strftime("%a"),
            "actual": format_hhmmss(d.actual),
            "balance": format_hhmmss(d.balance),
            "balance_seconds": int(d.balance.total_seconds()),
        }
        for d in report.result.days
    ]
    st.dataframe(rows, use_container_width=True, height=520)

    st.caption(
        "Weekends and weekdays without a visit to work are not counted. A day runs from the first "
        "arrival at work to the last departure, including breaks spent elsewhere."
    )


if __name__ == "__main__":
    main()
