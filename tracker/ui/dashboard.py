"""Streamlit console to import, review, and export carrier tracking rows."""
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

import streamlit as st

# Allow running via "streamlit run tracker/ui/dashboard.py" without installing the package
# by ensuring the repository root is on ``sys.path``.
if __package__ in {None, ""}:
    import sys

    sys.path.append(str(Path(__file__).resolve().parents[2]))

from tracker.core.config import Settings, load_settings
from tracker.core.errors import ExportError
from tracker.core.logging import configure_logging
from tracker.core.models import STATUSES, TrackingRecord
from tracker.processing.sorting import SORTABLE_FIELDS
from tracker.review.workflow import (
    TrackerState,
    change_status,
    export_bytes,
    import_into,
    records_to_rows,
    set_days_to_show,
    sort_by,
    with_error,
)

DAY_OPTIONS: Dict[str, Optional[int]] = {
    "All days": None,
    "Last day": 1,
    "Last 7 days": 7,
    "Last 15 days": 15,
    "Last 30 days": 30,
}
COLUMN_LABELS = {
    "reference": "Reference",
    "last_event": "Last Event",
    "last_event_date": "Last Event Date",
    "invoice_value": "Invoice Value",
    "status": "Status",
}
XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _session_state() -> TrackerState:
    """Return the tracker state for this browser session, creating it on first use."""

    if "tracker_state" not in st.session_state:
        st.session_state.tracker_state = TrackerState()
        st.session_state.editor_version = 0
    return st.session_state.tracker_state


def _store(state: TrackerState, reset_editor: bool = False) -> None:
    st.session_state.tracker_state = state
    if reset_editor:
        st.session_state.editor_version = st.session_state.get("editor_version", 0) + 1


def _rerun_app() -> None:
    """Trigger a Streamlit rerun, compatible with newer and older APIs."""

    rerun = getattr(st, "rerun", None) or getattr(st, "experimental_rerun", None)
    if not rerun:
        raise RuntimeError("Streamlit does not expose a rerun helper.")
    rerun()


def _import_key(uploaded, days: Optional[int]) -> Tuple[str, Optional[int]]:
    """Identify one upload within one day window; re-uploads get a fresh ``file_id``."""

    return (getattr(uploaded, "file_id", None) or uploaded.name, days)


def _maybe_import(state: TrackerState, uploaded, days: Optional[int], settings: Settings) -> TrackerState:
    """Import the uploaded workbook once per file and day window."""

    if uploaded is None:
        return state

    import_key = _import_key(uploaded, days)
    if st.session_state.get("last_import_key") == import_key:
        return state
    st.session_state.last_import_key = import_key

    with st.spinner(f"Processing {uploaded.name}..."):
        updated = import_into(state, uploaded.getvalue(), source_name=uploaded.name, settings=settings)
    _store(updated, reset_editor=True)
    return updated


def _status_counts(records: Iterable[TrackingRecord]) -> Dict[str, int]:
    counts = {status: 0 for status in STATUSES}
    for record in records:
        counts[record.status] = counts.get(record.status, 0) + 1
    return counts


def _queue_dashboard(records: List[TrackingRecord]) -> None:
    """Summarize how many shipments sit in each review status."""

    counts = _status_counts(records)
    st.metric("Total records", len(records))
    for status in STATUSES:
        st.metric(status, counts[status])

    total = len(records)
    handled = total - counts["Pending"]
    st.progress(handled / total if total else 0)
    st.caption(f"{handled} of {total} reviewed")


def _sort_controls(state: TrackerState) -> None:
    """Render one sort button per column with the active direction marked."""

    st.caption("Sort by column (click again to reverse)")
    columns = st.columns(len(SORTABLE_FIELDS))
    for column, field in zip(columns, SORTABLE_FIELDS):
        label = COLUMN_LABELS[field]
        if state.sort and state.sort.field == field:
            label = f"{label} {'▼' if state.sort.descending else '▲'}"
        if column.button(label, key=f"sort_{field}", use_container_width=True):
            _store(sort_by(state, field), reset_editor=True)
            _rerun_app()


def _status_editor(state: TrackerState) -> None:
    """Show the record table with an editable status column."""

    rows = records_to_rows(state.records)
    table = [{COLUMN_LABELS[field]: row[field] for field in SORTABLE_FIELDS} for row in rows]

    edited_rows = st.data_editor(
        table,
        hide_index=True,
        num_rows="fixed",
        use_container_width=True,
        key=f"editor_{st.session_state.get('editor_version', 0)}",
        column_config={
            "Status": st.column_config.SelectboxColumn("Status", options=list(STATUSES), required=True),
        },
        disabled=[label for field, label in COLUMN_LABELS.items() if field != "status"],
    )

    updated = state
    for record, edited in zip(state.records, edited_rows):
        new_status = edited.get("Status")
        if new_status and new_status != record.status:
            updated = change_status(updated, record.reference, new_status)
    if updated is not state:
        _store(updated)
        _rerun_app()


def _export_button(state: TrackerState, settings: Settings) -> None:
    """Offer the current record set as a workbook download."""

    try:
        payload = export_bytes(state)
    except ExportError as exc:
        _store(with_error(state, str(exc)))
        st.error(str(exc))
        return

    st.download_button(
        "Export XLSX",
        data=payload,
        file_name=settings.export_filename,
        mime=XLSX_MIME,
        type="primary",
    )


def main() -> None:
    """Launch the tracking review console."""

    configure_logging()
    settings = load_settings()

    st.set_page_config(page_title="Carrier Tracker", layout="wide", initial_sidebar_state="expanded")
    st.title("Carrier Tracker")
    st.caption(
        f"Keeps '{settings.service_type}' shipments whose last event is one of: "
        + ", ".join(settings.allowed_events)
    )

    state = _session_state()

    controls = st.columns([2, 1])
    with controls[0]:
        uploaded = st.file_uploader("Import XLSX", type=["xlsx", "xlsm"])
    with controls[1]:
        day_label = st.selectbox("Days to show", options=list(DAY_OPTIONS), index=0)

    days = DAY_OPTIONS[day_label]
    if state.days_to_show != days:
        state = set_days_to_show(state, days)
        _store(state)

    state = _maybe_import(state, uploaded, days, settings)

    if state.error:
        st.error(state.error)
        if uploaded is not None and st.button("Retry import", type="secondary"):
            st.session_state.pop("last_import_key", None)
            _store(with_error(state, None))
            _rerun_app()

    if state.records:
        st.markdown(f"#### {len(state.records)} records from `{state.source_name}`")
        _sort_controls(state)
        _status_editor(state)
        _export_button(state, settings)
    elif not state.error:
        st.info("Upload a carrier export to start reviewing shipments.")

    with st.sidebar:
        st.subheader("Review progress")
        _queue_dashboard(list(state.records))


if __name__ == "__main__":
    main()
