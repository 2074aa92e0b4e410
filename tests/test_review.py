"""Session state transitions driven by reviewer actions."""
from pathlib import Path

import pytest

from conftest import IMPORT_HEADERS
import tracker.review.workflow as workflow
from tracker.core.errors import ExportError
from tracker.core.models import SortState
from tracker.review.workflow import (
    TrackerState,
    change_status,
    export_bytes,
    export_rows,
    export_to_path,
    import_into,
    records_to_rows,
    set_days_to_show,
    sort_by,
)


@pytest.fixture
def loaded_state(write_workbook, carrier_rows, settings) -> TrackerState:
    return import_into(TrackerState(), write_workbook(carrier_rows), source_name="carrier.xlsx", settings=settings)


def test_import_into_replaces_records(loaded_state: TrackerState):
    assert loaded_state.error is None
    assert loaded_state.source_name == "carrier.xlsx"
    assert [record.reference for record in loaded_state.records] == ["REF1", "REF2"]
    assert loaded_state.can_export


def test_failed_import_keeps_previous_records(loaded_state, write_workbook, settings):
    bad_path = write_workbook([IMPORT_HEADERS, ["REF9", "Coletado", 45000, "Outro Serviço", "1,00"]], "other.xlsx")

    state = import_into(loaded_state, bad_path, source_name="other.xlsx", settings=settings)

    assert state.records == loaded_state.records
    assert state.source_name == "carrier.xlsx"
    assert state.error == "No rows found matching the specified criteria."


def test_successful_import_clears_error_and_sort(loaded_state, write_workbook, carrier_rows, settings):
    failed = import_into(sort_by(loaded_state, "reference"), b"", settings=settings)
    assert failed.error

    reloaded = import_into(failed, write_workbook(carrier_rows, "again.xlsx"), source_name="again.xlsx", settings=settings)

    assert reloaded.error is None
    assert reloaded.sort is None


def test_unexpected_failures_surface_generic_message(monkeypatch, loaded_state):
    def explode(*_args, **_kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(workflow, "import_workbook", explode)

    state = import_into(loaded_state, b"irrelevant")

    assert state.error == "Error processing the file. Check that the format is correct."
    assert state.records == loaded_state.records


def test_change_status_only_touches_matching_reference(loaded_state):
    updated = change_status(loaded_state, "REF2", "Lost")

    assert [record.status for record in updated.records] == ["Pending", "Lost"]
    assert [record.status for record in loaded_state.records] == ["Pending", "Pending"]
    assert updated.records[1].invoice_value == loaded_state.records[1].invoice_value


def test_change_status_rejects_unknown_values(loaded_state):
    with pytest.raises(ValueError, match="Unknown status"):
        change_status(loaded_state, "REF1", "Pendentes")


def test_sort_by_twice_reverses_order(loaded_state):
    ascending = sort_by(loaded_state, "last_event_date")
    descending = sort_by(ascending, "last_event_date")

    assert ascending.sort == SortState("last_event_date", "asc")
    assert descending.sort == SortState("last_event_date", "desc")
    assert descending.records == tuple(reversed(ascending.records))


def test_days_to_show_applies_to_next_import(write_workbook, carrier_rows, settings):
    state = set_days_to_show(TrackerState(), 1)

    state = import_into(state, write_workbook(carrier_rows), settings=settings)

    assert state.days_to_show == 1
    assert state.error == "No rows found matching the specified criteria."


def test_export_reads_state_without_mutating(loaded_state, tmp_path: Path):
    edited = change_status(loaded_state, "REF1", "Resolved")

    export_to_path(edited, tmp_path / "out.xlsx")

    assert export_rows(edited)[0]["Status"] == "Resolved"
    assert export_bytes(edited)[:2] == b"PK"
    assert edited.records[0].status == "Resolved"


def test_export_failure_leaves_records_untouched(loaded_state, tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(ExportError):
        export_to_path(loaded_state, blocker / "out.xlsx")

    assert len(loaded_state.records) == 2


def test_records_to_rows_collapses_whitespace(loaded_state):
    rows = records_to_rows(loaded_state.records)

    assert rows[0]["reference"] == "REF1"
    assert set(rows[0]) == {"reference", "last_event", "last_event_date", "service_type", "invoice_value", "status"}
