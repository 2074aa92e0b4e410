"""Header matching tolerates case and accent variants of the carrier labels."""
import pytest

from tracker.core.errors import MissingColumnsError
from tracker.ingestion.columns import NOT_FOUND, find_column_index, resolve_columns


def test_find_column_index_matches_case_and_accent_variants():
    headers = ["ID", "REFERENCIA DO PEDIDO", "Última Ocorrência"]

    assert find_column_index(headers, ["referência", "referencia"]) == 1
    assert find_column_index(headers, ["última ocorrência", "ultima ocorrencia"]) == 2


def test_find_column_index_returns_first_match():
    headers = ["Serviço", "Serviço Adicional"]

    assert find_column_index(headers, ["serviço"]) == 0


def test_find_column_index_handles_non_text_headers():
    headers = [None, 2024, "Vlr Mercadoria (R$)"]

    assert find_column_index(headers, ["vlr mercadoria"]) == 2
    assert find_column_index(headers, ["referência"]) == NOT_FOUND


def test_resolve_columns_maps_every_field():
    headers = ["Vlr Mercadoria", "Serviço", "Dt. Últ. Ocorrência", "Última Ocorrência", "Referência"]

    columns = resolve_columns(headers)

    assert columns.reference == 4
    assert columns.last_event == 3
    assert columns.last_event_date == 2
    assert columns.service_type == 1
    assert columns.invoice_value == 0


def test_resolve_columns_treats_value_column_as_optional():
    headers = ["Referência", "Última Ocorrência", "Dt. Últ. Ocorrência", "Servico"]

    assert resolve_columns(headers).invoice_value is None


def test_resolve_columns_names_missing_required_columns():
    headers = ["Referência", "Dt. Últ. Ocorrência", "Vlr Mercadoria"]

    with pytest.raises(MissingColumnsError) as excinfo:
        resolve_columns(headers)

    assert excinfo.value.missing == ["last_event", "service_type"]
    assert "Required columns not found" in str(excinfo.value)
