"""Pytest configuration to make the local package importable without installation."""
import sys
from pathlib import Path
from typing import Any, Callable, List, Sequence
from zoneinfo import ZoneInfo

import pytest
from openpyxl import Workbook

# Ensure repository root is on sys.path for module resolution
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tracker.cli import main as cli_main
from tracker.core.config import Settings

TEST_TIMEZONE = "America/Sao_Paulo"
IMPORT_HEADERS = ["Referência", "Última Ocorrência", "Dt. Últ. Ocorrência", "Serviço", "Vlr Mercadoria"]


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Pin the time zone and keep local env files or overrides out of tests."""

    monkeypatch.setenv("TRACKER_TIMEZONE", TEST_TIMEZONE)
    monkeypatch.setenv("TRACKER_ENV_FILE", str(tmp_path / "missing.env"))
    # setenv first so values loaded from env files inside a test are undone afterwards
    for key in ("TRACKER_SERVICE_TYPE", "TRACKER_ALLOWED_EVENTS", "TRACKER_EXPORT_FILENAME"):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


@pytest.fixture
def tz() -> ZoneInfo:
    return ZoneInfo(TEST_TIMEZONE)


@pytest.fixture
def settings() -> Settings:
    return Settings(timezone=TEST_TIMEZONE)


@pytest.fixture
def carrier_rows() -> List[List[Any]]:
    """A carrier export exercising every filter rule plus a duplicate reference."""

    return [
        IMPORT_HEADERS,
        ["REF1", "Coletado", 45000, "MR Coleta", "123,45"],
        ["REF2", "Recebido na Base", "16/03/2023 10:30", "MR Coleta", "1.234,56"],
        ["REF3", "Entregue", 45001, "MR Coleta", "10,00"],
        ["REF4", "Coletado", "sem data", "MR Coleta", "5,00"],
        ["REF5", "Coletado", 45002, "Outro Serviço", "5,00"],
        [None, None, None, None, None],
        ["REF1", "Romaneio em Transferencia", 45003, "MR Coleta", "200"],
        ["", "Coletado", 45000, "MR Coleta", "1,00"],
    ]


@pytest.fixture
def write_workbook(tmp_path: Path) -> Callable[..., Path]:
    """Write rows to a single-sheet workbook and return its path."""

    def _write(rows: Sequence[Sequence[Any]], name: str = "carrier.xlsx") -> Path:
        workbook = Workbook()
        sheet = workbook.active
        for row in rows:
            sheet.append(list(row))
        path = tmp_path / name
        workbook.save(path)
        return path

    return _write


@pytest.fixture
def run_cli(monkeypatch: pytest.MonkeyPatch):
    """Helper to invoke the CLI with custom arguments inside tests."""

    def _run(args: list[str]) -> int:
        monkeypatch.setattr(sys, "argv", ["tracker.cli", *args])
        return cli_main()

    return _run
