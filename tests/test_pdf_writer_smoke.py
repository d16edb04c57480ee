from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

import pytest

from glucosa_tool import pdf_writer
from glucosa_tool.model import STATUSES, Reading
from glucosa_tool.pdf_writer import (
    PdfLayout,
    export_filename,
    export_report,
    write_report_pdf,
)
from glucosa_tool.report import ReportGrid, build_grid
from glucosa_tool.store import ReadingStore
from glucosa_tool.window import report_window


def _grid() -> ReportGrid:
    store = ReadingStore()
    store.append(Reading(day=date(2024, 1, 1), status=STATUSES[0], glucose=95.0))
    return build_grid(store, report_window("2024-01-01"))


def test_export_filename() -> None:
    assert export_filename(date(2024, 1, 1)) == "registro-glucosa-2024-01-01.pdf"
    assert export_filename(date(2024, 1, 1), "glucosa") == "glucosa-2024-01-01.pdf"


def test_write_report_pdf_creates_parent(tmp_path: Path) -> None:
    out = tmp_path / "nested" / "out.pdf"
    write_report_pdf(_grid(), out, PdfLayout())
    data = out.read_bytes()
    assert data.startswith(b"%PDF")
    assert len(data) > 500


def test_write_report_pdf_empty_grid(tmp_path: Path) -> None:
    grid = build_grid(ReadingStore(), report_window("bad"))
    out = tmp_path / "empty.pdf"
    write_report_pdf(grid, out, PdfLayout())
    assert out.read_bytes().startswith(b"%PDF")


def test_export_report_success(tmp_path: Path) -> None:
    result = export_report(_grid(), tmp_path, date(2024, 1, 1))
    assert result.ok
    assert result.error is None
    assert result.path == tmp_path / "registro-glucosa-2024-01-01.pdf"


def test_export_report_failure_is_logged_and_returned(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    def _boom(*_args: object) -> None:
        raise RuntimeError("renderer roto")

    monkeypatch.setattr(pdf_writer, "write_report_pdf", _boom)

    with caplog.at_level(logging.ERROR, logger="glucosa_tool.pdf_writer"):
        result = export_report(_grid(), tmp_path, "2024-01-01")

    assert not result.ok
    assert result.path is None
    assert result.error == "RuntimeError: renderer roto"
    assert "Error al generar PDF" in caplog.text
    assert not list(tmp_path.iterdir())


@pytest.mark.parametrize("reference", ["2024/01/05", "../x", "", None])
def test_export_report_rejects_invalid_reference(
    tmp_path: Path, reference: str | None
) -> None:
    out_dir = tmp_path / "out"
    result = export_report(_grid(), out_dir, reference)
    assert not result.ok
    assert result.path is None
    assert result.error
    assert not out_dir.exists()
    assert list(tmp_path.iterdir()) == []
