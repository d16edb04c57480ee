"""Generación del PDF con la tabla semanal de glucosa."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from glucosa_tool.config import DEFAULT_FILE_PREFIX
from glucosa_tool.logging_config import get_logger
from glucosa_tool.report import ReportGrid
from glucosa_tool.window import parse_day

logger = get_logger(__name__)


@dataclass(frozen=True)
class PdfLayout:
    """Page and table formatting for the exported report."""

    pagesize: tuple[float, float] = field(default_factory=lambda: landscape(A4))
    title_template: str = "Glucosa: {days} días hasta {reference}"
    header_font_size: int = 9
    body_font_size: int = 9
    margin: float = 30.0


@dataclass(frozen=True)
class ExportResult:
    """Outcome of a PDF export; ``error`` is set when ``ok`` is False."""

    ok: bool
    path: Path | None = None
    error: str | None = None


def export_filename(reference: date, prefix: str = DEFAULT_FILE_PREFIX) -> str:
    """Nombre del archivo: ``<prefijo>-<fecha ISO>.pdf``."""
    return f"{prefix}-{reference.isoformat()}.pdf"


def _table_style(layout: PdfLayout) -> TableStyle:
    return TableStyle(
        [
            ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#333333")),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, 0), layout.header_font_size),
            ("BOTTOMPADDING", (0, 0), (-1, 0), 6),
            ("FONTSIZE", (0, 1), (-1, -1), layout.body_font_size),
            ("ALIGN", (1, 1), (-1, -1), "CENTER"),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
        ]
    )


def write_report_pdf(grid: ReportGrid, out_path: Path, layout: PdfLayout) -> None:
    """Write the grid as a single-table PDF.

    Args:
        grid: Report grid (header + one row per day).
        out_path: Output path for the PDF file.
        layout: PDF layout parameters.
    """
    out_path.parent.mkdir(parents=True, exist_ok=True)

    doc = SimpleDocTemplate(
        str(out_path),
        pagesize=layout.pagesize,
        leftMargin=layout.margin,
        rightMargin=layout.margin,
        topMargin=layout.margin,
        bottomMargin=layout.margin,
    )
    styles = getSampleStyleSheet()
    reference = grid.days[-1].isoformat() if grid.days else "-"
    title = layout.title_template.format(days=len(grid.days), reference=reference)

    table = Table([grid.header(), *grid.rows()], repeatRows=1, hAlign="LEFT")
    table.setStyle(_table_style(layout))

    doc.build([Paragraph(title, styles["Title"]), Spacer(1, 12), table])


def export_report(
    grid: ReportGrid,
    out_dir: Path,
    reference: date | str | None,
    *,
    prefix: str = DEFAULT_FILE_PREFIX,
    layout: PdfLayout | None = None,
) -> ExportResult:
    """Export the grid to ``out_dir`` and report the outcome.

    A reference that is not a valid date, and renderer or filesystem
    errors, are logged and returned as a failed result; they are not raised.
    """
    ref = parse_day(reference)
    if ref is None:
        logger.warning("PDF no generado: fecha de consulta inválida %r", reference)
        return ExportResult(
            ok=False, error=f"Fecha de consulta inválida: {reference!r}"
        )
    out_path = out_dir / export_filename(ref, prefix)
    try:
        write_report_pdf(grid, out_path, layout or PdfLayout())
    except Exception as exc:
        logger.exception("Error al generar PDF %s", out_path)
        return ExportResult(ok=False, error=f"{type(exc).__name__}: {exc}")
    logger.info("PDF generado: %s", out_path)
    return ExportResult(ok=True, path=out_path)
