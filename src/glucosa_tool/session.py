"""Estado de la sesión: formulario, almacén y fecha de consulta."""

from __future__ import annotations

from datetime import date
from pathlib import Path

from glucosa_tool.config import AppConfig
from glucosa_tool.logging_config import get_logger
from glucosa_tool.model import STATUSES, Reading
from glucosa_tool.pdf_writer import ExportResult, export_report
from glucosa_tool.report import ReportGrid, build_grid, render_text
from glucosa_tool.store import ReadingStore
from glucosa_tool.validation import (
    UnknownStatusError,
    ValidationError,
    adjust_glucose_text,
    normalize_glucose_text,
    validate,
)
from glucosa_tool.window import ReportWindow, report_window, today

logger = get_logger(__name__)

GLUCOSE_STEP = 0.1


class TrackerSession:
    """Owns the readings of one session plus the entry form state."""

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        store: ReadingStore | None = None,
        start_day: date | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self.store = store if store is not None else ReadingStore()
        self._start_day = start_day
        self.entry_day: str = ""
        self.status: str = STATUSES[0]
        self.glucose_text: str = ""
        self.error: str = ""
        self.report_reference: str = ""
        self._reset_form()

    def _reset_form(self) -> None:
        start = self._start_day or today(self.config.timezone)
        self.entry_day = start.isoformat()
        self.status = STATUSES[0]
        self.glucose_text = ""
        self.error = ""
        self.report_reference = start.isoformat()

    def reset(self) -> None:
        """Vacía el almacén y vuelve el formulario a sus valores iniciales."""
        self.store.reset()
        self._reset_form()

    def select_status(self, status: str) -> None:
        if status not in STATUSES:
            raise UnknownStatusError(f"Momento del día desconocido: {status!r}")
        self.status = status

    def set_glucose_text(self, text: str) -> None:
        self.glucose_text = normalize_glucose_text(text)

    def adjust_glucose(self, amount: float) -> None:
        self.glucose_text = adjust_glucose_text(self.glucose_text, amount)

    def submit(self) -> Reading | None:
        """Validate the form and append the reading.

        On a validation error the message is kept in ``error`` and the form
        keeps its input. Blank day or glucose is a silent no-op.

        Returns:
            The stored reading, or None if nothing was stored.
        """
        try:
            reading = validate(self.entry_day, self.glucose_text, self.status)
        except ValidationError as exc:
            logger.info("Lectura rechazada: %s", exc.message)
            self.error = exc.message
            return None
        if reading is None:
            return None
        self.error = ""
        self.store.append(reading)
        self.glucose_text = ""
        logger.debug("Lectura agregada: %s", reading)
        return reading

    def window(self) -> ReportWindow:
        return report_window(self.report_reference, self.config.window_days)

    def grid(self) -> ReportGrid:
        """Grilla recalculada desde el almacén en cada llamada."""
        return build_grid(self.store, self.window())

    def preview_text(self) -> str:
        window = self.window()
        return render_text(build_grid(self.store, window), window)

    def export_pdf(self, out_dir: Path | None = None) -> ExportResult:
        """Exporta la grilla actual a PDF (ver ``export_report``)."""
        window = self.window()
        return export_report(
            build_grid(self.store, window),
            out_dir or self.config.export_dir,
            window.reference or self.report_reference,
            prefix=self.config.file_prefix,
        )
