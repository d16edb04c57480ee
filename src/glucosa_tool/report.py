"""Armado de la grilla día x momento del día para pantalla y PDF."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

import pandas as pd

from glucosa_tool.model import NO_DATA, STATUSES
from glucosa_tool.store import ReadingStore
from glucosa_tool.window import ReportWindow

DATE_HEADER = "Fecha"


@dataclass(frozen=True)
class ReportGrid:
    """Dense, read-only day x status table."""

    days: tuple[date, ...]
    statuses: tuple[str, ...]
    cells: tuple[tuple[str, ...], ...]

    @property
    def is_empty(self) -> bool:
        return not self.days

    def header(self) -> list[str]:
        """Cabecera de la tabla: fecha y luego los momentos del día."""
        return [DATE_HEADER, *self.statuses]

    def rows(self) -> list[list[str]]:
        """Una fila por día, con la fecha ISO primero."""
        return [
            [day.isoformat(), *cells] for day, cells in zip(self.days, self.cells)
        ]

    def to_frame(self) -> pd.DataFrame:
        """Grid as a DataFrame, columns = ``header()``."""
        return pd.DataFrame(self.rows(), columns=self.header())


def build_grid(
    store: ReadingStore,
    window: ReportWindow | Sequence[date],
    statuses: Sequence[str] = STATUSES,
) -> ReportGrid:
    """Join the store against the window and the status list.

    Each cell holds the formatted glucose of the first matching reading in
    store order, or ``NO_DATA``.

    Args:
        store: Session readings.
        window: Report window or plain sequence of days.
        statuses: Column order.

    Returns:
        Grid with ``len(window)`` rows and ``len(statuses)`` columns.
    """
    days = tuple(window.days if isinstance(window, ReportWindow) else window)
    cells: list[tuple[str, ...]] = []
    for day in days:
        row: list[str] = []
        for status in statuses:
            reading = store.find(day, status)
            row.append(reading.display_value if reading is not None else NO_DATA)
        cells.append(tuple(row))
    return ReportGrid(days=days, statuses=tuple(statuses), cells=tuple(cells))


def render_text(grid: ReportGrid, window: ReportWindow | None = None) -> str:
    """Texto alineado de la grilla para la vista previa."""
    if window is not None and not window.is_valid:
        return "Fecha de consulta inválida: no hay días para mostrar."
    if grid.is_empty:
        return "Sin días para mostrar."
    return grid.to_frame().to_string(index=False)
