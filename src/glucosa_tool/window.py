"""Cálculo de la ventana de días del reporte."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

import pandas as pd
from dateutil import parser, tz

DEFAULT_WINDOW_DAYS = 7


@dataclass(frozen=True)
class ReportWindow:
    """Days covered by a report, oldest first.

    ``reference`` is None when the reference date was missing or could not be
    parsed; in that case ``days`` is empty.
    """

    reference: date | None
    days: tuple[date, ...]

    @property
    def is_valid(self) -> bool:
        return self.reference is not None

    def __len__(self) -> int:
        return len(self.days)


def parse_day(value: object) -> date | None:
    """Interpreta texto ISO o date como día calendario (sin zona horaria).

    Devuelve None si el valor está vacío o no es una fecha válida.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return parser.isoparse(text).date()
    except (ValueError, OverflowError):
        return None


def last_n_days(reference: object, n: int = DEFAULT_WINDOW_DAYS) -> list[date]:
    """Return ``n`` consecutive days ending at (and including) ``reference``.

    Args:
        reference: Reference day, as date or ISO text.
        n: Number of days in the window.

    Returns:
        Dates in increasing order; empty when the reference is missing or
        invalid, or when ``n`` is not positive.
    """
    ref = parse_day(reference)
    if ref is None or n <= 0:
        return []
    days = pd.date_range(end=ref, periods=n, freq="D")
    return list(days.date)


def report_window(reference: object, n: int = DEFAULT_WINDOW_DAYS) -> ReportWindow:
    """Construye la ventana del reporte; referencia inválida -> ventana vacía."""
    ref = parse_day(reference)
    if ref is None:
        return ReportWindow(reference=None, days=())
    return ReportWindow(reference=ref, days=tuple(last_n_days(ref, n)))


def today(tz_name: str | None = None) -> date:
    """Fecha de hoy en la zona horaria indicada (local si es None)."""
    zone = tz.gettz(tz_name) if tz_name else tz.tzlocal()
    return datetime.now(tz=zone).date()
