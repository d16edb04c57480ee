"""Modelos tipados para lecturas de glucosa por fecha y momento del día."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

STATUSES: tuple[str, ...] = (
    "Antes del desayuno",
    "Después del desayuno",
    "Antes del almuerzo",
    "Después del almuerzo",
    "Antes de la cena",
    "Después de la cena",
    "Antes de dormir",
)

NO_DATA = "-"


def format_glucose(value: float) -> str:
    """Formatea un valor de glucosa con un decimal."""
    return f"{value:.1f}"


@dataclass(frozen=True)
class Reading:
    """One glucose measurement (calendar day + meal-relative status)."""

    day: date
    status: str
    glucose: float

    @property
    def display_value(self) -> str:
        return format_glucose(self.glucose)
