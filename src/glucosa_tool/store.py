"""Almacén en memoria de las lecturas de la sesión."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date

from glucosa_tool.model import Reading


class ReadingStore:
    """Append-only, in-memory list of readings for one session."""

    def __init__(self) -> None:
        self._readings: list[Reading] = []

    def __len__(self) -> int:
        return len(self._readings)

    def __iter__(self) -> Iterator[Reading]:
        return iter(self._readings)

    @property
    def readings(self) -> tuple[Reading, ...]:
        """Snapshot inmutable en orden de inserción."""
        return tuple(self._readings)

    def append(self, reading: Reading) -> None:
        """Agrega una lectura ya validada al final."""
        self._readings.append(reading)

    def find(self, day: date, status: str) -> Reading | None:
        """Return the first reading in store order matching day and status.

        Duplicated (day, status) pairs are allowed; the earliest inserted one
        is the one shown in reports.

        Args:
            day: Calendar day.
            status: Meal-relative status label.

        Returns:
            The matching reading, or None.
        """
        for reading in self._readings:
            if reading.day == day and reading.status == status:
                return reading
        return None

    def reset(self) -> None:
        """Vacía el almacén."""
        self._readings.clear()
