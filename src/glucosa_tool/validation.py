"""Validación de lecturas antes de agregarlas al almacén."""

from __future__ import annotations

import math
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from glucosa_tool.model import STATUSES, Reading
from glucosa_tool.window import parse_day

_ONE_DECIMAL = Decimal("0.1")


class ValidationError(ValueError):
    """Base para errores de validación con mensaje para el usuario."""

    default_message = "Lectura inválida."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidNumberError(ValidationError):
    """El texto de glucosa no es un número."""

    default_message = "El valor de glucosa no es un número válido."


class NegativeValueError(ValidationError):
    """La glucosa es menor que cero."""

    default_message = "La glucosa no puede ser un valor negativo."


class UnknownStatusError(ValidationError):
    """El momento del día no está en la lista fija."""

    default_message = "Momento del día desconocido."


class InvalidDateError(ValidationError):
    """La fecha de la lectura no se puede interpretar."""

    default_message = "La fecha no es válida."


def _parse_decimal(text: str) -> Decimal:
    try:
        value = Decimal(text.strip().replace(",", "."))
    except InvalidOperation as exc:
        raise InvalidNumberError() from exc
    if not value.is_finite() or not math.isfinite(float(value)):
        raise InvalidNumberError()
    return value


def _round_one_decimal(value: Decimal) -> Decimal:
    # La precisión debe cubrir todos los dígitos enteros más un decimal.
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        rounded = value.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        return rounded.copy_abs()
    return rounded


def validate(
    day: date | str | None,
    glucose_text: str | None,
    status: str = STATUSES[0],
) -> Reading | None:
    """Validate a candidate reading.

    Blank day or blank glucose text is not an error: nothing is created and
    None is returned.

    Args:
        day: Calendar day, as date or ISO text.
        glucose_text: Free-text glucose value.
        status: One of ``STATUSES``.

    Returns:
        The reading with glucose rounded half-up to one decimal, or None.

    Raises:
        InvalidDateError: If the day text is not a valid date.
        InvalidNumberError: If the glucose text is not a finite number.
        NegativeValueError: If the glucose value is below zero.
        UnknownStatusError: If the status is not a known label.
    """
    if day is None or (isinstance(day, str) and not day.strip()):
        return None
    if glucose_text is None or not glucose_text.strip():
        return None

    parsed_day = parse_day(day)
    if parsed_day is None:
        raise InvalidDateError()

    value = _parse_decimal(glucose_text)
    if value < 0:
        raise NegativeValueError()
    if status not in STATUSES:
        raise UnknownStatusError(f"Momento del día desconocido: {status!r}")

    return Reading(
        day=parsed_day,
        status=status,
        glucose=float(_round_one_decimal(value)),
    )


def normalize_glucose_text(text: str | None) -> str:
    """Normaliza la entrada libre a un decimal; texto no numérico -> ""."""
    if text is None or not text.strip():
        return ""
    try:
        value = _parse_decimal(text)
    except InvalidNumberError:
        return ""
    return str(_round_one_decimal(value))


def adjust_glucose_text(text: str | None, amount: float) -> str:
    """Suma ``amount`` al valor actual, con piso en 0.

    Texto vacío o inválido cuenta como 0.
    """
    try:
        current = _parse_decimal(text) if text and text.strip() else Decimal(0)
    except InvalidNumberError:
        current = Decimal(0)
    adjusted = max(Decimal(0), current + Decimal(str(amount)))
    return str(_round_one_decimal(adjusted))
