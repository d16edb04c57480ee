from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any

import pytest

from glucosa_tool import window
from glucosa_tool.window import last_n_days, parse_day, report_window


def test_last_n_days_ends_at_reference() -> None:
    days = last_n_days("2024-01-10", 7)
    assert days == [date(2024, 1, d) for d in range(4, 11)]


@pytest.mark.parametrize(
    "reference",
    [date(2024, 1, 3), date(2024, 3, 2), date(2023, 3, 1), date(2025, 1, 1)],
)
def test_last_n_days_crosses_month_and_year(reference: date) -> None:
    days = last_n_days(reference, 7)
    assert len(days) == 7
    assert days[-1] == reference
    assert all(b - a == timedelta(days=1) for a, b in zip(days, days[1:]))


def test_last_n_days_leap_year() -> None:
    days = last_n_days("2024-03-01", 2)
    assert days == [date(2024, 2, 29), date(2024, 3, 1)]


@pytest.mark.parametrize("reference", [None, "", "  ", "no-es-fecha", "2024-13-01"])
def test_last_n_days_invalid_reference_is_empty(reference: object) -> None:
    assert last_n_days(reference, 7) == []


def test_last_n_days_non_positive_n() -> None:
    assert last_n_days("2024-01-10", 0) == []


def test_parse_day_variants() -> None:
    assert parse_day(date(2024, 1, 1)) == date(2024, 1, 1)
    assert parse_day(datetime(2024, 1, 1, 23, 59)) == date(2024, 1, 1)
    assert parse_day("2024-01-01T08:30") == date(2024, 1, 1)
    assert parse_day("bad") is None


def test_report_window_invalid_reference() -> None:
    win = report_window("bad", 7)
    assert not win.is_valid
    assert win.reference is None
    assert win.days == ()
    assert len(win) == 0


def test_report_window_valid_reference() -> None:
    win = report_window("2024-01-01", 7)
    assert win.is_valid
    assert win.reference == date(2024, 1, 1)
    assert win.days[0] == date(2023, 12, 26)


def test_today_uses_timezone(monkeypatch: pytest.MonkeyPatch) -> None:
    class _FixedDatetime(datetime):
        @classmethod
        def now(cls, tz: Any | None = None) -> _FixedDatetime:
            return cls(2025, 12, 31, 23, 59, 1, tzinfo=tz)

    monkeypatch.setattr(window, "datetime", _FixedDatetime)
    assert window.today("America/Argentina/Buenos_Aires") == date(2025, 12, 31)
    assert window.today() == date(2025, 12, 31)
