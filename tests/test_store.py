from __future__ import annotations

from datetime import date

from glucosa_tool.model import STATUSES, Reading
from glucosa_tool.store import ReadingStore


def test_store_append_find_and_reset() -> None:
    store = ReadingStore()
    assert len(store) == 0

    first = Reading(day=date(2024, 1, 2), status=STATUSES[3], glucose=120.0)
    second = Reading(day=date(2024, 1, 2), status=STATUSES[3], glucose=140.0)
    store.append(first)
    store.append(second)

    assert len(store) == 2
    assert store.readings == (first, second)
    assert list(store) == [first, second]
    assert store.find(date(2024, 1, 2), STATUSES[3]) is first
    assert store.find(date(2024, 1, 2), STATUSES[0]) is None

    store.reset()
    assert len(store) == 0
    assert store.find(date(2024, 1, 2), STATUSES[3]) is None

