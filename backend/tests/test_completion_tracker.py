from __future__ import annotations

import pytest

from lipidcare.services.completion_tracker import CompletionTracker


def test_unknown_key_defaults_to_incomplete() -> None:
    tracker = CompletionTracker()

    assert tracker.is_complete(0, 0) is False


def test_toggle_marks_then_unmarks() -> None:
    tracker = CompletionTracker()

    assert tracker.toggle(2, 3) is True
    assert tracker.is_complete(2, 3) is True
    assert tracker.toggle(2, 3) is False
    assert tracker.is_complete(2, 3) is False


@pytest.mark.parametrize("day_index, item_index", [(0, 0), (6, 4), (42, 99), (-1, -5)])
def test_double_toggle_restores_value(day_index, item_index) -> None:
    tracker = CompletionTracker()
    tracker.toggle(0, 0)
    before = tracker.is_complete(day_index, item_index)

    tracker.toggle(day_index, item_index)
    tracker.toggle(day_index, item_index)

    assert tracker.is_complete(day_index, item_index) == before


def test_keys_are_independent_per_day() -> None:
    tracker = CompletionTracker()
    tracker.toggle(0, 1)

    assert tracker.is_complete(1, 1) is False
    assert tracker.completed_count(0, 5) == 1
    assert tracker.completed_count(1, 5) == 0


def test_clear_and_snapshot() -> None:
    tracker = CompletionTracker()
    tracker.toggle(0, 1)
    tracker.toggle(3, 2)
    tracker.toggle(3, 2)

    assert tracker.snapshot() == {(0, 1): True}

    tracker.clear()
    assert tracker.snapshot() == {}
    assert tracker.is_complete(0, 1) is False
