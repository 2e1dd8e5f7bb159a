from __future__ import annotations

from decimal import Decimal

import pytest

from lipidcare.domain.fallback import fallback_schedule
from lipidcare.domain.schedule import DailySummary, DaySchedule, ScheduleItem
from lipidcare.services.completion_tracker import CompletionTracker
from lipidcare.services.progress import (
    DEFAULT_START_LEVEL,
    completion_percentage,
    day_completion_percentage,
    projected_level_series,
    projection_summary,
    round_half_up,
    start_level,
)


def _levels(current_level) -> list[int]:
    return [point.level for point in projected_level_series(current_level)]


def test_completion_percentage_for_five_item_day() -> None:
    schedule = fallback_schedule()
    tracker = CompletionTracker()

    assert day_completion_percentage(schedule, 0, tracker) == 0

    tracker.toggle(0, 0)
    tracker.toggle(0, 3)
    assert day_completion_percentage(schedule, 0, tracker) == 40

    for item_index in (1, 2, 4):
        tracker.toggle(0, item_index)
    assert day_completion_percentage(schedule, 0, tracker) == 100


def test_completion_percentage_ignores_other_days_and_stale_positions() -> None:
    schedule = fallback_schedule()
    tracker = CompletionTracker()
    tracker.toggle(1, 0)
    tracker.toggle(0, 9)

    assert day_completion_percentage(schedule, 0, tracker) == 0
    assert day_completion_percentage(schedule, 1, tracker) == 20


def test_completion_percentage_rounds_half_up() -> None:
    day = DaySchedule(
        day="Mon",
        hourly_schedule=[
            ScheduleItem(time=f"0{hour}:00", activity="walk", category="exercise") for hour in range(6, 9)
        ],
        daily_summary=DailySummary(fasting_window="12h", intensity="low"),
    )
    tracker = CompletionTracker()
    tracker.toggle(0, 0)
    tracker.toggle(0, 1)

    assert completion_percentage(day, 0, tracker) == 67


def test_completion_percentage_guards_empty_day() -> None:
    day = DaySchedule.model_construct(
        day="Mon",
        theme="",
        hourly_schedule=[],
        daily_summary=DailySummary(fasting_window="12h", intensity="low"),
    )

    assert completion_percentage(day, 0, CompletionTracker()) == 0


def test_projected_series_from_250() -> None:
    series = projected_level_series(250)

    assert [point.level for point in series] == [250, 243, 235, 228, 220, 213, 205]
    assert [point.day for point in series] == [f"Day {index}" for index in range(1, 8)]


def test_projected_series_from_string_level() -> None:
    assert _levels("300")[-1] == 246


def test_projection_does_not_depend_on_completions() -> None:
    assert _levels(180.0) == _levels("180")


def test_projection_defaults_when_level_unusable() -> None:
    assert _levels(None) == _levels(DEFAULT_START_LEVEL)
    assert _levels("abc") == _levels(DEFAULT_START_LEVEL)
    assert _levels(0) == _levels(DEFAULT_START_LEVEL)


@pytest.mark.parametrize("raw, expected", [("300.9", 300), (199.99, 199), ("  275 ", 275), ("", DEFAULT_START_LEVEL)])
def test_start_level_truncates(raw, expected) -> None:
    assert start_level(raw) == expected


def test_projection_summary_target_is_day_seven() -> None:
    summary = projection_summary(300)

    assert summary.target_level == 246
    assert summary.adherence_threshold == 85
    assert len(summary.series) == 7


def test_round_half_up() -> None:
    assert round_half_up(Decimal("242.5")) == 243
    assert round_half_up(212.5) == 213
    assert round_half_up(227.49) == 227
