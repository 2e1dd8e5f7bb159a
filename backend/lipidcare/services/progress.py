"""Derived progress values: daily completion and the projected level curve."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, List

from lipidcare.domain.schedule import DaySchedule, WeeklySchedule
from lipidcare.services.completion_tracker import CompletionTracker

PROJECTION_DAYS = 7
DAILY_DECAY_RATE = Decimal("0.03")
DEFAULT_START_LEVEL = 250
ADHERENCE_THRESHOLD_PERCENT = 85


@dataclass(frozen=True)
class ProjectedLevel:
    day: str
    level: int


@dataclass(frozen=True)
class ProjectionSummary:
    series: List[ProjectedLevel]
    target_level: int
    adherence_threshold: int = ADHERENCE_THRESHOLD_PERCENT


def round_half_up(value: Decimal | float | int) -> int:
    """Round to the nearest integer with halves going up (242.5 -> 243)."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def completion_percentage(day: DaySchedule, day_index: int, tracker: CompletionTracker) -> int:
    total = len(day.hourly_schedule)
    if total == 0:
        return 0
    completed = tracker.completed_count(day_index, total)
    return round_half_up(Decimal(100 * completed) / Decimal(total))


def day_completion_percentage(
    schedule: WeeklySchedule,
    day_index: int,
    tracker: CompletionTracker,
) -> int:
    return completion_percentage(schedule.day(day_index), day_index, tracker)


def start_level(raw: Any) -> int:
    """Integer part of the current level, or DEFAULT_START_LEVEL when unusable or zero."""
    if raw is None or isinstance(raw, bool):
        return DEFAULT_START_LEVEL
    try:
        value = Decimal(str(raw).strip())
    except InvalidOperation:
        return DEFAULT_START_LEVEL
    if not value.is_finite():
        return DEFAULT_START_LEVEL
    return int(value) or DEFAULT_START_LEVEL


def projected_level_series(current_level: Any) -> List[ProjectedLevel]:
    """Flat 3%-per-day decay from the current level over one week.

    Completion state and plan content do not influence the curve.
    """
    base = Decimal(start_level(current_level))
    return [
        ProjectedLevel(
            day=f"Day {index + 1}",
            level=round_half_up(base * (1 - index * DAILY_DECAY_RATE)),
        )
        for index in range(PROJECTION_DAYS)
    ]


def projection_summary(current_level: Any) -> ProjectionSummary:
    series = projected_level_series(current_level)
    return ProjectionSummary(series=series, target_level=series[-1].level)
