"""Weekly routine data model.

The JSON form of every model uses camelCase keys because that is the shape the
AI service is asked to return (``weekSchedule``, ``hourlySchedule`` and so on).
Python code reads the snake_case attribute names.
"""
from __future__ import annotations

import re
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DAYS_PER_WEEK = 7
MIN_ITEMS_PER_DAY = 5
MAX_ITEMS_PER_DAY = 7

Category = Literal["meal", "exercise", "general"]
CATEGORIES: tuple[str, ...] = ("meal", "exercise", "general")

_TIME_OF_DAY = re.compile(r"^([01]?\d|2[0-3]):[0-5]\d$")


class ScheduleModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ScheduleItem(ScheduleModel):
    time: str
    activity: str
    category: Category
    details: str = ""
    benefit: str = ""


class DailySummary(ScheduleModel):
    fasting_window: str
    intensity: str


class DaySchedule(ScheduleModel):
    day: str
    theme: str = ""
    hourly_schedule: List[ScheduleItem] = Field(min_length=1)
    daily_summary: DailySummary


class WeeklyGuidelines(ScheduleModel):
    dietary_principles: List[str] = Field(default_factory=list)
    expected_progress: str = ""


class WeeklySchedule(ScheduleModel):
    week_schedule: List[DaySchedule] = Field(min_length=DAYS_PER_WEEK, max_length=DAYS_PER_WEEK)
    weekly_guidelines: WeeklyGuidelines

    def day(self, day_index: int) -> DaySchedule:
        """Return the day at ``day_index``; negative indexes are rejected."""
        if day_index < 0 or day_index >= len(self.week_schedule):
            raise IndexError(f"day index {day_index} outside 0..{len(self.week_schedule) - 1}")
        return self.week_schedule[day_index]

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


def is_valid_category(value: object) -> bool:
    return value in CATEGORIES


def is_time_of_day(label: str) -> bool:
    """True when ``label`` looks like ``HH:MM`` on a 24-hour clock."""
    return bool(_TIME_OF_DAY.match(label.strip()))


def is_ordered_by_time(day: DaySchedule) -> bool:
    """Check the day's items are in chronological order.

    Labels that are not ``HH:MM`` cannot be compared and make the check fail.
    """
    labels = [item.time for item in day.hourly_schedule]
    if not all(is_time_of_day(label) for label in labels):
        return False
    minutes = [_to_minutes(label) for label in labels]
    return minutes == sorted(minutes)


def has_recommended_item_count(day: DaySchedule) -> bool:
    return MIN_ITEMS_PER_DAY <= len(day.hourly_schedule) <= MAX_ITEMS_PER_DAY


def _to_minutes(label: str) -> int:
    hours, minutes = label.strip().split(":")
    return int(hours) * 60 + int(minutes)
