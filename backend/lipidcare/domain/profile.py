"""User profile models."""
from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WorkSchedule(str, Enum):
    STANDARD = "standard"
    SHIFT = "shift"
    FLEXIBLE = "flexible"


class ExerciseLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class DietaryPreference(str, Enum):
    GENERAL = "general"
    KOREAN = "korean"
    VEGETARIAN = "vegetarian"
    PESCATARIAN = "pescatarian"


class ProfileSubmission(BaseModel):
    """Raw profile form input. Nothing here is validated beyond the enum choices."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    current_level: Optional[Union[float, str]] = None
    wake_time: str = "06:00"
    sleep_time: str = "22:00"
    work_schedule: WorkSchedule = WorkSchedule.STANDARD
    exercise_level: ExerciseLevel = ExerciseLevel.BEGINNER
    dietary_preference: DietaryPreference = DietaryPreference.GENERAL


class UserProfile(BaseModel):
    """An accepted profile; the immutable input to one generation cycle."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    current_level: float = Field(gt=0)
    wake_time: str = "06:00"
    sleep_time: str = "22:00"
    work_schedule: WorkSchedule = WorkSchedule.STANDARD
    exercise_level: ExerciseLevel = ExerciseLevel.BEGINNER
    dietary_preference: DietaryPreference = DietaryPreference.GENERAL

    @property
    def level_label(self) -> str:
        if self.current_level.is_integer():
            return str(int(self.current_level))
        return f"{self.current_level:g}"
