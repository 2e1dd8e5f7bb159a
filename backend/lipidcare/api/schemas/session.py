"""Schemas for routine sessions."""
from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from lipidcare.domain.schedule import ScheduleItem, WeeklySchedule


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SessionCreatedResponse(CamelModel):
    session_id: UUID
    state: str
    request_id: str


class SessionSummaryResponse(CamelModel):
    session_id: UUID
    state: str
    created_at: datetime
    selected_day_index: int
    generation: int
    has_schedule: bool
    schedule_source: Optional[Literal["ai", "fallback"]] = None
    request_id: str


class ProfileCheckResponse(CamelModel):
    submittable: bool


class GenerateResponse(CamelModel):
    session_id: UUID
    source: Literal["ai", "fallback"]
    failure_kind: Optional[str] = None
    generation: int
    schedule: WeeklySchedule
    request_id: str


class ScheduleResponse(CamelModel):
    session_id: UUID
    source: Optional[Literal["ai", "fallback"]] = None
    schedule: WeeklySchedule


class SelectDayRequest(CamelModel):
    day_index: int = Field(ge=0)


class ToggleCompletionRequest(CamelModel):
    day_index: int
    item_index: int


class ToggleCompletionResponse(CamelModel):
    day_index: int
    item_index: int
    completed: bool
    request_id: str


class ItemProgressPayload(CamelModel):
    index: int
    completed: bool
    item: ScheduleItem


class DayOverviewResponse(CamelModel):
    day_index: int
    day: str
    theme: str
    completion_percentage: int
    fasting_window: str
    intensity: str
    current_level: Optional[float] = None
    items: List[ItemProgressPayload]
