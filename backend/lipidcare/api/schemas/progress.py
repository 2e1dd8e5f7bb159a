"""Schemas for projection and care guide payloads."""
from __future__ import annotations

from typing import List

from lipidcare.api.schemas.session import CamelModel


class ProjectedLevelPayload(CamelModel):
    day: str
    level: int


class ProjectionResponse(CamelModel):
    series: List[ProjectedLevelPayload]
    target_level: int
    adherence_threshold: int


class CareGuidePayload(CamelModel):
    icon: str
    title: str
    description: str


class CareGuidesResponse(CamelModel):
    guides: List[CareGuidePayload]
    expert_note: str
