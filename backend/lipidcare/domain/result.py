"""Result type for schedule generation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Optional

from lipidcare.domain.fallback import fallback_schedule
from lipidcare.domain.schedule import WeeklySchedule

FailureKind = Literal["no_credential", "transport", "timeout", "parse", "schema"]


@dataclass(frozen=True)
class GenerationFailure:
    kind: FailureKind
    message: str


@dataclass(frozen=True)
class GenerationResult:
    """Either an AI-authored schedule or the reason one could not be produced."""

    schedule: Optional[WeeklySchedule] = None
    failure: Optional[GenerationFailure] = None

    @classmethod
    def ok(cls, schedule: WeeklySchedule) -> "GenerationResult":
        return cls(schedule=schedule)

    @classmethod
    def err(cls, kind: FailureKind, message: str) -> "GenerationResult":
        return cls(failure=GenerationFailure(kind=kind, message=message))

    @property
    def is_ok(self) -> bool:
        return self.schedule is not None

    def unwrap_or_else(self, default: Callable[[], WeeklySchedule]) -> WeeklySchedule:
        if self.schedule is not None:
            return self.schedule
        return default()

    def unwrap_or_fallback(self) -> WeeklySchedule:
        return self.unwrap_or_else(fallback_schedule)
