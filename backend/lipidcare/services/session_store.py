"""Session-scoped routine state and the generation state machine."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from threading import Lock
from typing import Any, Dict, List, Mapping, Optional, Union
from uuid import UUID, uuid4

from lipidcare.core.config import settings
from lipidcare.domain.profile import ProfileSubmission, UserProfile
from lipidcare.domain.result import GenerationFailure
from lipidcare.domain.schedule import ScheduleItem, WeeklySchedule
from lipidcare.services.completion_tracker import CompletionTracker
from lipidcare.services.profile_validator import ProfileInvalid, is_submittable, require_submittable
from lipidcare.services.progress import ProjectionSummary, completion_percentage, projection_summary
from lipidcare.services.schedule_generator import GeneratedSchedule, ScheduleSource, generate_with_source

logger = logging.getLogger(__name__)

DEFAULT_THEME = "데일리 케어"


class SessionState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    GENERATING = "generating"
    READY = "ready"


class InvalidTransition(RuntimeError):
    """Raised when an operation is not allowed in the session's current state."""

    def __init__(self, operation: str, state: SessionState) -> None:
        super().__init__(f"Cannot {operation} while session is {state.value}")
        self.operation = operation
        self.state = state


@dataclass(frozen=True)
class ItemProgress:
    index: int
    item: ScheduleItem
    completed: bool


@dataclass(frozen=True)
class DayOverview:
    day_index: int
    day: str
    theme: str
    completion_percentage: int
    fasting_window: str
    intensity: str
    current_level: Optional[float]
    items: List[ItemProgress]


class RoutineSession:
    """One user's routine, completion marks and selected day.

    Completion marks are cleared whenever a new schedule replaces the old one,
    so positions from a previous plan never carry over.
    """

    def __init__(self, session_id: Optional[UUID] = None) -> None:
        self.id = session_id or uuid4()
        self.created_at = datetime.now(timezone.utc)
        self.state = SessionState.IDLE
        self.profile: Optional[UserProfile] = None
        self.schedule: Optional[WeeklySchedule] = None
        self.schedule_source: Optional[ScheduleSource] = None
        self.last_failure: Optional[GenerationFailure] = None
        self.tracker = CompletionTracker()
        self.selected_day_index = 0
        self.generation = 0

    def check_profile(self, submission: Union[ProfileSubmission, Mapping[str, Any]]) -> bool:
        return is_submittable(submission)

    async def submit_profile(
        self,
        submission: Union[ProfileSubmission, Mapping[str, Any]],
        *,
        request_id: str | None = None,
    ) -> GeneratedSchedule:
        """Validate the profile and run one generation cycle.

        Raises ProfileInvalid for unusable input and InvalidTransition while a
        cycle is already in flight. Cancellation restores the previous state.
        """
        if self.state not in (SessionState.IDLE, SessionState.READY):
            raise InvalidTransition("submit a profile", self.state)

        previous_state = self.state
        self.state = SessionState.VALIDATING
        try:
            profile = require_submittable(submission)
        except ProfileInvalid:
            self.state = previous_state
            raise

        self.state = SessionState.GENERATING
        try:
            generated = await generate_with_source(
                profile,
                session_id=str(self.id),
                request_id=request_id,
            )
        except asyncio.CancelledError:
            logger.info("Generation cancelled for session %s", self.id)
            self.state = previous_state
            raise
        except Exception:
            logger.exception("Generation failed unexpectedly for session %s", self.id)
            self.state = previous_state
            raise

        self.profile = profile
        self.schedule = generated.schedule
        self.schedule_source = generated.source
        self.last_failure = generated.failure
        self.tracker.clear()
        self.selected_day_index = 0
        self.generation += 1
        self.state = SessionState.READY
        logger.info(
            "Session %s ready with %s schedule (generation %d)",
            self.id,
            generated.source,
            self.generation,
        )
        return generated

    def reset(self) -> None:
        """Return to profile entry; the current schedule stays until replaced."""
        if self.state is not SessionState.READY:
            raise InvalidTransition("reset", self.state)
        self.state = SessionState.IDLE

    def select_day(self, day_index: int) -> DayOverview:
        schedule = self._ready_schedule("select a day")
        schedule.day(day_index)
        self.selected_day_index = day_index
        return self.day_overview(day_index)

    def toggle(self, day_index: int, item_index: int) -> bool:
        self._ready_schedule("toggle completion")
        return self.tracker.toggle(day_index, item_index)

    def is_complete(self, day_index: int, item_index: int) -> bool:
        self._ready_schedule("read completion")
        return self.tracker.is_complete(day_index, item_index)

    def day_overview(self, day_index: Optional[int] = None) -> DayOverview:
        schedule = self._ready_schedule("read a day")
        index = self.selected_day_index if day_index is None else day_index
        day = schedule.day(index)
        return DayOverview(
            day_index=index,
            day=day.day,
            theme=day.theme.strip() or DEFAULT_THEME,
            completion_percentage=completion_percentage(day, index, self.tracker),
            fasting_window=day.daily_summary.fasting_window,
            intensity=day.daily_summary.intensity,
            current_level=self.profile.current_level if self.profile else None,
            items=[
                ItemProgress(index=item_index, item=item, completed=self.tracker.is_complete(index, item_index))
                for item_index, item in enumerate(day.hourly_schedule)
            ],
        )

    def projection(self) -> ProjectionSummary:
        return projection_summary(self.profile.current_level if self.profile else None)

    def _ready_schedule(self, operation: str) -> WeeklySchedule:
        if self.state is not SessionState.READY or self.schedule is None:
            raise InvalidTransition(operation, self.state)
        return self.schedule


class SessionStore:
    """In-memory registry of routine sessions for this process.

    Holds at most ``max_sessions`` sessions; creating one beyond that evicts the
    oldest.
    """

    def __init__(self, max_sessions: Optional[int] = None) -> None:
        self.max_sessions = max_sessions if max_sessions is not None else settings.max_sessions
        self._sessions: Dict[UUID, RoutineSession] = {}
        self._lock = Lock()

    def create(self) -> RoutineSession:
        session = RoutineSession()
        evicted: List[UUID] = []
        with self._lock:
            while self._sessions and len(self._sessions) >= self.max_sessions:
                oldest = next(iter(self._sessions))
                del self._sessions[oldest]
                evicted.append(oldest)
            self._sessions[session.id] = session
        for session_id in evicted:
            logger.info("Evicted session %s (store limit %d)", session_id, self.max_sessions)
        logger.debug("Created session %s", session.id)
        return session

    def get(self, session_id: UUID) -> RoutineSession:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise KeyError(str(session_id))
        return session

    def delete(self, session_id: UUID) -> None:
        with self._lock:
            removed = self._sessions.pop(session_id, None)
        if removed is None:
            raise KeyError(str(session_id))

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


session_store = SessionStore()


def get_session_store() -> SessionStore:
    return session_store
