"""Routine session lifecycle endpoints."""
from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from lipidcare.api.deps import get_routine_session
from lipidcare.api.schemas.session import (
    ProfileCheckResponse,
    SessionCreatedResponse,
    SessionSummaryResponse,
)
from lipidcare.domain.profile import ProfileSubmission
from lipidcare.observability.metrics import log_metric
from lipidcare.services.session_store import (
    InvalidTransition,
    RoutineSession,
    SessionStore,
    get_session_store,
)

router = APIRouter()


@router.post(
    "/sessions",
    response_model=SessionCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["sessions"],
)
def create_session(
    request: Request,
    store: SessionStore = Depends(get_session_store),
) -> SessionCreatedResponse:
    request_id = getattr(request.state, "request_id", None)
    session = store.create()
    log_metric("session.create", 1, metadata={"session_id": str(session.id)})
    return SessionCreatedResponse(
        session_id=session.id,
        state=session.state.value,
        request_id=request_id or "",
    )


@router.get("/sessions/{session_id}", response_model=SessionSummaryResponse, tags=["sessions"])
def get_session(
    request: Request,
    session: RoutineSession = Depends(get_routine_session),
) -> SessionSummaryResponse:
    return _summary(session, getattr(request.state, "request_id", None))


@router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT, tags=["sessions"])
def delete_session(
    session_id: UUID,
    store: SessionStore = Depends(get_session_store),
) -> Response:
    try:
        store.delete(session_id)
    except KeyError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/sessions/{session_id}/profile/check", response_model=ProfileCheckResponse, tags=["sessions"])
def check_profile(
    payload: ProfileSubmission,
    session: RoutineSession = Depends(get_routine_session),
) -> ProfileCheckResponse:
    """Report whether the profile may start a generation cycle; nothing is stored."""
    return ProfileCheckResponse(submittable=session.check_profile(payload))


@router.post("/sessions/{session_id}/reset", response_model=SessionSummaryResponse, tags=["sessions"])
def reset_session(
    request: Request,
    session: RoutineSession = Depends(get_routine_session),
) -> SessionSummaryResponse:
    try:
        session.reset()
    except InvalidTransition as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    return _summary(session, getattr(request.state, "request_id", None))


def _summary(session: RoutineSession, request_id: str | None) -> SessionSummaryResponse:
    return SessionSummaryResponse(
        session_id=session.id,
        state=session.state.value,
        created_at=session.created_at,
        selected_day_index=session.selected_day_index,
        generation=session.generation,
        has_schedule=session.schedule is not None,
        schedule_source=session.schedule_source,
        request_id=request_id or "",
    )
