"""Completion tracking and progress endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, status

from lipidcare.api.deps import get_routine_session
from lipidcare.api.schemas.progress import ProjectedLevelPayload, ProjectionResponse
from lipidcare.api.schemas.session import (
    DayOverviewResponse,
    ItemProgressPayload,
    SelectDayRequest,
    ToggleCompletionRequest,
    ToggleCompletionResponse,
)
from lipidcare.observability.metrics import log_metric
from lipidcare.observability.tracing import trace
from lipidcare.services.session_store import DayOverview, InvalidTransition, RoutineSession

router = APIRouter()


@router.put("/sessions/{session_id}/selected-day", response_model=DayOverviewResponse, tags=["progress"])
def select_day(
    payload: SelectDayRequest,
    session: RoutineSession = Depends(get_routine_session),
) -> DayOverviewResponse:
    try:
        overview = session.select_day(payload.day_index)
    except InvalidTransition as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    except IndexError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Day not found")
    return _overview_response(overview)


@router.get("/sessions/{session_id}/days/{day_index}", response_model=DayOverviewResponse, tags=["progress"])
def get_day(
    day_index: int,
    session: RoutineSession = Depends(get_routine_session),
) -> DayOverviewResponse:
    try:
        overview = session.day_overview(day_index)
    except InvalidTransition as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    except IndexError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Day not found")
    return _overview_response(overview)


@router.post(
    "/sessions/{session_id}/completions/toggle",
    response_model=ToggleCompletionResponse,
    tags=["progress"],
)
def toggle_completion(
    request: Request,
    payload: ToggleCompletionRequest,
    session: RoutineSession = Depends(get_routine_session),
) -> ToggleCompletionResponse:
    """Flip the done-mark at (dayIndex, itemIndex); positions are not checked."""
    request_id = getattr(request.state, "request_id", None)
    metadata = {
        "day_index": payload.day_index,
        "item_index": payload.item_index,
        "request_id": request_id,
    }
    with trace("completion.toggle", metadata=metadata, session_id=str(session.id), request_id=request_id):
        try:
            completed = session.toggle(payload.day_index, payload.item_index)
        except InvalidTransition as exc:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))

    log_metric(
        "completion.toggle",
        1 if completed else 0,
        metadata={"session_id": str(session.id)},
    )
    return ToggleCompletionResponse(
        day_index=payload.day_index,
        item_index=payload.item_index,
        completed=completed,
        request_id=request_id or "",
    )


@router.get("/sessions/{session_id}/projection", response_model=ProjectionResponse, tags=["progress"])
def get_projection(session: RoutineSession = Depends(get_routine_session)) -> ProjectionResponse:
    summary = session.projection()
    return ProjectionResponse(
        series=[ProjectedLevelPayload(day=point.day, level=point.level) for point in summary.series],
        target_level=summary.target_level,
        adherence_threshold=summary.adherence_threshold,
    )


def _overview_response(overview: DayOverview) -> DayOverviewResponse:
    return DayOverviewResponse(
        day_index=overview.day_index,
        day=overview.day,
        theme=overview.theme,
        completion_percentage=overview.completion_percentage,
        fasting_window=overview.fasting_window,
        intensity=overview.intensity,
        current_level=overview.current_level,
        items=[
            ItemProgressPayload(index=entry.index, completed=entry.completed, item=entry.item)
            for entry in overview.items
        ],
    )
