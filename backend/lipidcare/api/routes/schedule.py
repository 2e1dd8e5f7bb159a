"""Schedule generation endpoints."""
from __future__ import annotations

from time import perf_counter

from fastapi import APIRouter, Depends, HTTPException, Request, status

from lipidcare.api.deps import get_routine_session
from lipidcare.api.schemas.session import GenerateResponse, ScheduleResponse
from lipidcare.domain.profile import ProfileSubmission
from lipidcare.observability.metrics import log_metric
from lipidcare.observability.tracing import trace
from lipidcare.services.profile_validator import ProfileInvalid
from lipidcare.services.session_store import InvalidTransition, RoutineSession

router = APIRouter()


@router.post("/sessions/{session_id}/generate", response_model=GenerateResponse, tags=["schedule"])
async def generate_schedule(
    request: Request,
    payload: ProfileSubmission,
    session: RoutineSession = Depends(get_routine_session),
) -> GenerateResponse:
    """Validate the profile and produce a new weekly routine for the session."""
    request_id = getattr(request.state, "request_id", None)
    metadata = {"route": "/sessions/{session_id}/generate", "request_id": request_id}
    start = perf_counter()

    with trace("schedule.request", metadata=metadata, session_id=str(session.id), request_id=request_id):
        try:
            generated = await session.submit_profile(payload, request_id=request_id)
        except ProfileInvalid as exc:
            log_metric("schedule.request.rejected", 1, metadata={"session_id": str(session.id)})
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))
        except InvalidTransition as exc:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))

    latency_ms = (perf_counter() - start) * 1000
    log_metric(
        "schedule.request.latency_ms",
        latency_ms,
        metadata={"session_id": str(session.id), "source": generated.source},
    )
    return GenerateResponse(
        session_id=session.id,
        source=generated.source,
        failure_kind=generated.failure.kind if generated.failure else None,
        generation=session.generation,
        schedule=generated.schedule,
        request_id=request_id or "",
    )


@router.get("/sessions/{session_id}/schedule", response_model=ScheduleResponse, tags=["schedule"])
def get_schedule(session: RoutineSession = Depends(get_routine_session)) -> ScheduleResponse:
    if session.schedule is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No schedule generated yet")
    return ScheduleResponse(
        session_id=session.id,
        source=session.schedule_source,
        schedule=session.schedule,
    )
