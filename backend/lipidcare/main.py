"""Main FastAPI application for the LipidCare routine service."""
from fastapi import FastAPI, Request

from lipidcare.api.routes.guides import router as guides_router
from lipidcare.api.routes.progress import router as progress_router
from lipidcare.api.routes.schedule import router as schedule_router
from lipidcare.api.routes.sessions import router as sessions_router
from lipidcare.core.config import settings
from lipidcare.core.logging import configure_logging
from lipidcare.core.middleware import RequestIDMiddleware
from lipidcare.observability.client import init_opik
from lipidcare.observability.tracing import trace

configure_logging(log_level=settings.log_level)

app = FastAPI(title=settings.app_name, version="0.1.0")
app.add_middleware(RequestIDMiddleware)
app.include_router(sessions_router)
app.include_router(schedule_router)
app.include_router(progress_router)
app.include_router(guides_router)


@app.on_event("startup")
async def startup_observability() -> None:
    """Initialize observability backends after the event loop starts."""
    init_opik()


@app.get("/health", tags=["health"], summary="Readiness probe")
async def health_check(request: Request) -> dict[str, str]:
    """Return a simple status payload so automation can probe the API."""
    with trace("http.health_check", metadata={"route": "/health"}, request_id=request.state.request_id):
        return {"status": "ok"}
