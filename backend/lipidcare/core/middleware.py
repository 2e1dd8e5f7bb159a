"""Custom FastAPI middleware."""
from __future__ import annotations

from typing import Callable
from uuid import uuid4

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from lipidcare.core.context import request_id_ctx_var, session_id_ctx_var


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Populate request.state.request_id and ensure response header exists.

    Routes under ``/sessions/{id}`` also bind the session id so log lines emitted
    while serving the request carry it.
    """

    async def dispatch(self, request: Request, call_next: Callable[[Request], Response]) -> Response:  # type: ignore[override]
        request_id = request.headers.get("X-Request-Id") or str(uuid4())
        request.state.request_id = request_id
        token = request_id_ctx_var.set(request_id)
        session_token = session_id_ctx_var.set(_session_id_from_path(request.url.path))

        try:
            response = await call_next(request)
        finally:
            session_id_ctx_var.reset(session_token)
            request_id_ctx_var.reset(token)

        response.headers["X-Request-Id"] = request_id
        return response


def _session_id_from_path(path: str) -> str | None:
    parts = [part for part in path.split("/") if part]
    if len(parts) >= 2 and parts[0] == "sessions":
        return parts[1]
    return None
