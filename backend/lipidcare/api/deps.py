"""FastAPI dependencies shared by the routine routes."""
from __future__ import annotations

from uuid import UUID

from fastapi import Depends, HTTPException, status

from lipidcare.services.session_store import RoutineSession, SessionStore, get_session_store


def get_routine_session(
    session_id: UUID,
    store: SessionStore = Depends(get_session_store),
) -> RoutineSession:
    try:
        return store.get(session_id)
    except KeyError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
