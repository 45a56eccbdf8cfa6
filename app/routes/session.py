"""
Session restore/reset and narration script routes.
"""
from typing import Annotated, Literal
from fastapi import APIRouter, Depends, Header, HTTPException

from app.core.auth import verify_app_secret
from app.core.logger import log_request
from app.models.schemas import NarrationResponse, SessionResponse
from app.services import narration_service
from app.services.session_store import SessionStore, open_session_store

router = APIRouter(dependencies=[Depends(verify_app_secret)])


def get_session_store(x_session_id: Annotated[str, Header()] = "default") -> SessionStore:
    """FastAPI dependency: store scoped to the caller's X-Session-Id."""
    return open_session_store(x_session_id)


@router.get("/session", response_model=SessionResponse)
def restore_session(store: SessionStore = Depends(get_session_store)):
    """
    Restore the previously generated plan and its profile.

    Returns restored=false unless both were stored.
    """
    log_request("/session", "GET")

    stored = store.load()
    if stored is None:
        return SessionResponse(restored=False)
    plan, profile = stored
    return SessionResponse(restored=True, plan=plan, profile=profile)


@router.delete("/session", response_model=SessionResponse)
def reset_session(store: SessionStore = Depends(get_session_store)):
    """Forget the stored plan and profile ("New Plan")."""
    log_request("/session", "DELETE")

    store.clear()
    return SessionResponse(restored=False)


@router.get("/narration/{section}", response_model=NarrationResponse)
def get_narration(
    section: Literal["workout", "diet"],
    store: SessionStore = Depends(get_session_store),
):
    """Spoken script for the workout or diet section of the stored plan."""
    log_request(f"/narration/{section}", "GET")

    stored = store.load()
    if stored is None:
        raise HTTPException(status_code=404, detail="No plan stored for this session")
    plan, _ = stored
    return NarrationResponse(section=section, text=narration_service.narrate(plan, section))
