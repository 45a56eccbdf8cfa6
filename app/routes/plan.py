"""
Plan generation routes.
"""
from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from app.core.auth import verify_app_secret
from app.core.limiter import limiter, GENERATION_LIMIT
from app.core.logger import log_request, log_error
from app.models.profile import UserProfile
from app.models.schemas import PlanResult
from app.routes.session import get_session_store
from app.services import plan_service
from app.services.session_store import SessionStore

router = APIRouter(dependencies=[Depends(verify_app_secret)])


@router.post("/generate-plan", response_model=PlanResult, response_model_exclude_none=True)
@limiter.limit(GENERATION_LIMIT)
async def generate_plan(
    request: Request,
    profile: UserProfile,
    store: SessionStore = Depends(get_session_store),
):
    """
    Generate a personalized workout + diet plan.

    The profile is validated before any provider call (422 on failure).
    A failed generation returns 502 with {success: false, error} so the UI
    can offer a retry. A successful plan is stored with its profile.
    """
    log_request("/generate-plan")

    result = await plan_service.generate_plan(profile)

    if not result.success:
        return JSONResponse(
            status_code=502,
            content=result.model_dump(exclude_none=True)
        )

    try:
        # File-backed stores do blocking I/O
        await run_in_threadpool(
            store.save,
            result.data.model_dump(mode="json"),
            profile.model_dump(mode="json"),
        )
    except OSError as e:
        # The plan is still usable; it just won't survive a reload
        log_error("Session save", e)

    return result
