"""
Image and speech enrichment routes.
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.core.auth import verify_app_secret
from app.core.limiter import limiter, MEDIA_LIMIT
from app.core.logger import log_request
from app.models.schemas import ImageRequest, ImageResult, SpeechRequest, SpeechResult
from app.services import image_service, speech_service

router = APIRouter(dependencies=[Depends(verify_app_secret)])


@router.post("/generate-image", response_model=ImageResult, response_model_exclude_none=True)
@limiter.limit(MEDIA_LIMIT)
async def generate_image(request: Request, req: ImageRequest):
    """
    Visualize an exercise or meal.

    Always 200: a degraded result carries a fallback image URL that the
    client renders (or fails to render) on its own.
    """
    log_request("/generate-image")

    return await image_service.generate_image(req.description, req.type)


@router.post("/generate-speech", response_model=SpeechResult, response_model_exclude_none=True)
@limiter.limit(MEDIA_LIMIT)
async def generate_speech(request: Request, req: SpeechRequest):
    """Narrate a block of plan text as an mp3 data URI."""
    log_request("/generate-speech")

    result = await speech_service.generate_speech(req.text)
    if not result.success:
        return JSONResponse(
            status_code=502,
            content=result.model_dump(exclude_none=True)
        )
    return result
