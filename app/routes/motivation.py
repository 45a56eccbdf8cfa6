"""
Motivation routes: single refresh and a periodic WebSocket stream.
"""
from fastapi import APIRouter, Depends, Request, WebSocket, WebSocketDisconnect, status

from app.core.auth import verify_app_secret
from app.core.config import settings
from app.core.limiter import limiter, MEDIA_LIMIT
from app.core.logger import logger, log_request
from app.models.schemas import MotivationRequest, MotivationResult
from app.services import motivation_service

router = APIRouter(dependencies=[Depends(verify_app_secret)])

# WebSocket routes authenticate inside the handler
ws_router = APIRouter()


@router.post("/generate-motivation", response_model=MotivationResult)
@limiter.limit(MEDIA_LIMIT)
async def generate_motivation(request: Request, req: MotivationRequest):
    """
    One motivation block for the user.

    Always 200 with data; degraded=true means the fixed fallback was served.
    """
    log_request("/generate-motivation")

    return await motivation_service.generate_motivation(req.name, req.goal)


@ws_router.websocket("/ws/motivation")
async def motivation_stream(websocket: WebSocket, name: str, goal: str, secret: str = ""):
    """
    Push a motivation block now and every MOTIVATION_INTERVAL_SECONDS.

    The stream lives as long as the plan view keeps the socket open;
    disconnecting stops the ticker and drops in-flight refreshes.
    """
    supplied = websocket.headers.get("x-app-secret") or secret
    if settings.APP_API_SECRET and supplied != settings.APP_API_SECRET:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await websocket.accept()
    log_request("/ws/motivation", "WS")

    async def push(result: MotivationResult) -> None:
        await websocket.send_json(result.model_dump(mode="json"))

    async with motivation_service.MotivationTicker(name, goal, on_update=push):
        try:
            while True:
                # Client messages are ignored; this only waits for disconnect
                await websocket.receive_text()
        except WebSocketDisconnect:
            logger.info(f"Motivation stream closed for: {name}")
