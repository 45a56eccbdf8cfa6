"""
AI Fitness Coach - Main Entry Point

Profile-driven workout/diet plan generation with AI imagery,
motivation and narration.
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.core.config import settings
from app.core.logger import logger
from app.core.limiter import limiter
from app.routes import plan, session, motivation, media


SERVICE_NAME = "ai-fitness-coach"
VERSION = "1.0.0"


# Validate configuration on startup
try:
    missing_config = settings.validate()
except ValueError as e:
    logger.error(f"Configuration error: {e}")
    raise

if missing_config:
    logger.warning(
        f"Missing credentials: {', '.join(missing_config)}. "
        "Operations that need them will fail until they are set."
    )
else:
    logger.info(f"Configuration validated successfully (text provider: {settings.TEXT_PROVIDER})")


# Create FastAPI app
app = FastAPI(
    title="AI Fitness Coach",
    description="AI-generated workout and diet plans with imagery, motivation and narration",
    version=VERSION
)

# Attach rate limiter and its error handler
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


app.include_router(plan.router, tags=["Plan"])
app.include_router(session.router, tags=["Session"])
app.include_router(motivation.router, tags=["Motivation"])
app.include_router(motivation.ws_router, tags=["Motivation"])
app.include_router(media.router, tags=["Media"])


@app.get("/")
@limiter.limit("60/minute")
def root(request: Request):
    """Health check endpoint."""
    return {"message": "AI Fitness Coach running"}


@app.get("/health")
def health():
    """
    Detailed health status.
    Returns 'degraded' if provider credentials are missing.
    """
    missing = settings.missing_credentials()

    if missing:
        return JSONResponse(
            status_code=200,
            content={
                "status": "degraded",
                "service": SERVICE_NAME,
                "version": VERSION,
                "missing_config": missing,
                "message": f"Missing required environment variables: {', '.join(missing)}"
            }
        )

    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": VERSION
    }


# Run with uvicorn when executed directly
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False
    )
