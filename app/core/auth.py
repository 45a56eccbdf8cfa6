"""
Optional shared-secret authentication dependency.

The coach UI and this service are usually deployed together. When the service
is reachable from the internet, set APP_API_SECRET so only the UI (which sends
the same value in the X-App-Secret header) can spend provider quota.

How it works:
  - APP_API_SECRET unset: every request is allowed (local development)
  - APP_API_SECRET set: requests must send X-App-Secret: <APP_API_SECRET>
  - Returns 403 if missing or wrong
"""
from fastapi import Header, HTTPException
from typing import Annotated

from app.core.config import settings


def verify_app_secret(x_app_secret: Annotated[str, Header()] = "") -> None:
    """FastAPI dependency: validates the shared secret header when configured."""
    if not settings.APP_API_SECRET:
        return
    if x_app_secret != settings.APP_API_SECRET:
        raise HTTPException(
            status_code=403,
            detail="Forbidden: invalid or missing app secret"
        )
