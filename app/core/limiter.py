"""
Rate limiter configuration.

Generation endpoints each cost provider quota, so they carry tighter
per-endpoint limits than the read-only session endpoints.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

# Keyed by client IP
limiter = Limiter(key_func=get_remote_address)

GENERATION_LIMIT = "10/minute"
MEDIA_LIMIT = "30/minute"
