"""
Rate limiting shared by the application and its routers.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import settings


limiter = Limiter(key_func=get_remote_address)

# Applied to every /api/v1 route
DEFAULT_RATE_LIMIT = f"{settings.rate_limit_requests}/minute"
