from __future__ import annotations

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import settings

USER_ID_HEADER = "X-User-Id"


def client_identity(request: Request) -> str:
    """User identity for rate limiting: explicit user header, else the caller's IP."""
    user_id = (request.headers.get(USER_ID_HEADER) or "").strip()
    if user_id:
        return f"user:{user_id[:200]}"
    if settings.trust_x_forwarded_for:
        forwarded_for = request.headers.get("x-forwarded-for", "").strip()
        if forwarded_for:
            return f"ip:{forwarded_for.split(',')[0].strip()}"
    return f"ip:{get_remote_address(request)}"


limiter = Limiter(key_func=client_identity, enabled=settings.rate_limit_enabled)


def rate_limit():
    if settings.rate_limit_enabled:
        return limiter.limit(settings.rate_limit)

    def decorator(func):
        return func

    return decorator
