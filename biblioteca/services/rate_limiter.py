"""
Rate Limiting Service

Per-client rate limiting with slowapi. SlowAPIMiddleware applies
settings.rate_limit_default to every route, so handlers need no
decorators.

Counters live in memory by default; point RATE_LIMIT_STORAGE_URI at a
shared backend (redis://...) when running several API processes.
"""

import logging

from fastapi import Request, status
from fastapi.responses import PlainTextResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from biblioteca.config import Settings

logger = logging.getLogger(__name__)


def get_client_ip(request: Request) -> str:
    """
    Get client IP address for rate limiting.

    Honours X-Forwarded-For and X-Real-IP, which hosting platforms set
    when the API sits behind a proxy.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        # First entry is the original client
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    return get_remote_address(request)


def create_limiter(settings: Settings) -> Limiter:
    """Create the rate limiter described by the settings."""
    limiter = Limiter(
        key_func=get_client_ip,
        default_limits=[settings.rate_limit_default],
        storage_uri=settings.rate_limit_storage_uri,
        strategy="fixed-window",
        enabled=settings.rate_limit_enabled,
    )

    logger.info(
        f"Rate limiter initialized - enabled: {settings.rate_limit_enabled}, "
        f"default: {settings.rate_limit_default}"
    )

    return limiter


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> PlainTextResponse:
    """Answer 429 with a plain-text message and a Retry-After hint."""
    limit_detail = str(exc.detail)

    logger.warning(
        f"Rate limit exceeded for {get_client_ip(request)}: {limit_detail}"
    )

    return PlainTextResponse(
        "Muitas requisições. Tente novamente em instantes.",
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        headers={"Retry-After": "60", "X-RateLimit-Limit": limit_detail},
    )
