# ednc/core/rate_limit.py
# One default limit per client address, applied to every route.
from fastapi import FastAPI
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from ednc.core.config import settings


def create_limiter(limit: str | None = None, enabled: bool | None = None) -> Limiter:
    return Limiter(
        key_func=get_remote_address,
        default_limits=[limit or settings.RATE_LIMIT],
        enabled=settings.RATE_LIMIT_ENABLED if enabled is None else enabled,
    )


def install_rate_limiting(app: FastAPI, limiter: Limiter) -> None:
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
