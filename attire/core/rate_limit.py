"""
Rate limiting

SlowAPI limiter keyed by client address. Login and register use
RATE_LIMIT_AUTH, checkout uses RATE_LIMIT_CHECKOUT, everything else the
default. Counters are in process memory.

X-Forwarded-For is only read when the direct peer is listed in
TRUSTED_PROXIES; otherwise any client could pick its own key.
"""
import logging
from typing import Iterable, Optional

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from attire.core.config import settings
from attire.core.exceptions import RateLimited

logger = logging.getLogger(__name__)


def forwarded_client(header: Optional[str], peer: str, trusted: Iterable[str]) -> str:
    """
    Resolve the client behind a chain of trusted proxies.

    Hops are read right to left; the first one that is not a trusted proxy is
    the client. A chain made only of trusted proxies resolves to its leftmost
    hop.
    """
    trusted = set(trusted)
    if peer not in trusted or not header:
        return peer

    hops = [hop.strip() for hop in header.split(",") if hop.strip()]
    for hop in reversed(hops):
        if hop not in trusted:
            return hop
    return hops[0] if hops else peer


def get_client_ip(request: Request) -> str:
    return forwarded_client(
        request.headers.get("X-Forwarded-For"),
        get_remote_address(request),
        settings.TRUSTED_PROXIES,
    )


limiter = Limiter(
    key_func=get_client_ip,
    enabled=settings.RATE_LIMIT_ENABLED,
    default_limits=[settings.RATE_LIMIT_DEFAULT],
)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """429 in the storefront error shape."""
    client = get_client_ip(request)
    logger.warning(f"Rate limit {exc.detail} hit by {client} on {request.method} {request.url.path}")

    error = RateLimited(
        f"Too many requests, limit is {exc.detail}",
        details={"limit": exc.detail},
    )
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_dict(),
        headers={"Retry-After": "60"},
    )
