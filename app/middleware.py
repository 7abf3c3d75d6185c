# =============================================================================
# app/middleware.py - Request Interceptors
# =============================================================================
# The interceptor chain run before the routers. Each middleware either
# answers the request itself or passes it on with call_next.
#
# build_middleware() returns the chain as an ordered list; the first entry
# is the outermost and sees the request first.
# =============================================================================

import logging
import time

from fastapi import Request
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from app.config import Settings

access_logger = logging.getLogger("app.access")
startup_logger = logging.getLogger("app.startup")
logger = logging.getLogger(__name__)


class AccessLogMiddleware(BaseHTTPMiddleware):
    """
    Log one line per request in the short "tiny" format:

        GET /api/usuarios 200 87 - 1.234 ms
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        url = request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"
        length = response.headers.get("content-length", "-")

        access_logger.info(
            f"{request.method} {url} {response.status_code} {length} - {elapsed_ms:.3f} ms"
        )
        return response


class RequestTraceMiddleware(BaseHTTPMiddleware):
    """Log each request as it enters the application."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        logger.debug(f"Handling {request.method} {request.url.path}")
        return await call_next(request)


class AuthStubMiddleware(BaseHTTPMiddleware):
    """
    Placeholder for authentication.

    Every request is let through; real credential checks would go here and
    short-circuit with a 401 response.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        logger.debug("Authenticating...")
        return await call_next(request)


def build_middleware(settings: Settings) -> list[Middleware]:
    """
    Build the interceptor chain for the given settings.

    The access log is only installed in development.

    Returns:
        Ordered middleware list, outermost first
    """
    chain: list[Middleware] = []

    if settings.is_development:
        chain.append(Middleware(AccessLogMiddleware))
        startup_logger.debug("Request logging enabled")

    chain.append(Middleware(RequestTraceMiddleware))
    chain.append(Middleware(AuthStubMiddleware))
    return chain
