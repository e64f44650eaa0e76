"""HTTP Middleware — origin guard, CORS headers and request logging as one ordered stack.

Invariants:
    - build_middleware() returns the stack outermost-first; the order IS the pipeline:
      origin guard -> CORS headers -> request logging -> router
    - A request carrying an Origin other than settings.frontend_url never reaches a route
    - Requests without an Origin header are same-origin or non-browser and pass through

Design Decisions:
    - Origin guard separate from CORSMiddleware: Starlette's CORS support only omits
      headers for a foreign origin, the API must refuse the request outright
    - Stack passed to FastAPI(middleware=...) instead of add_middleware calls, which
      register in reverse and hide the effective order
"""

import logging
import time
from typing import Callable

from fastapi import Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware

from product_api.config import Settings
from product_api.core.errors import CorsRejectedError
from product_api.core.messages import Locale, Message, get_message

logger = logging.getLogger(__name__)


class OriginGuardMiddleware(BaseHTTPMiddleware):
    """Reject cross-origin requests from any origin but the allowed one."""

    def __init__(self, app, allowed_origin: str, locale: Locale = Locale.EN):
        super().__init__(app)
        self.allowed_origin = allowed_origin.rstrip("/")
        self.locale = locale

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        origin = request.headers.get("origin")
        if origin is None or origin.rstrip("/") == self.allowed_origin:
            return await call_next(request)
        exc = CorsRejectedError(
            origin, get_message(Message.CORS_REJECTED, self.locale),
        )
        logger.warning(
            f"Rejected cross-origin request from {origin}",
            extra={
                "origin": origin, "path": request.url.path,
                "error_code": exc.code,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One log line per request: method, path, status, duration."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                f"{request.method} {request.url.path} failed",
                extra={
                    "method": request.method, "path": request.url.path,
                    "duration_ms": _elapsed_ms(start),
                },
            )
            raise
        logger.info(
            f"{request.method} {request.url.path} {response.status_code}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": _elapsed_ms(start),
            },
        )
        return response


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


def build_middleware(settings: Settings) -> list[Middleware]:
    """Middleware stack, outermost first."""
    return [
        Middleware(
            OriginGuardMiddleware,
            allowed_origin=settings.frontend_url,
            locale=settings.message_locale,
        ),
        Middleware(
            CORSMiddleware,
            allow_origins=[settings.frontend_url],
            allow_methods=["*"],
            allow_headers=["*"],
        ),
        Middleware(RequestLoggingMiddleware),
    ]
