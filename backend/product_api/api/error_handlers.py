"""Error Handlers — global exception handlers for the Product API.

Invariants:
    - ProductApiError -> the error's own body (to_response) and http_status
    - RequestValidationError -> the same {errors: [...]} shape as the validation gate
    - Exception (catch-all) -> never leaks internal details

Design Decisions:
    - Three-layer handler: domain (ProductApiError), validation (Pydantic), catch-all (Exception)
    - Log level follows error severity: a 404 is routine, a database failure is not
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from product_api.core.errors import ErrorSeverity, ProductApiError
from product_api.core.messages import Message, get_message

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_product_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_product_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(ProductApiError)
    async def product_error_handler(request: Request, exc: ProductApiError):
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"{exc.__class__.__name__}: {getattr(exc, 'detail', exc.message)}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "product_id": exc.context.product_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler.

    Current routes declare no Pydantic-typed parameters (the path id is str and
    bodies are read by the validation gate), so this only fires for a typed
    parameter added later. It keeps that case at 400 {errors} instead of 422.
    """

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "message": get_message(Message.INTERNAL_ERROR),
                "code": "INTERNAL_ERROR",
            },
        )


def build_validation_error_response(exc: RequestValidationError) -> dict:
    """Map Pydantic error dicts onto the gate's {errors: [...]} shape."""
    errors = []
    for e in exc.errors():
        loc = [str(part) for part in e["loc"]]
        location = {"path": "params", "query": "query"}.get(loc[0], loc[0]) if loc else "body"
        errors.append({
            "type": "field",
            "msg": e["msg"],
            "path": ".".join(loc[1:]) or None,
            "location": location,
        })
    return {"errors": errors}
