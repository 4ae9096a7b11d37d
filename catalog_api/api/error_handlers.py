"""Error Handlers — every failure leaves the API as a CatalogError envelope.

Invariants:
    - CatalogError → its own to_response() at its own http_status
    - RequestValidationError → RequestValidationFailedError (400) with per-field details
    - Any other Exception → InternalError (500); the original text only reaches the log
    - All error bodies share {"error": {code, message, category, severity, timestamp, context}}

Design Decisions:
    - Validation and catch-all failures are converted to CatalogError first, so the
      envelope is built in exactly one place (CatalogError.to_response)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog_api.core.errors import (
    CatalogError, InternalError, RequestValidationFailedError,
)

logger = logging.getLogger(__name__)


def _field_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]


def _render(request: Request, exc: CatalogError) -> JSONResponse:
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(
        f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_catalog_error(request: Request, exc: CatalogError) -> JSONResponse:
    return _render(request, exc)


async def handle_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    return _render(request, RequestValidationFailedError(_field_errors(exc)))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.url.path}",
        exc_info=exc,
    )
    return _render(request, InternalError())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogError, handle_catalog_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
