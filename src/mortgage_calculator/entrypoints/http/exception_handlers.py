"""Translate calculator errors into JSON error bodies.

Every error leaves the API as ``{"detail", "code", "errors"?}`` so clients
can branch on ``code`` without parsing messages.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from mortgage_calculator.domain.errors import DomainError

logger = logging.getLogger(__name__)

# Error codes to HTTP status codes; anything else is a 400
STATUS_CODE_MAP: dict[str, int] = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "TERM_TOO_LARGE": 422,  # HTTP_422_UNPROCESSABLE_CONTENT
}


def _request_fields(request: Request) -> dict[str, str]:
    return {"path": request.url.path, "method": request.method}


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Map a DomainError to its status code.

    - VALIDATION_ERROR: 400, with one entry per failing field
    - TERM_TOO_LARGE: 422
    - any other code: 400
    """
    status_code = STATUS_CODE_MAP.get(exc.error_code, status.HTTP_400_BAD_REQUEST)

    # Bad input is the caller's problem, not ours
    logger.info(
        "Client error",
        extra={
            "error_code": exc.error_code,
            "error_message": exc.message,
            "context": exc.context,
            **_request_fields(request),
        },
    )

    payload = exc.to_dict()
    body: dict[str, Any] = {"detail": payload["message"], "code": payload["code"]}
    if payload.get("errors"):
        body["errors"] = payload["errors"]

    return JSONResponse(status_code=status_code, content=body)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Body-shape failures caught by FastAPI before the domain validator runs.

    Covers invalid JSON, a non-object body, or a field holding an array or
    object where a number is expected. Reported as VALIDATION_ERROR with the
    pydantic error type as each entry's code.
    """
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"] if loc not in ("body", "query")),
            "message": error["msg"],
            "code": error["type"],
        }
        for error in exc.errors()
    ]

    logger.info("Request validation error", extra={"errors": errors, **_request_fields(request)})

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Invalid request body",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log with traceback and hide internals from the client."""
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "error_message": str(exc),
            **_request_fields(request),
        },
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred", "code": "INTERNAL_ERROR"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers above. Call once from ``build_app()``."""
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.debug("Exception handlers registered successfully")
