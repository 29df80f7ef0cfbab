"""HTTP translation of catalog failures.

Every error leaves the API as ``{"detail", "code", "errors"?}`` with a status
taken from the error code. Client mistakes are logged at INFO; a catalog that
cannot serve and anything unexpected are logged at ERROR.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog_lite.domain.errors import DomainError

logger = logging.getLogger(__name__)

STATUS_CODE_MAP: dict[str, int] = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CATALOG_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
}

# Location segments FastAPI prepends to parameter errors
_LOCATION_PREFIXES = ("body", "query", "path")


def _request_fields(request: Request) -> dict[str, str]:
    return {"path": request.url.path, "method": request.method}


def _error_body(detail: str, code: str, errors: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"detail": detail, "code": code}
    if errors:
        body["errors"] = errors
    return body


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Map a DomainError to its status code.

    VALIDATION_ERROR is 400, NOT_FOUND is 404 and CATALOG_UNAVAILABLE is 503.
    Codes without a mapping fall back to 400. Error context is logged but
    never returned to the caller.
    """
    status_code = STATUS_CODE_MAP.get(exc.error_code, status.HTTP_400_BAD_REQUEST)

    if status_code >= 500:
        logger.error(
            "Domain error occurred",
            extra={
                "error_code": exc.error_code,
                "error_message": exc.message,
                "context": exc.context,
                **_request_fields(request),
            },
        )
    else:
        logger.info(
            "Client error",
            extra={
                "error_code": exc.error_code,
                "error_message": exc.message,
                **_request_fields(request),
            },
        )

    return JSONResponse(
        status_code=status_code,
        content=_error_body(exc.message, exc.error_code, exc.to_dict().get("errors")),
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report parameters FastAPI could not coerce (e.g. ``page=abc``) as a 400.

    These fail before the input validator sees the request, but share its
    VALIDATION_ERROR code and field error layout.
    """
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"] if loc not in _LOCATION_PREFIXES),
            "message": error["msg"],
            "code": error["type"],
        }
        for error in exc.errors()
    ]

    logger.info(
        "Request validation error",
        extra={"errors": errors, **_request_fields(request)},
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("Invalid request parameters", "VALIDATION_ERROR", errors),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    # Details stay in the log; the caller gets a generic message
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
        content=_error_body(
            "An internal error has occurred. Please try again later.", "INTERNAL_ERROR"
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on ``app``; call once from the app factory."""
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.info("Exception handlers registered successfully")
