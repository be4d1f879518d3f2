"""Error Handlers — map classified failures to HTTP responses.

Invariants:
    - CertTrackError -> its http_status with {"message", "code"}
    - pydantic ValidationError / RequestValidationError -> 400
      {"message": "Validation error", "errors": [{"field", "message", "type"}]}
    - Unmatched path or method (router 404/405) -> 404 "Route not found: METHOD /path"
    - Anything else -> 500 via internal_error_response(), called by the
      request boundary middleware; detail exposed only in development

Design Decisions:
    - Unclassified errors are handled in the middleware, not an Exception
      handler: Starlette runs Exception handlers outside user middleware, so
      CORS headers would be missing from the 500 response
"""

import logging
from collections.abc import Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from certtrack.core.errors import CertTrackError, RouteNotFoundError

logger = logging.getLogger(__name__)

GENERIC_ERROR_DETAIL = "Something went wrong"


def register_error_handlers(app: FastAPI) -> None:
    """Register all classified error handlers on the FastAPI app."""
    _register_certtrack_error_handler(app)
    _register_validation_error_handlers(app)
    _register_http_error_handler(app)


def _register_certtrack_error_handler(app: FastAPI) -> None:

    @app.exception_handler(CertTrackError)
    async def certtrack_error_handler(request: Request, exc: CertTrackError):
        """Handle all classified certtrack errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"CertTrackError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        if exc.http_status >= 500:
            return internal_error_response(request, exc, _expose_errors(request))
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Request body/path failed schema validation."""
        return _validation_error_response(request, exc.errors())

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        """Schema validation raised inside a service (nested payloads)."""
        return _validation_error_response(
            request, exc.errors(include_url=False),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Router misses (404/405) become route-not-found; others keep their status."""
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            error = RouteNotFoundError(request.method, request.url.path)
            logger.warning(
                error.message,
                extra={"error_code": error.code, "path": request.url.path},
            )
            return JSONResponse(
                status_code=error.http_status, content=error.to_response(),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _validation_error_response(
    request: Request, errors: Sequence[dict],
) -> JSONResponse:
    details = build_validation_details(errors)
    logger.warning(
        f"Validation error on {request.url.path}: {details}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation error", "errors": details},
    )


def build_validation_details(errors: Sequence[dict]) -> list[dict]:
    """Flatten pydantic errors to field-level descriptors."""
    details = []
    for e in errors:
        loc = list(e.get("loc", ()))
        if loc and loc[0] == "body":
            loc = loc[1:]
        details.append({
            "field": ".".join(str(part) for part in loc),
            "message": e.get("msg", ""),
            "type": e.get("type", ""),
        })
    return details


def internal_error_response(
    request: Request, exc: Exception, expose: bool,
) -> JSONResponse:
    """500 body; the real error text only when `expose` is set."""
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
        extra={"method": request.method, "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "message": "Internal server error",
            "error": str(exc) if expose else GENERIC_ERROR_DETAIL,
        },
    )


def _expose_errors(request: Request) -> bool:
    return bool(getattr(request.app.state, "expose_errors", False))
