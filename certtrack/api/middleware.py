"""HTTP Middleware — /api prefix stripping, CORS, preflight, failure boundary.

Invariants:
    - A leading "/api" path segment is removed before routing ("/api/workers" -> "/workers")
    - OPTIONS on any path -> 200, empty body, CORS headers; never reaches a route
    - Every response carries the CORS headers and Content-Type: application/json
    - Exceptions no handler classified become the 500 body here, once per request

Design Decisions:
    - Prefix stripping as raw ASGI middleware: it must rewrite scope["path"]
      before Starlette's router reads it
    - CORS headers set unconditionally (all origins), not only when the
      request carries an Origin header
"""

import logging

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp, Receive, Scope, Send

from certtrack.api.error_handlers import internal_error_response

logger = logging.getLogger(__name__)

API_PREFIX = "/api"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": (
        "Origin, X-Requested-With, Content-Type, Accept, Authorization"
    ),
    "Content-Type": "application/json",
}


def strip_api_prefix(path: str, prefix: str = API_PREFIX) -> str:
    """Remove a leading prefix segment; "/api" alone becomes "/"."""
    if path == prefix:
        return "/"
    if path.startswith(prefix + "/"):
        return path[len(prefix):]
    return path


class StripApiPrefixMiddleware:
    """Rewrite /api/<route> to /<route> for HTTP requests."""

    def __init__(self, app: ASGIApp, prefix: str = API_PREFIX):
        self.app = app
        self.prefix = prefix

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            path = strip_api_prefix(scope["path"], self.prefix)
            if path != scope["path"]:
                scope = dict(scope)
                scope["path"] = path
                scope["raw_path"] = path.encode("utf-8")
        await self.app(scope, receive, send)


class RequestBoundaryMiddleware(BaseHTTPMiddleware):
    """Preflight short-circuit, CORS headers, and the catch-all 500."""

    def __init__(self, app: ASGIApp, expose_errors: bool = False):
        super().__init__(app)
        self.expose_errors = expose_errors

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            try:
                response = await call_next(request)
            except Exception as exc:
                response = internal_error_response(
                    request, exc, self.expose_errors,
                )
        response.headers.update(CORS_HEADERS)
        return response
