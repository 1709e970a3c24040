"""API middleware: per-request timing log and optional API key check."""

import logging
import time
from typing import Callable, Iterable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

DOCS_PATHS = ("/docs", "/redoc", "/openapi.json")


def _client(request: Request) -> str:
    return request.client.host if request.client else "unknown"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request and its status, and reports duration in X-Process-Time."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - started

        # One line per request, after the handler has run
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"in {elapsed:.3f}s client={_client(request)}"
        )
        response.headers["X-Process-Time"] = f"{elapsed:.3f}"
        return response


class APIKeyMiddleware(BaseHTTPMiddleware):
    """Requires the configured key on every path except the public ones.

    The key is accepted as ``X-API-Key`` or as an ``Authorization: Bearer``
    token.
    """

    def __init__(self, app, api_key: str, public_paths: Iterable[str] = ()):
        super().__init__(app)
        self.api_key = api_key
        self.public_paths = frozenset(public_paths) | frozenset(DOCS_PATHS)

    def _provided_key(self, request: Request) -> str | None:
        auth_header = request.headers.get("Authorization", "")
        if auth_header.startswith("Bearer "):
            return auth_header.removeprefix("Bearer ")
        return request.headers.get("X-API-Key")

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Probes and docs stay reachable without a key
        if request.url.path in self.public_paths:
            return await call_next(request)

        if self._provided_key(request) != self.api_key:
            logger.warning(f"Rejected {request.method} {request.url.path} client={_client(request)}")
            return JSONResponse(
                status_code=401,
                content={"error": "Unauthorized", "detail": "Invalid or missing API key"},
            )

        return await call_next(request)
