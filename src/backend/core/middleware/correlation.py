"""
Correlation ID middleware for request tracing.

Tags every request and response with an X-Correlation-ID header and
logs the handled request under that id.
"""

import logging
import time
import uuid
from contextvars import ContextVar
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

# Correlation ID of the request being handled
correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Correlation ID of the current request, or an empty string."""
    return correlation_id_var.get("")


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """
    Middleware to add a correlation ID to requests and responses.

    - Reuses the caller's X-Correlation-ID or generates a new one
    - Stores it in a context variable for services and log lines
    - Echoes it back in the response headers
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        token = correlation_id_var.set(correlation_id)
        start = time.perf_counter()
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({elapsed_ms:.1f}ms) [{correlation_id}]"
        )
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
