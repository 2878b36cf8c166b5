"""
Request logging middleware.

Writes one line per request to the ``bookstore.request`` logger with the
method, path, status, client address and latency. Failed requests are
logged at ERROR. Headers and bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from bookstore.shared.logging import REQUEST_LOGGER_NAME

request_logger = logging.getLogger(REQUEST_LOGGER_NAME)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs every request after it completes."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        client = request.client.host if request.client else "-"
        try:
            response = await call_next(request)
        except Exception as exc:
            request_logger.error(
                "request error method=%s uri=%s remote_ip=%s latency_ms=%.1f error=%s",
                request.method,
                request.url.path,
                client,
                (time.perf_counter() - started) * 1000,
                type(exc).__name__,
            )
            raise

        level = logging.ERROR if response.status_code >= 500 else logging.INFO
        request_logger.log(
            level,
            "request method=%s uri=%s status=%d remote_ip=%s latency_ms=%.1f",
            request.method,
            request.url.path,
            response.status_code,
            client,
            (time.perf_counter() - started) * 1000,
        )
        return response
