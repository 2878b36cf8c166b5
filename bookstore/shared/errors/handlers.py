"""
Centralized error handlers for FastAPI.

Maps tagged service errors to HTTP responses.
No stack traces or internal details are exposed to clients: every failure
response has an empty body and only the status code carries meaning.
"""

import logging

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError

from bookstore.domain.errors import ServiceError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500


def _operation(request: Request) -> str:
    """Name of the route handling ``request``, for log lines."""
    route = request.scope.get("route")
    name = getattr(route, "name", None)
    return name or f"{request.method} {request.url.path}"


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, _exc: RequestValidationError
    ) -> Response:
        """Malformed body or path parameter. The service is never called."""
        return Response(status_code=HTTP_400)

    @app.exception_handler(ServiceError)
    async def handle_service_error(
        _request: Request, exc: ServiceError
    ) -> Response:
        """Answer with the code the service tagged the error with.

        The service layer already logged the cause.
        """
        return Response(status_code=exc.code)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> Response:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.error(
            "Error %s Handler : %s: %s",
            _operation(request),
            type(exc).__name__,
            exc,
            exc_info=exc,
        )
        return Response(status_code=HTTP_500)
