"""
Static access-token middleware.

Every request except the health check must present the shared secret in
the Authorization header, either bare or as ``Bearer <token>``. Anything
else is answered with 401 before routing.
"""

import hmac

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from bookstore.domain.errors import UnauthorizedError

PUBLIC_PATHS = frozenset({"/health"})
BEARER_PREFIX = "bearer "


def presented_token(header_value: str) -> str:
    """Strip an optional ``Bearer`` scheme from an Authorization header value."""
    if header_value[: len(BEARER_PREFIX)].lower() == BEARER_PREFIX:
        return header_value[len(BEARER_PREFIX):].strip()
    return header_value


def is_authorized(header_value: str | None, access_token: str) -> bool:
    """Return True when the header carries the configured token.

    An unconfigured (empty) token never authorizes anything.
    """
    if not access_token or header_value is None:
        return False
    return hmac.compare_digest(
        presented_token(header_value).encode("utf-8"), access_token.encode("utf-8")
    )


class AccessTokenMiddleware(BaseHTTPMiddleware):
    """Middleware that rejects requests lacking the shared secret."""

    def __init__(self, app: ASGIApp, access_token: str) -> None:
        super().__init__(app)
        self._access_token = access_token

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in PUBLIC_PATHS:
            return await call_next(request)
        if not is_authorized(request.headers.get("Authorization"), self._access_token):
            return Response(status_code=UnauthorizedError.code)
        return await call_next(request)
