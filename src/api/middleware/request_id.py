"""Request ID tracking middleware."""

import re
from typing import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from core.providers import new_id

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"

# Ids end up in log lines and response headers; anything else is replaced.
_VALID_REQUEST_ID = re.compile(r"[A-Za-z0-9._:-]{1,128}")


def resolve_request_id(incoming: str | None) -> str:
    """Use the caller's id when it is well formed, otherwise mint a new one."""
    if incoming and _VALID_REQUEST_ID.fullmatch(incoming):
        return incoming
    if incoming:
        logger.debug("request_id_replaced", length=len(incoming))
    return new_id()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach a request id to the request state and echo it in the response."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
