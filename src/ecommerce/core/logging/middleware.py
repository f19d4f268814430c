# src/ecommerce/core/logging/middleware.py
"""
Request ID middleware.

Takes `X-Request-ID` from the incoming request (or generates a UUID4), stores it
in the contextvar read by RequestIdFilter and echoes it on the response so
clients can quote it when reporting a failure.

Register it as the outermost middleware so error responses written by
ExceptionHandlingMiddleware carry the header and their log lines carry the id.
"""

import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from .filters import set_request_id, reset_request_id

REQUEST_ID_HEADER = "X-Request-ID"
_MAX_REQUEST_ID_LENGTH = 128


def _accept_incoming(value: str | None) -> str | None:
    # reject values that could break log lines or flood them
    if not value or len(value) > _MAX_REQUEST_ID_LENGTH or not value.isprintable():
        return None
    return value


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        rid = _accept_incoming(request.headers.get(REQUEST_ID_HEADER)) or str(uuid.uuid4())
        token = set_request_id(rid)
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = rid
            return response
        finally:
            reset_request_id(token)
