# src/ecommerce/core/logging/filters.py
"""
Logging filters.

- RequestIdFilter: stamps every LogRecord with `request_id`, read from a
  contextvar set by RequestIDMiddleware. Records logged outside a request get
  the sentinel "-" so `%(request_id)s` never raises KeyError.
- RedactFilter: masks sensitive `extra=` attributes (passwords, tokens) before
  any handler formats the record.

A contextvar (not threading.local) is used because every request runs as its
own asyncio task and the value has to survive `await` boundaries.
"""

import logging
from logging import LogRecord
import contextvars

_request_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)


def set_request_id(request_id: str | None):
    """
    Set the request id in the current context and return the token to allow reset.
    """
    return _request_id_ctx.set(request_id)


def reset_request_id(token):
    _request_id_ctx.reset(token)


def get_request_id() -> str | None:
    return _request_id_ctx.get()


class RequestIdFilter(logging.Filter):
    """
    Guarantee every LogRecord has a `request_id` attribute.

    Precedence: explicit `extra={"request_id": ...}`, then the contextvar, then "-".
    Always returns True; it annotates, never drops.
    """

    def filter(self, record: LogRecord) -> bool:
        record.request_id = (
            getattr(record, "request_id", None) or get_request_id() or "-"
        )
        return True


class RedactFilter(logging.Filter):
    SENSITIVE = {
        "password",
        "password_hash",
        "passwordhash",
        "secret",
        "token",
        "access_token",
        "refresh_token",
        "authorization",
    }
    MASK = "***REDACTED***"

    def filter(self, record: LogRecord) -> bool:
        for key in list(record.__dict__.keys()):
            if key.lower() in self.SENSITIVE:
                record.__dict__[key] = self.MASK
        return True


__all__ = [
    "set_request_id",
    "reset_request_id",
    "get_request_id",
    "RequestIdFilter",
    "RedactFilter",
]
