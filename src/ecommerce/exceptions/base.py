"""
Application error taxonomy.

Every failure that can reach the HTTP boundary is one of a closed set of kinds
(see `ErrorKind`). The kind alone decides the HTTP status; the message is shown
to the client verbatim.

- NotFoundError        -> 404
- BadRequestError      -> 400 (DuplicateError is a BadRequestError)
- UnauthorizedError    -> 401
- ForbiddenError       -> 403
- InternalServerError  -> 500 (DataAccessError is an InternalServerError)

Anything that is not an `AppError` is treated as INTERNAL by the boundary.
"""

from enum import Enum
from typing import Iterable


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    INTERNAL = "internal"


# Exhaustive: every ErrorKind member must have an entry (checked in tests).
STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.INTERNAL: 500,
}


def status_for(kind: ErrorKind) -> int:
    return STATUS_BY_KIND[kind]


class AppError(Exception):
    """
    Base exception for service, gateway and boundary errors.

    - message: human-friendly message (returned to clients as-is)
    - kind: the ErrorKind that selects the HTTP status

    Instances are read-only after construction.
    """

    kind: ErrorKind = ErrorKind.INTERNAL
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: str | None = None):
        self._message = message or self.default_message
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    def __setattr__(self, name, value):
        # dunder attributes (__cause__, __traceback__, ...) are managed by the interpreter
        if not name.startswith("__") and hasattr(self, "_message"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __str__(self) -> str:
        return self._message

    def http_status(self) -> int:
        return status_for(self.kind)

    def to_payload(self) -> dict:
        """
        Return the response envelope for this error:
            {"statusCode": 404, "message": "...", "data": None}
        """
        return {"statusCode": self.http_status(), "message": self.message, "data": None}


class NotFoundError(AppError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Not found"


class BadRequestError(AppError):
    kind = ErrorKind.BAD_REQUEST
    default_message = "Bad request"


class DuplicateError(BadRequestError):
    """Raised or reported when an entity with the same unique value already exists."""

    def __init__(self, message: str, *, fields: Iterable[str] | None = None):
        self._fields = tuple(fields) if fields else ()
        super().__init__(message)

    @property
    def fields(self) -> tuple[str, ...]:
        return self._fields

    def __str__(self) -> str:
        # keep the plain message for clients; fields are for logs only
        return self.message


class UnauthorizedError(AppError):
    kind = ErrorKind.UNAUTHORIZED
    default_message = "Unauthorized"


class ForbiddenError(AppError):
    kind = ErrorKind.FORBIDDEN
    default_message = "Forbidden"


class InternalServerError(AppError):
    kind = ErrorKind.INTERNAL


class DataAccessError(InternalServerError):
    """
    The remote procedure call itself could not complete (connectivity, malformed
    parameters, driver errors). Distinct from "no rows", which is never an error
    at the gateway level.
    """

    default_message = "Database call failed"

    def __init__(self, message: str | None = None, *, procedure: str | None = None):
        self._procedure = procedure
        super().__init__(message)

    @property
    def procedure(self) -> str | None:
        return self._procedure


__all__ = [
    "ErrorKind",
    "STATUS_BY_KIND",
    "status_for",
    "AppError",
    "NotFoundError",
    "BadRequestError",
    "DuplicateError",
    "UnauthorizedError",
    "ForbiddenError",
    "InternalServerError",
    "DataAccessError",
]
