from .base import (
    ErrorKind,
    STATUS_BY_KIND,
    status_for,
    AppError,
    NotFoundError,
    BadRequestError,
    DuplicateError,
    UnauthorizedError,
    ForbiddenError,
    InternalServerError,
    DataAccessError,
)

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
