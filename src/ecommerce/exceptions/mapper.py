"""
Translate low-level database failures into application errors.

Stored procedures surface two kinds of failure the services care about:

- a unique-key violation (a concurrent insert won the race past CHECK_DUPLICATE)
  -> DuplicateError (400)
- everything else (connectivity, bad parameters, driver errors, row validation)
  -> DataAccessError (500)

`db_error_handler` wraps each gateway call so this mapping lives in one place.
"""

import logging
from contextlib import asynccontextmanager

from sqlalchemy.exc import DBAPIError, IntegrityError

from .base import AppError, DataAccessError, DuplicateError

logger = logging.getLogger(__name__)

# SQLSTATE / native error numbers for unique violations
_POSTGRES_UNIQUE_VIOLATION = "23505"
_MSSQL_UNIQUE_VIOLATIONS = ("2601", "2627")
_UNIQUE_KEYWORDS = ("unique constraint", "unique index", "duplicate key", "duplicate entry", "unique violation")


def _raw_message(exc: Exception) -> str:
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


def is_unique_violation(exc: IntegrityError) -> bool:
    """
    Best-effort check whether an IntegrityError is a unique-key violation.

    Checks the Postgres `pgcode` / `sqlstate` first, then SQL Server native error
    numbers and finally common message wording (SQLite, MySQL, ODBC drivers).
    """
    orig = exc.orig
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code == _POSTGRES_UNIQUE_VIOLATION:
        return True

    msg = _raw_message(exc).lower()
    if any(f"({number})" in msg or f"error {number}" in msg for number in _MSSQL_UNIQUE_VIOLATIONS):
        return True
    return any(keyword in msg for keyword in _UNIQUE_KEYWORDS)


def map_database_error(exc: Exception, procedure: str | None = None) -> AppError:
    """Return the application error that should replace `exc`."""
    if isinstance(exc, IntegrityError) and is_unique_violation(exc):
        # expected client-level scenario, not worth a stack trace
        logger.info("mapper.duplicate_detected", extra={"procedure": procedure})
        return DuplicateError("A record with the same unique value already exists.")

    raw = _raw_message(exc)
    logger.debug("mapper.database_error_raw", extra={"procedure": procedure, "raw": raw})
    return DataAccessError(f"Database call {procedure or 'database'} failed: {raw}", procedure=procedure)


@asynccontextmanager
async def db_error_handler(session, procedure: str | None = None):
    """
    Usage:
        async with db_error_handler(session, "sp_Brands"):
            ... one stored procedure call ...

    Rolls the session back on error and raises a mapped application error.
    Application errors raised inside the block pass through untouched, and so
    does cancellation (asyncio.CancelledError is not an Exception).
    """
    try:
        yield
    except AppError:
        raise
    except Exception as exc:
        try:
            await session.rollback()
        except Exception:
            logger.exception("Failed to rollback session after database error", extra={"procedure": procedure})

        error = map_database_error(exc, procedure)
        if isinstance(error, DataAccessError):
            logger.exception("Unexpected database error for %s", procedure, extra={"procedure": procedure})
        raise error from exc
