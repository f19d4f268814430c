"""
Generic stored-procedure gateway.

Every entity lives behind one stored procedure (`sp_Brands`, `sp_Products`, ...)
whose branch is selected by the `Activity` parameter. `DatabaseRepository` is the
only code that talks to the database; it knows nothing about entities beyond the
record model it validates rows into.

    repo = DatabaseRepository(session_factory, procedure_style="mssql")
    brand = await repo.get_one("sp_Brands", {"Activity": Activity.GET_BY_ID, "Id": brand_id}, Brand)
    page = await repo.get_page("sp_Brands", 1, 10, {"Activity": Activity.GET_ALL}, Brand)
    ok = await repo.execute("sp_Brands", {"Activity": Activity.DELETE, "Id": brand_id})

Each call opens its own session, runs exactly one statement and closes the
session. Failures are rolled back and mapped by `db_error_handler`
(unique violation -> DuplicateError, anything else -> DataAccessError).
"""

import logging
import time
import uuid
from enum import Enum
from typing import Any, Literal, Mapping, Protocol, TypeVar

from pydantic import BaseModel
from pydantic_core import to_json
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ecommerce.exceptions.base import DataAccessError
from ecommerce.exceptions.mapper import db_error_handler
from ecommerce.models.common import PaginationModel
from ecommerce.validators.parameter_validators import (
    find_invalid_parameter_names,
    is_valid_procedure_name,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

ProcedureStyle = Literal["mssql", "postgres"]

# window-count column returned by paged GET_ALL branches
TOTAL_ROWS_COLUMN = "TotalRows"


class Activity(str, Enum):
    GET_ALL = "GET_ALL"
    GET_BY_ID = "GET_BY_ID"
    GET_DETAILS_BY_ID = "GET_DETAILS_BY_ID"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    CHANGE_STATUS = "CHANGE_STATUS"
    CHECK_DUPLICATE = "CHECK_DUPLICATE"


class DataGateway(Protocol):
    """What services need from the data layer. Tests substitute an in-memory fake."""

    async def execute(self, procedure: str, parameters: Mapping[str, Any]) -> bool: ...

    async def get_one(self, procedure: str, parameters: Mapping[str, Any], model: type[M]) -> M | None: ...

    async def get_page(
        self,
        procedure: str,
        page_index: int,
        page_size: int,
        parameters: Mapping[str, Any],
        model: type[M],
    ) -> PaginationModel[M]: ...


def to_db_value(value: Any) -> Any:
    """Convert one parameter value to something every DBAPI driver can bind."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, (BaseModel, list, tuple, dict)):
        # nested collections travel as JSON text (e.g. purchase order lines)
        return to_json(value, by_alias=True).decode("utf-8")
    return value


def build_statement(procedure: str, keys: list[str], style: ProcedureStyle = "mssql") -> str:
    """
    Statement text for one procedure call with named bind parameters.

    mssql:    EXEC sp_Brands @Activity = :Activity, @Id = :Id
    postgres: SELECT * FROM sp_Brands("Activity" => :Activity, "Id" => :Id)
    """
    if style == "postgres":
        args = ", ".join(f'"{key}" => :{key}' for key in keys)
        return f"SELECT * FROM {procedure}({args})"
    args = ", ".join(f"@{key} = :{key}" for key in keys)
    return f"EXEC {procedure} {args}".rstrip()


class DatabaseRepository:
    """
    Stored-procedure gateway over an async SQLAlchemy session factory.

    Args:
        session_factory: produces one AsyncSession per call.
        procedure_style: "mssql" (EXEC ...) or "postgres" (SELECT * FROM fn(...)).
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        procedure_style: ProcedureStyle = "mssql",
    ):
        self.session_factory = session_factory
        self.procedure_style = procedure_style

    # =================================================================================================================
    # Public API
    # =================================================================================================================

    async def execute(self, procedure: str, parameters: Mapping[str, Any]) -> bool:
        """
        Run a mutation branch (INSERT / UPDATE / DELETE / CHANGE_STATUS).
        Returns True when at least one row was affected. The session is committed on success.
        """
        statement, params = self._prepare(procedure, parameters)
        start = time.perf_counter()

        async with self.session_factory() as session:
            async with db_error_handler(session, procedure):
                result = await session.execute(text(statement), params)
                affected = result.rowcount
                await session.commit()

        logger.info(
            "repo.execute.success",
            extra={
                "procedure": procedure,
                "activity": params.get("Activity"),
                "affected": affected,
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return affected is not None and affected > 0

    async def get_one(self, procedure: str, parameters: Mapping[str, Any], model: type[M]) -> M | None:
        """First row validated into `model`, or None when the procedure returned no rows."""
        statement, params = self._prepare(procedure, parameters)

        async with self.session_factory() as session:
            async with db_error_handler(session, procedure):
                result = await session.execute(text(statement), params)
                row = result.mappings().first()
                if row is None:
                    logger.debug("repo.get_one.empty", extra={"procedure": procedure, "activity": params.get("Activity")})
                    return None
                return model.model_validate(dict(row))

    async def get_page(
        self,
        procedure: str,
        page_index: int,
        page_size: int,
        parameters: Mapping[str, Any],
        model: type[M],
    ) -> PaginationModel[M]:
        """
        One page of rows. `PageIndex` / `PageSize` are added to the parameters.

        The total is read from the `TotalRows` column of the returned rows. A
        procedure that does not return that column is treated as returning the
        whole filtered set, and the window is cut locally.
        A page past the end returns no rows and so no `TotalRows`; the first page
        is then fetched with a page size of 1 to read the real total.
        """
        if not isinstance(page_index, int) or page_index < 1:
            raise DataAccessError(f"Invalid page index {page_index!r} for {procedure}", procedure=procedure)
        if not isinstance(page_size, int) or page_size < 1:
            raise DataAccessError(f"Invalid page size {page_size!r} for {procedure}", procedure=procedure)

        paged = {**parameters, "PageIndex": page_index, "PageSize": page_size}
        statement, params = self._prepare(procedure, paged)

        async with self.session_factory() as session:
            async with db_error_handler(session, procedure):
                result = await session.execute(text(statement), params)
                rows = [dict(row) for row in result.mappings().all()]

                if rows and TOTAL_ROWS_COLUMN in rows[0]:
                    total = int(rows[0][TOTAL_ROWS_COLUMN] or 0)
                    window = rows[:page_size]
                elif not rows and page_index > 1:
                    total = await self._count_rows(session, statement, params)
                    window = []
                else:
                    total = len(rows)
                    offset = (page_index - 1) * page_size
                    window = rows[offset:offset + page_size]

                items = [model.model_validate(row) for row in window]

        logger.debug(
            "repo.get_page.success",
            extra={"procedure": procedure, "page_index": page_index, "page_size": page_size, "total": total},
        )
        return PaginationModel[model](
            items=items,
            page_index=page_index,
            page_size=page_size,
            total_count=max(total, len(items)),
        )

    # =================================================================================================================
    # Helpers
    # =================================================================================================================

    async def _count_rows(self, session: AsyncSession, statement: str, params: dict[str, Any]) -> int:
        result = await session.execute(text(statement), {**params, "PageIndex": 1, "PageSize": 1})
        first = result.mappings().first()
        if first is None:
            return 0
        return int(first.get(TOTAL_ROWS_COLUMN) or 0)

    def _prepare(self, procedure: str, parameters: Mapping[str, Any]) -> tuple[str, dict[str, Any]]:
        """Validate the call and build (statement, bind params). Raises DataAccessError before any I/O."""
        if not is_valid_procedure_name(procedure):
            raise DataAccessError(f"Invalid stored procedure name: {procedure!r}", procedure=procedure)

        invalid = find_invalid_parameter_names(parameters.keys())
        if invalid:
            raise DataAccessError(
                f"Invalid parameter name(s) for {procedure}: {', '.join(map(repr, invalid))}",
                procedure=procedure,
            )

        params = {key: to_db_value(value) for key, value in parameters.items()}
        statement = build_statement(procedure, list(params), self.procedure_style)

        # keys only, values may hold credentials
        logger.debug(
            "repo.call.start",
            extra={"procedure": procedure, "activity": params.get("Activity"), "parameter_keys": sorted(params)},
        )
        return statement, params
