import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from ecommerce.exceptions import (
    STATUS_BY_KIND,
    AppError,
    BadRequestError,
    DataAccessError,
    DuplicateError,
    ErrorKind,
    ForbiddenError,
    InternalServerError,
    NotFoundError,
    UnauthorizedError,
)
from ecommerce.exceptions.mapper import db_error_handler, is_unique_violation, map_database_error
from ecommerce.tests.test_fixtures.fakes import FakeSession


class _DriverError(Exception):
    """Looks like a DBAPI exception; `pgcode` is what psycopg exposes."""

    def __init__(self, message, pgcode=None):
        super().__init__(message)
        self.pgcode = pgcode


def integrity_error(message, pgcode=None) -> IntegrityError:
    return IntegrityError("EXEC sp_Brands", {}, _DriverError(message, pgcode))


class TestErrorKinds:
    """
    Tests covering the closed set of error kinds and the kind -> HTTP status table.

    Rationale:
      - Every AppError subclass maps to exactly one kind, and every kind to one status,
        so the boundary never has to guess.
    """

    def test_every_kind_has_a_status(self):
        assert set(STATUS_BY_KIND) == set(ErrorKind)

    @pytest.mark.parametrize(
        "error, status",
        [
            (NotFoundError("x"), 404),
            (BadRequestError("x"), 400),
            (DuplicateError("x"), 400),
            (UnauthorizedError("x"), 401),
            (ForbiddenError("x"), 403),
            (InternalServerError("x"), 500),
            (DataAccessError("x"), 500),
        ],
    )
    def test_http_status_follows_kind(self, error, status):
        assert error.http_status() == status

    def test_payload_is_the_error_envelope(self):
        assert NotFoundError("The brand is not found").to_payload() == {
            "statusCode": 404,
            "message": "The brand is not found",
            "data": None,
        }

    def test_app_error_is_an_exception(self):
        assert issubclass(AppError, Exception)

    def test_default_message(self):
        assert ForbiddenError().message == "Forbidden"
        assert str(DataAccessError()) == "Database call failed"


class TestErrorImmutability:

    def test_message_cannot_be_reassigned(self):
        err = NotFoundError("first")
        with pytest.raises(AttributeError):
            err.message = "second"

    def test_private_state_cannot_be_changed(self):
        err = DuplicateError("dup", fields=["name"])
        with pytest.raises(AttributeError):
            err._message = "changed"
        with pytest.raises(AttributeError):
            err.extra = 1
        assert err.message == "dup"
        assert err.fields == ("name",)

    def test_can_still_be_chained(self):
        cause = ValueError("boom")
        with pytest.raises(DataAccessError) as exc_info:
            try:
                raise cause
            except ValueError as exc:
                raise DataAccessError("wrapped", procedure="sp_Brands") from exc
        assert exc_info.value.__cause__ is cause
        assert exc_info.value.procedure == "sp_Brands"


class TestUniqueViolation:
    """
    Unique-key violations are recognized from the Postgres SQLSTATE or from the
    SQL Server / generic driver messages; foreign-key violations are not duplicates.
    """

    def test_postgres_sqlstate(self):
        assert is_unique_violation(integrity_error("violates", pgcode="23505"))

    @pytest.mark.parametrize(
        "message",
        [
            "[23000] [Microsoft][ODBC Driver 18 for SQL Server]Violation of UNIQUE KEY constraint 'UQ_Brands_Name'. (2627)",
            "Cannot insert duplicate key row in object 'dbo.Brands' with unique index 'IX_Name'. (2601)",
            "UNIQUE constraint failed: brands.name",
        ],
    )
    def test_driver_messages(self, message):
        assert is_unique_violation(integrity_error(message))

    def test_foreign_key_is_not_a_duplicate(self):
        assert not is_unique_violation(integrity_error("FOREIGN KEY constraint failed", pgcode="23503"))

    def test_map_duplicate(self):
        error = map_database_error(integrity_error("duplicate key value", pgcode="23505"), "sp_Brands")
        assert isinstance(error, DuplicateError)
        assert error.kind is ErrorKind.BAD_REQUEST

    def test_map_other_error(self):
        error = map_database_error(OperationalError("EXEC sp_Brands", {}, _DriverError("login timeout")), "sp_Brands")
        assert isinstance(error, DataAccessError)
        assert error.procedure == "sp_Brands"
        assert "login timeout" in error.message


@pytest.mark.asyncio
class TestDbErrorHandler:
    """
    Tests covering the db_error_handler() context manager.

    Fixtures used:
      - none; a FakeSession records rollbacks.
    """

    async def test_rolls_back_and_maps(self):
        """
        Behavior:
          - A driver error inside the block rolls the session back and is re-raised as DataAccessError.
        """
        session = FakeSession()
        with pytest.raises(DataAccessError) as exc_info:
            async with db_error_handler(session, "sp_Products"):
                raise OperationalError("EXEC sp_Products", {}, _DriverError("connection reset"))

        assert session.rollbacks == 1
        assert isinstance(exc_info.value.__cause__, OperationalError)

    async def test_duplicate_is_mapped(self):
        session = FakeSession()
        with pytest.raises(DuplicateError):
            async with db_error_handler(session, "sp_Brands"):
                raise integrity_error("duplicate key", pgcode="23505")
        assert session.rollbacks == 1

    async def test_app_errors_pass_through_untouched(self):
        session = FakeSession()
        original = NotFoundError("missing")
        with pytest.raises(NotFoundError) as exc_info:
            async with db_error_handler(session, "sp_Brands"):
                raise original
        assert exc_info.value is original
        assert session.rollbacks == 0

    async def test_success_does_nothing(self):
        session = FakeSession()
        async with db_error_handler(session, "sp_Brands"):
            pass
        assert session.rollbacks == 0
