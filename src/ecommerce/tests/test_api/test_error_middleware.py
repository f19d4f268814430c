import uuid

import pytest
from fastapi.testclient import TestClient

from ecommerce.api.v1.error_handlers import to_response
from ecommerce.exceptions import (
    STATUS_BY_KIND,
    BadRequestError,
    DataAccessError,
    ErrorKind,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
)
from ecommerce.main import create_app
from ecommerce.services import Failure, Ok
from ecommerce.tests.test_fixtures.fakes import FakeAssetStorage, FakeDatabaseRepository


class RaisingGateway(FakeDatabaseRepository):
    """Every read raises the configured exception."""

    def __init__(self, error: Exception):
        super().__init__()
        self.error = error

    async def get_one(self, procedure, parameters, model):
        raise self.error

    async def get_page(self, procedure, page_index, page_size, parameters, model):
        raise self.error


def client_for(test_settings, error: Exception) -> TestClient:
    app = create_app(test_settings, gateway=RaisingGateway(error), asset_storage=FakeAssetStorage())
    return TestClient(app, raise_server_exceptions=False)


class TestExceptionHandlingMiddleware:
    """
    Tests covering ExceptionHandlingMiddleware end to end through the app.

    Fixtures used:
      - test_settings: Settings without an env file, text logging.
      - client_for(): builds an app whose gateway raises the given exception on every call.

    Rationale:
      - Any error raised below the routes becomes {statusCode, message, data: null}
        with the HTTP status of its kind; unknown exceptions are 500.
    """

    @pytest.mark.parametrize(
        "error, status",
        [
            (NotFoundError("X not found"), 404),
            (BadRequestError("bad input"), 400),
            (UnauthorizedError("login required"), 401),
            (ForbiddenError("not allowed"), 403),
            (DataAccessError("Database call sp_Brands failed: timeout", procedure="sp_Brands"), 500),
        ],
    )
    def test_raised_app_errors_become_envelopes(self, test_settings, error, status):
        """
        Behavior:
          - NotFoundError("X not found") raised by the gateway answers 404 with
            {"statusCode": 404, "message": "X not found", "data": null}; likewise for each kind.

        Importance:
          - Clients read the status from the body as well as the response line; the two must agree.
        """
        with client_for(test_settings, error) as client:
            resp = client.get(f"/api/v1/brands/{uuid.uuid4()}")

        assert resp.status_code == status
        assert resp.json() == {"statusCode": status, "message": error.message, "data": None}

    def test_unknown_exception_is_internal(self, test_settings):
        with client_for(test_settings, RuntimeError("something broke")) as client:
            resp = client.get("/api/v1/brands")

        assert resp.status_code == 500
        assert resp.json() == {"statusCode": 500, "message": "something broke", "data": None}

    def test_error_response_carries_request_id(self, test_settings):
        """
        Behavior:
          - RequestIDMiddleware wraps the error middleware, so error responses still echo X-Request-ID.
        """
        with client_for(test_settings, NotFoundError("X not found")) as client:
            resp = client.get(f"/api/v1/brands/{uuid.uuid4()}", headers={"X-Request-ID": "req-42"})

        assert resp.status_code == 404
        assert resp.headers["X-Request-ID"] == "req-42"


class TestToResponse:
    """to_response(): Ok -> 200, Failure -> the status of its kind, anything else is a programming error."""

    def test_ok(self):
        resp = to_response(Ok({"id": 1}, message="Create brand success"))
        assert resp.status_code == 200
        assert resp.body == b'{"statusCode":200,"message":"Create brand success","data":{"id":1}}'

    @pytest.mark.parametrize("kind", list(ErrorKind))
    def test_failure_status_follows_kind(self, kind):
        error = next(
            e
            for e in (
                NotFoundError("m"),
                BadRequestError("m"),
                UnauthorizedError("m"),
                ForbiddenError("m"),
                DataAccessError("m"),
            )
            if e.kind is kind
        )
        resp = to_response(Failure(error))
        assert resp.status_code == STATUS_BY_KIND[kind]

    def test_rejects_other_values(self):
        with pytest.raises(TypeError):
            to_response("not a result")
