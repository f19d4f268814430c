"""
Core pytest configuration for the entire test suite.

No test needs a database server: the stored-procedure gateway is replaced by
the in-memory FakeDatabaseRepository, and the real DatabaseRepository is
exercised against FakeSession.

Domain-specific fixtures live in:
- tests/test_fixtures/app_fixtures.py   (settings, fake gateway, services, TestClient)
- tests/test_fixtures/fakes.py          (the fakes themselves)
"""

import logging

# Quiet noisy third-party loggers before anything imports them.
NOISY_LOGGERS = (
    "sqlalchemy",
    "sqlalchemy.engine",
    "sqlalchemy.engine.Engine",
    "asyncio",
    "httpx",
    "urllib3",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

import pytest  # noqa: E402


@pytest.fixture(autouse=True)
def clear_request_id():
    """Tests that set a request id must not leak it into the next test."""
    from ecommerce.core.logging.filters import reset_request_id, set_request_id

    token = set_request_id(None)
    yield
    reset_request_id(token)


# App / service fixtures
from .test_fixtures.app_fixtures import (  # noqa: E402,F401
    app,
    assets,
    brand_service,
    client,
    gateway,
    mapper,
    test_settings,
    user_service,
)
