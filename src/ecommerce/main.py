"""
Application factory.

    uvicorn ecommerce.main:create_app --factory

Tests build the app with an in-memory gateway:

    app = create_app(settings, gateway=FakeDatabaseRepository(), asset_storage=FakeAssetStorage())
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ecommerce.api.v1 import build_api_router
from ecommerce.api.v1.error_handlers import ExceptionHandlingMiddleware, envelope_response, register_exception_handlers
from ecommerce.config.settings import Settings, get_settings
from ecommerce.core.logging import RequestIDMiddleware, setup_logging
from ecommerce.database.session import create_engine, create_session_factory
from ecommerce.mapping.profile import get_mapper
from ecommerce.repositories.database_repository import DatabaseRepository, DataGateway
from ecommerce.services.assets import AssetStorage, LocalAssetStorage
from ecommerce.utils.logging import get_project_name, get_project_version

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    *,
    gateway: DataGateway | None = None,
    asset_storage: AssetStorage | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    engine = None
    if gateway is None:
        engine = create_engine(settings)
        gateway = DatabaseRepository(create_session_factory(engine), settings.DB_PROCEDURE_STYLE)
    if asset_storage is None:
        asset_storage = LocalAssetStorage(settings.ASSET_ROOT, settings.ASSET_TEMP_DIR)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("app.startup", extra={"env": settings.ENV, "procedure_style": settings.DB_PROCEDURE_STYLE})
        yield
        if engine is not None:
            await engine.dispose()
        logger.info("app.shutdown")

    app = FastAPI(title=get_project_name(), version=get_project_version(), lifespan=lifespan)
    app.state.settings = settings
    app.state.gateway = gateway
    app.state.mapper = get_mapper()
    app.state.assets = asset_storage

    # last added runs first: RequestIDMiddleware wraps ExceptionHandlingMiddleware
    app.add_middleware(ExceptionHandlingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    register_exception_handlers(app)

    app.include_router(
        build_api_router(default_page_size=settings.DEFAULT_PAGE_SIZE, max_page_size=settings.MAX_PAGE_SIZE)
    )

    @app.get("/health", response_model=None, tags=["health"])
    async def health():
        return envelope_response(200, "Success", {"status": "ok", "version": get_project_version()})

    return app
