from fastapi import APIRouter

from ecommerce.services.definitions import DEFINITIONS, USER

from .routes import build_entity_router
from .users import build_user_router


def build_api_router(*, default_page_size: int = 10, max_page_size: int = 100) -> APIRouter:
    """All entity routers under one /api/v1 router."""
    api = APIRouter(prefix="/api/v1")
    for definition in DEFINITIONS.values():
        if definition is USER:
            api.include_router(build_user_router(default_page_size=default_page_size, max_page_size=max_page_size))
        else:
            api.include_router(
                build_entity_router(definition, default_page_size=default_page_size, max_page_size=max_page_size)
            )
    return api
