"""
Router factory shared by every entity.

    router = build_entity_router(BRAND)

gives
    GET    /brands                 paged list (searchString, pageIndex, pageSize)
    GET    /brands/{id}
    GET    /brands/{id}/details    only for entities with a details model
    POST   /brands
    PUT    /brands/{id}
    PATCH  /brands/{id}/status     toggles the status flag
    DELETE /brands/{id}

Every endpoint returns a ResponseEnvelope built by `to_response`.
"""

# No `from __future__ import annotations`: the body type is taken from the
# definition at runtime and FastAPI must see the real class.

import uuid
from typing import Callable

from fastapi import APIRouter, Depends, Query

from ecommerce.core.dependencies import entity_service_provider
from ecommerce.models.common import FilterRequest
from ecommerce.services.definitions import EntityDefinition
from ecommerce.services.entity_service import EntityService

from .error_handlers import to_response


def build_entity_router(
    definition: EntityDefinition,
    *,
    provide: Callable[..., EntityService] | None = None,
    default_page_size: int = 10,
    max_page_size: int = 100,
) -> APIRouter:
    router = APIRouter(prefix=f"/{definition.path}", tags=[definition.path])
    provide = provide or entity_service_provider(definition)
    EditModel = definition.edit_model

    @router.get("", response_model=None, summary=f"List {definition.path}")
    async def get_all(
        search_string: str | None = Query(default=None, alias="searchString"),
        page_index: int = Query(default=1, ge=1, alias="pageIndex"),
        page_size: int = Query(default=default_page_size, ge=1, le=max_page_size, alias="pageSize"),
        service: EntityService = Depends(provide),
    ):
        filter = FilterRequest(search_string=search_string, page_index=page_index, page_size=page_size)
        return to_response(await service.get_all(filter))

    @router.get("/{id}", response_model=None, summary=f"Get one {definition.name}")
    async def get_by_id(id: uuid.UUID, service: EntityService = Depends(provide)):
        return to_response(await service.get_by_id(id))

    if definition.details_model is not None:

        @router.get("/{id}/details", response_model=None, summary=f"Get {definition.name} details")
        async def get_details(id: uuid.UUID, service: EntityService = Depends(provide)):
            return to_response(await service.get_details(id))

    @router.post("", response_model=None, summary=f"Create a {definition.name}")
    async def create(data: EditModel, service: EntityService = Depends(provide)):
        return to_response(await service.create(data))

    @router.put("/{id}", response_model=None, summary=f"Update a {definition.name}")
    async def update(id: uuid.UUID, data: EditModel, service: EntityService = Depends(provide)):
        return to_response(await service.update(id, data))

    @router.patch("/{id}/status", response_model=None, summary=f"Toggle {definition.name} status")
    async def change_status(id: uuid.UUID, service: EntityService = Depends(provide)):
        return to_response(await service.change_status(id))

    @router.delete("/{id}", response_model=None, summary=f"Delete a {definition.name}")
    async def delete(id: uuid.UUID, service: EntityService = Depends(provide)):
        return to_response(await service.delete(id))

    return router
