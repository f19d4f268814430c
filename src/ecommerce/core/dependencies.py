"""
FastAPI dependencies. The gateway, mapper and asset storage are created once by
the application factory and kept on `app.state`; services are cheap and built
per request.
"""

from fastapi import Depends, Request

from ecommerce.mapping.mapper import Mapper
from ecommerce.repositories.database_repository import DataGateway
from ecommerce.services.assets import AssetStorage
from ecommerce.services.definitions import EntityDefinition
from ecommerce.services.entity_service import EntityService
from ecommerce.services.user_service import UserService


def get_gateway(request: Request) -> DataGateway:
    return request.app.state.gateway


def get_mapper(request: Request) -> Mapper:
    return request.app.state.mapper


def get_asset_storage(request: Request) -> AssetStorage:
    return request.app.state.assets


def entity_service_provider(definition: EntityDefinition):
    """Build the dependency that yields an EntityService for `definition`."""

    def provide(
        gateway: DataGateway = Depends(get_gateway),
        mapper: Mapper = Depends(get_mapper),
        assets: AssetStorage = Depends(get_asset_storage),
    ) -> EntityService:
        return EntityService(definition, gateway, mapper, assets)

    return provide


def get_user_service(
    gateway: DataGateway = Depends(get_gateway),
    mapper: Mapper = Depends(get_mapper),
    assets: AssetStorage = Depends(get_asset_storage),
) -> UserService:
    return UserService(gateway, mapper, assets)
