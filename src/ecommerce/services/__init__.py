from .assets import AssetStorage, LocalAssetStorage
from .definitions import DEFINITIONS, EntityDefinition, get_definition
from .entity_service import EntityService
from .result import Failure, Ok, ServiceResult
from .user_service import UserService

__all__ = [
    "AssetStorage",
    "LocalAssetStorage",
    "DEFINITIONS",
    "EntityDefinition",
    "get_definition",
    "EntityService",
    "Failure",
    "Ok",
    "ServiceResult",
    "UserService",
]
