import uuid

from fastapi import APIRouter, Depends

from ecommerce.core.dependencies import get_user_service
from ecommerce.models import EditProfileModel, UserRegistrationModel
from ecommerce.services.definitions import USER
from ecommerce.services.user_service import UserService

from .error_handlers import to_response
from .routes import build_entity_router


def build_user_router(*, default_page_size: int = 10, max_page_size: int = 100) -> APIRouter:
    """Standard user CRUD plus self-service registration and profile edit."""
    router = build_entity_router(
        USER,
        provide=get_user_service,
        default_page_size=default_page_size,
        max_page_size=max_page_size,
    )

    @router.post("/register", response_model=None, summary="Register an account")
    async def register(data: UserRegistrationModel, service: UserService = Depends(get_user_service)):
        return to_response(await service.register(data))

    @router.put("/{id}/profile", response_model=None, summary="Edit own profile")
    async def update_profile(id: uuid.UUID, data: EditProfileModel, service: UserService = Depends(get_user_service)):
        return to_response(await service.update_profile(id, data))

    return router
