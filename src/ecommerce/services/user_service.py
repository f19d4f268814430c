import logging
import uuid

from ecommerce.exceptions.base import DuplicateError
from ecommerce.mapping.mapper import Mapper
from ecommerce.models import EditProfileModel, User, UserRegistrationModel
from ecommerce.repositories.database_repository import Activity, DataGateway

from .assets import AssetStorage
from .definitions import USER
from .entity_service import EntityService
from .result import Failure, ServiceResult

logger = logging.getLogger(__name__)

# fields a user may change on their own profile
PROFILE_FIELDS = ("first_name", "last_name", "phone_number", "address", "email_confirmed")


class UserService(EntityService):
    """Admin CRUD for users plus self-service registration and profile edits."""

    def __init__(self, gateway: DataGateway, mapper: Mapper, assets: AssetStorage | None = None):
        super().__init__(USER, gateway, mapper, assets)

    async def register(self, data: UserRegistrationModel) -> ServiceResult:
        if await self.check_duplicate(data):
            logger.info("service.register.duplicate", extra={"entity": "user"})
            return Failure(DuplicateError("User with the same email already exists.", fields=("email",)))

        user = self.mapper.map(data, User)
        user.id = uuid.uuid4()
        return await self.save(user, Activity.INSERT, success="Register success", failure="Register failed")

    async def update_profile(self, id: uuid.UUID, data: EditProfileModel) -> ServiceResult:
        """
        Apply a profile edit on top of the stored account; username, email and the
        password hash are carried over unchanged.
        """
        existing = await self.find_by_id(id)
        if existing is None:
            return self._not_found()

        edited = self.mapper.map(data, User)
        changes = {field: getattr(edited, field) for field in PROFILE_FIELDS}
        changes["avatar"] = await self.reconcile_asset(data.avatar, existing.avatar)
        user = existing.model_copy(update=changes)

        return await self.save(user, Activity.UPDATE, success="Update profile success", failure="Update profile failed")
