"""
Generic per-entity service.

One class serves every entity in `definitions.DEFINITIONS`. Each operation
validates, makes its stored-procedure call(s) through the gateway, maps the
rows and returns an `Ok` / `Failure`. Gateway and asset-storage errors are not
caught here; they propagate to the exception middleware.
"""

import logging
import uuid
from typing import Any

from pydantic import BaseModel

from ecommerce.exceptions.base import DuplicateError, InternalServerError, NotFoundError
from ecommerce.mapping.mapper import Mapper
from ecommerce.models.common import FilterRequest, RecordModel
from ecommerce.repositories.database_repository import Activity, DataGateway

from .assets import AssetStorage
from .definitions import EntityDefinition
from .result import Failure, Ok, ServiceResult

logger = logging.getLogger(__name__)


class EntityService:
    def __init__(
        self,
        definition: EntityDefinition,
        gateway: DataGateway,
        mapper: Mapper,
        assets: AssetStorage | None = None,
    ):
        self.definition = definition
        self.gateway = gateway
        self.mapper = mapper
        self.assets = assets

    # =================================================================================================================
    # Queries
    # =================================================================================================================

    async def get_all(self, filter: FilterRequest) -> ServiceResult:
        """Search and paging are done by the procedure; rows come back already filtered."""
        d = self.definition
        page = await self.gateway.get_page(
            d.procedure,
            filter.page_index,
            filter.page_size,
            {"Activity": Activity.GET_ALL, "SearchString": filter.search_string},
            d.record,
        )
        return Ok(self.mapper.map_page(page, d.model))

    async def get_by_id(self, id: uuid.UUID) -> ServiceResult:
        record = await self.find_by_id(id)
        if record is None:
            return self._not_found()
        return Ok(self.mapper.map(record, self.definition.model))

    async def get_details(self, id: uuid.UUID) -> ServiceResult:
        d = self.definition
        if d.details_model is None:
            return Failure(NotFoundError(f"{d.title} details are not available"))

        details = await self.gateway.get_one(
            d.procedure,
            {"Activity": Activity.GET_DETAILS_BY_ID, "Id": id},
            d.details_model,
        )
        if details is None:
            return self._not_found()
        return Ok(details)

    async def find_by_id(self, id: uuid.UUID) -> RecordModel | None:
        d = self.definition
        return await self.gateway.get_one(d.procedure, {"Activity": Activity.GET_BY_ID, "Id": id}, d.record)

    async def exists(self, id: uuid.UUID) -> bool:
        return await self.find_by_id(id) is not None

    async def check_duplicate(self, data: BaseModel) -> bool:
        """True when a row with the same unique value(s) already exists."""
        d = self.definition
        parameters: dict[str, Any] = {"Activity": Activity.CHECK_DUPLICATE}
        for field in d.duplicate_fields:
            parameters[d.record.column_name(field)] = getattr(data, field)
        return await self.gateway.get_one(d.procedure, parameters, d.record) is not None

    # =================================================================================================================
    # Commands
    # =================================================================================================================

    async def create(self, data: BaseModel) -> ServiceResult:
        d = self.definition
        if await self.check_duplicate(data):
            logger.info("service.create.duplicate", extra={"entity": d.name, "fields": list(d.duplicate_fields)})
            return Failure(
                DuplicateError(f"{d.title} with the same {d.duplicate_label} already exists.", fields=d.duplicate_fields)
            )

        record = self.mapper.map(data, d.record)
        record.id = uuid.uuid4()
        if d.asset_field:
            reference = getattr(data, d.asset_field, None)
            setattr(record, d.asset_field, await self._relocate(reference) if reference else None)

        return await self.save(record, Activity.INSERT, success=f"Create {d.name} success", failure=f"Create {d.name} failed")

    async def update(self, id: uuid.UUID, data: BaseModel) -> ServiceResult:
        d = self.definition
        existing = await self.find_by_id(id)
        if existing is None:
            return self._not_found()

        record = self.mapper.map(data, d.record)
        record.id = id
        if d.asset_field:
            new = getattr(data, d.asset_field, None)
            old = getattr(existing, d.asset_field, None)
            setattr(record, d.asset_field, await self.reconcile_asset(new, old))

        return await self.save(record, Activity.UPDATE, success=f"Update {d.name} success", failure=f"Update {d.name} failed")

    async def change_status(self, id: uuid.UUID) -> ServiceResult:
        """Toggles the status flag; calling it twice restores the original state."""
        d = self.definition
        return await self._execute_existing(
            id, Activity.CHANGE_STATUS, success="Change status success", failure=f"Change status {d.name} failed"
        )

    async def delete(self, id: uuid.UUID) -> ServiceResult:
        d = self.definition
        return await self._execute_existing(
            id, Activity.DELETE, success=f"Delete {d.name} success", failure=f"Delete {d.name} failed"
        )

    async def save(self, record: RecordModel, activity: Activity, *, success: str, failure: str) -> ServiceResult:
        """Send an INSERT / UPDATE with the definition's column list for that activity."""
        d = self.definition
        fields = d.insert_fields if activity is Activity.INSERT else d.update_fields
        parameters: dict[str, Any] = {"Activity": activity, "Id": record.id}
        for field in fields:
            parameters[d.record.column_name(field)] = getattr(record, field)

        if not await self.gateway.execute(d.procedure, parameters):
            logger.warning("service.save.no_rows", extra={"entity": d.name, "activity": activity.value})
            return Failure(InternalServerError(failure))

        logger.info("service.save.success", extra={"entity": d.name, "activity": activity.value, "id": str(record.id)})
        return Ok(message=success)

    # =================================================================================================================
    # Assets
    # =================================================================================================================

    async def reconcile_asset(self, new: str | None, old: str | None) -> str | None:
        """
        Return the reference to persist after an update.

            new   old     action
            -     -       nothing
            A     -       move A
            A     B       delete B, move A
            -     B       delete B
            A     A       keep A
        """
        if new and new == old:
            return old
        if old:
            await self.assets.delete(old)
        if new:
            return await self._relocate(new)
        return None

    async def _relocate(self, reference: str) -> str:
        return await self.assets.move(reference, self.definition.asset_folder)

    # =================================================================================================================
    # Helpers
    # =================================================================================================================

    async def _execute_existing(self, id: uuid.UUID, activity: Activity, *, success: str, failure: str) -> ServiceResult:
        d = self.definition
        if not await self.exists(id):
            return self._not_found()
        if not await self.gateway.execute(d.procedure, {"Activity": activity, "Id": id}):
            logger.warning("service.execute.no_rows", extra={"entity": d.name, "activity": activity.value})
            return Failure(InternalServerError(failure))
        return Ok(message=success)

    def _not_found(self) -> Failure:
        return Failure(NotFoundError(f"The {self.definition.name} is not found"))
