import uuid

from pydantic import Field

from .common import RecordModel, TransferModel


class Role(RecordModel):
    """Row of sp_Roles."""

    id: uuid.UUID | None = None
    name: str = ""
    description: str | None = None
    status: bool = True


class RoleModel(TransferModel):
    id: uuid.UUID | None = None
    name: str = ""
    description: str | None = None
    status: bool = True


class EditRoleModel(TransferModel):
    name: str = Field(min_length=1, max_length=128)
    description: str | None = None
    status: bool = True
