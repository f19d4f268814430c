import uuid
from datetime import datetime

from pydantic import Field

from .common import RecordModel, TransferModel


class Category(RecordModel):
    """Row of sp_Categories."""

    id: uuid.UUID | None = None
    name: str = ""
    image: str | None = None
    description: str | None = None
    parent_id: uuid.UUID | None = None
    status: bool = True
    created: datetime | None = None
    modified: datetime | None = None


class CategoryModel(TransferModel):
    id: uuid.UUID | None = None
    name: str = ""
    image: str | None = None
    description: str | None = None
    parent_id: uuid.UUID | None = None
    status: bool = True
    created: datetime | None = None
    modified: datetime | None = None


class EditCategoryModel(TransferModel):
    name: str = Field(min_length=1, max_length=255)
    image: str | None = None
    description: str | None = None
    parent_id: uuid.UUID | None = None
    status: bool = True
