import uuid
from datetime import datetime

from pydantic import Field

from .common import RecordModel, TransferModel


class Supplier(RecordModel):
    """Row of sp_Suppliers."""

    id: uuid.UUID | None = None
    name: str = ""
    contact_person: str | None = None
    email: str | None = None
    phone_number: str | None = None
    address: str | None = None
    status: bool = True
    created: datetime | None = None
    modified: datetime | None = None


class SupplierModel(TransferModel):
    id: uuid.UUID | None = None
    name: str = ""
    contact_person: str | None = None
    email: str | None = None
    phone_number: str | None = None
    address: str | None = None
    status: bool = True
    created: datetime | None = None
    modified: datetime | None = None


class EditSupplierModel(TransferModel):
    name: str = Field(min_length=1, max_length=255)
    contact_person: str | None = None
    email: str | None = None
    phone_number: str | None = Field(default=None, max_length=32)
    address: str | None = None
    status: bool = True
