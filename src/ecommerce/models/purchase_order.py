import json
import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import Field, field_validator

from .common import RecordModel, TransferModel


class PurchaseOrderLine(RecordModel):
    product_id: uuid.UUID | None = None
    quantity: int = 0
    unit_price: Decimal = Decimal("0")


class PurchaseOrder(RecordModel):
    """
    Row of sp_PurchaseOrders. Line items travel as a JSON array in the
    `Details` column/parameter.
    """

    id: uuid.UUID | None = None
    code: str = ""
    supplier_id: uuid.UUID | None = None
    order_date: datetime | None = None
    total_amount: Decimal = Decimal("0")
    note: str | None = None
    status: bool = True
    details: list[PurchaseOrderLine] = Field(default_factory=list)
    created: datetime | None = None
    modified: datetime | None = None

    @field_validator("details", mode="before")
    @classmethod
    def _parse_details_json(cls, value):
        if isinstance(value, (str, bytes)):
            return json.loads(value) if value else []
        return value if value is not None else []


class PurchaseOrderLineModel(TransferModel):
    product_id: uuid.UUID | None = None
    product_name: str | None = None
    quantity: int = 0
    unit_price: Decimal = Decimal("0")


class PurchaseOrderModel(TransferModel):
    id: uuid.UUID | None = None
    code: str = ""
    supplier_id: uuid.UUID | None = None
    order_date: datetime | None = None
    total_amount: Decimal = Decimal("0")
    note: str | None = None
    status: bool = True
    created: datetime | None = None
    modified: datetime | None = None


class PurchaseOrderDetailsModel(PurchaseOrderModel):
    supplier_name: str | None = None
    details: list[PurchaseOrderLineModel] = Field(default_factory=list)

    @field_validator("details", mode="before")
    @classmethod
    def _parse_details_json(cls, value):
        if isinstance(value, (str, bytes)):
            return json.loads(value) if value else []
        return value if value is not None else []


class EditPurchaseOrderLineModel(TransferModel):
    product_id: uuid.UUID
    quantity: int = Field(gt=0)
    unit_price: Decimal = Field(ge=0)


class EditPurchaseOrderModel(TransferModel):
    code: str = Field(min_length=1, max_length=64)
    supplier_id: uuid.UUID
    order_date: datetime | None = None
    note: str | None = None
    status: bool = True
    details: list[EditPurchaseOrderLineModel] = Field(default_factory=list)
