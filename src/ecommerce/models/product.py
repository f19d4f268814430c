import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import Field

from .common import RecordModel, TransferModel


class Product(RecordModel):
    """Row of sp_Products."""

    id: uuid.UUID | None = None
    name: str = ""
    description: str | None = None
    image: str | None = None
    price: Decimal = Decimal("0")
    brand_id: uuid.UUID | None = None
    category_id: uuid.UUID | None = None
    supplier_id: uuid.UUID | None = None
    status: bool = True
    created: datetime | None = None
    modified: datetime | None = None


class ProductModel(TransferModel):
    id: uuid.UUID | None = None
    name: str = ""
    description: str | None = None
    image: str | None = None
    price: Decimal = Decimal("0")
    brand_id: uuid.UUID | None = None
    category_id: uuid.UUID | None = None
    supplier_id: uuid.UUID | None = None
    status: bool = True
    created: datetime | None = None
    modified: datetime | None = None


class ProductDetailsModel(ProductModel):
    brand_name: str | None = None
    category_name: str | None = None
    supplier_name: str | None = None


class EditProductModel(TransferModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    image: str | None = None
    price: Decimal = Field(default=Decimal("0"), ge=0)
    brand_id: uuid.UUID | None = None
    category_id: uuid.UUID | None = None
    supplier_id: uuid.UUID | None = None
    status: bool = True
