import uuid
from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import Field, model_validator

from .common import RecordModel, TransferModel

DiscountType = Literal["PERCENT", "AMOUNT"]


class Promotion(RecordModel):
    """Row of sp_Promotions. Discount rules are evaluated elsewhere; this is plain CRUD."""

    id: uuid.UUID | None = None
    user_id: uuid.UUID | None = None
    code: str = ""
    discount_type: str = "PERCENT"
    discount_value: Decimal = Decimal("0")
    minimum_order_amount: Decimal = Decimal("0")
    is_active: bool = True
    start_date: datetime | None = None
    end_date: datetime | None = None
    created: datetime | None = None
    modified: datetime | None = None


class PromotionModel(TransferModel):
    id: uuid.UUID | None = None
    user_id: uuid.UUID | None = None
    code: str = ""
    discount_type: str = "PERCENT"
    discount_value: Decimal = Decimal("0")
    minimum_order_amount: Decimal = Decimal("0")
    is_active: bool = True
    start_date: datetime | None = None
    end_date: datetime | None = None
    created: datetime | None = None
    modified: datetime | None = None


class EditPromotionModel(TransferModel):
    user_id: uuid.UUID | None = None
    code: str = Field(min_length=1, max_length=64)
    discount_type: DiscountType = "PERCENT"
    discount_value: Decimal = Field(default=Decimal("0"), ge=0)
    minimum_order_amount: Decimal = Field(default=Decimal("0"), ge=0)
    is_active: bool = True
    start_date: datetime | None = None
    end_date: datetime | None = None

    @model_validator(mode="after")
    def _check_window(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("endDate must not be earlier than startDate")
        return self
