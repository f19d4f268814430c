import uuid
from datetime import datetime

from pydantic import AliasChoices, Field

from .common import RecordModel, TransferModel


class Brand(RecordModel):
    """Row of sp_Brands."""

    id: uuid.UUID | None = None
    name: str = ""
    # column is spelled LogoURL, not LogoUrl
    logo_url: str | None = Field(default=None, alias="LogoURL")
    description: str | None = None
    status: bool = True
    created: datetime | None = None
    modified: datetime | None = None


_LOGO_URL = dict(
    validation_alias=AliasChoices("logo_url", "logoUrl", "LogoURL"),
    serialization_alias="logoUrl",
)


class BrandModel(TransferModel):
    id: uuid.UUID | None = None
    name: str = ""
    logo_url: str | None = Field(default=None, **_LOGO_URL)
    description: str | None = None
    status: bool = True
    created: datetime | None = None
    modified: datetime | None = None


class BrandDetailsModel(BrandModel):
    """GET_DETAILS_BY_ID adds aggregate columns to the brand row."""

    product_count: int = 0


class EditBrandModel(TransferModel):
    name: str = Field(min_length=1, max_length=255)
    # temporary upload reference on input; replaced by the durable path before persisting
    logo_url: str | None = Field(default=None, **_LOGO_URL)
    description: str | None = None
    status: bool = True
