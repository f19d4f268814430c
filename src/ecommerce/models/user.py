import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import Field

from .common import RecordModel, TransferModel


class User(RecordModel):
    """Row of sp_Users."""

    id: uuid.UUID | None = None
    username: str = ""
    email: str = ""
    password_hash: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    address: str | None = None
    avatar: str | None = None
    email_confirmed: bool = False
    total_amount_owed: Decimal = Decimal("0")
    status: bool = True
    created: datetime | None = None
    modified: datetime | None = None


class UserModel(TransferModel):
    """Public projection of a user; the password hash is not part of it."""

    id: uuid.UUID | None = None
    username: str = ""
    email: str = ""
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    address: str | None = None
    avatar: str | None = None
    email_confirmed: bool = False
    total_amount_owed: Decimal = Decimal("0")
    status: bool = True
    created: datetime | None = None
    modified: datetime | None = None


class UserRegistrationModel(TransferModel):
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=6, max_length=128)
    first_name: str | None = None
    last_name: str | None = None


class EditUserModel(TransferModel):
    """Account created or edited by an administrator."""

    username: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=6, max_length=128)
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    address: str | None = None
    avatar: str | None = None


class EditProfileModel(TransferModel):
    """Self-service profile edit; credentials and email are not editable here."""

    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    address: str | None = None
    avatar: str | None = None
