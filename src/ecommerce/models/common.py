"""
Shared model bases and envelopes.

Two families of pydantic models live in this package:

- Records (`RecordModel`): the shape of a stored-procedure row. Aliases are the
  PascalCase column names (`Id`, `LogoURL`, `PasswordHash`), which are also the
  procedure parameter names.
- Transfer models (`TransferModel`): what the HTTP API reads and writes. They
  serialize as camelCase and accept snake_case, camelCase or PascalCase keys, so
  details rows can be validated straight into them.
"""

import math
from typing import Any, Generic, TypeVar

from pydantic import (
    AliasChoices,
    AliasGenerator,
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    model_validator,
)
from pydantic.alias_generators import to_camel, to_pascal

T = TypeVar("T")


def _any_case(name: str) -> AliasChoices:
    return AliasChoices(name, to_camel(name), to_pascal(name))


class RecordModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    @classmethod
    def column_name(cls, field: str) -> str:
        """Column / procedure parameter name of a field."""
        info = cls.model_fields[field]
        return info.alias or field


class TransferModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=AliasGenerator(validation_alias=_any_case, serialization_alias=to_camel),
        populate_by_name=True,
    )


class PaginationModel(BaseModel, Generic[T]):
    """
    One page of results.

    Invariants: len(items) <= page_size; total_pages == ceil(total_count / page_size).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    items: list[T] = Field(default_factory=list)
    page_index: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1)
    total_count: int = Field(default=0, ge=0)

    @computed_field(alias="totalPages")  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @model_validator(mode="after")
    def _check_page_bounds(self):
        if len(self.items) > self.page_size:
            raise ValueError(f"page holds {len(self.items)} items but page_size is {self.page_size}")
        return self


class ResponseEnvelope(BaseModel):
    """
    Uniform body of every HTTP response: {statusCode, message, data}.

    A non-2xx status never carries data.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status_code: int = 200
    message: str = "Success"
    data: Any = None

    @model_validator(mode="after")
    def _no_data_on_error(self):
        if not 200 <= self.status_code < 300 and self.data is not None:
            raise ValueError("error responses cannot carry data")
        return self

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class FilterRequest(TransferModel):
    """Search string and paging window passed to GET_ALL."""

    search_string: str | None = None
    page_index: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1)
