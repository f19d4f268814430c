"""
Tagged service results.

Services return `Ok` or `Failure` instead of raising for expected outcomes
(not found, duplicate, mutation that affected nothing). The HTTP boundary turns
either variant into a ResponseEnvelope via `to_response`.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from ecommerce.exceptions.base import AppError, ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    data: T | None = None
    message: str = "Success"


@dataclass(frozen=True)
class Failure:
    error: AppError

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @property
    def message(self) -> str:
        return self.error.message


ServiceResult = Union[Ok[Any], Failure]
