"""Tri-state result of a coordinated request."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from .errors import NetworkError
from .exceptions import RequestError, UnexpectedResponseError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Body decoded, or intentionally empty for no-content statuses."""

    data: T | None = None

    is_success = True
    is_failure = False
    is_informational = False

    def unwrap(self) -> T | None:
        return self.data


@dataclass(frozen=True, slots=True)
class Failed:
    """Terminal failure for the call."""

    error: NetworkError

    is_success = False
    is_failure = True
    is_informational = False

    def unwrap(self) -> NoReturn:
        raise RequestError(
            self.error.description,
            status_code=self.error.status_code,
            details=self.error,
        )


@dataclass(frozen=True, slots=True)
class Informational:
    """Status code in a band that carries no payload contract (1xx, 3xx)."""

    code: int

    is_success = False
    is_failure = False
    is_informational = True

    def unwrap(self) -> NoReturn:
        raise UnexpectedResponseError(
            f"Informational status {self.code} carries no payload",
            status_code=self.code,
        )


Outcome = Union[Success[T], Failed, Informational]

__all__ = ["Failed", "Informational", "Outcome", "Success"]
