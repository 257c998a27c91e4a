"""Error kinds carried by failed outcomes.

Each kind is an immutable value. Kinds derived from an HTTP response keep the
status code so callers can inspect it without parsing the description.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class NetworkError(ABC):
    """Common surface of every error kind."""

    __slots__ = ()

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable text for the error."""

    @property
    def status_code(self) -> int | None:
        return None

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True, slots=True)
class InvalidURL(NetworkError):
    @property
    def description(self) -> str:
        return "Invalid URL."


@dataclass(frozen=True, slots=True)
class NoInternetConnection(NetworkError):
    @property
    def description(self) -> str:
        return "No internet connection."


@dataclass(frozen=True, slots=True)
class ServerError(NetworkError):
    status_code: int = field()  # shadows NetworkError.status_code

    @property
    def description(self) -> str:
        return f"Server error: {self.status_code}"


@dataclass(frozen=True, slots=True)
class RequestTimeout(NetworkError):
    @property
    def description(self) -> str:
        return "Request timeout."


@dataclass(frozen=True, slots=True)
class InvalidResponse(NetworkError):
    @property
    def description(self) -> str:
        return "Invalid response from server."


@dataclass(frozen=True, slots=True)
class BadRequest(NetworkError):
    @property
    def description(self) -> str:
        return "Bad request"

    @property
    def status_code(self) -> int | None:
        return 400


@dataclass(frozen=True, slots=True)
class Unauthorized(NetworkError):
    @property
    def description(self) -> str:
        return "Unauthorized access."

    @property
    def status_code(self) -> int | None:
        return 401


@dataclass(frozen=True, slots=True)
class NotFound(NetworkError):
    @property
    def description(self) -> str:
        return "Resource not found."

    @property
    def status_code(self) -> int | None:
        return 404


@dataclass(frozen=True, slots=True)
class DecodingError(NetworkError):
    @property
    def description(self) -> str:
        return "Error in decoding data"

    @property
    def status_code(self) -> int | None:
        return 200


@dataclass(frozen=True, slots=True)
class OtherStatusCode(NetworkError):
    code: int

    @property
    def description(self) -> str:
        return f"Other code: {self.code}"

    @property
    def status_code(self) -> int | None:
        return self.code


@dataclass(frozen=True, slots=True)
class Other(NetworkError):
    message: str

    @property
    def description(self) -> str:
        return self.message


__all__ = [
    "BadRequest",
    "DecodingError",
    "InvalidResponse",
    "InvalidURL",
    "NetworkError",
    "NoInternetConnection",
    "NotFound",
    "Other",
    "OtherStatusCode",
    "RequestTimeout",
    "ServerError",
    "Unauthorized",
]
