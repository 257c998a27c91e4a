"""Custom exception hierarchy for the service coordinator."""
from __future__ import annotations

from typing import Any


class ServiceCoordinatorError(RuntimeError):
    """Base error for service coordinator failures."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class InvalidURLError(ServiceCoordinatorError, ValueError):
    """Raised when a URL cannot be parsed as an absolute URL."""


class TransportError(ServiceCoordinatorError):
    """Raised when the transport cannot complete an exchange."""


class RequestError(ServiceCoordinatorError):
    """Raised when a failed outcome is unwrapped."""


class UnexpectedResponseError(ServiceCoordinatorError):
    """Raised when an informational outcome is unwrapped as a payload."""
