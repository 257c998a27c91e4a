"""Transport configuration for `ServiceCoordinator`."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from http.cookiejar import CookieJar
from typing import Any

from requests.adapters import BaseAdapter

DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_CONNECTIONS_PER_HOST = 6


class ServiceType(Enum):
    """Traffic class hint for the network layer."""

    DEFAULT = "default"
    VIDEO = "video"
    BACKGROUND = "background"
    VOICE = "voice"
    RESPONSIVE_DATA = "responsive-data"
    AV_STREAMING = "av-streaming"
    RESPONSIVE_AV = "responsive-av"
    CALL_SIGNALING = "call-signaling"


@dataclass(frozen=True, slots=True)
class TransportConfiguration:
    """Typed configuration for the transport built by `ServiceCoordinator`.

    ``timeout_request`` bounds connecting, ``timeout_resource`` bounds each
    read. ``interceptor`` is a ``requests`` transport adapter class or
    instance mounted for every scheme, which lets tests and protocol shims
    answer requests in-process. ``allows_cellular``, ``discretionary``,
    ``service_type`` and ``cache`` are carried for collaborators; ``requests``
    itself has no use for them.
    """

    timeout_request: float = DEFAULT_TIMEOUT
    timeout_resource: float = DEFAULT_TIMEOUT
    allows_cellular: bool = True
    cache: Any | None = None
    proxies: Mapping[str, str] | None = None
    cookies: CookieJar | None = None
    default_headers: Mapping[str, str] | None = None
    max_connections_per_host: int = DEFAULT_MAX_CONNECTIONS_PER_HOST
    discretionary: bool = False
    service_type: ServiceType = ServiceType.DEFAULT
    interceptor: type[BaseAdapter] | BaseAdapter | None = None

    def __post_init__(self) -> None:
        if self.timeout_request <= 0 or self.timeout_resource <= 0:
            raise ValueError("Timeouts must be positive.")
        if self.max_connections_per_host < 1:
            raise ValueError("max_connections_per_host must be at least 1.")

    @property
    def timeout(self) -> tuple[float, float]:
        return (self.timeout_request, self.timeout_resource)

    def resolved_headers(self) -> dict[str, str]:
        return dict(self.default_headers or {})

    def resolved_proxies(self) -> dict[str, str]:
        return dict(self.proxies or {})


__all__ = ["ServiceType", "TransportConfiguration"]
