"""Transport boundary and its ``requests`` implementation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

import requests
from requests.adapters import BaseAdapter, HTTPAdapter
from requests.structures import CaseInsensitiveDict
from urllib3.util import Retry

from .config import TransportConfiguration
from .exceptions import TransportError
from .methods import CachePolicy, HTTPMethod


@dataclass(slots=True)
class RequestDescriptor:
    """Everything the transport needs to perform one exchange."""

    url: str
    method: HTTPMethod = HTTPMethod.GET
    headers: CaseInsensitiveDict[str] = field(default_factory=CaseInsensitiveDict)
    body: bytes | None = None
    cache_policy: CachePolicy = CachePolicy.RELOAD_IGNORING_LOCAL_CACHE_DATA


@dataclass(slots=True)
class TransportResponse:
    """Raw response envelope; ``status_code`` is ``None`` when not HTTP."""

    status_code: int | None
    content: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)


class Transport(Protocol):
    configuration: TransportConfiguration | None

    def execute(self, request: RequestDescriptor) -> TransportResponse:
        """Perform ``request``; raise `TransportError` if no response arrives."""

    def close(self) -> None:
        ...


class RequestsTransport:
    """Execute request descriptors over a `requests.Session`."""

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        configuration: TransportConfiguration | None = None,
    ) -> None:
        self._session = session or requests.Session()
        self.configuration = configuration

    @classmethod
    def from_configuration(
        cls, configuration: TransportConfiguration | None
    ) -> RequestsTransport:
        return cls(build_session(configuration), configuration=configuration)

    @property
    def timeout(self) -> tuple[float, float] | None:
        return self.configuration.timeout if self.configuration else None

    def execute(self, request: RequestDescriptor) -> TransportResponse:
        try:
            response = self._session.request(
                method=request.method.value,
                url=request.url,
                headers=dict(request.headers),
                data=request.body,
                timeout=self.timeout,
            )
            content = response.content or b""
        except requests.RequestException as exc:
            reason = str(exc).strip() or exc.__class__.__name__
            raise TransportError(reason, details=exc) from exc

        status_code = response.status_code if isinstance(response.status_code, int) else None
        return TransportResponse(status_code=status_code, content=content, headers=response.headers)

    def close(self) -> None:
        self._session.close()


def build_session(configuration: TransportConfiguration | None) -> requests.Session:
    """Return a session honouring ``configuration``; platform defaults when ``None``."""

    session = requests.Session()
    if configuration is None:
        return session
    session.headers.update(configuration.resolved_headers())
    session.proxies.update(configuration.resolved_proxies())
    if configuration.cookies is not None:
        session.cookies = configuration.cookies  # type: ignore[assignment]
    adapter = _build_adapter(configuration)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


def _build_adapter(configuration: TransportConfiguration) -> BaseAdapter:
    interceptor = configuration.interceptor
    if isinstance(interceptor, type):
        return interceptor()
    if interceptor is not None:
        return interceptor
    return HTTPAdapter(
        pool_maxsize=configuration.max_connections_per_host,
        max_retries=Retry(total=0, read=False),
    )


__all__ = [
    "RequestDescriptor",
    "RequestsTransport",
    "Transport",
    "TransportResponse",
    "build_session",
]
