"""High-level request coordinator."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable, Mapping
from functools import partial
from typing import Any, ClassVar, TypeVar

from requests.structures import CaseInsensitiveDict

from .config import TransportConfiguration
from .encoding import (
    JSON_CONTENT_TYPE,
    decode_payload,
    decode_raw,
    encode_body,
    payload_text,
)
from .errors import (
    BadRequest,
    DecodingError,
    InvalidResponse,
    InvalidURL,
    NotFound,
    Other,
    OtherStatusCode,
    ServerError,
    Unauthorized,
)
from .exceptions import InvalidURLError, TransportError
from .methods import CachePolicy, HTTPMethod
from .outcome import Failed, Informational, Outcome, Success
from .status import StatusBand, classify_status
from .transport import RequestDescriptor, RequestsTransport, Transport, TransportResponse
from .urls import build_url

logger = logging.getLogger(__name__)

T = TypeVar("T")

TransportFactory = Callable[[TransportConfiguration | None], Transport]
Decoder = Callable[[bytes], Any]


class ServiceCoordinator:
    """Build, execute and classify HTTP requests.

    The coordinator owns at most one `TransportConfiguration` and the
    transport built from it. Replacing or removing the configuration drops
    the cached transport so the next call rebuilds it; calls already in
    flight keep the transport they started with, and a dropped transport is
    closed once the last of them finishes.
    """

    _shared: ClassVar[ServiceCoordinator | None] = None
    _shared_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        configuration: TransportConfiguration | None = None,
        *,
        transport_factory: TransportFactory = RequestsTransport.from_configuration,
    ) -> None:
        self._lock = threading.RLock()
        self._transport_factory = transport_factory
        self._configuration = configuration
        self._transport: Transport | None = None
        self._built: list[Transport] = []
        self._in_flight: dict[int, int] = {}

    @classmethod
    def shared(cls) -> ServiceCoordinator:
        """Return a lazily created process-wide coordinator."""
        with cls._shared_lock:
            if cls._shared is None:
                cls._shared = cls()
            return cls._shared

    # Context manager helpers -------------------------------------------------
    def __enter__(self) -> ServiceCoordinator:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # Configuration -----------------------------------------------------------
    def set_configuration(
        self, configuration: TransportConfiguration | None = None, **fields: Any
    ) -> TransportConfiguration:
        """Replace the active configuration.

        Pass either a ready `TransportConfiguration` or its fields as keyword
        arguments; unspecified fields take their defaults rather than the
        previous configuration's values.
        """
        if configuration is not None and fields:
            raise TypeError("Pass a TransportConfiguration or keyword fields, not both.")
        if configuration is None:
            configuration = TransportConfiguration(**fields)
        with self._lock:
            self._configuration = configuration
            retired = self._discard_transport()
        self._close_retired(retired)
        logger.debug("Transport configuration replaced: %s", configuration)
        return configuration

    def remove_configuration(self) -> None:
        with self._lock:
            self._configuration = None
            retired = self._discard_transport()
        self._close_retired(retired)
        logger.debug("Transport configuration removed; using defaults")

    def get_configuration(self) -> TransportConfiguration | None:
        with self._lock:
            return self._configuration

    # Public API --------------------------------------------------------------
    def send(
        self,
        url: str,
        params: Mapping[str, Any] | None = None,
        method: HTTPMethod | str = HTTPMethod.GET,
        headers: Mapping[str, str] | None = None,
        body: Mapping[str, Any] | None = None,
        cache_policy: CachePolicy = CachePolicy.RELOAD_IGNORING_LOCAL_CACHE_DATA,
        *,
        response_type: type[T] | Any = Any,
    ) -> Outcome[T]:
        """Send a request and decode a 200 body as ``response_type``."""
        decoder = partial(decode_payload, response_type=response_type)
        return self._dispatch(url, params, method, headers, body, cache_policy, decoder)

    def send_raw(
        self,
        url: str,
        params: Mapping[str, Any] | None = None,
        method: HTTPMethod | str = HTTPMethod.GET,
        headers: Mapping[str, str] | None = None,
        body: Mapping[str, Any] | None = None,
        cache_policy: CachePolicy = CachePolicy.RELOAD_IGNORING_LOCAL_CACHE_DATA,
    ) -> Outcome[bytes]:
        """Send a request and return a 200 body as the bytes received."""
        return self._dispatch(url, params, method, headers, body, cache_policy, decode_raw)

    async def send_async(
        self,
        url: str,
        params: Mapping[str, Any] | None = None,
        method: HTTPMethod | str = HTTPMethod.GET,
        headers: Mapping[str, str] | None = None,
        body: Mapping[str, Any] | None = None,
        cache_policy: CachePolicy = CachePolicy.RELOAD_IGNORING_LOCAL_CACHE_DATA,
        *,
        response_type: type[T] | Any = Any,
    ) -> Outcome[T]:
        """Coroutine form of `send`; the exchange runs on a worker thread."""
        return await asyncio.to_thread(
            self.send,
            url,
            params,
            method,
            headers,
            body,
            cache_policy,
            response_type=response_type,
        )

    async def send_raw_async(
        self,
        url: str,
        params: Mapping[str, Any] | None = None,
        method: HTTPMethod | str = HTTPMethod.GET,
        headers: Mapping[str, str] | None = None,
        body: Mapping[str, Any] | None = None,
        cache_policy: CachePolicy = CachePolicy.RELOAD_IGNORING_LOCAL_CACHE_DATA,
    ) -> Outcome[bytes]:
        return await asyncio.to_thread(
            self.send_raw, url, params, method, headers, body, cache_policy
        )

    def close(self) -> None:
        with self._lock:
            built, self._built = self._built, []
            self._transport = None
            self._in_flight.clear()
        for transport in built:
            transport.close()

    # Internal helpers --------------------------------------------------------
    def _dispatch(
        self,
        url: str,
        params: Mapping[str, Any] | None,
        method: HTTPMethod | str,
        headers: Mapping[str, str] | None,
        body: Mapping[str, Any] | None,
        cache_policy: CachePolicy,
        decoder: Decoder,
    ) -> Outcome[Any]:
        try:
            target = build_url(url, params)
        except InvalidURLError:
            return Failed(InvalidURL())

        method = HTTPMethod(str(method).upper())
        request = self._prepare_request(target, method, headers, body, cache_policy)
        transport = self._acquire_transport()
        try:
            self._log_request(request, transport)
            try:
                response = transport.execute(request)
            except TransportError as exc:
                logger.warning("Service request %s %s failed: %s", method.value, target, exc)
                return Failed(Other(message=str(exc)))
        finally:
            self._release_transport(transport)

        return self._classify(response, decoder)

    def _acquire_transport(self) -> Transport:
        with self._lock:
            if self._transport is None:
                self._transport = self._transport_factory(self._configuration)
                self._built.append(self._transport)
            key = id(self._transport)
            self._in_flight[key] = self._in_flight.get(key, 0) + 1
            return self._transport

    def _release_transport(self, transport: Transport) -> None:
        with self._lock:
            key = id(transport)
            remaining = self._in_flight.get(key, 0) - 1
            if remaining > 0:
                self._in_flight[key] = remaining
                return
            self._in_flight.pop(key, None)
            if transport is self._transport or transport not in self._built:
                return
            self._built.remove(transport)
        self._close_retired(transport)

    def _discard_transport(self) -> Transport | None:
        """Drop the active transport; return it if no call is still using it.

        Must be called with the lock held. A transport with calls in flight is
        closed by the last `_release_transport` instead.
        """
        retired, self._transport = self._transport, None
        if retired is None or self._in_flight.get(id(retired)):
            return None
        self._built.remove(retired)
        return retired

    @staticmethod
    def _close_retired(transport: Transport | None) -> None:
        if transport is not None:
            logger.debug("Closing retired transport %r", transport)
            transport.close()

    def _prepare_request(
        self,
        url: str,
        method: HTTPMethod,
        headers: Mapping[str, str] | None,
        body: Mapping[str, Any] | None,
        cache_policy: CachePolicy,
    ) -> RequestDescriptor:
        merged: CaseInsensitiveDict[str] = CaseInsensitiveDict(headers or {})
        directive = cache_policy.cache_control
        if directive is not None:
            merged.setdefault("Cache-Control", directive)

        encoded: bytes | None = None
        if body is not None and method.allows_body:
            encoded = encode_body(body)
            if encoded is not None:
                merged["Content-Type"] = JSON_CONTENT_TYPE
            else:
                logger.debug("Request body for %s %s is not serialisable; omitting", method.value, url)

        return RequestDescriptor(
            url=url,
            method=method,
            headers=merged,
            body=encoded,
            cache_policy=cache_policy,
        )

    def _classify(self, response: TransportResponse, decoder: Decoder) -> Outcome[Any]:
        code = response.status_code
        if not isinstance(code, int):
            return Failed(InvalidResponse())

        band = classify_status(code)
        logger.debug("Response status %s classified as %s", code, band.value)

        if band in (StatusBand.INFORMATIONAL, StatusBand.REDIRECTION):
            return Informational(code=code)
        if band is StatusBand.CONTENT:
            if not response.content:
                return Failed(InvalidResponse())
            data = decoder(response.content)
            if data is None:
                logger.debug("Undecodable response body: %s", payload_text(response.content)[:200])
                return Failed(DecodingError())
            return Success(data=data)
        if band is StatusBand.NO_CONTENT:
            return Success(data=None)
        if band is StatusBand.BAD_REQUEST:
            return Failed(BadRequest())
        if band is StatusBand.UNAUTHORIZED:
            return Failed(Unauthorized())
        if band is StatusBand.NOT_FOUND:
            return Failed(NotFound())
        if band is StatusBand.SERVER_ERROR:
            return Failed(ServerError(status_code=code))
        return Failed(OtherStatusCode(code=code))

    def _log_request(self, request: RequestDescriptor, transport: Transport) -> None:
        logger.info(
            "Service request %s %s (configuration=%s)",
            request.method.value,
            request.url,
            "custom" if transport.configuration is not None else "default",
        )


__all__ = ["ServiceCoordinator"]
