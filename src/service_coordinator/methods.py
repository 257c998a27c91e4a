"""Request methods and cache policies understood by the coordinator."""

from __future__ import annotations

from enum import Enum


class HTTPMethod(str, Enum):
    """HTTP verbs; the value is the wire representation."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    OPTIONS = "OPTIONS"
    HEAD = "HEAD"
    TRACE = "TRACE"
    CONNECT = "CONNECT"

    @property
    def allows_body(self) -> bool:
        return self is not HTTPMethod.GET

    def __str__(self) -> str:
        return self.value


class CachePolicy(Enum):
    """How a request may be satisfied from caches along the way."""

    USE_PROTOCOL_CACHE_POLICY = "use-protocol"
    RELOAD_IGNORING_LOCAL_CACHE_DATA = "reload-ignoring-local"
    RELOAD_IGNORING_LOCAL_AND_REMOTE_CACHE_DATA = "reload-ignoring-local-and-remote"
    RETURN_CACHE_DATA_ELSE_LOAD = "return-cache-else-load"
    RETURN_CACHE_DATA_DONT_LOAD = "return-cache-dont-load"
    RELOAD_REVALIDATING_CACHE_DATA = "reload-revalidating"

    @property
    def cache_control(self) -> str | None:
        """Return the ``Cache-Control`` request directive for this policy."""
        return _CACHE_CONTROL[self]


_CACHE_CONTROL: dict[CachePolicy, str | None] = {
    CachePolicy.USE_PROTOCOL_CACHE_POLICY: None,
    CachePolicy.RELOAD_IGNORING_LOCAL_CACHE_DATA: None,
    CachePolicy.RELOAD_IGNORING_LOCAL_AND_REMOTE_CACHE_DATA: "no-cache",
    CachePolicy.RETURN_CACHE_DATA_ELSE_LOAD: "max-stale",
    CachePolicy.RETURN_CACHE_DATA_DONT_LOAD: "only-if-cached",
    CachePolicy.RELOAD_REVALIDATING_CACHE_DATA: "max-age=0",
}


__all__ = ["CachePolicy", "HTTPMethod"]
