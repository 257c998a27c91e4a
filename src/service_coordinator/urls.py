"""URL construction for outgoing requests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

from .exceptions import InvalidURLError

_ILLEGAL_CHARACTERS = frozenset('<>"{}|\\^`')


def build_url(base: str, params: Mapping[str, Any] | None = None) -> str:
    """Validate ``base`` and append ``params`` as query items.

    Values are stringified with ``str()``. Existing query items are kept and
    the new ones are appended after them. Raises `InvalidURLError` when
    ``base`` is not an absolute URL.
    """

    _validate(base)
    if not params:
        return base

    parts = urlsplit(base)
    encoded = urlencode([(key, str(value)) for key, value in params.items()], quote_via=quote)
    query = f"{parts.query}&{encoded}" if parts.query else encoded
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def _validate(base: str) -> None:
    if not isinstance(base, str) or not base:
        raise InvalidURLError(f"Invalid URL: {base!r}")
    for ch in base:
        if ch.isspace() or not ch.isprintable() or ch in _ILLEGAL_CHARACTERS:
            raise InvalidURLError(f"Invalid URL: {base!r}")
    try:
        parts = urlsplit(base)
        parts.port  # raises ValueError for a malformed port
    except ValueError as exc:
        raise InvalidURLError(f"Invalid URL: {base!r}") from exc
    if not parts.scheme or not parts.hostname:
        raise InvalidURLError(f"Invalid URL: {base!r}")


__all__ = ["build_url"]
