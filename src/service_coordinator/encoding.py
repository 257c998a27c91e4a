"""Body encoding and payload decoding helpers."""

from __future__ import annotations

import json
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
NO_INFORMATION = "No information"


def encode_body(body: Mapping[str, Any]) -> bytes | None:
    """Serialise ``body`` as UTF-8 JSON, or return ``None`` if it cannot be."""

    if not isinstance(body, Mapping):
        return None
    try:
        text = json.dumps(dict(body), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError):
        return None
    # json.dumps coerces int, float, bool and None keys to strings
    if not _has_string_keys(body):
        return None
    return text.encode("utf-8")


def decode_raw(data: bytes) -> bytes:
    return data


def decode_payload(data: bytes, response_type: type[T] | Any = Any) -> T | None:
    """Validate JSON ``data`` against ``response_type``.

    Returns ``None`` for malformed JSON or a schema mismatch.
    """

    try:
        return _adapter_for(response_type).validate_json(data, strict=True)
    except ValidationError:
        return None


def payload_text(data: bytes) -> str:
    """Best-effort text rendering of a payload for diagnostics."""

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return NO_INFORMATION


def _has_string_keys(value: Any) -> bool:
    if isinstance(value, Mapping):
        return all(
            isinstance(key, str) and _has_string_keys(item) for key, item in value.items()
        )
    if isinstance(value, (list, tuple)):
        return all(_has_string_keys(item) for item in value)
    return True


@lru_cache(maxsize=128)
def _adapter_for(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


__all__ = [
    "JSON_CONTENT_TYPE",
    "NO_INFORMATION",
    "decode_payload",
    "decode_raw",
    "encode_body",
    "payload_text",
]
