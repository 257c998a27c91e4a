"""Status-code bands and their classification."""

from __future__ import annotations

from enum import Enum


class StatusBand(Enum):
    """Contiguous status ranges that map to a single outcome kind."""

    INFORMATIONAL = "informational"
    CONTENT = "content"
    NO_CONTENT = "no-content"
    REDIRECTION = "redirection"
    BAD_REQUEST = "bad-request"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not-found"
    SERVER_ERROR = "server-error"
    OTHER = "other"


def classify_status(code: int) -> StatusBand:
    """Return the band for ``code``; first matching rule wins."""

    if 100 <= code < 200:
        return StatusBand.INFORMATIONAL
    if code == 200:
        return StatusBand.CONTENT
    if 201 <= code <= 203:
        return StatusBand.NO_CONTENT
    if 300 <= code < 400:
        return StatusBand.REDIRECTION
    if code == 400:
        return StatusBand.BAD_REQUEST
    if code == 401:
        return StatusBand.UNAUTHORIZED
    if code == 404:
        return StatusBand.NOT_FOUND
    if 500 <= code <= 599:
        return StatusBand.SERVER_ERROR
    return StatusBand.OTHER


__all__ = ["StatusBand", "classify_status"]
