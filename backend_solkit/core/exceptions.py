"""
Application-level exceptions.

Two error kinds only:
- BAD_REQUEST: caller input is missing, malformed or semantically invalid (HTTP 400).
- INTERNAL_ERROR: an invariant the service should guarantee was violated (HTTP 500).

Codec failures are BadRequest subclasses so callers can either catch them
precisely or let them propagate to the API error handler.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    BAD_REQUEST = "bad_request"
    INTERNAL_ERROR = "internal_error"


_STATUS_CODES = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.INTERNAL_ERROR: 500,
}

_PREFIXES = {
    ErrorKind.BAD_REQUEST: "Bad request",
    ErrorKind.INTERNAL_ERROR: "Internal server error",
}


def status_code_for(kind: ErrorKind) -> int:
    """HTTP status for an error kind."""
    return _STATUS_CODES[kind]


class ApiError(Exception):
    """Base error carrying an ErrorKind and a human-readable message."""

    kind: ErrorKind = ErrorKind.INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return status_code_for(self.kind)

    def __str__(self) -> str:
        return f"{_PREFIXES[self.kind]}: {self.message}"


class BadRequest(ApiError):
    kind = ErrorKind.BAD_REQUEST


class InternalError(ApiError):
    kind = ErrorKind.INTERNAL_ERROR


class InvalidKeyError(BadRequest):
    """Text is not a base58 public key of exactly 32 bytes."""


class InvalidSecretError(BadRequest):
    """Decoded secret key bytes have the wrong length or do not form a key-pair."""


class InvalidEncodingError(BadRequest):
    """Text is not valid base58/base64."""
