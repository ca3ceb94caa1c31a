"""
Base58 / base64 codec for public keys, secrets and raw byte buffers.

Every decode either returns a typed value or raises a BadRequest subclass
from core.exceptions; malformed input never escapes as a bare ValueError.
"""

from __future__ import annotations

import base64
import binascii

import base58
from solders.pubkey import Pubkey

from backend_solkit.core.exceptions import (
    InvalidEncodingError,
    InvalidKeyError,
    InvalidSecretError,
)

PUBKEY_LEN = 32
SIGNATURE_LEN = 64
SECRET_KEY_LEN = 64  # 32 private + 32 public
# Longest base58 text that can hold 32 bytes
MAX_BASE58_PUBKEY_LEN = 44
# Longest base58 text that can hold 64 bytes
MAX_BASE58_SECRET_LEN = 88


def decode_base58_key(value: object) -> Pubkey:
    """Decode base58 text into a 32-byte Pubkey. Raises InvalidKeyError."""
    if (
        not isinstance(value, str)
        or not value
        or len(value) > MAX_BASE58_PUBKEY_LEN
        or value != value.strip()
    ):
        raise InvalidKeyError("Invalid public key")
    try:
        raw = base58.b58decode(value)
    except ValueError as e:
        raise InvalidKeyError("Invalid public key") from e
    if len(raw) != PUBKEY_LEN:
        raise InvalidKeyError(f"Public key must be {PUBKEY_LEN} bytes, got {len(raw)}")
    return Pubkey.from_bytes(raw)


def decode_base58_secret(value: object) -> bytes:
    """
    Decode a base58 secret key (private + public halves) into raw bytes.

    Raises InvalidEncodingError for non-base58 text and InvalidSecretError
    when the decoded length is not SECRET_KEY_LEN.
    """
    if not isinstance(value, str) or not value or value != value.strip():
        raise InvalidEncodingError("Invalid base58 secret key")
    if len(value) > MAX_BASE58_SECRET_LEN:
        raise InvalidSecretError(f"Secret key text longer than {MAX_BASE58_SECRET_LEN} characters")
    try:
        raw = base58.b58decode(value)
    except ValueError as e:
        raise InvalidEncodingError("Invalid base58 secret key") from e
    if len(raw) != SECRET_KEY_LEN:
        raise InvalidSecretError(f"Secret key must be {SECRET_KEY_LEN} bytes, got {len(raw)}")
    return raw


def encode_base58(data: bytes) -> str:
    return base58.b58encode(bytes(data)).decode("ascii")


def encode_base64(data: bytes) -> str:
    return base64.b64encode(bytes(data)).decode("ascii")


def decode_base64(value: object) -> bytes:
    """Strict standard-alphabet base64 decode. Raises InvalidEncodingError."""
    if not isinstance(value, str):
        raise InvalidEncodingError("Invalid base64 data")
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncodingError("Invalid base64 data") from e
