"""
Per-endpoint request validators and the field-level checks they share.

Validators receive fields that already passed JSON shape checks (pydantic)
and return frozen, typed values. They never accumulate errors: the first
failure raises BadRequest and nothing after it runs.
"""

from __future__ import annotations

from dataclasses import dataclass

from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature

from backend_solkit.core.codec import (
    SIGNATURE_LEN,
    decode_base58_key,
    decode_base58_secret,
    decode_base64,
)
from backend_solkit.core.exceptions import (
    BadRequest,
    InvalidEncodingError,
    InvalidKeyError,
    InvalidSecretError,
)

MISSING_FIELDS_MESSAGE = "Missing required fields"


# -----------------------------------------------------------------------------
# Field checks
# -----------------------------------------------------------------------------


def require_non_blank(*values: str | None) -> None:
    """Raise BadRequest if any value is None, empty or whitespace-only."""
    for value in values:
        if value is None or not value.strip():
            raise BadRequest(MISSING_FIELDS_MESSAGE)


def encode_message(message: str) -> bytes:
    """UTF-8 bytes of `message`; text that cannot be encoded (lone surrogates) is a BadRequest."""
    try:
        return message.encode("utf-8")
    except UnicodeEncodeError as e:
        raise BadRequest("Invalid message encoding") from e


def require_positive(value: int, field_name: str) -> None:
    if value <= 0:
        raise BadRequest(f"{field_name} must be greater than 0")


def parse_pubkey(value: str, message: str) -> Pubkey:
    """Decode a base58 pubkey; on failure raise BadRequest(message)."""
    try:
        return decode_base58_key(value)
    except InvalidKeyError as e:
        raise BadRequest(message) from e


def parse_keypair(secret: str) -> Keypair:
    """
    Rebuild a Keypair from its base58 secret (64 bytes: private + public).

    Non-base58 text -> "Invalid base58 secret key"; wrong length or a public
    half that does not match the private half -> "Invalid secret key format".
    """
    try:
        raw = decode_base58_secret(secret)
    except InvalidEncodingError as e:
        raise BadRequest("Invalid base58 secret key") from e
    except InvalidSecretError as e:
        raise BadRequest("Invalid secret key format") from e
    try:
        keypair = Keypair.from_bytes(raw)
    except Exception as e:
        raise BadRequest("Invalid secret key format") from e
    if bytes(keypair.pubkey()) != raw[32:]:
        raise BadRequest("Invalid secret key format")
    return keypair


def parse_signature(value: str) -> Signature:
    """Decode a base64 signature of exactly SIGNATURE_LEN bytes."""
    try:
        raw = decode_base64(value)
    except InvalidEncodingError as e:
        raise BadRequest("Invalid base64 signature") from e
    if len(raw) != SIGNATURE_LEN:
        raise BadRequest("Invalid signature format")
    return Signature.from_bytes(raw)


# -----------------------------------------------------------------------------
# Validated requests
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class ValidatedCreateToken:
    mint: Pubkey
    mint_authority: Pubkey
    decimals: int


@dataclass(frozen=True)
class ValidatedMintTo:
    mint: Pubkey
    destination: Pubkey
    authority: Pubkey
    amount: int


@dataclass(frozen=True)
class ValidatedSendSol:
    from_pubkey: Pubkey
    to_pubkey: Pubkey
    lamports: int


@dataclass(frozen=True)
class ValidatedSendToken:
    owner: Pubkey
    destination: Pubkey
    mint: Pubkey
    amount: int


def validate_create_token(mint: str, mint_authority: str, decimals: int) -> ValidatedCreateToken:
    """POST /token/create. decimals range (u8) is enforced by the request schema."""
    return ValidatedCreateToken(
        mint=parse_pubkey(mint, "Invalid mint pubkey"),
        mint_authority=parse_pubkey(mint_authority, "Invalid mintAuthority pubkey"),
        decimals=decimals,
    )


def validate_mint_to(mint: str, destination: str, authority: str, amount: int) -> ValidatedMintTo:
    """
    POST /token/mint. No zero-amount check: the mint-to instruction accepts
    amount=0, unlike the two transfer endpoints.
    """
    return ValidatedMintTo(
        mint=parse_pubkey(mint, "Invalid mint pubkey"),
        destination=parse_pubkey(destination, "Invalid destination pubkey"),
        authority=parse_pubkey(authority, "Invalid authority pubkey"),
        amount=amount,
    )


def validate_send_sol(from_: str, to: str, lamports: int) -> ValidatedSendSol:
    """POST /send/sol. lamports must be > 0, checked before decoding addresses."""
    require_positive(lamports, "lamports")
    return ValidatedSendSol(
        from_pubkey=parse_pubkey(from_, "Invalid 'from' address"),
        to_pubkey=parse_pubkey(to, "Invalid 'to' address"),
        lamports=lamports,
    )


def validate_send_token(owner: str, destination: str, mint: str, amount: int) -> ValidatedSendToken:
    """POST /send/token. amount must be > 0; then owner, destination, mint are decoded in that order."""
    require_positive(amount, "amount")
    return ValidatedSendToken(
        owner=parse_pubkey(owner, "Invalid owner pubkey"),
        destination=parse_pubkey(destination, "Invalid destination pubkey"),
        mint=parse_pubkey(mint, "Invalid mint pubkey"),
        amount=amount,
    )
