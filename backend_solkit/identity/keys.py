"""
Identity operations: Ed25519 key-pair generation, message signing and verification.

Key material lives only on the stack of a single call: nothing is cached,
stored or logged.
"""

from __future__ import annotations

from dataclasses import dataclass

from solders.keypair import Keypair

from backend_solkit.core.codec import encode_base58, encode_base64
from backend_solkit.solkit_logging import get_logger
from backend_solkit.validation.validators import (
    encode_message,
    parse_keypair,
    parse_pubkey,
    parse_signature,
    require_non_blank,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class GeneratedKeypair:
    """pubkey: base58 public key; secret: base58 of the 64-byte private+public key."""

    pubkey: str
    secret: str


@dataclass(frozen=True)
class SignedMessage:
    signature: str
    public_key: str
    message: str


def generate_keypair() -> GeneratedKeypair:
    """Generate a fresh random key-pair. The secret is returned once and not kept."""
    keypair = Keypair()
    logger.debug("keypair_generated")
    return GeneratedKeypair(
        pubkey=str(keypair.pubkey()),
        secret=encode_base58(bytes(keypair)),
    )


def sign_message(message: str, secret: str) -> SignedMessage:
    """
    Sign the UTF-8 bytes of `message` with the key-pair encoded in `secret`.

    Raises BadRequest for blank inputs or an undecodable secret.
    """
    require_non_blank(message, secret)
    keypair = parse_keypair(secret)
    signature = keypair.sign_message(encode_message(message))
    return SignedMessage(
        signature=encode_base64(bytes(signature)),
        public_key=str(keypair.pubkey()),
        message=message,
    )


def verify_message(message: str, signature: str, pubkey: str) -> bool:
    """
    Return whether `signature` (base64) signs `message` under `pubkey` (base58).

    Malformed input raises BadRequest. A well-formed signature that does not
    match returns False.
    """
    require_non_blank(message, signature, pubkey)
    public_key = parse_pubkey(pubkey, "Invalid public key")
    sig = parse_signature(signature)
    return sig.verify(public_key, encode_message(message))
