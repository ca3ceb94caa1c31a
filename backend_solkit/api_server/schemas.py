"""
Request and response models for the HTTP API.

JSON field names are camelCase (mintAuthority, programId, isSigner, ...);
Python attributes stay snake_case via pydantic aliases. Request models only
enforce JSON shape (presence, types, integer width); semantic checks live in
backend_solkit.validation.
"""

from __future__ import annotations

from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from backend_solkit.instructions.constants import U8_MAX, U64_MAX

T = TypeVar("T")

U8 = Annotated[int, Field(strict=True, ge=0, le=U8_MAX)]
U64 = Annotated[int, Field(strict=True, ge=0, le=U64_MAX)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# -----------------------------------------------------------------------------
# Envelopes
# -----------------------------------------------------------------------------


class SuccessResponse(BaseModel, Generic[T]):
    success: bool = True
    data: T


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------


class CreateTokenRequest(CamelModel):
    """POST /token/create body."""

    mint: str = Field(..., description="Mint account (base58)")
    mint_authority: str = Field(..., description="Mint authority (base58)")
    decimals: U8 = Field(..., description="Token decimals (0-255)")


class MintTokenRequest(CamelModel):
    """POST /token/mint body."""

    mint: str
    destination: str
    authority: str
    amount: U64


class SignMessageRequest(CamelModel):
    message: str
    secret: str = Field(..., description="Base58 secret key (64 bytes)")


class VerifyMessageRequest(CamelModel):
    message: str
    signature: str = Field(..., description="Base64 signature (64 bytes)")
    pubkey: str = Field(..., description="Signer public key (base58)")


class SendSolRequest(CamelModel):
    """POST /send/sol body. `from` is a Python keyword, hence the explicit alias."""

    from_: str = Field(..., alias="from")
    to: str
    lamports: U64


class SendTokenRequest(CamelModel):
    destination: str
    mint: str
    owner: str
    amount: U64


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------


class KeypairResponse(CamelModel):
    pubkey: str
    secret: str


class AccountMetaResponse(CamelModel):
    pubkey: str
    is_signer: bool
    is_writable: bool


class AccountMetaSimple(CamelModel):
    pubkey: str
    is_signer: bool


class TokenInstructionResponse(CamelModel):
    """Shared by /token/create and /token/mint."""

    program_id: str
    accounts: list[AccountMetaResponse]
    instruction_data: str = Field(..., description="Base64-encoded instruction data")


class SendSolResponse(CamelModel):
    program_id: str
    accounts: list[str]
    instruction_data: str


class SendTokenResponse(CamelModel):
    program_id: str
    accounts: list[AccountMetaSimple]
    instruction_data: str


class SignMessageResponse(CamelModel):
    signature: str
    public_key: str
    message: str


class VerifyMessageResponse(CamelModel):
    valid: bool
    message: str
    pubkey: str
