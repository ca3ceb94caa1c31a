"""
Response assembler: uniform success/error envelopes and instruction serialization.

Success: {"success": true, "data": {...}} with HTTP 200.
Error:   {"success": false, "error": "..."} with 400 or 500 from the error kind.
"""

from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel
from solders.instruction import Instruction

from backend_solkit.api_server.schemas import (
    AccountMetaResponse,
    AccountMetaSimple,
    ErrorResponse,
    SendSolResponse,
    SendTokenResponse,
    SuccessResponse,
    TokenInstructionResponse,
)
from backend_solkit.core.codec import encode_base64
from backend_solkit.core.exceptions import ApiError


def success_response(payload: BaseModel) -> JSONResponse:
    envelope = SuccessResponse[Any](data=payload.model_dump(by_alias=True))
    return JSONResponse(status_code=200, content=envelope.model_dump())


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def api_error_response(exc: ApiError) -> JSONResponse:
    """Render an ApiError; status is a pure function of its kind."""
    return error_response(exc.status_code, str(exc))


def token_instruction_response(ix: Instruction) -> TokenInstructionResponse:
    """Full account metas: pubkey, isSigner, isWritable."""
    return TokenInstructionResponse(
        program_id=str(ix.program_id),
        accounts=[
            AccountMetaResponse(
                pubkey=str(meta.pubkey),
                is_signer=meta.is_signer,
                is_writable=meta.is_writable,
            )
            for meta in ix.accounts
        ],
        instruction_data=encode_base64(bytes(ix.data)),
    )


def send_sol_response(ix: Instruction) -> SendSolResponse:
    """Account list flattened to base58 strings."""
    return SendSolResponse(
        program_id=str(ix.program_id),
        accounts=[str(meta.pubkey) for meta in ix.accounts],
        instruction_data=encode_base64(bytes(ix.data)),
    )


def send_token_response(ix: Instruction) -> SendTokenResponse:
    return SendTokenResponse(
        program_id=str(ix.program_id),
        accounts=[
            AccountMetaSimple(pubkey=str(meta.pubkey), is_signer=meta.is_signer)
            for meta in ix.accounts
        ],
        instruction_data=encode_base64(bytes(ix.data)),
    )
