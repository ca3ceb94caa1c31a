"""
FastAPI server — key-pairs, message signing, unsigned instruction building.

Every route runs validation -> identity op or builder -> response assembler.
Every failure is rendered as {"success": false, "error": ...}; nothing is
persisted and nothing is sent to a cluster.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend_solkit import __version__
from backend_solkit.api_server.middleware import register_request_logging
from backend_solkit.api_server.responses import (
    api_error_response,
    error_response,
    send_sol_response,
    send_token_response,
    success_response,
    token_instruction_response,
)
from backend_solkit.api_server.schemas import (
    CreateTokenRequest,
    KeypairResponse,
    MintTokenRequest,
    SendSolRequest,
    SendSolResponse,
    SendTokenRequest,
    SendTokenResponse,
    SignMessageRequest,
    SignMessageResponse,
    SuccessResponse,
    TokenInstructionResponse,
    VerifyMessageRequest,
    VerifyMessageResponse,
)
from backend_solkit.config import Settings
from backend_solkit.core.exceptions import ApiError, BadRequest, InternalError
from backend_solkit.identity import generate_keypair, sign_message, verify_message
from backend_solkit.instructions import initialize_mint, mint_to, native_transfer, token_transfer
from backend_solkit.solkit_logging import get_logger
from backend_solkit.solkit_logging.logger import configure_structlog
from backend_solkit.validation import (
    validate_create_token,
    validate_mint_to,
    validate_send_sol,
    validate_send_token,
)

logger = get_logger(__name__)

GREETING = "Hello, world!"

router = APIRouter()


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------


@router.get("/", response_class=PlainTextResponse)
def hello() -> str:
    return GREETING


@router.get("/health")
def health() -> dict[str, str]:
    """Liveness probe: API is up."""
    return {"status": "ok"}


@router.post("/keypair", response_model=SuccessResponse[KeypairResponse])
def create_keypair() -> JSONResponse:
    """Generate a new Ed25519 key-pair. The secret is returned once and not stored."""
    keypair = generate_keypair()
    logger.info("keypair_issued", pubkey=keypair.pubkey)
    return success_response(KeypairResponse(pubkey=keypair.pubkey, secret=keypair.secret))


@router.post("/token/create", response_model=SuccessResponse[TokenInstructionResponse])
def create_token(body: CreateTokenRequest) -> JSONResponse:
    """Build an SPL Token InitializeMint instruction (no freeze authority)."""
    req = validate_create_token(body.mint, body.mint_authority, body.decimals)
    ix = initialize_mint(req.mint, req.mint_authority, req.decimals)
    logger.info("token_create_built", mint=str(req.mint), decimals=req.decimals)
    return success_response(token_instruction_response(ix))


@router.post("/token/mint", response_model=SuccessResponse[TokenInstructionResponse])
def mint_token(body: MintTokenRequest) -> JSONResponse:
    """Build an SPL Token MintTo instruction with a single authority."""
    req = validate_mint_to(body.mint, body.destination, body.authority, body.amount)
    ix = mint_to(req.mint, req.destination, req.authority, req.amount)
    logger.info("token_mint_built", mint=str(req.mint), amount=req.amount)
    return success_response(token_instruction_response(ix))


@router.post("/message/sign", response_model=SuccessResponse[SignMessageResponse])
def sign(body: SignMessageRequest) -> JSONResponse:
    signed = sign_message(body.message, body.secret)
    logger.info("message_signed", pubkey=signed.public_key)
    return success_response(
        SignMessageResponse(
            signature=signed.signature,
            public_key=signed.public_key,
            message=signed.message,
        )
    )


@router.post("/message/verify", response_model=SuccessResponse[VerifyMessageResponse])
def verify(body: VerifyMessageRequest) -> JSONResponse:
    """A signature that does not match is a successful response with valid=false."""
    valid = verify_message(body.message, body.signature, body.pubkey)
    logger.info("message_verified", pubkey=body.pubkey, valid=valid)
    return success_response(
        VerifyMessageResponse(valid=valid, message=body.message, pubkey=body.pubkey)
    )


@router.post("/send/sol", response_model=SuccessResponse[SendSolResponse])
def send_sol(body: SendSolRequest) -> JSONResponse:
    """Build a System program transfer. lamports must be > 0."""
    req = validate_send_sol(body.from_, body.to, body.lamports)
    ix = native_transfer(req.from_pubkey, req.to_pubkey, req.lamports)
    logger.info("send_sol_built", lamports=req.lamports)
    return success_response(send_sol_response(ix))


@router.post("/send/token", response_model=SuccessResponse[SendTokenResponse])
def send_token(body: SendTokenRequest) -> JSONResponse:
    """Build an SPL Token transfer between the owner's and destination's associated token accounts."""
    req = validate_send_token(body.owner, body.destination, body.mint, body.amount)
    ix = token_transfer(req.owner, req.destination, req.mint, req.amount)
    logger.info("send_token_built", mint=str(req.mint), amount=req.amount)
    return success_response(send_token_response(ix))


# -----------------------------------------------------------------------------
# Error handlers
# -----------------------------------------------------------------------------


def validation_error_message(errors: list[dict[str, Any]]) -> str:
    """
    Turn the first pydantic error into a single message naming the field.
    Only the first error is reported (fail-fast).
    """
    if not errors:
        return "Invalid request body"
    first = errors[0]
    err_type = first.get("type", "")
    fields = [str(p) for p in first.get("loc", ()) if p != "body"]
    if err_type == "json_invalid":
        return "Invalid JSON body"
    if not fields:
        if err_type == "missing":
            return "Missing request body"
        return "Invalid JSON body"
    name = ".".join(fields)
    if err_type == "missing":
        return f"Missing required field: {name}"
    return f"Invalid value for field '{name}': {first.get('msg', 'invalid')}"


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if isinstance(exc, InternalError):
        logger.error("request_internal_error", path=request.url.path, error=exc.message)
    else:
        logger.info("request_rejected", path=request.url.path, error=exc.message)
    return api_error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    err = BadRequest(validation_error_message(list(exc.errors())))
    logger.info("request_rejected", path=request.url.path, error=err.message)
    return api_error_response(err)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """404/405 etc. in the same envelope."""
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("request_unhandled_exception", path=request.url.path, error=str(exc))
    return api_error_response(InternalError("unexpected error"))


# -----------------------------------------------------------------------------
# App factory
# -----------------------------------------------------------------------------


def create_app(settings: Settings) -> FastAPI:
    """Build the ASGI app around an immutable Settings value."""
    configure_structlog(settings.log_level, settings.log_format)
    app = FastAPI(
        title="Backend SolKit API",
        description="Stateless Solana key-pair, signing and instruction-building API.",
        version=__version__,
    )
    app.state.settings = settings
    app.include_router(router)
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    register_request_logging(app)
    logger.info("app_created", bind=settings.bind_address)
    return app
