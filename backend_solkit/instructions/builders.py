"""
Instruction builders for mint initialization, mint-to, SOL transfer and SPL token transfer.

Each builder returns a solders Instruction (program_id, ordered AccountMeta list,
data bytes). Account order is positional and fixed by the target program.
Range violations here mean a validator let something through, so they raise
InternalError rather than BadRequest.
"""

from __future__ import annotations

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey
from solders.system_program import TransferParams
from solders.system_program import transfer as system_transfer
from spl.token.instructions import get_associated_token_address

from backend_solkit.core.exceptions import InternalError
from backend_solkit.instructions.constants import (
    AMOUNT_IX_LAYOUT,
    INITIALIZE_MINT_LAYOUT,
    SYSVAR_RENT_ID,
    TOKEN_IX_INITIALIZE_MINT,
    TOKEN_IX_MINT_TO,
    TOKEN_IX_TRANSFER,
    TOKEN_PROGRAM_ID,
    U8_MAX,
    U64_MAX,
)
from backend_solkit.solkit_logging import get_logger

logger = get_logger(__name__)


def _check_range(value: int, upper: int, name: str, error_prefix: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= upper:
        raise InternalError(f"{error_prefix}: {name} out of range ({value!r})")


def derive_associated_token_address(wallet: Pubkey, mint: Pubkey) -> Pubkey:
    """Associated token account for (wallet, mint) under the SPL Token program."""
    return get_associated_token_address(wallet, mint)


def initialize_mint(mint: Pubkey, authority: Pubkey, decimals: int) -> Instruction:
    """
    SPL Token InitializeMint with no freeze authority.

    Accounts: [mint (writable), rent sysvar].
    """
    _check_range(decimals, U8_MAX, "decimals", "Instruction creation failed")
    data = INITIALIZE_MINT_LAYOUT.pack(TOKEN_IX_INITIALIZE_MINT, decimals, bytes(authority), 0)
    accounts = [
        AccountMeta(pubkey=mint, is_signer=False, is_writable=True),
        AccountMeta(pubkey=SYSVAR_RENT_ID, is_signer=False, is_writable=False),
    ]
    ix = Instruction(program_id=TOKEN_PROGRAM_ID, data=data, accounts=accounts)
    logger.debug("instruction_built", kind="initialize_mint", accounts=len(accounts))
    return ix


def mint_to(mint: Pubkey, destination: Pubkey, authority: Pubkey, amount: int) -> Instruction:
    """
    SPL Token MintTo with a single mint authority (no multisig signers).

    Accounts: [mint (writable), destination (writable), authority (signer)].
    amount=0 is a valid instruction.
    """
    _check_range(amount, U64_MAX, "amount", "Failed to create mint instruction")
    data = AMOUNT_IX_LAYOUT.pack(TOKEN_IX_MINT_TO, amount)
    accounts = [
        AccountMeta(pubkey=mint, is_signer=False, is_writable=True),
        AccountMeta(pubkey=destination, is_signer=False, is_writable=True),
        AccountMeta(pubkey=authority, is_signer=True, is_writable=False),
    ]
    ix = Instruction(program_id=TOKEN_PROGRAM_ID, data=data, accounts=accounts)
    logger.debug("instruction_built", kind="mint_to", accounts=len(accounts))
    return ix


def native_transfer(from_pubkey: Pubkey, to_pubkey: Pubkey, lamports: int) -> Instruction:
    """System program Transfer. Accounts: [from (signer, writable), to (writable)]."""
    _check_range(lamports, U64_MAX, "lamports", "Failed to create transfer instruction")
    ix = system_transfer(
        TransferParams(from_pubkey=from_pubkey, to_pubkey=to_pubkey, lamports=lamports)
    )
    logger.debug("instruction_built", kind="native_transfer", accounts=len(ix.accounts))
    return ix


def token_transfer(owner: Pubkey, destination: Pubkey, mint: Pubkey, amount: int) -> Instruction:
    """
    SPL Token Transfer between the associated token accounts of owner and destination.

    Accounts: [owner ATA (writable), destination ATA (writable), owner (signer)].
    """
    _check_range(amount, U64_MAX, "amount", "Failed to create token transfer instruction")
    source_ata = derive_associated_token_address(owner, mint)
    destination_ata = derive_associated_token_address(destination, mint)
    data = AMOUNT_IX_LAYOUT.pack(TOKEN_IX_TRANSFER, amount)
    accounts = [
        AccountMeta(pubkey=source_ata, is_signer=False, is_writable=True),
        AccountMeta(pubkey=destination_ata, is_signer=False, is_writable=True),
        AccountMeta(pubkey=owner, is_signer=True, is_writable=False),
    ]
    ix = Instruction(program_id=TOKEN_PROGRAM_ID, data=data, accounts=accounts)
    logger.debug("instruction_built", kind="token_transfer", accounts=len(accounts))
    return ix
