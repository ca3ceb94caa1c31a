"""
Instruction builders — unsigned Solana instructions for the System and SPL Token programs.

Builders are pure: typed values in, solders Instruction out. No RPC, no signing.
"""

from backend_solkit.instructions.builders import (  # noqa: F401
    derive_associated_token_address,
    initialize_mint,
    mint_to,
    native_transfer,
    token_transfer,
)
