"""
Request validation — fail-fast field checks that run before any builder.

Order per endpoint: presence/non-blank, numeric range, then key/signature
decoding. The first failing check raises BadRequest naming the field.
"""

from backend_solkit.validation.validators import (  # noqa: F401
    ValidatedCreateToken,
    ValidatedMintTo,
    ValidatedSendSol,
    ValidatedSendToken,
    validate_create_token,
    validate_mint_to,
    validate_send_sol,
    validate_send_token,
)
