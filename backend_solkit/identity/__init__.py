"""
Identity operations — key-pair generation, signing, verification.
"""

from backend_solkit.identity.keys import (  # noqa: F401
    GeneratedKeypair,
    SignedMessage,
    generate_keypair,
    sign_message,
    verify_message,
)
