"""
Program ids, sysvars and instruction layouts used by the builders.

SPL Token layouts (little-endian):
- InitializeMint: u8 tag=0 | u8 decimals | 32 mint_authority | COption<Pubkey> freeze (None = single 0 byte)
- Transfer:       u8 tag=3 | u64 amount
- MintTo:         u8 tag=7 | u64 amount
System program Transfer: u32 tag=2 | u64 lamports
"""

from __future__ import annotations

import struct

from solders.system_program import ID as SYSTEM_PROGRAM_ID  # noqa: F401
from solders.sysvar import RENT as SYSVAR_RENT_ID  # noqa: F401
from spl.token.constants import ASSOCIATED_TOKEN_PROGRAM_ID, TOKEN_PROGRAM_ID  # noqa: F401

U8_MAX = 0xFF
U64_MAX = 0xFFFF_FFFF_FFFF_FFFF

TOKEN_IX_INITIALIZE_MINT = 0
TOKEN_IX_TRANSFER = 3
TOKEN_IX_MINT_TO = 7
SYSTEM_IX_TRANSFER = 2

INITIALIZE_MINT_LAYOUT = struct.Struct("<BB32sB")  # 35 bytes
AMOUNT_IX_LAYOUT = struct.Struct("<BQ")  # 9 bytes
SYSTEM_TRANSFER_LAYOUT = struct.Struct("<IQ")  # 12 bytes
