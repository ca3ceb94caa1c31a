"""
Backend SolKit — stateless HTTP service for Solana instruction building.

Generates key-pairs, signs and verifies messages, and builds unsigned
instructions (mint initialization, mint-to, SOL transfer, SPL token transfer)
for off-chain clients. Nothing is persisted and nothing is submitted.
"""

__version__ = "0.1.0"
