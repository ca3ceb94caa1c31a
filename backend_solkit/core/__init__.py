"""
Core utilities — error taxonomy and the base58/base64 codec.

Shared by the validator, identity operations, instruction builders and
the API server.
"""
