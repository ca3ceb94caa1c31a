"""
API server package — HTTP/JSON interface.

Thin transport shell over validation, identity and instruction builders.
No authentication, no rate limiting, no persisted state.
"""
