"""Security: bearer tokens with capability claims, editor form nonces."""

from app.infrastructure.security.jwt import (
    create_access_token,
    create_capability_token,
    token_capabilities,
    verify_token,
)
from app.infrastructure.security.nonce import NonceService

__all__ = [
    "NonceService",
    "create_access_token",
    "create_capability_token",
    "token_capabilities",
    "verify_token",
]
