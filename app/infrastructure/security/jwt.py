"""Bearer tokens for the HTTP API.

Tokens carry the caller id in sub and granted capabilities in caps
(e.g. ["manage_options", "edit_posts"]). Secret and algorithm come from
app.core.config.
"""

from collections.abc import Iterable
from datetime import timedelta
from typing import Any, cast

from jose import JWTError, jwt

from app.core.config import get_settings
from app.shared.utils.datetime import utc_now

CAPABILITIES_CLAIM = "caps"


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed token with the given claims.

    Args:
        data: Claims to encode (sub, caps).
        expires_delta: Optional TTL; else uses settings.access_token_expire_minutes.
    """
    settings = get_settings()
    to_encode = data.copy()
    ttl = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = utc_now() + ttl
    encoded = jwt.encode(
        to_encode,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def create_capability_token(
    subject: str,
    capabilities: Iterable[str],
    expires_delta: timedelta | None = None,
) -> str:
    """Token for subject granting capabilities."""
    return create_access_token(
        {"sub": subject, CAPABILITIES_CLAIM: sorted(set(capabilities))},
        expires_delta=expires_delta,
    )


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a token. Returns the payload.

    Raises:
        ValueError: If token is invalid, expired, or missing exp/sub.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if "sub" not in payload:
        raise ValueError("Token missing required claim: sub")
    return payload


def token_capabilities(payload: dict[str, Any]) -> frozenset[str]:
    """Capabilities granted by a decoded payload (malformed claim grants none)."""
    caps = payload.get(CAPABILITIES_CLAIM)
    if not isinstance(caps, list):
        return frozenset()
    return frozenset(c for c in caps if isinstance(c, str))
