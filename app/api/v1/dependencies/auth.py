"""Bearer token and capability dependencies (composition root)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.domain.exceptions import AuthenticationException, AuthorizationException
from app.infrastructure.security.jwt import token_capabilities, verify_token

logger = logging.getLogger(__name__)

_http_bearer = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    """Caller identity from the bearer token."""

    id: str
    capabilities: frozenset[str]

    def can(self, capability: str) -> bool:
        return capability in self.capabilities


async def get_current_user_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> CurrentUser | None:
    """Return the caller from the bearer token if present and valid; else None."""
    if not credentials:
        return None
    try:
        payload = verify_token(credentials.credentials)
    except ValueError as e:
        logger.debug("Rejected bearer token: %s", e)
        return None
    return CurrentUser(id=str(payload["sub"]), capabilities=token_capabilities(payload))


async def get_current_user(
    current_user: Annotated[CurrentUser | None, Depends(get_current_user_optional)],
) -> CurrentUser:
    """Return the caller; raise 401 if the token is missing or invalid."""
    if current_user is None:
        raise AuthenticationException("Not authenticated")
    return current_user


def require_capability(capability: str):
    """Dependency factory: require a valid token granting capability (403 otherwise)."""

    async def _require(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if not current_user.can(capability):
            raise AuthorizationException(capability)
        return current_user

    return _require
