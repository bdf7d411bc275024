"""Editor form nonces: short-lived signed tokens bound to an action and a record."""

from datetime import timedelta
from typing import Any, cast

from jose import JWTError, jwt

from app.domain.exceptions import NonceVerificationException
from app.shared.utils.datetime import utc_now

NONCE_SUBJECT = "nonce"


class NonceService:
    """Creates and verifies form nonces with python-jose.

    A nonce is valid for one (action, record_id) pair until it expires; it is
    not single-use.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", ttl_minutes: int = 1440) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._ttl = timedelta(minutes=ttl_minutes)

    def create(self, action: str, record_id: int) -> str:
        claims: dict[str, Any] = {
            "sub": NONCE_SUBJECT,
            "act": action,
            "rid": int(record_id),
            "exp": utc_now() + self._ttl,
        }
        return cast(str, jwt.encode(claims, self._secret_key, algorithm=self._algorithm))

    def verify(self, nonce: str | None, action: str, record_id: int) -> None:
        """Raise NonceVerificationException unless nonce matches action and record_id."""
        if not nonce:
            raise NonceVerificationException("missing")
        try:
            claims = jwt.decode(
                nonce,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require_exp": True},
            )
        except JWTError as e:
            raise NonceVerificationException("invalid") from e
        if claims.get("sub") != NONCE_SUBJECT or claims.get("act") != action:
            raise NonceVerificationException("wrong_action")
        if claims.get("rid") != int(record_id):
            raise NonceVerificationException("wrong_record")
