"""
Token issuance and verification in front of the task endpoints.

Tokens are RS256 JWTs: signed with the private key, verified with the public
key. Both keys are read once, when the gate is built.
"""

from __future__ import annotations

import hmac
import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, Optional, TypeVar

import pydantic
from jose import JOSEError, jwt

from .errors import ForbiddenError, InternalError, UnauthorizedError
from .schemas.auth import Claims

logger = logging.getLogger(__name__)

ALGORITHM = "RS256"
ACCESS_LEVEL = "level1"
USER_KIND = "human"

T = TypeVar("T")


def _same(a: str, b: str) -> bool:
    return hmac.compare_digest(a.encode("utf-8"), b.encode("utf-8"))


class AuthGate:
    """Issues tokens for the one accepted login and checks presented tokens."""

    def __init__(
        self,
        private_key: str,
        public_key: str,
        user: str,
        password: str,
        ttl: timedelta = timedelta(hours=10),
    ) -> None:
        self._private_key = private_key
        self._public_key = public_key
        self._user = user
        self._password = password
        self._ttl = ttl

    @classmethod
    def from_files(
        cls,
        private_key_path: str | Path,
        public_key_path: str | Path,
        **kwargs,
    ) -> "AuthGate":
        """Build a gate from PEM key files. Unreadable files fail here."""
        private_key = Path(private_key_path).read_text(encoding="utf-8")
        public_key = Path(public_key_path).read_text(encoding="utf-8")
        logger.info("Loaded signing keys from %s and %s", private_key_path, public_key_path)
        return cls(private_key, public_key, **kwargs)

    def issue_token(self, user: str, password: str) -> str:
        """Return a signed token, or raise ``ForbiddenError`` on a wrong pair."""
        if not (_same(user, self._user) and _same(password, self._password)):
            logger.warning("Rejected login for user %r", user)
            raise ForbiddenError("wrong credentials")

        expire = datetime.now(timezone.utc) + self._ttl
        claims = Claims(
            access=ACCESS_LEVEL,
            name=user,
            kind=USER_KIND,
            exp=int(expire.timestamp()),
        )
        try:
            token = jwt.encode(claims.model_dump(), self._private_key, algorithm=ALGORITHM)
        except (JOSEError, ValueError) as exc:
            raise InternalError(f"could not sign token: {exc}") from exc

        logger.info("Issued token for user %r", user)
        return token

    def verify_token(self, token: Optional[str]) -> Claims:
        """
        Decode ``token`` and return its claims.

        Missing, malformed, expired and badly signed tokens all raise the
        same ``UnauthorizedError``.
        """
        if not token:
            raise UnauthorizedError("missing token")
        try:
            payload = jwt.decode(token, self._public_key, algorithms=[ALGORITHM])
            return Claims(**payload)
        except (JOSEError, pydantic.ValidationError) as exc:
            logger.debug("Token rejected: %s", exc)
            raise UnauthorizedError("invalid token") from exc

    def gate(self, token: Optional[str], downstream: Callable[[Claims], T]) -> T:
        """Call ``downstream`` with the token's claims only if the token verifies."""
        claims = self.verify_token(token)
        return downstream(claims)
