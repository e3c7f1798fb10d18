"""
Feedback Tracker Backend — Caller Authentication
=================================================

What:  Resolves the caller of an /api request from its bearer token.
Why:   Points ownership and listing depend on who is asking and whether
       they hold the administrator role.
How:   The auth service issues HS256 JWTs; this module only verifies them.

Token claims:
    sub   the caller's login
    auth  comma-separated authorities, e.g. "ROLE_ADMIN,ROLE_USER"
    exp   expiry (enforced by PyJWT)
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import FrozenSet, Iterable, Optional

import jwt
from fastapi import Header

from feedback.config import settings
from feedback.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

ROLE_ADMIN = "ROLE_ADMIN"
ROLE_USER = "ROLE_USER"


@dataclass(frozen=True)
class Caller:
    """The authenticated principal of the current request."""
    login: str
    authorities: FrozenSet[str]

    def has_role(self, role: str) -> bool:
        return role in self.authorities

    @property
    def is_admin(self) -> bool:
        return self.has_role(ROLE_ADMIN)


def create_access_token(
    login: str,
    authorities: Iterable[str] = (ROLE_USER,),
    ttl_seconds: Optional[int] = None,
) -> str:
    """Mint a token the way the auth service does (tooling and tests)."""
    now = datetime.now(timezone.utc)
    ttl = settings.jwt_token_ttl if ttl_seconds is None else ttl_seconds
    payload = {
        "sub": login,
        "auth": ",".join(authorities),
        "iat": now,
        "exp": now + timedelta(seconds=ttl),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Caller:
    """
    Verify a token and extract the caller.

    Raises:
        AuthenticationError: bad signature, expired, or missing subject
    """
    if not settings.jwt_secret:
        raise AuthenticationError(message="Token verification is not configured")
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError as e:
        raise AuthenticationError(message="Token has expired") from e
    except jwt.InvalidTokenError as e:
        logger.debug("Rejected token: %s", str(e))
        raise AuthenticationError(message="Invalid token") from e

    login = payload.get("sub")
    if not login:
        raise AuthenticationError(message="Token has no subject")
    authorities = frozenset(
        a.strip() for a in str(payload.get("auth", "")).split(",") if a.strip()
    )
    return Caller(login=login, authorities=authorities)


async def get_current_caller(
    authorization: Optional[str] = Header(default=None),
) -> Caller:
    """FastAPI dependency: the Caller behind the Authorization header."""
    if not authorization:
        raise AuthenticationError()
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise AuthenticationError(message="Invalid authorization header format")
    return decode_token(parts[1])
