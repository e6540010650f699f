"""Signed session tokens.

Tokens are HS256 JWTs carrying ``userId`` and ``username``. Verification
reports *why* a token was rejected through :class:`TokenStatus`; the HTTP
layer collapses every non-valid status into one 401.
"""

import enum
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from catshop.config import settings
from catshop.models.user import User


class TokenStatus(enum.Enum):
    VALID = "valid"
    EXPIRED = "expired"
    MALFORMED = "malformed"
    ABSENT = "absent"


@dataclass(frozen=True)
class TokenCheck:
    status: TokenStatus
    claims: dict[str, Any] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return self.status is TokenStatus.VALID

    @property
    def username(self) -> str | None:
        return self.claims.get("username")


def create_session_token(user: User, expires_in: timedelta | None = None) -> str:
    if expires_in is None:
        expires_in = timedelta(seconds=settings.jwt_expires_seconds)
    now = datetime.now(timezone.utc)
    payload = {
        "userId": user.id,
        "username": user.username,
        "iat": now,
        "exp": now + expires_in,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def check_session_token(token: str | None) -> TokenCheck:
    if not token:
        return TokenCheck(TokenStatus.ABSENT)
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError:
        return TokenCheck(TokenStatus.EXPIRED)
    except jwt.InvalidTokenError:
        return TokenCheck(TokenStatus.MALFORMED)

    if not isinstance(claims.get("username"), str):
        return TokenCheck(TokenStatus.MALFORMED)
    return TokenCheck(TokenStatus.VALID, claims)
