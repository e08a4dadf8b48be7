from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from brandhub.core import config


class InvalidTokenError(Exception):
    """Raised when a session token is expired, tampered with or malformed."""


class SessionClaims(BaseModel):
    id: int
    name: str | None = None
    address: str | None = None


def create_access_token(
    claims: SessionClaims,
    secret: str | None = None,
    expires_seconds: int | None = None,
) -> str:
    if expires_seconds is None:
        expires_seconds = config.JWT_EXPIRES_SECONDS
    if secret is None:
        secret = config.JWT_SECRET
    now = datetime.now(timezone.utc)
    payload = claims.model_dump()
    payload.update({"iat": now, "exp": now + timedelta(seconds=expires_seconds)})
    return jwt.encode(payload, secret, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str, secret: str | None = None) -> SessionClaims:
    if secret is None:
        secret = config.JWT_SECRET
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[config.JWT_ALGORITHM],
            options={"require": ["exp"]},
        )
        return SessionClaims.model_validate(payload)
    except (jwt.PyJWTError, ValidationError) as exc:
        raise InvalidTokenError(str(exc)) from exc
