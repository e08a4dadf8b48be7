import logging

from fastapi import Header, HTTPException

from brandhub.auth import jwt_handler
from brandhub.auth.jwt_handler import SessionClaims

logger = logging.getLogger(__name__)


def extract_bearer_token(authorization: str) -> str:
    parts = authorization.split(" ")
    return parts[1] if len(parts) > 1 else ""


def require_session(authorization: str | None = Header(default=None)) -> SessionClaims:
    if not authorization:
        raise HTTPException(status_code=401, detail="token required")

    token = extract_bearer_token(authorization)
    try:
        return jwt_handler.decode_access_token(token)
    except jwt_handler.InvalidTokenError as exc:
        logger.info("Rejected session token: %s", exc)
        raise HTTPException(status_code=401, detail="Unauthorized") from exc
