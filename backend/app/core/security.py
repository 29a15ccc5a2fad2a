"""
Bearer token issuing and decoding.
"""
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import jwt

from app.config import get_settings


def create_access_token(
    record_id: str,
    document_id: str,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a signed JWT bound to a profile record.

    Args:
        record_id: Profile ObjectId as string, stored in the ``sub`` claim
        document_id: The profile's document id
        expires_delta: Optional custom validity window

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()

    if expires_delta is None:
        expires_delta = timedelta(hours=settings.jwt_access_token_expire_hours)

    issued_at = datetime.now(timezone.utc)

    payload = {
        "sub": record_id,
        "document_id": document_id,
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }

    return jwt.encode(
        payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str) -> dict[str, Any]:
    """
    Decode and validate a JWT token.

    Args:
        token: The JWT token string to decode

    Returns:
        Decoded payload dictionary with keys: sub, document_id, iat, exp

    Raises:
        JWTError: If the signature is invalid or the token has expired
    """
    settings = get_settings()
    return jwt.decode(
        token,
        settings.jwt_secret_key,
        algorithms=[settings.jwt_algorithm],
    )
