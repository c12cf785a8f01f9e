"""Bearer token helpers binding a caller identity to signed JWTs."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from autorotate.core.settings import settings


def create_access_token(identity: str, extra_claims: dict[str, str] | None = None) -> str:
    """Create a JWT access token whose subject is the caller identity."""
    to_encode: dict[str, object] = {"sub": identity}
    if extra_claims:
        to_encode.update(extra_claims)
    expire = datetime.now(UTC) + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = expire
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def decode_identity(token: str) -> str:
    """Return the identity carried by a token.

    Raises:
        ValueError: If the token is invalid, expired or has no subject.
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as err:
        raise ValueError("invalid access token") from err

    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        raise ValueError("access token has no subject")
    return subject
