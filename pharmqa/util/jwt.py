"""JWT session token utilities.

Tokens are issued after the identity provider has authenticated the user and
the internal user record exists; they carry the internal user ID and the
provider's subject identifier.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from pharmqa.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: str
    subject: str  # Identity provider's user identifier
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(user_id: str, subject: str, settings: AuthSettings) -> str:
    """Create a JWT session token for the user.

    Args:
        user_id: Internal user ID
        subject: Identity provider user identifier
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "user_id": user_id,
        "subject": subject,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
