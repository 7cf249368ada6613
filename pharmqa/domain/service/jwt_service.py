"""JWT token domain service.

Resolves the current user from the session token issued after sign-in at the
identity provider.
"""

from uuid import UUID

import logfire

from pharmqa.config import AuthSettings
from pharmqa.domain.value import UserId
from pharmqa.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, subject: str) -> str:
        """Create JWT token for user.

        Args:
            user_id: Internal user ID
            subject: Identity provider user identifier

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(user_id, subject, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Resolve the current user from a JWT token without raising exceptions.

        A token that verifies but carries a user_id that is not a UUID is
        treated the same as an invalid token.

        Args:
            token: JWT token string (optional)

        Returns:
            User ID if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
        except JWTError as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None

        try:
            return UserId(UUID(payload.user_id))
        except ValueError:
            logfire.warn(
                "JWT user_id is not a UUID, treating as unauthenticated",
                user_id=payload.user_id,
            )
            return None
