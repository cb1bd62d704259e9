"""JWT token domain service."""

from uuid import UUID

import logfire
from pydantic import ValidationError as PydanticValidationError

from discuss.config import AuthSettings
from discuss.domain.value import Requester, Role, UserId
from discuss.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations.

    Tokens carry the already-authenticated user ID and role; the comment
    engine trusts them as its requester identity.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, role: Role = Role.USER) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            role: User role

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(user_id, role.value, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id, role=role.value)
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

    def get_requester_from_token(self, token: str | None) -> Requester | None:
        """Resolve the requester from a JWT token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Requester if the token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return Requester(
                user_id=UserId(UUID(payload.user_id)), role=Role(payload.role)
            )
        except (JWTError, ValueError, PydanticValidationError) as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
