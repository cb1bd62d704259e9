"""Requester resolution for API routes.

Tokens are read from the auth cookie first, then from an
``Authorization: Bearer`` header.
"""

from discuss.domain.service import JWTService
from discuss.domain.value import Requester
from discuss.interface.error import AuthenticationError, ErrorCode


def extract_token(auth_token: str | None, authorization: str | None) -> str | None:
    """Pick the token from the cookie or the bearer header."""
    if auth_token:
        return auth_token
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return None


def optional_requester(
    jwt_service: JWTService, auth_token: str | None, authorization: str | None
) -> Requester | None:
    """Resolve the requester for reads; bad or missing tokens mean anonymous."""
    return jwt_service.get_requester_from_token(
        extract_token(auth_token, authorization)
    )


def require_requester(
    jwt_service: JWTService, auth_token: str | None, authorization: str | None
) -> Requester:
    """Resolve the requester for mutations.

    Raises:
        AuthenticationError: If no token was sent or it does not verify
    """
    token = extract_token(auth_token, authorization)
    if not token:
        raise AuthenticationError(
            ErrorCode.AUTH_TOKEN_MISSING, "Authentication required"
        )

    requester = jwt_service.get_requester_from_token(token)
    if requester is None:
        raise AuthenticationError(
            ErrorCode.AUTH_TOKEN_INVALID, "Invalid or expired token"
        )
    return requester
