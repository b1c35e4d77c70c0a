"""Bearer token authentication for API routes."""

import logging

from fastapi import HTTPException, status

from quiz.domain.error import NotFoundError
from quiz.domain.service import JWTService
from quiz.domain.value import UserId

logger = logging.getLogger(__name__)


def extract_bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header.

    Args:
        authorization: Raw header value (optional)

    Returns:
        The token, or None if the header is missing or not a bearer credential
    """
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def authenticate(authorization: str | None, jwt_service: JWTService) -> UserId:
    """Resolve the calling user from the Authorization header.

    Args:
        authorization: Raw Authorization header value
        jwt_service: JWT service for token verification

    Returns:
        User ID bound to the token

    Raises:
        HTTPException: 401 if no bearer token was sent, 403 if it is invalid or expired
    """
    token = extract_bearer_token(authorization)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = jwt_service.get_user_id_from_token(token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token",
        )
    return user_id


def user_not_found(e: NotFoundError) -> HTTPException:
    """Map a vanished token subject to a 404 response.

    Args:
        e: Error raised when the token's user no longer resolves
    """
    logger.warning(f"Token refers to a missing user: {e.identifier}")
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
