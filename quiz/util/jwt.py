"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from quiz.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: str
    iat: datetime
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(user_id: str, settings: AuthSettings) -> str:
    """Create a JWT token for the user.

    Args:
        user_id: User ID
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    issued_at = datetime.now(timezone.utc)
    expiry = issued_at + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "user_id": user_id,
        "iat": issued_at,
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
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "user_id"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except (TypeError, ValueError):
        # Signed but malformed claims
        raise JWTError("Invalid token payload")
