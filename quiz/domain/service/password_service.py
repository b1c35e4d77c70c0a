"""Password hashing domain service."""

import asyncio

import logfire

from quiz.config import AuthSettings
from quiz.domain.error import ValidationError
from quiz.util.password import hash_password, verify_password

from .base import Service


class PasswordService(Service):
    """Produces and checks salted password hashes.

    bcrypt is deliberately slow, so the work runs in a worker thread to keep
    the event loop responsive.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize password service.

        Args:
            auth_settings: Authentication settings (holds the bcrypt work factor)
        """
        self.auth_settings = auth_settings

    async def hash_password(self, plain_password: str) -> str:
        """Hash a password with a fresh salt.

        Args:
            plain_password: Plain text password

        Returns:
            bcrypt hash

        Raises:
            ValidationError: If the password is too long to hash
        """
        with logfire.span("password_service.hash_password"):
            try:
                return await asyncio.to_thread(
                    hash_password, plain_password, self.auth_settings.bcrypt_rounds
                )
            except ValueError as e:
                raise ValidationError(str(e)) from e

    async def verify_password(self, plain_password: str, password_hash: str) -> bool:
        """Check a password against a stored hash.

        Args:
            plain_password: Plain text password
            password_hash: Stored bcrypt hash

        Returns:
            True if the password matches, False otherwise
        """
        with logfire.span("password_service.verify_password"):
            return await asyncio.to_thread(
                verify_password, plain_password, password_hash
            )
