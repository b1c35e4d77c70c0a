"""Account domain service: signup and password login."""

from dataclasses import dataclass
from uuid import uuid4

import logfire

from quiz.domain.error import AlreadyExistsError, InvalidCredentialsError
from quiz.domain.model import User
from quiz.domain.repository import DuplicateKeyError, UserRepository
from quiz.domain.value import UserId, utcnow

from .base import Service
from .jwt_service import JWTService
from .password_service import PasswordService


@dataclass
class AuthResult:
    """Outcome of a successful signup or login."""

    token: str
    user: User


class AccountService(Service):
    """Domain service for account creation and authentication."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize account service.

        Args:
            user_repository: User repository
            password_service: Password hashing service
            jwt_service: JWT token service
        """
        self.user_repository = user_repository
        self.password_service = password_service
        self.jwt_service = jwt_service

    async def signup(self, email: str, full_name: str, password: str) -> AuthResult:
        """Register a new user and issue a token.

        The email pre-check is advisory; the store's unique constraint is
        authoritative and a violation at write time is reported the same way.

        Args:
            email: Email address (unique, exact match)
            full_name: Display name
            password: Plain text password

        Returns:
            Token and the newly created user

        Raises:
            AlreadyExistsError: If the email is already registered
            ValidationError: If the password cannot be hashed
        """
        with logfire.span("account_service.signup"):
            existing = await self.user_repository.find_by_email(email)
            if existing:
                logfire.warn("Signup rejected - email taken")
                raise AlreadyExistsError("User already exists with this email")

            password_hash = await self.password_service.hash_password(password)

            user = User(
                id=UserId(uuid4()),
                email=email,
                full_name=full_name,
                password_hash=password_hash,
                scores=[],
                favourites=[],
                diamonds=0,
                created_at=utcnow(),
            )

            try:
                saved = await self.user_repository.create(user)
            except DuplicateKeyError:
                logfire.warn("Signup lost race on unique email")
                raise AlreadyExistsError("User already exists with this email")

            token = self.jwt_service.create_token(saved.id)
            logfire.info("User signed up", user_id=str(saved.id))
            return AuthResult(token=token, user=saved)

    async def login(self, email: str, password: str) -> AuthResult:
        """Authenticate with email and password.

        Args:
            email: Email address
            password: Plain text password

        Returns:
            Token and the authenticated user

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        with logfire.span("account_service.login"):
            user = await self.user_repository.find_by_email(email)
            if not user:
                logfire.warn("Login failed - unknown email")
                raise InvalidCredentialsError()

            if not await self.password_service.verify_password(
                password, user.password_hash
            ):
                logfire.warn("Login failed - wrong password", user_id=str(user.id))
                raise InvalidCredentialsError()

            token = self.jwt_service.create_token(user.id)
            logfire.info("User logged in", user_id=str(user.id))
            return AuthResult(token=token, user=user)
