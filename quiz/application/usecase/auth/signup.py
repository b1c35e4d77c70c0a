"""Signup use case."""

from pydantic import BaseModel

from quiz.application.usecase.base import BaseUseCase
from quiz.application.usecase.common import CamelModel, UserProfile
from quiz.domain.service import AccountService


class SignupRequest(BaseModel):
    """Signup request."""

    email: str
    full_name: str
    password: str


class SignupResponse(CamelModel):
    """Signup response."""

    success: bool = True
    message: str = "User created successfully"
    token: str
    user: UserProfile


class SignupUseCase(BaseUseCase):
    """Use case for creating an account with email and password."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize signup use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(self, request: SignupRequest) -> SignupResponse:
        """Execute signup flow.

        Args:
            request: Signup request

        Returns:
            Token and public profile of the new user

        Raises:
            AlreadyExistsError: If the email is already registered
            ValidationError: If the password cannot be accepted
        """
        result = await self.account_service.signup(
            email=request.email,
            full_name=request.full_name,
            password=request.password,
        )
        return SignupResponse(
            token=result.token, user=UserProfile.from_user(result.user)
        )
