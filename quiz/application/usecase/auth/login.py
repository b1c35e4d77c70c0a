"""Login use case."""

from pydantic import BaseModel

from quiz.application.usecase.base import BaseUseCase
from quiz.application.usecase.common import CamelModel, UserProfile
from quiz.domain.service import AccountService


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginResponse(CamelModel):
    """Login response."""

    success: bool = True
    message: str = "Login successful"
    token: str
    user: UserProfile


class LoginUseCase(BaseUseCase):
    """Use case for email/password login."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize login use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Args:
            request: Login request

        Returns:
            Token and public profile of the user

        Raises:
            InvalidCredentialsError: If the email or password is wrong
        """
        result = await self.account_service.login(
            email=request.email, password=request.password
        )
        return LoginResponse(token=result.token, user=UserProfile.from_user(result.user))
