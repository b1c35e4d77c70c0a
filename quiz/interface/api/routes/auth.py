"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import Field

from quiz.application.usecase.auth import (
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    SignupRequest,
    SignupResponse,
    SignupUseCase,
)
from quiz.application.usecase.common import CamelModel
from quiz.domain.error import (
    AlreadyExistsError,
    InvalidCredentialsError,
    ValidationError,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/auth", tags=["authentication"], route_class=DishkaRoute
)


class SignupBody(CamelModel):
    """Signup request body (``{email, fullName, password}``)."""

    email: str = Field(min_length=1)
    full_name: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginBody(CamelModel):
    """Login request body."""

    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


@router.post(
    "/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    body: SignupBody,
    use_case: FromDishka[SignupUseCase],
) -> SignupResponse:
    """Create an account and return a session token.

    Raises:
        HTTPException: 409 if the email is taken, 400 if the input is rejected
    """
    try:
        return await use_case.execute(
            SignupRequest(
                email=body.email, full_name=body.full_name, password=body.password
            )
        )
    except AlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginBody,
    use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Exchange email and password for a session token.

    Raises:
        HTTPException: 401 if the credentials don't match an account
    """
    try:
        return await use_case.execute(
            LoginRequest(email=body.email, password=body.password)
        )
    except InvalidCredentialsError as e:
        logger.info("Rejected login attempt")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
