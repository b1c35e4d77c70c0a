"""Favourite question routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import Field

from quiz.application.usecase.common import CamelModel
from quiz.application.usecase.favourite import (
    AddFavouriteRequest,
    AddFavouriteUseCase,
    ClearFavouritesRequest,
    ClearFavouritesUseCase,
    FavouritesResponse,
    GetFavouritesRequest,
    GetFavouritesUseCase,
    RemoveFavouriteRequest,
    RemoveFavouriteUseCase,
)
from quiz.domain.error import AlreadyExistsError, NotFoundError, ValidationError
from quiz.domain.service import JWTService
from quiz.interface.api.bearer import authenticate, user_not_found

router = APIRouter(
    prefix="/api/favourites", tags=["favourites"], route_class=DishkaRoute
)


class AddFavouriteBody(CamelModel):
    """Add favourite request body (``{question, options, answer, id?}``)."""

    question: str | None = None
    options: list[str] | None = None
    answer: str | None = None
    external_id: str | None = Field(default=None, alias="id")


@router.get("", response_model=FavouritesResponse, response_model_exclude_none=True)
async def get_favourites(
    jwt_service: FromDishka[JWTService],
    use_case: FromDishka[GetFavouritesUseCase],
    authorization: str | None = Header(default=None),
) -> FavouritesResponse:
    """List the caller's favourite questions in insertion order."""
    user_id = authenticate(authorization, jwt_service)
    try:
        return await use_case.execute(GetFavouritesRequest(user_id=str(user_id)))
    except NotFoundError as e:
        raise user_not_found(e)


@router.post(
    "",
    response_model=FavouritesResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def add_favourite(
    body: AddFavouriteBody,
    jwt_service: FromDishka[JWTService],
    use_case: FromDishka[AddFavouriteUseCase],
    authorization: str | None = Header(default=None),
) -> FavouritesResponse:
    """Bookmark a question.

    Raises:
        HTTPException: 400 if the question is invalid or already bookmarked,
            404 if the user is gone
    """
    user_id = authenticate(authorization, jwt_service)
    try:
        return await use_case.execute(
            AddFavouriteRequest(
                user_id=str(user_id),
                question=body.question,
                options=body.options,
                answer=body.answer,
                external_id=body.external_id,
            )
        )
    except (ValidationError, AlreadyExistsError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise user_not_found(e)


@router.delete(
    "/{key:path}", response_model=FavouritesResponse, response_model_exclude_none=True
)
async def remove_favourite(
    key: str,
    jwt_service: FromDishka[JWTService],
    use_case: FromDishka[RemoveFavouriteUseCase],
    authorization: str | None = Header(default=None),
) -> FavouritesResponse:
    """Remove the favourite addressed by its external id or question text."""
    user_id = authenticate(authorization, jwt_service)
    try:
        return await use_case.execute(
            RemoveFavouriteRequest(user_id=str(user_id), key=key)
        )
    except NotFoundError as e:
        raise user_not_found(e)


@router.delete(
    "", response_model=FavouritesResponse, response_model_exclude_none=True
)
async def clear_favourites(
    jwt_service: FromDishka[JWTService],
    use_case: FromDishka[ClearFavouritesUseCase],
    authorization: str | None = Header(default=None),
) -> FavouritesResponse:
    """Remove every favourite of the caller."""
    user_id = authenticate(authorization, jwt_service)
    try:
        return await use_case.execute(ClearFavouritesRequest(user_id=str(user_id)))
    except NotFoundError as e:
        raise user_not_found(e)
