"""Favourite use cases."""

from .add_favourite import AddFavouriteRequest, AddFavouriteUseCase
from .clear_favourites import ClearFavouritesRequest, ClearFavouritesUseCase
from .get_favourites import (
    FavouritesResponse,
    GetFavouritesRequest,
    GetFavouritesUseCase,
)
from .remove_favourite import RemoveFavouriteRequest, RemoveFavouriteUseCase

__all__ = [
    "AddFavouriteRequest",
    "AddFavouriteUseCase",
    "ClearFavouritesRequest",
    "ClearFavouritesUseCase",
    "FavouritesResponse",
    "GetFavouritesRequest",
    "GetFavouritesUseCase",
    "RemoveFavouriteRequest",
    "RemoveFavouriteUseCase",
]
