"""Production container and its FastAPI hookup."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from quiz.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container with every production provider.

    ``FastapiProvider`` exposes the current ``Request`` to REQUEST-scoped
    factories.
    """
    providers = [get_provider(base)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` so ``DishkaRoute`` handlers can resolve ``FromDishka``."""
    setup_dishka(container, app)
