"""Dependency injection wiring.

``PROVIDERS`` lists one entry per layer. Concrete providers are used as-is;
mockable components are resolved to their production or mock subclass by
``get_provider``.
"""

from typing import Type

from quiz.util.di.application import ProdApplicationProvider
from quiz.util.di.base import Component, ProviderBase
from quiz.util.di.core import ProdConfigProvider
from quiz.util.di.domain import ProdDomainProvider
from quiz.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a ``PROVIDERS`` entry to the class to instantiate.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Pick the ``__is_mock__`` subclass of a mockable component

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the component has no implementation of the requested kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
