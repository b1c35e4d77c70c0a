"""Provider base class and mockable component names."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with an in-memory stand-in for tests
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for every provider in ``PROVIDERS``.

    A provider that can be swapped out declares ``__mock_component__`` on an
    abstract base and has exactly two subclasses: a production one and one
    with ``__is_mock__ = True``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
