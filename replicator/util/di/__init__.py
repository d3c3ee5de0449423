"""Dependency injection wiring.

Every provider is listed once in ``PROVIDERS``. A provider with subclasses is
a swappable component: its subclasses are the production implementation and
a test double told apart by ``__is_mock__``.
"""

from typing import Type

from replicator.util.di.application import ProdApplicationProvider
from replicator.util.di.base import Component, ProviderBase
from replicator.util.di.core import ProdConfigProvider
from replicator.util.di.domain import ProdDomainProvider
from replicator.util.di.infrastructure import (
    Auth0Provider,
    PersistenceProvider,
    ProdAuth0Provider,
    ProdPersistenceProvider,
)
from replicator.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    Auth0Provider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for one ``PROVIDERS`` entry.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Prefer the test double of a swappable component

    Returns:
        ``base`` itself if it is concrete, otherwise the matching subclass

    Raises:
        DependencyInjectionError: If the component has no such implementation
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if implementation.__is_mock__ == use_mock:
            return implementation

    kind = "mock" if use_mock else "production"
    raise DependencyInjectionError(
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
    "Auth0Provider",
    "PersistenceProvider",
    "ProdAuth0Provider",
    "ProdPersistenceProvider",
]
