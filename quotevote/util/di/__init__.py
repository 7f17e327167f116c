"""Dependency injection wiring.

Providers come in two kinds. Core providers (config, domain services,
use cases) are concrete and always used as-is. Component providers, such
as persistence, are abstract bases whose subclasses are either the
production or the in-memory implementation, picked by ``__is_mock__``.
"""

from typing import Type

from quotevote.util.di.application import ProdApplicationProvider
from quotevote.util.di.base import Component, ProviderBase
from quotevote.util.di.core import ProdConfigProvider
from quotevote.util.di.domain import ProdDomainProvider
from quotevote.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable for tests
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class that should be instantiated.

    Args:
        base: Entry from PROVIDERS
        use_mock: Pick the in-memory implementation of a component

    Returns:
        ``base`` itself for core providers, otherwise the matching subclass

    Raises:
        ValueError: If the component has no implementation of the requested kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = getattr(base, "__mock_component__", base.__name__)
    raise ValueError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
