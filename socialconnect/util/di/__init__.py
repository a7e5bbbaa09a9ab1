"""Dependency injection module.

Providers come in two kinds. Core providers (config, domain services, use
cases) are concrete and always used as-is. Infrastructure components
(persistence, session, twitter) are abstract bases whose subclasses are
the production and mock implementations; the container picks one per
component.
"""

from typing import Type

from socialconnect.util.di.application import ProdApplicationProvider
from socialconnect.util.di.base import Component, ProviderBase
from socialconnect.util.di.core import ProdConfigProvider
from socialconnect.util.di.domain import ProdDomainProvider
from socialconnect.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
    ProdSessionProvider,
    ProdTwitterProvider,
    SessionProvider,
    TwitterProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    SessionProvider,
    TwitterProvider,
]


def mockable_components() -> dict[Component, Type[ProviderBase]]:
    """Map each swappable component name to its provider base."""
    return {
        base.__mock_component__: base
        for base in PROVIDERS
        if base.__mock_component__ is not None and base.__subclasses__()
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get the provider class to instantiate for a base.

    Args:
        base: Provider base class
        use_mock: Whether to pick the mock implementation of a component

    Returns:
        The base itself for core providers, otherwise the implementation
        whose ``__is_mock__`` matches ``use_mock``

    Raises:
        ValueError: If the component has no such implementation
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
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "SessionProvider",
    "TwitterProvider",
    "ProdPersistenceProvider",
    "ProdSessionProvider",
    "ProdTwitterProvider",
]
