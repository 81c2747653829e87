"""Dependency injection: provider registry and implementation selection."""

from typing import Type

from tour.util.di.application import ProdApplicationProvider
from tour.util.di.base import Component, ProviderBase
from tour.util.di.core import ProdConfigProvider
from tour.util.di.domain import ProdDomainProvider
from tour.util.di.infrastructure import (
    EmailProvider,
    PersistenceProvider,
    ProdEmailProvider,
    ProdPersistenceProvider,
    ProdRateLimitProvider,
    RateLimitProvider,
)
from tour.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    # Always production
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Components with a mock twin (persistence, email, ratelimit)
    PersistenceProvider,
    EmailProvider,
    RateLimitProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for ``base``.

    A base without subclasses is itself the implementation. A component base
    (e.g. ``RateLimitProvider``) is resolved to the subclass whose
    ``__is_mock__`` matches ``use_mock``; mock subclasses only exist once
    ``tests.di`` has been imported.

    Raises:
        DependencyInjectionError: If no subclass of the requested kind exists
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    for impl in subclasses:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = getattr(base, "__mock_component__", None) or base.__name__
    raise DependencyInjectionError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "EmailProvider",
    "PersistenceProvider",
    "RateLimitProvider",
    "ProdEmailProvider",
    "ProdPersistenceProvider",
    "ProdRateLimitProvider",
]
