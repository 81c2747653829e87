"""Infrastructure providers."""

# Import bases
from .email import EmailProvider
from .persistence import PersistenceProvider
from .ratelimit import RateLimitProvider

# Import implementations (needed for __subclasses__())
from .email import ProdEmailProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .ratelimit import ProdRateLimitProvider  # noqa: F401

__all__ = [
    "EmailProvider",
    "PersistenceProvider",
    "ProdEmailProvider",
    "ProdPersistenceProvider",
    "ProdRateLimitProvider",
    "RateLimitProvider",
]
