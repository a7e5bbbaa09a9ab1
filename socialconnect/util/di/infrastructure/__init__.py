"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider
from .session import SessionProvider
from .twitter import TwitterProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401
from .session import ProdSessionProvider  # noqa: F401
from .twitter import ProdTwitterProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdSessionProvider",
    "ProdTwitterProvider",
    "SessionProvider",
    "TwitterProvider",
]
