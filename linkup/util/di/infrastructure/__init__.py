"""Infrastructure providers."""

# Import bases
from .identity import IdentityProvider
from .imagehost import ImageHostProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .identity import ProdIdentityProvider  # noqa: F401
from .imagehost import ProdImageHostProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "IdentityProvider",
    "ImageHostProvider",
    "PersistenceProvider",
    "ProdIdentityProvider",
    "ProdImageHostProvider",
    "ProdPersistenceProvider",
]
