"""Mock providers for testing."""

from .identity import MockIdentityProvider
from .imagehost import MockImageHostProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockIdentityProvider",
    "MockImageHostProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
