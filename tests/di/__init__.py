"""Mock providers for testing."""

from .content import MockContentProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockContentProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
