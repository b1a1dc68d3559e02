"""Mock providers for testing."""

from .email import MockEmailProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockEmailProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
