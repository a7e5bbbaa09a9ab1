"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .session import TEST_ACCOUNT_ID, MockSessionProvider
from .twitter import TEST_PARAMETERS, MockTwitterProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "MockSessionProvider",
    "MockTwitterProvider",
    "TEST_ACCOUNT_ID",
    "TEST_PARAMETERS",
    "build_test_container",
]
