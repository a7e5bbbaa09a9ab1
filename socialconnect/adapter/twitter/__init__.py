"""Twitter provider adapter."""

from .client import (
    MockTwitterServiceApi,
    MockTwitterTemplate,
    TwitterApiError,
    TwitterOperations,
    TwitterServiceApi,
    TwitterTemplate,
)

__all__ = [
    "MockTwitterServiceApi",
    "MockTwitterTemplate",
    "TwitterApiError",
    "TwitterOperations",
    "TwitterServiceApi",
    "TwitterTemplate",
]
