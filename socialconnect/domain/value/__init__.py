"""Domain value objects for provider connections."""

from socialconnect.domain.value.identifiers import AccountId, ConnectionId
from socialconnect.domain.value.types import (
    AuthorizedRequestToken,
    AuthorizeUrlTemplate,
    OAuthToken,
    ProviderParameters,
)

__all__ = [
    # Identifiers
    "AccountId",
    "ConnectionId",
    # Types
    "AuthorizeUrlTemplate",
    "AuthorizedRequestToken",
    "OAuthToken",
    "ProviderParameters",
]
