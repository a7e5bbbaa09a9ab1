"""Domain model entities for provider connections."""

from socialconnect.domain.model.account_connection import AccountConnection
from socialconnect.domain.model.request_token import PendingRequestToken

__all__ = [
    "AccountConnection",
    "PendingRequestToken",
]
