"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from socialconnect.domain.model import AccountConnection, PendingRequestToken
from socialconnect.domain.value import AccountId, ConnectionId, OAuthToken


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_account_connection(row: Dict[str, Any]) -> AccountConnection:
    """Convert database row to AccountConnection domain model."""
    return AccountConnection(
        id=ConnectionId(_uuid(row["id"])),
        account_id=AccountId(_uuid(row["account_id"])),
        provider=row["provider"],
        access_token=OAuthToken(
            value=row["access_token"], secret=row.get("access_token_secret")
        ),
        provider_account_id=row["provider_account_id"],
        profile_url=row.get("profile_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def account_connection_to_dict(connection: AccountConnection) -> Dict[str, Any]:
    """Convert AccountConnection domain model to database dict.

    The access token is flattened into its value and secret columns.
    """
    return {
        "id": connection.id,
        "account_id": connection.account_id,
        "provider": connection.provider,
        "access_token": connection.access_token.value,
        "access_token_secret": connection.access_token.secret,
        "provider_account_id": connection.provider_account_id,
        "profile_url": connection.profile_url,
        "created_at": connection.created_at,
        "updated_at": connection.updated_at,
    }


def row_to_pending_request_token(row: Dict[str, Any]) -> PendingRequestToken:
    """Convert database row to PendingRequestToken domain model."""
    return PendingRequestToken(
        account_id=AccountId(_uuid(row["account_id"])),
        provider=row["provider"],
        token=OAuthToken(value=row["token"], secret=row["token_secret"]),
        created_at=row["created_at"],
    )


def pending_request_token_to_dict(pending: PendingRequestToken) -> Dict[str, Any]:
    """Convert PendingRequestToken domain model to database dict."""
    return {
        "token": pending.token.value,
        "token_secret": pending.token.secret,
        "account_id": pending.account_id,
        "provider": pending.provider,
        "created_at": pending.created_at,
    }
