"""AccountConnection repository implementation using PostgreSQL."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from socialconnect.domain.model.account_connection import AccountConnection
from socialconnect.domain.repository.account_connection import (
    AccountConnectionRepository,
)
from socialconnect.domain.value import AccountId, ConnectionId, OAuthToken
from socialconnect.persistence.mappers import (
    account_connection_to_dict,
    row_to_account_connection,
)
from socialconnect.persistence.tables import account_connections_table


class PostgresAccountConnectionRepository(AccountConnectionRepository):
    """PostgreSQL implementation of AccountConnectionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add_connection(
        self,
        account_id: AccountId,
        provider: str,
        access_token: OAuthToken,
        provider_account_id: str,
        profile_url: str | None,
    ) -> AccountConnection:
        """Insert the connection, updating the existing row on conflict.

        The row keeps its id and created_at; tokens and profile data are
        replaced.
        """
        now = datetime.now(timezone.utc)
        values = account_connection_to_dict(
            AccountConnection(
                id=ConnectionId(uuid4()),
                account_id=account_id,
                provider=provider,
                access_token=access_token,
                provider_account_id=provider_account_id,
                profile_url=profile_url,
                created_at=now,
                updated_at=now,
            )
        )

        stmt = insert(account_connections_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            constraint="uq_account_connection",
            set_={
                "access_token": stmt.excluded.access_token,
                "access_token_secret": stmt.excluded.access_token_secret,
                "provider_account_id": stmt.excluded.provider_account_id,
                "profile_url": stmt.excluded.profile_url,
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(account_connections_table)

        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_account_connection(dict(row))

    async def is_connected(self, account_id: AccountId, provider: str) -> bool:
        """Check if a connection row exists."""
        stmt = select(func.count()).where(
            account_connections_table.c.account_id == account_id,
            account_connections_table.c.provider == provider,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one() > 0

    async def disconnect(self, account_id: AccountId, provider: str) -> None:
        """Delete the connection row, if any."""
        stmt = account_connections_table.delete().where(
            account_connections_table.c.account_id == account_id,
            account_connections_table.c.provider == provider,
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def get_access_token(
        self, account_id: AccountId, provider: str
    ) -> Optional[OAuthToken]:
        """Get the stored access token."""
        stmt = select(
            account_connections_table.c.access_token,
            account_connections_table.c.access_token_secret,
        ).where(
            account_connections_table.c.account_id == account_id,
            account_connections_table.c.provider == provider,
        )
        result = await self.session.execute(stmt)
        row = result.first()

        if not row:
            return None

        return OAuthToken(value=row.access_token, secret=row.access_token_secret)

    async def get_account_connections(
        self, account_id: AccountId, provider: str
    ) -> list[AccountConnection]:
        """Get the account's connections to the provider."""
        stmt = (
            select(account_connections_table)
            .where(
                account_connections_table.c.account_id == account_id,
                account_connections_table.c.provider == provider,
            )
            .order_by(account_connections_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        rows = result.mappings().all()

        return [row_to_account_connection(dict(row)) for row in rows]

    async def get_provider_account_id(
        self, account_id: AccountId, provider: str
    ) -> Optional[str]:
        """Get the provider-side account id."""
        stmt = select(account_connections_table.c.provider_account_id).where(
            account_connections_table.c.account_id == account_id,
            account_connections_table.c.provider == provider,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
