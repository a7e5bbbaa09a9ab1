"""PendingRequestToken repository implementation using PostgreSQL."""

from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from socialconnect.domain.model.request_token import PendingRequestToken
from socialconnect.domain.repository.request_token import (
    PendingRequestTokenRepository,
)
from socialconnect.persistence.mappers import (
    pending_request_token_to_dict,
    row_to_pending_request_token,
)
from socialconnect.persistence.tables import oauth_request_tokens_table


class PostgresPendingRequestTokenRepository(PendingRequestTokenRepository):
    """PostgreSQL implementation of PendingRequestTokenRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, pending: PendingRequestToken) -> PendingRequestToken:
        """Insert the pending request token."""
        stmt = oauth_request_tokens_table.insert().values(
            **pending_request_token_to_dict(pending)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return pending

    async def pop(self, token_value: str) -> Optional[PendingRequestToken]:
        """Delete the pending token and return the deleted row."""
        stmt = (
            oauth_request_tokens_table.delete()
            .where(oauth_request_tokens_table.c.token == token_value)
            .returning(oauth_request_tokens_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()

        if not row:
            return None

        return row_to_pending_request_token(dict(row))

    async def delete_expired(self, issued_before: datetime) -> int:
        """Delete pending tokens the user never came back for."""
        stmt = oauth_request_tokens_table.delete().where(
            oauth_request_tokens_table.c.created_at < issued_before
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
