"""initial schema

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-18 10:12:41.508214

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    op.create_table(
        "account_connections",
        sa.Column(
            "id",
            postgresql.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("account_id", postgresql.UUID(), nullable=False),
        sa.Column("provider", sa.String(length=50), nullable=False),
        sa.Column("access_token", sa.Text(), nullable=False),
        sa.Column("access_token_secret", sa.Text(), nullable=True),
        sa.Column("provider_account_id", sa.String(length=255), nullable=False),
        sa.Column("profile_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("account_id", "provider", name="uq_account_connection"),
    )
    op.create_index(
        "idx_account_connections_provider_account",
        "account_connections",
        ["provider", "provider_account_id"],
    )

    op.create_table(
        "oauth_request_tokens",
        sa.Column("token", sa.String(length=255), nullable=False),
        sa.Column("token_secret", sa.Text(), nullable=False),
        sa.Column("account_id", postgresql.UUID(), nullable=False),
        sa.Column("provider", sa.String(length=50), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("token"),
    )
    op.create_index(
        "idx_oauth_request_tokens_created_at",
        "oauth_request_tokens",
        ["created_at"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(
        "idx_oauth_request_tokens_created_at", table_name="oauth_request_tokens"
    )
    op.drop_table("oauth_request_tokens")
    op.drop_index(
        "idx_account_connections_provider_account", table_name="account_connections"
    )
    op.drop_table("account_connections")
