"""SQLAlchemy table definitions.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, Index, MetaData, String, Table, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# ACCOUNT CONNECTIONS TABLE (one row per account and provider)
# ============================================================================
account_connections_table = Table(
    "account_connections",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("account_id", UUID, nullable=False),  # Local account (hosting app)
    Column("provider", String(50), nullable=False),  # 'twitter'
    Column("access_token", Text, nullable=False),
    Column("access_token_secret", Text, nullable=True),
    Column("provider_account_id", String(255), nullable=False),
    Column("profile_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("account_id", "provider", name="uq_account_connection"),
)

Index(
    "idx_account_connections_provider_account",
    account_connections_table.c.provider,
    account_connections_table.c.provider_account_id,
)

# ============================================================================
# OAUTH REQUEST TOKENS TABLE (pending authorizations)
# ============================================================================
oauth_request_tokens_table = Table(
    "oauth_request_tokens",
    metadata,
    Column("token", String(255), primary_key=True),
    Column("token_secret", Text, nullable=False),
    Column("account_id", UUID, nullable=False),
    Column("provider", String(50), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_oauth_request_tokens_created_at",
    oauth_request_tokens_table.c.created_at,
)
