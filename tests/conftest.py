"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import jwt

from socialconnect.adapter.oauth import MockOAuthClient
from socialconnect.adapter.twitter import MockTwitterServiceApi
from socialconnect.config import AuthSettings
from socialconnect.domain.service import ServiceProvider, StaticAccountIdResolver
from socialconnect.domain.value import AccountId
from socialconnect.persistence.repository.inmemory import (
    InMemoryAccountConnectionRepository,
    InMemoryTransactionManager,
)
from tests.di import TEST_ACCOUNT_ID, TEST_PARAMETERS


def make_service_provider(
    account_id: AccountId | None = TEST_ACCOUNT_ID,
    service_api=None,
    oauth_client=None,
    connection_repository=None,
    transactions=None,
) -> ServiceProvider:
    """Helper to build a service provider outside the container.

    Used by tests that need collaborators the container doesn't provide,
    such as failing clients or an anonymous caller.
    """
    return ServiceProvider(
        parameters=TEST_PARAMETERS,
        service_api=service_api or MockTwitterServiceApi(),
        oauth_client=oauth_client or MockOAuthClient(),
        connection_repository=connection_repository
        or InMemoryAccountConnectionRepository(),
        account_id_resolver=StaticAccountIdResolver(account_id),
        transactions=transactions or InMemoryTransactionManager(),
    )


def make_auth_token(
    account_id: AccountId,
    settings: AuthSettings,
    handle: str | None = None,
    expires_in: timedelta = timedelta(days=1),
) -> str:
    """Helper to mint an auth cookie the way the hosting application does."""
    payload = {
        "user_id": str(account_id),
        "handle": handle,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)
