"""Unit tests for BeginConnectionUseCase."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from socialconnect.adapter.oauth import MockOAuthClient
from socialconnect.application.usecase.connection.begin_connection import (
    BeginConnectionRequest,
    BeginConnectionUseCase,
)
from socialconnect.domain.error import AccountNotResolvedError
from socialconnect.domain.model import PendingRequestToken
from socialconnect.domain.repository import PendingRequestTokenRepository
from socialconnect.domain.service import OAuthClient, StaticAccountIdResolver
from socialconnect.domain.value import AccountId, OAuthToken
from socialconnect.persistence.repository.inmemory import (
    InMemoryPendingRequestTokenRepository,
)
from tests.conftest import make_service_provider
from tests.di import TEST_ACCOUNT_ID
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestBeginConnectionUseCase:
    """Tests for BeginConnectionUseCase."""

    @pytest.mark.asyncio
    async def test_returns_authorize_url(self, unit_env):
        """Beginning a connection should return the provider authorize URL."""
        use_case = await unit_env.get(BeginConnectionUseCase)
        oauth_client = await unit_env.get(OAuthClient)

        response = await use_case.execute(
            BeginConnectionRequest(callback_url="https://app/cb")
        )

        assert response.provider == "twitter"
        assert response.authorization_url == "https://p.example/auth?token=rt1"
        assert oauth_client.callback_urls == ["https://app/cb"]

    @pytest.mark.asyncio
    async def test_remembers_request_token_for_account(self, unit_env):
        """The request token and secret should be kept for the callback."""
        use_case = await unit_env.get(BeginConnectionUseCase)
        repo = await unit_env.get(PendingRequestTokenRepository)

        await use_case.execute(BeginConnectionRequest(callback_url="https://app/cb"))

        pending = await repo.pop("rt1")
        assert pending is not None
        assert pending.account_id == TEST_ACCOUNT_ID
        assert pending.provider == "twitter"
        assert pending.token == OAuthToken(value="rt1", secret="rs1")

    @pytest.mark.asyncio
    async def test_anonymous_caller_rejected(self):
        """Anonymous callers cannot start a connection."""
        oauth_client = MockOAuthClient()
        repo = InMemoryPendingRequestTokenRepository()
        use_case = BeginConnectionUseCase(
            service_provider=make_service_provider(
                account_id=None, oauth_client=oauth_client
            ),
            account_id_resolver=StaticAccountIdResolver(None),
            request_token_repository=repo,
        )

        with pytest.raises(AccountNotResolvedError):
            await use_case.execute(BeginConnectionRequest(callback_url="https://app/cb"))

        assert oauth_client.callback_urls == []
        assert await repo.pop("rt1") is None

    @pytest.mark.asyncio
    async def test_sweeps_abandoned_request_tokens(self, unit_env):
        """Starting a flow removes pending tokens past their lifetime."""
        use_case = await unit_env.get(BeginConnectionUseCase)
        repo = await unit_env.get(PendingRequestTokenRepository)
        now = datetime.now(timezone.utc)
        for value, age in (("stale", timedelta(days=2)), ("fresh", timedelta(0))):
            await repo.save(
                PendingRequestToken(
                    account_id=AccountId(uuid4()),
                    provider="twitter",
                    token=OAuthToken(value=value, secret="s"),
                    created_at=now - age,
                )
            )

        await use_case.execute(BeginConnectionRequest(callback_url="https://app/cb"))

        assert await repo.pop("stale") is None
        assert await repo.pop("fresh") is not None
        assert await repo.pop("rt1") is not None
