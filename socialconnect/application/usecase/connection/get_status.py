"""Get connection status use case."""

from datetime import datetime

from pydantic import BaseModel

from socialconnect.application.usecase.base import BaseUseCase
from socialconnect.domain.service import ServiceProvider


class ConnectionInfo(BaseModel):
    """Connection information for response. Tokens are never exposed."""

    provider_account_id: str
    profile_url: str | None
    created_at: datetime
    updated_at: datetime


class ConnectionStatusResponse(BaseModel):
    """Connection status response."""

    provider: str
    display_name: str
    connected: bool
    provider_account_id: str | None = None
    connections: list[ConnectionInfo] = []


class GetConnectionStatusUseCase(BaseUseCase):
    """Use case for reporting whether the current account is connected.

    Anonymous callers are reported as not connected.
    """

    def __init__(self, service_provider: ServiceProvider) -> None:
        self.service_provider = service_provider

    async def execute(self, request: None = None) -> ConnectionStatusResponse:
        connections = await self.service_provider.get_connections()
        return ConnectionStatusResponse(
            provider=self.service_provider.name,
            display_name=self.service_provider.display_name,
            connected=await self.service_provider.is_connected(),
            provider_account_id=await self.service_provider.get_provider_account_id(),
            connections=[
                ConnectionInfo(
                    provider_account_id=c.provider_account_id,
                    profile_url=c.profile_url,
                    created_at=c.created_at,
                    updated_at=c.updated_at,
                )
                for c in connections
            ],
        )
