"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from socialconnect.config import Settings
from socialconnect.interface.api.routes import connect, health
from socialconnect.util.di.container import create_container, setup_di
from socialconnect.util.observability import instrument_fastapi, instrument_httpx


def create_app(
    container: AsyncContainer | None = None, instrument: bool = True
) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; in
    production scripts/start_app.py handles this.

    Args:
        container: DI container (defaults to the production container)
        instrument: Whether to install Logfire instrumentation
    """
    settings = Settings()

    if instrument:
        instrument_httpx()

    app_instance = FastAPI(
        title="Social Connect API",
        description="Connect local accounts to OAuth 1.0a service providers",
        version="0.1.0",
    )

    if instrument:
        instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(connect.router)

    return app_instance
