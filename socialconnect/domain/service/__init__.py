"""Domain services."""

from .account_resolver import AccountIdResolver, StaticAccountIdResolver
from .base import Service
from .jwt_service import JWTAccountIdResolver, JWTService
from .oauth_client import OAuthClient
from .service_api import ServiceApi
from .service_provider import ServiceProvider

__all__ = [
    "AccountIdResolver",
    "JWTAccountIdResolver",
    "JWTService",
    "OAuthClient",
    "Service",
    "ServiceApi",
    "ServiceProvider",
    "StaticAccountIdResolver",
]
