"""OAuth 1.0a transport adapter."""

from .client import MockOAuthClient, OAuthTransportError, RealOAuthClient

__all__ = ["MockOAuthClient", "OAuthTransportError", "RealOAuthClient"]
