"""Value objects for OAuth 1.0a provider connections.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules for tokens and provider configuration.
"""

import re
from urllib.parse import quote

from pydantic import field_validator

from socialconnect.domain.value.common import RootValueObject, ValueObject

TOKEN_PLACEHOLDER = "{token}"

_HTTP_URL = re.compile(r"^https?://[^\s/?#]+[^\s]*$")


def _validate_http_url(v: str) -> str:
    if not _HTTP_URL.match(v):
        raise ValueError(f"Must be an http(s) URL: {v!r}")
    return v


class OAuthToken(ValueObject):
    """OAuth token value and secret.

    The secret is optional: access tokens imported from elsewhere may only
    carry a value. An unauthenticated caller is represented by the absence
    of a token (``None``), never by an empty one.
    """

    value: str
    secret: str | None = None

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        """Validate token value is not empty."""
        if not v:
            raise ValueError("Token value must not be empty")
        return v


class AuthorizedRequestToken(ValueObject):
    """Request token the user approved on the provider's site.

    Carries the verifier returned with the callback redirect. It is
    exchanged for an access token exactly once.
    """

    value: str
    secret: str
    verifier: str


class AuthorizeUrlTemplate(RootValueObject[str]):
    """Provider authorize URL with a ``{token}`` placeholder.

    Example: 'https://api.twitter.com/oauth/authorize?oauth_token={token}'
    """

    @field_validator("root")
    @classmethod
    def validate_template(cls, v: str) -> str:
        """Validate template is an http(s) URL containing the placeholder."""
        _validate_http_url(v)
        if TOKEN_PLACEHOLDER not in v:
            raise ValueError(f"Authorize URL template must contain {TOKEN_PLACEHOLDER}")
        return v

    def expand(self, request_token_value: str) -> str:
        """Substitute the (percent-encoded) request token into the template."""
        return self.root.replace(TOKEN_PLACEHOLDER, quote(request_token_value, safe=""))


class ProviderParameters(ValueObject):
    """Static configuration of one service provider.

    Built once at startup from settings. Invalid values fail here, at
    construction, rather than on the first OAuth call.
    """

    name: str
    display_name: str
    api_key: str
    secret: str
    app_id: int | None = None
    request_token_url: str
    access_token_url: str
    authorize_url: AuthorizeUrlTemplate

    @field_validator("name", "display_name", "api_key", "secret")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Validate required strings are present."""
        if not v or not v.strip():
            raise ValueError("Must not be empty")
        return v

    @field_validator("name")
    @classmethod
    def validate_name_format(cls, v: str) -> str:
        """Provider names are used in URLs and as storage keys."""
        if not re.match(r"^[a-z0-9_-]{1,50}$", v):
            raise ValueError(
                "Provider name must be 1-50 characters, lowercase, alphanumeric"
            )
        return v

    @field_validator("request_token_url", "access_token_url")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Validate token endpoints are http(s) URLs."""
        return _validate_http_url(v)
