"""Unit tests for connection value objects."""

import pydantic
import pytest

from socialconnect.domain.value import (
    AuthorizeUrlTemplate,
    OAuthToken,
    ProviderParameters,
)


def _parameters(**overrides) -> ProviderParameters:
    values = {
        "name": "twitter",
        "display_name": "Twitter",
        "api_key": "K",
        "secret": "S",
        "request_token_url": "https://p.example/oauth/request_token",
        "access_token_url": "https://p.example/oauth/access_token",
        "authorize_url": "https://p.example/auth?token={token}",
    }
    values.update(overrides)
    return ProviderParameters(**values)


class TestOAuthToken:
    """Tests for OAuthToken."""

    def test_secret_is_optional(self):
        """Tokens imported from elsewhere may have no secret."""
        token = OAuthToken(value="at1")

        assert token.secret is None

    def test_empty_value_rejected(self):
        """An empty token value is not a token."""
        with pytest.raises(pydantic.ValidationError):
            OAuthToken(value="")

    def test_tokens_compare_by_value(self):
        """Tokens with equal value and secret are equal."""
        assert OAuthToken(value="a", secret="b") == OAuthToken(value="a", secret="b")
        assert OAuthToken(value="a", secret="b") != OAuthToken(value="a", secret="c")


class TestAuthorizeUrlTemplate:
    """Tests for AuthorizeUrlTemplate."""

    def test_expand_substitutes_token(self):
        """The placeholder should be replaced by the token."""
        template = AuthorizeUrlTemplate("https://p.example/auth?token={token}")

        assert template.expand("rt1") == "https://p.example/auth?token=rt1"

    def test_expand_percent_encodes_token(self):
        """Reserved characters should not leak into the query string."""
        template = AuthorizeUrlTemplate("https://p.example/auth?token={token}")

        assert template.expand("a b/c") == "https://p.example/auth?token=a%20b%2Fc"

    def test_template_without_placeholder_rejected(self):
        """A template must contain the token placeholder."""
        with pytest.raises(pydantic.ValidationError, match="must contain"):
            AuthorizeUrlTemplate("https://p.example/auth")

    def test_non_http_template_rejected(self):
        """A template must be an http(s) URL."""
        with pytest.raises(pydantic.ValidationError, match="http"):
            AuthorizeUrlTemplate("ftp://p.example/auth?token={token}")


class TestProviderParameters:
    """Tests for ProviderParameters."""

    def test_valid_parameters(self):
        """Valid parameters should build, with the template wrapped."""
        parameters = _parameters(app_id=99)

        assert parameters.name == "twitter"
        assert parameters.app_id == 99
        assert parameters.authorize_url.expand("x") == "https://p.example/auth?token=x"

    def test_app_id_defaults_to_none(self):
        """The numeric application id is optional."""
        assert _parameters().app_id is None

    @pytest.mark.parametrize("field", ["name", "display_name", "api_key", "secret"])
    def test_empty_required_string_rejected(self, field):
        """Required strings must not be blank."""
        with pytest.raises(pydantic.ValidationError):
            _parameters(**{field: "  "})

    def test_name_must_be_lowercase_slug(self):
        """Provider names are used in URLs and storage keys."""
        with pytest.raises(pydantic.ValidationError, match="Provider name"):
            _parameters(name="Twitter")

    def test_token_endpoint_must_be_http_url(self):
        """Token endpoints must be http(s) URLs."""
        with pytest.raises(pydantic.ValidationError, match="http"):
            _parameters(request_token_url="not a url")

    def test_parameters_are_immutable(self):
        """Parameters are fixed once built."""
        parameters = _parameters()

        with pytest.raises(pydantic.ValidationError):
            parameters.api_key = "other"
