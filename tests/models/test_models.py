from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from pinterest_oauth.config import OAuthSettings
from pinterest_oauth.models.credentials import ClientCredentials
from pinterest_oauth.models.flow import AuthorizationOptions
from pinterest_oauth.models.tokens import TokenRequest
from pinterest_oauth.oauth import PinterestOAuth


class TestClientCredentials:
    def test_all_fields_optional(self) -> None:
        # Act
        credentials = ClientCredentials()

        # Assert
        assert credentials.client_id is None
        assert credentials.client_secret is None
        assert credentials.redirect_uri is None

    def test_is_immutable(self) -> None:
        # Arrange
        credentials = ClientCredentials(client_id="app-123")

        # Act & Assert
        with pytest.raises(ValidationError):
            credentials.client_id = "other"

    @pytest.mark.parametrize(
        "redirect_uri", ["", "pdk4812345://", "myapp://callback", "/callback"]
    )
    def test_redirect_uri_stored_as_given(self, redirect_uri) -> None:
        # Act
        credentials = ClientCredentials(redirect_uri=redirect_uri)

        # Assert
        assert credentials.redirect_uri == redirect_uri

    def test_secret_hidden_from_repr(self) -> None:
        # Act
        text = repr(ClientCredentials(client_id="app-123", client_secret="s3cret"))

        # Assert
        assert "s3cret" not in text
        assert "app-123" in text


class TestAuthorizationOptions:
    def test_from_mapping_splits_known_and_extra_keys(self) -> None:
        # Act
        options = AuthorizationOptions.from_mapping(
            {"scopes": ["read"], "display": "popup", "callback": "https://a.com/cb"}
        )

        # Assert
        assert options.scopes == ["read"]
        assert options.callback == "https://a.com/cb"
        assert options.extra_params == {"display": "popup"}

    @pytest.mark.parametrize(
        ("scopes", "expected"),
        [
            (["read", "write"], "read,write"),
            (("read",), "read"),
            ("read,write", "read,write"),
            ([], ""),
            (None, None),
        ],
    )
    def test_scope_param(self, scopes, expected) -> None:
        # Act & Assert
        assert AuthorizationOptions(scopes=scopes).scope_param() == expected


class TestTokenRequest:
    def test_form_data_omits_missing_redirect_uri(self) -> None:
        # Act
        data = TokenRequest("app-123", "secret-456", "code-1").to_form_data()

        # Assert
        assert data == {
            "client_id": "app-123",
            "client_secret": "secret-456",
            "code": "code-1",
        }


class TestOAuthSettings:
    def test_defaults(self) -> None:
        # Act
        settings = OAuthSettings()

        # Assert
        assert settings.base_url == "https://api.pinterest.com"
        assert settings.token_path() == "/oauth/token"

    def test_rejects_non_positive_timeout(self) -> None:
        # Act & Assert
        with pytest.raises(ValueError):
            OAuthSettings(timeout=0)


class TestHelperCredentials:
    def test_accessors_expose_constructor_values(self) -> None:
        # Act
        oauth = PinterestOAuth(
            "app-123", "secret-456", "https://myapp.com/cb", transport=MagicMock()
        )

        # Assert
        assert oauth.client_id == "app-123"
        assert oauth.client_secret == "secret-456"
        assert oauth.redirect_uri == "https://myapp.com/cb"
        assert oauth.credentials.client_id == "app-123"
