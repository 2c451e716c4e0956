"""Pinterest OAuth 2.0 authorization code helper.

Builds the URL users are sent to for login and consent, exchanges the
returned code for an access token, and parses whatever the token
endpoint answers with.
"""

from __future__ import annotations

import logging
import secrets
from collections.abc import Mapping
from typing import Any, Protocol

from pinterest_oauth.config import OAuthSettings
from pinterest_oauth.models.credentials import ClientCredentials
from pinterest_oauth.models.errors import (
    ConfigurationError,
    InvalidArgumentError,
    ServerError,
    TokenRequestError,
)
from pinterest_oauth.models.flow import AuthorizationOptions, AuthorizationResponse
from pinterest_oauth.models.tokens import TokenRequest
from pinterest_oauth.services import parsing
from pinterest_oauth.services.security import TokenBytes, generate_state, validate_state
from pinterest_oauth.transport import PinterestTransport, TransportResponse

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """What the helper needs from an HTTP transport."""

    def post(self, path: str, params: Mapping[str, Any]) -> TransportResponse: ...

    def encode_params(self, params: Mapping[str, Any]) -> str: ...


class PinterestOAuth:
    """OAuth 2.0 authorization code helper for the Pinterest API.

    Holds the app credentials and a default callback URL; every call is
    otherwise independent, so one instance can serve concurrent requests
    as long as its transport can.

    Example:
        oauth = PinterestOAuth(app_id, app_secret, "https://myapp.com/cb")
        url = oauth.build_authorization_url({"scopes": ["read_public"]})
        ...
        token = oauth.get_access_token(request.args["code"])
    """

    def __init__(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        redirect_uri: str | None = None,
        *,
        transport: Transport | None = None,
        settings: OAuthSettings | None = None,
        token_bytes: TokenBytes = secrets.token_bytes,
    ):
        """Initialize the helper.

        Args:
            client_id: Pinterest app id
            client_secret: Pinterest app secret
            redirect_uri: Default OAuth callback URL
            transport: HTTP transport, a ``PinterestTransport`` by default
            settings: Endpoint settings, used when building the default transport
            token_bytes: Random byte source for generated state values
        """
        self.credentials = ClientCredentials(
            client_id=client_id,
            client_secret=client_secret,
            redirect_uri=redirect_uri,
        )
        self.settings = settings or OAuthSettings()
        self._owns_transport = transport is None
        self._transport = transport or PinterestTransport(self.settings)
        self._token_bytes = token_bytes

    @property
    def client_id(self) -> str | None:
        return self.credentials.client_id

    @property
    def client_secret(self) -> str | None:
        return self.credentials.client_secret

    @property
    def redirect_uri(self) -> str | None:
        return self.credentials.redirect_uri

    # authorization URLs

    def build_authorization_url(
        self, options: AuthorizationOptions | Mapping[str, Any] | None = None
    ) -> str:
        """Build the OAuth URL users are sent to for login and permissions.

        Args:
            options: ``AuthorizationOptions`` or a plain mapping with optional
                ``scopes``, ``state``, ``redirect_uri``/``callback`` keys; any
                other key is added to the query string unchanged

        Returns:
            Authorization URL such as ``https://api.pinterest.com/oauth?...``

        Raises:
            ConfigurationError: If no client id is configured or no redirect
                URI is given here or at construction
        """
        if options is None:
            options = AuthorizationOptions()
        elif not isinstance(options, AuthorizationOptions):
            options = AuthorizationOptions.from_mapping(options)

        client_id = self._require_client_id()

        params: dict[str, Any] = {"client_id": client_id}
        params.update(
            (key, value)
            for key, value in options.extra_params.items()
            if key != "client_id"
        )

        scope = options.scope_param()
        if scope is not None:
            params["scope"] = scope

        params["state"] = (
            options.state
            if options.state is not None
            else generate_state(self._token_bytes)
        )
        params["response_type"] = "code"

        if options.redirect_uri is not None:
            params["redirect_uri"] = options.redirect_uri
        if options.callback is not None:
            params["callback"] = options.callback

        return self.build_url(
            self.settings.authorize_path, params, require_redirect_uri=True
        )

    def build_url(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        require_redirect_uri: bool = False,
    ) -> str:
        """Build an API URL with ``params`` as its query string.

        When ``require_redirect_uri`` is set, the redirect URI is resolved
        from ``params["redirect_uri"]``, then ``params["callback"]`` (which
        is removed), then the default given at construction.

        Raises:
            ConfigurationError: If a redirect URI is required but unresolved
        """
        url_params = dict(params or {})

        if require_redirect_uri:
            callback = url_params.pop("callback", None)
            redirect_uri = (
                url_params.get("redirect_uri") or callback or self.redirect_uri
            )
            if not redirect_uri:
                raise ConfigurationError(
                    "build_url needs a redirect URI, either from the "
                    "PinterestOAuth object or in the parameters"
                )
            url_params["redirect_uri"] = redirect_uri

        query = self._transport.encode_params(url_params)
        return f"{self.settings.base_url}/{path.lstrip('/')}?{query}"

    def parse_authorization_callback(
        self, callback_url: str, expected_state: str | None = None
    ) -> AuthorizationResponse:
        """Parse the URL Pinterest redirected the user back to.

        Args:
            callback_url: Full callback URL received by the redirect URI
            expected_state: State sent with the authorization URL; checked
                against the callback's state when given

        Returns:
            AuthorizationResponse: Parsed code or error

        Raises:
            AuthorizationCallbackError: If the callback URL is malformed
            StateValidationError: If the state is missing or doesn't match
        """
        auth_response = parsing.parse_authorization_callback(callback_url)

        if expected_state is not None:
            validate_state(expected_state, auth_response.state)

        if auth_response.is_error():
            logger.warning(
                f"Authorization callback contained error: {auth_response.error} - "
                f"{auth_response.error_description}"
            )
        elif not auth_response.is_success():
            logger.warning("Authorization callback missing both code and error")

        return auth_response

    # access tokens

    def get_access_token_info(
        self, code: str, redirect_uri: str | None = None
    ) -> dict[str, Any]:
        """Fetch the access token, its expiration and other info for a code.

        Args:
            code: Authorization code from the OAuth callback
            redirect_uri: Callback URL to send along, overriding the default

        Returns:
            Mapping of the token info Pinterest returned

        Raises:
            InvalidArgumentError: If ``code`` is missing or empty
            ConfigurationError: If the app id or secret is not configured
            TokenRequestError: If Pinterest answers with a non-success status
            TransportError: If the request could not be sent
        """
        if not isinstance(code, str) or not code.strip():
            raise InvalidArgumentError("An authorization code is required")

        client_id, client_secret = self._require_client_credentials()

        resolved_redirect = redirect_uri or self.redirect_uri
        if not resolved_redirect:
            logger.warning(
                "Exchanging authorization code without a redirect_uri; "
                "Pinterest may reject it if one was used to obtain the code"
            )

        token_request = TokenRequest(
            client_id=client_id,
            client_secret=client_secret,
            code=code,
            redirect_uri=resolved_redirect,
        )

        logger.debug(
            f"Token request: client_id={client_id}, "
            f"redirect_uri={resolved_redirect or 'none'}"
        )

        body = self._post_token_request(token_request.to_form_data())
        token_info = self.parse_token_response(body)

        if "access_token" in token_info:
            logger.info("Token exchange successful")
        else:
            logger.warning("Token response did not include an access_token")
        return token_info

    def get_access_token(
        self, code: str, redirect_uri: str | None = None
    ) -> str | None:
        """Fetch just the access token for a code, ignoring expiration etc.

        Returns:
            The access token, or ``None`` if the response had none

        Raises:
            See ``get_access_token_info``
        """
        token_info = self.get_access_token_info(code, redirect_uri=redirect_uri)
        return token_info.get("access_token")

    def get_token_from_server(
        self, params: Mapping[str, Any], endpoint: str = "token"
    ) -> dict[str, Any]:
        """POST ``params`` to a token endpoint and parse the answer."""
        return self.parse_token_response(self.fetch_token_string(params, endpoint))

    def fetch_token_string(
        self, params: Mapping[str, Any], endpoint: str = "token"
    ) -> str:
        """POST the app credentials plus ``params`` to ``/oauth/<endpoint>``.

        Returns:
            Raw response body

        Raises:
            ConfigurationError: If the app id or secret is not configured
            TokenRequestError: If Pinterest answers with a non-success status
            TransportError: If the request could not be sent
        """
        client_id, client_secret = self._require_client_credentials()
        form_data = {"client_id": client_id, "client_secret": client_secret}
        form_data.update(params)
        return self._post_token_request(form_data, endpoint)

    parse_token_response = staticmethod(parsing.parse_token_response)

    def _post_token_request(
        self, form_data: Mapping[str, Any], endpoint: str = "token"
    ) -> str:
        response = self._transport.post(
            self.settings.token_path(endpoint), form_data
        )

        if response.status_code >= 500:
            logger.warning(f"Token endpoint unavailable: HTTP {response.status_code}")
            raise ServerError(response.status_code, response.body)
        if not response.is_success():
            logger.warning(f"Token request rejected: HTTP {response.status_code}")
            raise TokenRequestError(response.status_code, response.body)

        return response.body

    def _require_client_id(self) -> str:
        if not self.client_id:
            raise ConfigurationError("PinterestOAuth needs a client_id")
        return self.client_id

    def _require_client_credentials(self) -> tuple[str, str]:
        client_id = self._require_client_id()
        if not self.client_secret:
            raise ConfigurationError("PinterestOAuth needs a client_secret")
        return client_id, self.client_secret

    def close(self) -> None:
        """Close the transport if this helper created it."""
        if self._owns_transport:
            self._transport.close()

    def __enter__(self) -> PinterestOAuth:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
