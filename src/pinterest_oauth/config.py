"""Endpoint and transport settings for the Pinterest API."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_API_HOST = "api.pinterest.com"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class OAuthSettings:
    """Where the OAuth endpoints live and how long to wait for them.

    Credentials are not part of the settings; they are handed to
    ``PinterestOAuth`` directly by the caller.
    """

    api_host: str = DEFAULT_API_HOST
    scheme: str = "https"
    authorize_path: str = "oauth"
    token_path_prefix: str = "/oauth"
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.api_host:
            raise ValueError("api_host must not be empty")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.api_host}"

    def token_path(self, endpoint: str = "token") -> str:
        """Path of a token-family endpoint, e.g. ``/oauth/token``."""
        return f"{self.token_path_prefix}/{endpoint}"
