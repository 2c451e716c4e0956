"""HTTP transport for the Pinterest API.

Performs the outbound POSTs the OAuth helper needs and owns query-string
encoding, so the helper itself never touches the network.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

import httpx

from pinterest_oauth.config import OAuthSettings
from pinterest_oauth.models.errors import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    """Status code and raw text body of an HTTP response."""

    status_code: int
    body: str

    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class PinterestTransport:
    """Synchronous HTTP transport for ``https://api.pinterest.com``.

    Requests are sent as application/x-www-form-urlencoded, which is what
    the token endpoint accepts. Status codes are reported, not raised;
    only failures to get any response at all become ``TransportError``.
    """

    def __init__(
        self,
        settings: OAuthSettings | None = None,
        http_client: httpx.Client | None = None,
    ):
        """Initialize the transport.

        Args:
            settings: Endpoint settings, defaults to the public Pinterest API
            http_client: Preconfigured client, e.g. one with a mock transport
        """
        self.settings = settings or OAuthSettings()
        self._http_client = http_client or httpx.Client(timeout=self.settings.timeout)

    @staticmethod
    def encode_params(params: Mapping[str, Any]) -> str:
        """Encode a mapping as a URL query string, keeping insertion order.

        ``None`` values are dropped; everything else is stringified and
        percent-encoded.
        """
        return urlencode(
            {key: value for key, value in params.items() if value is not None}
        )

    def url_for(self, path: str) -> str:
        return f"{self.settings.base_url}/{path.lstrip('/')}"

    def post(self, path: str, params: Mapping[str, Any]) -> TransportResponse:
        """POST form-encoded ``params`` to ``path`` on the API host.

        Args:
            path: Absolute path such as ``/oauth/token``
            params: Form fields to send

        Returns:
            TransportResponse: Status and body, whatever the status

        Raises:
            TransportError: If the request could not be completed
        """
        url = self.url_for(path)
        headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            "Accept": "application/json",
        }
        data = {key: value for key, value in params.items() if value is not None}

        logger.debug(f"POST {url} with fields {sorted(data)}")

        try:
            response = self._http_client.post(url, data=data, headers=headers)
        except httpx.HTTPError as e:
            raise TransportError(f"HTTP error during POST {url}: {e}") from e

        logger.debug(f"POST {url} returned {response.status_code}")
        return TransportResponse(status_code=response.status_code, body=response.text)

    def close(self) -> None:
        """Close the HTTP client and clean up resources."""
        self._http_client.close()

    def __enter__(self) -> PinterestTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
