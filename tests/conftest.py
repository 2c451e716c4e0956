from collections.abc import Mapping
from itertools import count
from typing import Any

import pytest

from pinterest_oauth.oauth import PinterestOAuth
from pinterest_oauth.transport import PinterestTransport, TransportResponse


class MockTransport:
    """Mock transport for testing."""

    def __init__(self):
        self.posts: list[tuple[str, dict[str, Any]]] = []
        self.response = TransportResponse(status_code=200, body="{}")
        self.error: Exception | None = None

    def respond_with(self, status_code: int, body: str) -> None:
        self.response = TransportResponse(status_code=status_code, body=body)

    def fail_with(self, error: Exception) -> None:
        self.error = error

    def post(self, path: str, params: Mapping[str, Any]) -> TransportResponse:
        self.posts.append((path, dict(params)))
        if self.error is not None:
            raise self.error
        return self.response

    def encode_params(self, params: Mapping[str, Any]) -> str:
        return PinterestTransport.encode_params(params)


def counting_token_bytes():
    """Deterministic stand-in for secrets.token_bytes."""
    counter = count(1)

    def token_bytes(n: int) -> bytes:
        return bytes([next(counter) % 256]) * n

    return token_bytes


@pytest.fixture
def transport() -> MockTransport:
    return MockTransport()


@pytest.fixture
def oauth(transport: MockTransport) -> PinterestOAuth:
    return PinterestOAuth(
        "app-123",
        "secret-456",
        "https://myapp.com/callback",
        transport=transport,
        token_bytes=counting_token_bytes(),
    )
