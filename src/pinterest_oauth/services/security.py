"""Security utilities for the OAuth flow.

Provides cryptographically secure state generation and constant-time
state validation for CSRF protection.
"""

from __future__ import annotations

import secrets
from collections.abc import Callable

from pinterest_oauth.models.errors import StateValidationError

STATE_BYTES = 10

TokenBytes = Callable[[int], bytes]


def generate_state(token_bytes: TokenBytes = secrets.token_bytes) -> str:
    """Generate a cryptographically secure state parameter.

    The state parameter provides CSRF protection by ensuring the callback
    matches the original authorization request.

    Args:
        token_bytes: Random byte source, ``secrets.token_bytes`` unless a
            test injects a deterministic one

    Returns:
        Lowercase hex string of ``2 * STATE_BYTES`` (20) characters
    """
    return token_bytes(STATE_BYTES).hex()


def validate_state(expected: str, actual: str | None) -> None:
    """Validate state parameter matches expected value.

    Args:
        expected: State parameter from original authorization request
        actual: State parameter from callback URL

    Raises:
        StateValidationError: If the state is missing or doesn't match
    """
    if actual is None:
        raise StateValidationError("Authorization callback missing state parameter")
    if not secrets.compare_digest(expected.encode(), actual.encode()):
        raise StateValidationError("State parameter mismatch - possible CSRF attack")
