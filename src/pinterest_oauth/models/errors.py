"""Exception hierarchy for Pinterest OAuth errors.

Provides specific exception types for different failure modes so callers
can tell a rejected authorization code from a provider outage.
"""

from __future__ import annotations


class OAuthError(Exception):
    """Base exception for all Pinterest OAuth related errors."""

    pass


class ConfigurationError(OAuthError, ValueError):
    """Raised when the helper lacks a credential or redirect URI it needs."""

    pass


class InvalidArgumentError(OAuthError, ValueError):
    """Raised when a caller-supplied argument is missing or empty."""

    pass


class TransportError(OAuthError):
    """Raised when the HTTP request itself fails (connection, timeout, ...)."""

    pass


class TokenRequestError(OAuthError):
    """Raised when the token endpoint answers with a non-success status.

    Carries the HTTP status code and the raw response body so callers can
    inspect the provider's error payload.
    """

    def __init__(self, status_code: int, body: str | None = None):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Token request failed with HTTP {status_code}: {body}")


class ServerError(TokenRequestError):
    """Raised when the token endpoint answers with a 5xx status."""

    pass


class TokenParseError(OAuthError):
    """Raised when a token response is neither JSON nor form-encoded."""

    pass


class AuthorizationCallbackError(OAuthError):
    """Raised when authorization callback data is malformed or invalid.

    This indicates Pinterest (or whoever called the redirect URI) sent an
    invalid callback URL, not that our callback handling code failed.
    """

    pass


class StateValidationError(AuthorizationCallbackError):
    """Raised when OAuth state parameter validation fails.

    This indicates either a missing state parameter or a state mismatch,
    which could indicate a CSRF attack.
    """

    pass
