"""Parsing of token endpoint bodies and authorization callback URLs.

Pinterest's token endpoint has historically answered either with a JSON
object or with a classic ``key=value&key=value`` body, so parsing tries
JSON first and falls back to form decoding.
"""

from __future__ import annotations

import json
import logging
from urllib.parse import parse_qs, unquote, urlparse

from pinterest_oauth.models.errors import AuthorizationCallbackError, TokenParseError
from pinterest_oauth.models.flow import AuthorizationResponse
from pinterest_oauth.models.tokens import TokenParseResult

logger = logging.getLogger(__name__)


def parse_token_body(raw_text: str | None) -> TokenParseResult:
    """Parse a token endpoint body into a ``TokenParseResult``.

    Returns:
        The JSON object when the body is one, otherwise the form-decoded
        pairs, otherwise an empty result.
    """
    if raw_text is None or not raw_text.strip():
        return TokenParseResult()

    json_values = _load_json_object(raw_text)
    if json_values is not None:
        return TokenParseResult(values=json_values, body_format="json")

    form_values = _load_form_pairs(raw_text)
    if form_values is not None:
        return TokenParseResult(values=form_values, body_format="form")

    logger.debug("Token response is neither JSON nor form-encoded")
    return TokenParseResult()


def parse_token_response(raw_text: str | None, strict: bool = False) -> dict:
    """Parse a token endpoint body into a plain mapping.

    Args:
        raw_text: Raw response body
        strict: Raise instead of returning ``{}`` for unparseable bodies

    Returns:
        Mapping of the response fields (``access_token``, ``expires_in``, ...)

    Raises:
        TokenParseError: If ``strict`` and the body could not be parsed
    """
    result = parse_token_body(raw_text)
    if strict and result.is_empty():
        raise TokenParseError(f"Unrecognized token response body: {raw_text!r}")
    return result.values


def _load_json_object(raw_text: str) -> dict | None:
    try:
        data = json.loads(raw_text)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def _load_form_pairs(raw_text: str) -> dict[str, str] | None:
    # A body without a single "=" is not form-encoded, just noise.
    if "=" not in raw_text:
        return None

    values: dict[str, str] = {}
    for segment in raw_text.strip().split("&"):
        if not segment:
            continue
        key, _, value = segment.partition("=")
        # Only %XX escapes are decoded; "+" stays literal.
        values[unquote(key)] = unquote(value)
    return values


def parse_authorization_callback(callback_url: str) -> AuthorizationResponse:
    """Parse the callback URL Pinterest redirected the user to.

    Args:
        callback_url: Full callback URL, query string included

    Returns:
        AuthorizationResponse: Parsed callback parameters

    Raises:
        AuthorizationCallbackError: If the URL is malformed
    """
    if not isinstance(callback_url, str) or not callback_url:
        raise AuthorizationCallbackError("Callback URL must be a non-empty string")

    try:
        parsed = urlparse(callback_url)
        query_params = parse_qs(parsed.query)
    except ValueError as e:
        raise AuthorizationCallbackError(
            f"Failed to parse callback URL: {e}"
        ) from e

    def get_single_param(key: str) -> str | None:
        values = query_params.get(key, [])
        return values[0] if values else None

    return AuthorizationResponse(
        code=get_single_param("code"),
        state=get_single_param("state"),
        error=get_single_param("error"),
        error_description=get_single_param("error_description"),
        error_uri=get_single_param("error_uri"),
    )
