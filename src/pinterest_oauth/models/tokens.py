"""Token exchange request and response models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

BodyFormat = Literal["json", "form", "empty"]


@dataclass(frozen=True)
class TokenRequest:
    """Parameters posted to the token endpoint to redeem an authorization code.

    Pinterest authenticates the app with the id and secret in the form body
    rather than with HTTP basic auth.
    """

    client_id: str
    client_secret: str
    code: str
    redirect_uri: str | None = None

    def to_form_data(self) -> dict[str, str]:
        """Convert to form data for the token POST.

        Returns:
            Dictionary suitable for the transport's ``post`` params
        """
        data = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "code": self.code,
        }

        if self.redirect_uri:
            data["redirect_uri"] = self.redirect_uri

        return data


@dataclass(frozen=True)
class TokenParseResult:
    """Outcome of parsing a token endpoint body.

    ``body_format`` records which branch produced ``values``: a JSON
    object, a form-encoded body, or nothing usable at all.
    """

    values: dict[str, Any] = field(default_factory=dict)
    body_format: BodyFormat = "empty"

    def is_empty(self) -> bool:
        return self.body_format == "empty"
