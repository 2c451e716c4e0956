"""Authorization flow models for the Pinterest OAuth dance.

Contains the options accepted when building an authorization URL and the
parsed callback the user's browser brings back.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

# Option keys with a meaning of their own; everything else is sent as-is.
RECOGNIZED_OPTIONS = ("scopes", "state", "redirect_uri", "callback")


@dataclass(frozen=True)
class AuthorizationOptions:
    """Caller options for an authorization URL.

    ``scopes`` may be a sequence of scope names or an already comma-joined
    string. ``callback`` is an alias for ``redirect_uri`` that is consumed
    during resolution and never sent as its own parameter.
    """

    scopes: Sequence[str] | str | None = None
    state: str | None = None
    redirect_uri: str | None = None
    callback: str | None = None
    extra_params: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> AuthorizationOptions:
        """Split a free-form option mapping into named fields and extras."""
        known = {key: options[key] for key in RECOGNIZED_OPTIONS if key in options}
        extra = {
            key: value
            for key, value in options.items()
            if key not in RECOGNIZED_OPTIONS
        }
        return cls(**known, extra_params=extra)

    def scope_param(self) -> str | None:
        """Return the scopes joined the way Pinterest expects them."""
        if self.scopes is None:
            return None
        if isinstance(self.scopes, str):
            return self.scopes
        return ",".join(self.scopes)


@dataclass(frozen=True)
class AuthorizationResponse:
    code: str | None = None
    state: str | None = None
    error: str | None = None
    error_description: str | None = None
    error_uri: str | None = None

    def is_success(self) -> bool:
        return self.error is None and self.code is not None

    def is_error(self) -> bool:
        return self.error is not None
