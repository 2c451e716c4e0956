"""Application credentials issued by Pinterest."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ClientCredentials(BaseModel):
    """Immutable app id, app secret and default OAuth callback URL.

    Every field is optional at construction; the helper checks for the
    ones an operation needs when that operation runs. The callback URL is
    passed through untouched, so custom schemes such as ``pdk<appid>://``
    used by mobile apps are accepted.
    """

    model_config = ConfigDict(frozen=True)

    client_id: str | None = None
    client_secret: str | None = Field(default=None, repr=False)
    redirect_uri: str | None = None
