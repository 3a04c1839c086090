"""Client settings — keyword arguments and ``OMS_CLIENT_*`` env vars.

Priority (highest first):
  1. Init kwargs — e.g. values passed by the CLI or by application code
  2. Env vars    — ``OMS_CLIENT_BASE_URL``, ``OMS_CLIENT_API_KEY``, ...
  3. Defaults    — baked in below

Settings are frozen; build a second object to talk to a second
environment (sandbox vs. production).
"""

from __future__ import annotations

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Connection and protocol settings for one client.

    Attributes:
        base_url: Scheme and host of the API, without a trailing path.
        api_key: Private key, sent as the HTTP basic-auth user name.
        api_version: Selects the versioned ``Accept`` media type.
        locale: Sent as ``Accept-Language``; localises error messages.
        timeout: Seconds before a request is abandoned by the transport.
        orders_endpoint: Path of the orders collection.
        next_param / previous_param: Query parameter names that carry the
            cursor tokens when walking a list.
    """

    model_config = SettingsConfigDict(
        env_prefix="OMS_CLIENT_",
        frozen=True,
        extra="ignore",
    )

    base_url: str = "https://api.conekta.io"
    api_key: SecretStr = SecretStr("")
    api_version: str = "2.0.0"
    locale: str = "es"
    timeout: float = Field(default=30.0, gt=0)
    orders_endpoint: str = "/orders"
    next_param: str = "next"
    previous_param: str = "previous"

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {value!r}")
        return value.rstrip("/")

    @field_validator("orders_endpoint")
    @classmethod
    def _leading_slash(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError(f"orders_endpoint must start with '/', got {value!r}")
        return value.rstrip("/") or "/"

    @field_validator("next_param", "previous_param")
    @classmethod
    def _not_reserved(cls, value: str) -> str:
        if not value or value == "limit":
            raise ValueError(f"Invalid cursor parameter name: {value!r}")
        return value

    @property
    def accept_header(self) -> str:
        return f"application/vnd.conekta-v{self.api_version}+json"
