"""Process-wide request context settings and the HTTP method allow-list."""

from __future__ import annotations

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Method(str, Enum):
    """HTTP verbs as defined in RFC 2616, plus PATCH."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    TRACE = "TRACE"
    OPTIONS = "OPTIONS"
    CONNECT = "CONNECT"
    PATCH = "PATCH"


DEFAULT_FORMAT = "json"


class RequestSettings(BaseSettings):
    """Deployment defaults shared by every RequestContext.

    Read once from ``REQUEST_CONTEXT_*`` environment variables (or ``.env``)
    and frozen afterwards.
    """

    allowed_methods: tuple[str, ...] = Field(
        default_factory=lambda: tuple(m.value for m in Method),
        description="HTTP verbs a dispatcher should accept",
    )
    default_format: str = Field(
        default=DEFAULT_FORMAT,
        min_length=1,
        description="Format used when the URI carries no suffix",
    )
    base_url: str | None = Field(
        default=None, description="Path prefix stripped before routing"
    )

    model_config = SettingsConfigDict(
        env_prefix="REQUEST_CONTEXT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )


settings = RequestSettings()
