# ABOUTME: Configuration management for the Contentful Management client
# ABOUTME: Reads CONTENTFUL_* environment variables into validated settings

"""
Configuration management using pydantic-settings.

=============================================================================
WHAT IS THIS FILE?
=============================================================================

This module holds every knob the client exposes. It:

1. READS environment variables (like CONTENTFUL_ACCESS_TOKEN, CONTENTFUL_HOST)
2. VALIDATES them (hosts are bare hostnames, log levels are real levels)
3. PROVIDES typed access to settings for the HTTP layer and logging setup

Settings can also be built programmatically, which is what create_client()
does when keyword overrides are passed:

    settings = ClientSettings(access_token=SecretStr("CFPAT-..."), timeout=10)

=============================================================================
ENVIRONMENT VARIABLE MAPPING
=============================================================================

    CONTENTFUL_ACCESS_TOKEN   -> Content Management API token
    CONTENTFUL_HOST           -> API host (default: api.contentful.com)
    CONTENTFUL_HOST_UPLOAD    -> Upload host (default: upload.contentful.com)
    CONTENTFUL_BASE_PATH      -> Path prefix placed before every request path
    CONTENTFUL_INSECURE       -> Use http:// instead of https://
    CONTENTFUL_TIMEOUT        -> Request timeout in seconds
    CONTENTFUL_RETRY_ON_ERROR -> Retry on 429/5xx/timeouts (default: true)
    CONTENTFUL_MAX_RETRIES    -> Maximum attempts per request
    CONTENTFUL_RETRY_BACKOFF  -> Exponential backoff multiplier in seconds
    CONTENTFUL_APPLICATION    -> "name/version" reported in the user agent
    CONTENTFUL_INTEGRATION    -> "name/version" of a wrapping integration
    CONTENTFUL_LOG_LEVEL      -> Logging level
    CONTENTFUL_JSON_LOGS      -> Emit JSON logs instead of console output
"""

from __future__ import annotations

import os
from typing import Annotated

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HOST = "api.contentful.com"
DEFAULT_UPLOAD_HOST = "upload.contentful.com"


class ClientSettings(BaseSettings):
    """
    Contentful Management client configuration.

    USAGE:
    ------
        settings = load_settings()          # From environment
        print(settings.base_url)            # https://api.contentful.com/
        print(settings.upload_base_url)     # https://upload.contentful.com/
    """

    model_config = SettingsConfigDict(
        env_prefix="CONTENTFUL_",
        extra="ignore",
        populate_by_name=True,
    )

    # -------------------------------------------------------------------------
    # AUTHENTICATION
    # -------------------------------------------------------------------------

    access_token: SecretStr = Field(
        default=SecretStr(""),
        description="Content Management API access token",
    )
    # SecretStr keeps the token out of repr() and accidental log output.
    # Use .get_secret_value() at the single place the header is built.

    # -------------------------------------------------------------------------
    # ENDPOINTS
    # -------------------------------------------------------------------------

    host: str = Field(default=DEFAULT_HOST, description="Management API host")

    host_upload: str = Field(default=DEFAULT_UPLOAD_HOST, description="Upload API host")

    base_path: str = Field(default="", description="Path prefix for every request")

    insecure: bool = Field(default=False, description="Use http instead of https")

    # -------------------------------------------------------------------------
    # TRANSPORT BEHAVIOUR
    # -------------------------------------------------------------------------

    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")

    retry_on_error: bool = Field(
        default=True,
        description="Retry requests that fail with 429, 5xx or a timeout",
    )

    max_retries: int = Field(default=5, ge=1, description="Maximum attempts per request")

    retry_backoff: float = Field(
        default=1.0,
        ge=0,
        description="Exponential backoff multiplier in seconds",
    )

    # -------------------------------------------------------------------------
    # USER AGENT
    # -------------------------------------------------------------------------

    application: str | None = Field(
        default=None,
        description="Application name/version reported in X-Contentful-User-Agent",
    )

    integration: str | None = Field(
        default=None,
        description="Integration name/version reported in X-Contentful-User-Agent",
    )

    # -------------------------------------------------------------------------
    # LOGGING
    # -------------------------------------------------------------------------

    log_level: Annotated[str, Field(pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")] = Field(
        default="INFO",
        description="Logging level",
    )

    json_logs: bool = Field(default=False, description="Render logs as JSON")

    @field_validator("host", "host_upload")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """
        Reduce a host to its bare hostname (and optional port).

        Users often paste a full URL. The scheme is decided by `insecure`,
        so "https://api.eu.contentful.com/" becomes "api.eu.contentful.com".
        """
        for scheme in ("https://", "http://"):
            if v.startswith(scheme):
                v = v[len(scheme) :]
        return v.rstrip("/")

    @field_validator("base_path")
    @classmethod
    def validate_base_path(cls, v: str) -> str:
        """Normalise base_path to "" or "/segment" without a trailing slash."""
        v = v.strip("/")
        return f"/{v}" if v else ""

    @property
    def scheme(self) -> str:
        return "http" if self.insecure else "https"

    @property
    def base_url(self) -> str:
        """Root URL of the Management API, always ending in a slash."""
        return f"{self.scheme}://{self.host}{self.base_path}/"

    @property
    def upload_base_url(self) -> str:
        """Root URL of the Upload API, always ending in a slash."""
        return f"{self.scheme}://{self.host_upload}{self.base_path}/"


def load_settings(**overrides: object) -> ClientSettings:
    """
    Load settings from the environment with validation.

    If CONTENTFUL_ENV_FILE is set, variables are also read from that file.
    Keyword overrides win over anything found in the environment.

    Returns:
        Fully validated ClientSettings instance.

    Raises:
        pydantic.ValidationError: If any value fails validation.
    """
    return ClientSettings(
        _env_file=os.environ.get("CONTENTFUL_ENV_FILE"),  # type: ignore[call-arg]
        **overrides,  # type: ignore[arg-type]
    )
