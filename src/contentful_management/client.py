# ABOUTME: Top-level Contentful Management client and create_client factory
# ABOUTME: Owns the API and upload connections and fetches root resources

"""
Contentful Management client.

=============================================================================
USAGE
=============================================================================

    from contentful_management import create_client

    async with create_client(access_token="CFPAT-...") as client:
        org = await client.get_organization("<organization_id>")
        teams = await org.get_teams()
        for team in teams:
            print(team.name)

The client is an async context manager: entering it opens one connection
pool per host (management and upload), leaving it closes both. Every entity
handed out by the client reuses those pools.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from pydantic import SecretStr

from contentful_management.config import ClientSettings, load_settings
from contentful_management.entities.base import Collection
from contentful_management.entities.user import User, wrap_user
from contentful_management.organization import (
    Organization,
    wrap_organization,
    wrap_organization_collection,
)
from contentful_management.space import Space, wrap_space, wrap_space_collection
from contentful_management.utils.errors import NotFound
from contentful_management.utils.http import HttpClient, create_request_config
from contentful_management.utils.logging import configure_logging

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = structlog.get_logger(__name__)


class ContentfulClient:
    """
    Entry point to the Contentful Management API.

    Prefer create_client() over constructing this class directly.
    """

    def __init__(self, settings: ClientSettings, version: str = "0.0.0") -> None:
        self._settings = settings
        self._http = HttpClient(settings, version=version)
        self._upload_http = HttpClient(settings, settings.upload_base_url, version=version)

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def http(self) -> HttpClient:
        return self._http

    async def __aenter__(self) -> ContentfulClient:
        await self._http.__aenter__()
        try:
            await self._upload_http.__aenter__()
        except BaseException:
            await self._http.__aexit__(None, None, None)
            raise
        logger.debug("Contentful client opened", host=self._settings.host)
        return self

    async def __aexit__(self, *args: object) -> None:
        try:
            await self._upload_http.__aexit__(*args)
        finally:
            await self._http.__aexit__(*args)

    # =========================================================================
    # ORGANIZATIONS
    # =========================================================================

    async def get_organizations(
        self, query: Mapping[str, Any] | None = None
    ) -> Collection[Organization]:
        """Get every organization the token has access to."""
        data = await self._http.get("organizations", create_request_config(query))
        return wrap_organization_collection(self._http, data)

    async def get_organization(self, organization_id: str) -> Organization:
        """
        Get one organization.

        The API has no single-organization endpoint, so the organization
        list is fetched and searched.

        Raises:
            NotFound: If no accessible organization has this id
        """
        data = await self._http.get("organizations", {"limit": 100})
        for item in data.get("items") or []:
            if (item.get("sys") or {}).get("id") == organization_id:
                return wrap_organization(self._http, item)
        raise NotFound(
            404,
            f"No organization was found with the ID {organization_id}",
            name="NotFound",
            status_text="Not Found",
            details={"type": "Organization", "id": organization_id},
        )

    # =========================================================================
    # SPACES
    # =========================================================================

    async def get_space(self, space_id: str) -> Space:
        data = await self._http.get(f"spaces/{space_id}")
        return wrap_space(self._http, data, self._upload_http)

    async def get_spaces(self, query: Mapping[str, Any] | None = None) -> Collection[Space]:
        data = await self._http.get("spaces", create_request_config(query))
        return wrap_space_collection(self._http, data, self._upload_http)

    # =========================================================================
    # USERS
    # =========================================================================

    async def get_current_user(self) -> User:
        """Get the user the access token belongs to."""
        data = await self._http.get("users/me")
        return wrap_user(self._http, data)


def create_client(
    access_token: str | None = None,
    *,
    settings: ClientSettings | None = None,
    configure_logs: bool = False,
    **overrides: Any,
) -> ContentfulClient:
    """
    Create a Contentful Management client.

    Args:
        access_token: Management API token; falls back to CONTENTFUL_ACCESS_TOKEN
        settings: Complete settings object; skips environment loading
        configure_logs: Install structlog configuration from the settings
        **overrides: Any ClientSettings field (host, timeout, max_retries, ...)

    Returns:
        A ContentfulClient, to be used with 'async with'

    Raises:
        ValueError: If no access token is configured
    """
    from contentful_management import __version__

    if access_token is not None:
        overrides["access_token"] = SecretStr(access_token)
    if settings is None:
        settings = load_settings(**overrides)
    elif overrides:
        settings = ClientSettings(**{**settings.model_dump(), **overrides})

    if not settings.access_token.get_secret_value():
        raise ValueError("Expected parameter access_token")

    if configure_logs:
        configure_logging(settings.log_level, json_output=settings.json_logs)

    return ContentfulClient(settings, version=__version__)
