# ABOUTME: Space and Environment entities with their scoped API methods
# ABOUTME: Preview API keys, space memberships, assets and file uploads

"""
Space and environment API.

Spaces hold environments; assets live inside an environment:

    space = await client.get_space("<space_id>")
    env = await space.get_environment("master")
    asset = await env.create_asset_from_files({
        "fields": {
            "title": {"en-US": "Playsam Streamliner"},
            "file": {
                "en-US": {
                    "contentType": "image/jpeg",
                    "fileName": "example.jpeg",
                    "file": open("example.jpeg", "rb"),
                }
            },
        }
    })
    asset = await asset.process_for_all_locales()

Uploads go to the upload host (upload.contentful.com), every other call
to the management host.
"""

from __future__ import annotations

import asyncio
from typing import IO, TYPE_CHECKING, Any, Union

import structlog

from contentful_management.entities.asset import Asset, wrap_asset, wrap_asset_collection
from contentful_management.entities.base import Collection, Entity
from contentful_management.entities.preview_api_key import (
    PreviewApiKey,
    wrap_preview_api_key,
    wrap_preview_api_key_collection,
)
from contentful_management.entities.space_membership import (
    SpaceMembership,
    wrap_space_membership,
    wrap_space_membership_collection,
)
from contentful_management.entities.upload import Upload, wrap_upload
from contentful_management.utils.http import create_request_config
from contentful_management.utils.logging import correlation_scope

if TYPE_CHECKING:
    from collections.abc import Mapping

    from contentful_management.utils.http import HttpClient

logger = structlog.get_logger(__name__)

FileContent = Union[bytes, str, IO[bytes]]


def _read_file(file: FileContent) -> bytes:
    if isinstance(file, bytes):
        return file
    if isinstance(file, str):
        return file.encode("utf-8")
    return file.read()


class _UploadAware(Entity):
    """Entity that also carries the upload host client."""

    _SLOTS = Entity._SLOTS | {"_upload_http"}

    def __init__(
        self,
        http: HttpClient,
        data: Mapping[str, Any],
        upload_http: HttpClient | None = None,
    ) -> None:
        super().__init__(http, data)
        object.__setattr__(self, "_upload_http", upload_http)


# =============================================================================
# ENVIRONMENT
# =============================================================================


class Environment(_UploadAware):
    """
    Environment of a space (e.g. "master").

    Methods are scoped to spaces/{space}/environments/{id}/.
    """

    @property
    def space_id(self) -> str:
        return self._link_id("space")

    @property
    def api(self) -> HttpClient:
        return self._http.root.scoped(f"spaces/{self.space_id}/environments/{self.id}")

    @property
    def upload_api(self) -> HttpClient:
        if self._upload_http is None:
            raise RuntimeError("No upload client configured for this environment")
        return self._upload_http.root.scoped(f"spaces/{self.space_id}/environments/{self.id}")

    # =========================================================================
    # ASSETS
    # =========================================================================

    async def get_asset(self, asset_id: str, query: Mapping[str, Any] | None = None) -> Asset:
        data = await self.api.get(f"assets/{asset_id}", create_request_config(query))
        return wrap_asset(self.api, data)

    async def get_assets(self, query: Mapping[str, Any] | None = None) -> Collection[Asset]:
        data = await self.api.get("assets", create_request_config(query))
        return wrap_asset_collection(self.api, data)

    async def create_asset(self, data: Mapping[str, Any]) -> Asset:
        """Create an asset with a server-generated id."""
        response = await self.api.post("assets", dict(data))
        return wrap_asset(self.api, response)

    async def create_asset_with_id(self, asset_id: str, data: Mapping[str, Any]) -> Asset:
        """Create an asset with a caller-chosen id."""
        response = await self.api.put(f"assets/{asset_id}", dict(data))
        return wrap_asset(self.api, response)

    # =========================================================================
    # UPLOADS
    # =========================================================================

    async def create_upload(self, file: FileContent) -> Upload:
        """
        Stage raw file content on the upload host.

        Args:
            file: bytes, a str (encoded as UTF-8), or a binary file object
        """
        response = await self.upload_api.post(
            "uploads",
            content=_read_file(file),
            headers={"Content-Type": "application/octet-stream"},
        )
        return wrap_upload(self.upload_api, response)

    async def create_asset_from_files(self, data: Mapping[str, Any]) -> Asset:
        """
        Upload every locale's file, then create an asset linking to them.

        data["fields"]["file"][locale] must contain "file" (the content),
        "contentType" and "fileName". The returned asset still needs to be
        processed before it gets a url.
        """
        fields = dict(data.get("fields") or {})
        files: Mapping[str, Mapping[str, Any]] = fields.get("file") or {}
        locales = list(files)

        with correlation_scope():
            uploads = await asyncio.gather(
                *(self.create_upload(files[locale]["file"]) for locale in locales)
            )
            logger.debug("Uploaded asset files", locales=locales, count=len(uploads))

            fields["file"] = {
                locale: {
                    "contentType": files[locale]["contentType"],
                    "fileName": files[locale]["fileName"],
                    "uploadFrom": upload.as_link(),
                }
                for locale, upload in zip(locales, uploads)
            }
            return await self.create_asset({**data, "fields": fields})


def wrap_environment(
    http: HttpClient,
    data: Mapping[str, Any],
    upload_http: HttpClient | None = None,
) -> Environment:
    return Environment(http, data, upload_http)


# =============================================================================
# SPACE
# =============================================================================


class Space(_UploadAware):
    """
    Contentful space.

    Data fields: name. Methods are scoped to spaces/{id}/.
    """

    @property
    def api(self) -> HttpClient:
        return self._http.root.scoped(f"spaces/{self.id}")

    async def delete(self) -> None:
        await self._delete_entity(f"spaces/{self.id}", http=self._http.root)

    async def get_environment(self, environment_id: str) -> Environment:
        data = await self.api.get(f"environments/{environment_id}")
        return wrap_environment(self.api, data, self._upload_http)

    async def get_environments(
        self, query: Mapping[str, Any] | None = None
    ) -> Collection[Environment]:
        data = await self.api.get("environments", create_request_config(query))
        items = [wrap_environment(self.api, item, self._upload_http) for item in data.get("items") or []]
        return Collection(data, items)

    async def get_preview_api_key(self, key_id: str) -> PreviewApiKey:
        data = await self.api.get(f"preview_api_keys/{key_id}")
        return wrap_preview_api_key(self.api, data)

    async def get_preview_api_keys(
        self, query: Mapping[str, Any] | None = None
    ) -> Collection[PreviewApiKey]:
        data = await self.api.get("preview_api_keys", create_request_config(query))
        return wrap_preview_api_key_collection(self.api, data)

    async def get_space_membership(self, membership_id: str) -> SpaceMembership:
        data = await self.api.get(f"space_memberships/{membership_id}")
        return wrap_space_membership(self.api, data)

    async def get_space_memberships(
        self, query: Mapping[str, Any] | None = None
    ) -> Collection[SpaceMembership]:
        data = await self.api.get("space_memberships", create_request_config(query))
        return wrap_space_membership_collection(self.api, data)


def wrap_space(
    http: HttpClient,
    data: Mapping[str, Any],
    upload_http: HttpClient | None = None,
) -> Space:
    return Space(http, data, upload_http)


def wrap_space_collection(
    http: HttpClient,
    data: Mapping[str, Any],
    upload_http: HttpClient | None = None,
) -> Collection[Space]:
    return Collection(data, [wrap_space(http, item, upload_http) for item in data.get("items") or []])


__all__ = [
    "Environment",
    "Space",
    "wrap_environment",
    "wrap_space",
    "wrap_space_collection",
]
