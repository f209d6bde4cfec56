# ABOUTME: Asset entity for the Contentful environment API
# ABOUTME: Publishing, archiving and file processing with url polling

"""
Asset entity.

=============================================================================
ASSET LIFECYCLE
=============================================================================

An asset moves between states that are derived entirely from sys:

    draft      -> sys.publishedVersion missing
    published  -> sys.publishedVersion set
    updated    -> published, but edited since (version > publishedVersion + 1)
    archived   -> sys.archivedVersion set

Every write returns a new Asset with the server's sys; the receiver keeps
its old version number, so chain calls on the returned value:

    asset = await asset.process_for_all_locales()
    asset = await asset.publish()

=============================================================================
FILE PROCESSING
=============================================================================

A freshly created asset only has fields.file[locale].upload (or uploadFrom).
Processing asks Contentful to fetch the file and compute details; it is
asynchronous on the server side, so after triggering it the client polls the
asset until fields.file[locale].url appears:

    PUT assets/{id}/files/{locale}/process
    (wait) GET assets/{id}   -> no url yet
    (wait) GET assets/{id}   -> url present, done

After processing_check_retries polls without a url, AssetProcessingTimeout
is raised.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

import structlog

from contentful_management.entities.base import Entity, wrap_collection
from contentful_management.utils.errors import AssetProcessingTimeout
from contentful_management.utils.logging import correlation_scope

if TYPE_CHECKING:
    from collections.abc import Mapping

    from contentful_management.utils.http import HttpClient

logger = structlog.get_logger(__name__)

# Seconds between processing checks
DEFAULT_PROCESSING_CHECK_WAIT = 0.5
DEFAULT_PROCESSING_CHECK_RETRIES = 5


class Asset(Entity):
    """
    Media asset (image, video, document) in an environment.

    Data fields: fields.title[locale], fields.description[locale],
    fields.file[locale] = {fileName, contentType, upload|uploadFrom|url, details}.
    """

    def _path(self, suffix: str = "") -> str:
        return f"assets/{self.id}{suffix}"

    # =========================================================================
    # STATE CHECKS
    # =========================================================================

    def is_published(self) -> bool:
        return bool(self.sys.get("publishedVersion"))

    def is_updated(self) -> bool:
        """Published, then changed again without republishing."""
        published_version = self.sys.get("publishedVersion")
        if not published_version:
            return False
        return (self.version or 0) > published_version + 1

    def is_draft(self) -> bool:
        return not self.sys.get("publishedVersion")

    def is_archived(self) -> bool:
        return bool(self.sys.get("archivedVersion"))

    # =========================================================================
    # WRITES
    # =========================================================================

    async def update(self) -> Asset:
        return await self._put_entity(self._path(), self._payload())

    async def delete(self) -> None:
        await self._delete_entity(self._path())

    async def publish(self) -> Asset:
        return await self._put_entity(self._path("/published"), None)

    async def unpublish(self) -> Asset:
        data = await self._http.delete(self._path("/published"))
        return Asset(self._http, data)

    async def archive(self) -> Asset:
        return await self._put_entity(self._path("/archived"), None)

    async def unarchive(self) -> Asset:
        data = await self._http.delete(self._path("/archived"))
        return Asset(self._http, data)

    # =========================================================================
    # PROCESSING
    # =========================================================================

    def _locales(self) -> list[str]:
        files = self._data.get("fields", {}).get("file") or {}
        return list(files)

    async def _wait_for_url(self, locale: str, wait: float, retries: int) -> Asset:
        log = logger.bind(asset_id=self.id, locale=locale)
        for check in range(1, retries + 1):
            await asyncio.sleep(wait)
            asset = Asset(self._http, await self._http.get(self._path()))
            file = asset._data.get("fields", {}).get("file", {}).get(locale) or {}
            if file.get("url"):
                log.debug("Asset processed", checks=check)
                return asset
            log.debug("Asset not processed yet", check=check, retries=retries)

        raise AssetProcessingTimeout(
            None,
            f"Asset {self.id} was not processed for locale {locale!r} "
            f"after {retries} checks",
            details={"assetId": self.id, "locale": locale, "retries": retries},
        )

    async def _process(self, locale: str, wait: float, retries: int) -> Asset:
        await self._http.put(
            self._path(f"/files/{locale}/process"),
            None,
            headers=self._version_headers(),
        )
        return await self._wait_for_url(locale, wait, retries)

    async def process_for_locale(
        self,
        locale: str,
        processing_check_wait: float = DEFAULT_PROCESSING_CHECK_WAIT,
        processing_check_retries: int = DEFAULT_PROCESSING_CHECK_RETRIES,
    ) -> Asset:
        """
        Process the file of one locale and wait until it has a url.

        Args:
            locale: Locale code whose fields.file entry is processed
            processing_check_wait: Seconds to wait before each check
            processing_check_retries: Number of checks before giving up

        Returns:
            The processed Asset as fetched from the server

        Raises:
            AssetProcessingTimeout: If no url appears after all checks
            ContentfulError: If the process request itself fails
        """
        with correlation_scope():
            return await self._process(locale, processing_check_wait, processing_check_retries)

    async def process_for_all_locales(
        self,
        processing_check_wait: float = DEFAULT_PROCESSING_CHECK_WAIT,
        processing_check_retries: int = DEFAULT_PROCESSING_CHECK_RETRIES,
    ) -> Asset:
        """
        Process the files of every locale concurrently.

        Returns:
            The asset as fetched once every locale has a url, or the
            receiver itself when it has no files
        """
        locales = self._locales()
        if not locales:
            return self

        with correlation_scope():
            await asyncio.gather(
                *(
                    self._process(locale, processing_check_wait, processing_check_retries)
                    for locale in locales
                )
            )
            return Asset(self._http, await self._http.get(self._path()))


def wrap_asset(http: HttpClient, data: Mapping[str, Any]) -> Asset:
    return Asset(http, data)


wrap_asset_collection = wrap_collection(wrap_asset)
