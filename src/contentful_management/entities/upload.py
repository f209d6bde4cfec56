# ABOUTME: Upload entity for the Contentful Upload API
# ABOUTME: Raw file bytes staged before being linked into an asset

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from contentful_management.entities.base import Entity

if TYPE_CHECKING:
    from collections.abc import Mapping

    from contentful_management.utils.http import HttpClient


class Upload(Entity):
    """Staged file on the upload host. Expires 24h after creation."""

    def as_link(self) -> dict[str, Any]:
        """Link payload used as an asset file's uploadFrom value."""
        return {"sys": {"type": "Link", "linkType": "Upload", "id": self.id}}

    async def delete(self) -> None:
        await self._delete_entity(f"uploads/{self.id}")


def wrap_upload(http: HttpClient, data: Mapping[str, Any]) -> Upload:
    return Upload(http, data)
