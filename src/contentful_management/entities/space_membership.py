# ABOUTME: Space membership entity for the Contentful Management API
# ABOUTME: A user's access to a space, listed per space or per organization

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from contentful_management.entities.base import Entity, wrap_collection

if TYPE_CHECKING:
    from collections.abc import Mapping

    from contentful_management.utils.http import HttpClient


class SpaceMembership(Entity):
    """
    A user's membership in a space.

    Data fields: admin, roles (list of Role links), user (User link).
    Paths are relative to the client the membership was fetched through,
    either "spaces/{id}/" or "organizations/{id}/".
    """

    async def update(self) -> SpaceMembership:
        return await self._put_entity(f"space_memberships/{self.id}", self._payload())

    async def delete(self) -> None:
        await self._delete_entity(f"space_memberships/{self.id}")


def wrap_space_membership(http: HttpClient, data: Mapping[str, Any]) -> SpaceMembership:
    return SpaceMembership(http, data)


wrap_space_membership_collection = wrap_collection(wrap_space_membership)
