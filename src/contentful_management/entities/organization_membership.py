# ABOUTME: Organization membership entity for the Contentful organization API
# ABOUTME: Only the role of a membership can be changed through update()

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from contentful_management.entities.base import Entity, wrap_collection

if TYPE_CHECKING:
    from collections.abc import Mapping

    from contentful_management.utils.http import HttpClient


class OrganizationMembership(Entity):
    """
    A user's membership in an organization.

    Data fields: role ("owner", "admin", "member"), user (User link),
    sso and status flags. The API only accepts role on update.
    """

    async def update(self) -> OrganizationMembership:
        return await self._put_entity(
            f"organization_memberships/{self.id}",
            {"role": self._data.get("role")},
        )

    async def delete(self) -> None:
        await self._delete_entity(f"organization_memberships/{self.id}")


def wrap_organization_membership(
    http: HttpClient, data: Mapping[str, Any]
) -> OrganizationMembership:
    return OrganizationMembership(http, data)


wrap_organization_membership_collection = wrap_collection(wrap_organization_membership)
