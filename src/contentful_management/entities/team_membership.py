# ABOUTME: Team membership entity for the Contentful organization API
# ABOUTME: Links an organization membership to a team, optionally as admin

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from contentful_management.entities.base import Entity, wrap_collection

if TYPE_CHECKING:
    from collections.abc import Mapping

    from contentful_management.utils.http import HttpClient


class TeamMembership(Entity):
    """
    Membership of an organization member in a team.

    Data fields: admin, organizationMembershipId. The owning team is
    referenced by the sys.team link.
    """

    @property
    def team_id(self) -> str:
        return self._link_id("team")

    def _path(self) -> str:
        return f"teams/{self.team_id}/team_memberships/{self.id}"

    async def update(self) -> TeamMembership:
        return await self._put_entity(self._path(), self._payload())

    async def delete(self) -> None:
        await self._delete_entity(self._path())


def wrap_team_membership(http: HttpClient, data: Mapping[str, Any]) -> TeamMembership:
    return TeamMembership(http, data)


wrap_team_membership_collection = wrap_collection(wrap_team_membership)
