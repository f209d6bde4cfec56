# ABOUTME: Team space membership entity for the Contentful Management API
# ABOUTME: Grants a whole team access to a space with a set of roles

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from contentful_management.entities.base import Entity, wrap_collection

if TYPE_CHECKING:
    from collections.abc import Mapping

    from contentful_management.utils.http import HttpClient


class TeamSpaceMembership(Entity):
    """
    Access of a team to a space.

    Data fields: admin, roles (list of Role links). Listing happens at the
    organization level, but writes go to the space endpoint, so update and
    delete use the unscoped client together with the x-contentful-team header.
    """

    @property
    def space_id(self) -> str:
        return self._link_id("space")

    @property
    def team_id(self) -> str:
        return self._link_id("team")

    def _path(self) -> str:
        return f"spaces/{self.space_id}/team_space_memberships/{self.id}"

    async def update(self) -> TeamSpaceMembership:
        return await self._put_entity(
            self._path(),
            self._payload(),
            headers={"x-contentful-team": self.team_id},
            http=self._http.root,
        )

    async def delete(self) -> None:
        await self._delete_entity(self._path(), http=self._http.root)


def wrap_team_space_membership(http: HttpClient, data: Mapping[str, Any]) -> TeamSpaceMembership:
    return TeamSpaceMembership(http, data)


wrap_team_space_membership_collection = wrap_collection(wrap_team_space_membership)
