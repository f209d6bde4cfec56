# ABOUTME: Team entity for the Contentful organization API
# ABOUTME: Teams group organization memberships and can be updated or deleted

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from contentful_management.entities.base import Entity, wrap_collection

if TYPE_CHECKING:
    from collections.abc import Mapping

    from contentful_management.utils.http import HttpClient


class Team(Entity):
    """
    Organization team.

    Data fields: name, description.
    """

    async def update(self) -> Team:
        """Send the edited name/description back, guarded by sys.version."""
        return await self._put_entity(f"teams/{self.id}", self._payload())

    async def delete(self) -> None:
        await self._delete_entity(f"teams/{self.id}")


def wrap_team(http: HttpClient, data: Mapping[str, Any]) -> Team:
    return Team(http, data)


wrap_team_collection = wrap_collection(wrap_team)
