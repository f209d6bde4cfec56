# ABOUTME: App definition entity for the Contentful organization API
# ABOUTME: Describes an app (name, src, locations) installable in spaces

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from contentful_management.entities.base import Entity, wrap_collection

if TYPE_CHECKING:
    from collections.abc import Mapping

    from contentful_management.utils.http import HttpClient


class AppDefinition(Entity):
    """
    App definition owned by an organization.

    Data fields: name, src (URL the app is served from), locations
    (e.g. [{"location": "app-config"}]).
    """

    async def update(self) -> AppDefinition:
        return await self._put_entity(f"app_definitions/{self.id}", self._payload())

    async def delete(self) -> None:
        await self._delete_entity(f"app_definitions/{self.id}")


def wrap_app_definition(http: HttpClient, data: Mapping[str, Any]) -> AppDefinition:
    return AppDefinition(http, data)


wrap_app_definition_collection = wrap_collection(wrap_app_definition)
