# ABOUTME: Organization invitation entity for the Contentful organization API
# ABOUTME: Invitations are read-only once created

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from contentful_management.entities.base import Entity

if TYPE_CHECKING:
    from collections.abc import Mapping

    from contentful_management.utils.http import HttpClient


class OrganizationInvitation(Entity):
    """Pending invitation (email, firstName, lastName, role)."""


def wrap_organization_invitation(
    http: HttpClient, data: Mapping[str, Any]
) -> OrganizationInvitation:
    return OrganizationInvitation(http, data)
