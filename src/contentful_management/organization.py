# ABOUTME: Organization entity and organization-scoped API methods
# ABOUTME: Users, memberships, teams, invitations and app definitions

"""
Organization API.

=============================================================================
WHAT IS THIS FILE?
=============================================================================

An Organization is fetched from the top-level client:

    async with create_client(access_token="CFPAT-...") as client:
        org = await client.get_organization("<organization_id>")
        teams = await org.get_teams({"limit": 100})

Every method below issues one request under "organizations/{id}/" and
returns a wrapped entity or collection. Errors surface as ContentfulError
subclasses (NotFound, AccessDenied, ...).

=============================================================================
ENDPOINTS
=============================================================================

    GET  users, users/{id}
    GET  organization_memberships, organization_memberships/{id}
    POST teams                         GET teams, teams/{id}
    POST teams/{id}/team_memberships   GET teams/{id}/team_memberships[/{id}]
    GET  team_memberships
    GET  team_space_memberships[/{id}]
    GET  space_memberships[/{id}]
    POST invitations                   GET invitations/{id}
    POST app_definitions               GET app_definitions[/{id}]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from contentful_management.entities.app_definition import (
    AppDefinition,
    wrap_app_definition,
    wrap_app_definition_collection,
)
from contentful_management.entities.base import Collection, Entity, wrap_collection
from contentful_management.entities.organization_invitation import (
    OrganizationInvitation,
    wrap_organization_invitation,
)
from contentful_management.entities.organization_membership import (
    OrganizationMembership,
    wrap_organization_membership,
    wrap_organization_membership_collection,
)
from contentful_management.entities.space_membership import (
    SpaceMembership,
    wrap_space_membership,
    wrap_space_membership_collection,
)
from contentful_management.entities.team import Team, wrap_team, wrap_team_collection
from contentful_management.entities.team_membership import (
    TeamMembership,
    wrap_team_membership,
    wrap_team_membership_collection,
)
from contentful_management.entities.team_space_membership import (
    TeamSpaceMembership,
    wrap_team_space_membership,
    wrap_team_space_membership_collection,
)
from contentful_management.entities.user import User, wrap_user, wrap_user_collection
from contentful_management.utils.http import create_request_config

if TYPE_CHECKING:
    from collections.abc import Mapping

    from contentful_management.utils.http import HttpClient

# Alpha feature flags required by the invitation endpoints
USER_MANAGEMENT_HEADERS = {"x-contentful-enable-alpha-feature": "organization-user-management-api"}
PENDING_MEMBERSHIP_HEADERS = {"x-contentful-enable-alpha-feature": "pending-org-membership"}


class Organization(Entity):
    """
    Contentful organization.

    Data fields: name. All methods are scoped to this organization.
    """

    @property
    def api(self) -> HttpClient:
        """HTTP client scoped to organizations/{id}/."""
        return self._http.root.scoped(f"organizations/{self.id}")

    # =========================================================================
    # USERS
    # =========================================================================

    async def get_user(self, user_id: str) -> User:
        data = await self.api.get(f"users/{user_id}")
        return wrap_user(self.api, data)

    async def get_users(self, query: Mapping[str, Any] | None = None) -> Collection[User]:
        """
        Get a collection of users in the organization.

        Args:
            query: Search parameters such as {"limit": 100, "skip": 0}
        """
        data = await self.api.get("users", create_request_config(query))
        return wrap_user_collection(self.api, data)

    # =========================================================================
    # ORGANIZATION MEMBERSHIPS
    # =========================================================================

    async def get_organization_membership(self, membership_id: str) -> OrganizationMembership:
        data = await self.api.get(f"organization_memberships/{membership_id}")
        return wrap_organization_membership(self.api, data)

    async def get_organization_memberships(
        self, query: Mapping[str, Any] | None = None
    ) -> Collection[OrganizationMembership]:
        data = await self.api.get("organization_memberships", create_request_config(query))
        return wrap_organization_membership_collection(self.api, data)

    # =========================================================================
    # TEAMS
    # =========================================================================

    async def create_team(self, data: Mapping[str, Any]) -> Team:
        """
        Create a team.

        Example:
            team = await org.create_team({"name": "new team", "description": "..."})
        """
        response = await self.api.post("teams", dict(data))
        return wrap_team(self.api, response)

    async def get_team(self, team_id: str) -> Team:
        data = await self.api.get(f"teams/{team_id}")
        return wrap_team(self.api, data)

    async def get_teams(self, query: Mapping[str, Any] | None = None) -> Collection[Team]:
        data = await self.api.get("teams", create_request_config(query))
        return wrap_team_collection(self.api, data)

    # =========================================================================
    # TEAM MEMBERSHIPS
    # =========================================================================

    async def create_team_membership(
        self, team_id: str, data: Mapping[str, Any]
    ) -> TeamMembership:
        """
        Add an organization member to a team.

        Example:
            membership = await org.create_team_membership(
                "teamId", {"admin": True, "organizationMembershipId": "omId"}
            )
        """
        response = await self.api.post(f"teams/{team_id}/team_memberships", dict(data))
        return wrap_team_membership(self.api, response)

    async def get_team_membership(self, team_id: str, team_membership_id: str) -> TeamMembership:
        data = await self.api.get(f"teams/{team_id}/team_memberships/{team_membership_id}")
        return wrap_team_membership(self.api, data)

    async def get_team_memberships(
        self,
        team_id: str | None = None,
        query: Mapping[str, Any] | None = None,
    ) -> Collection[TeamMembership]:
        """
        Get team memberships.

        With team_id, only the memberships of that team are returned;
        otherwise all team memberships of the organization.
        """
        path = f"teams/{team_id}/team_memberships" if team_id else "team_memberships"
        data = await self.api.get(path, create_request_config(query))
        return wrap_team_membership_collection(self.api, data)

    # =========================================================================
    # TEAM SPACE MEMBERSHIPS
    # =========================================================================

    async def get_team_space_memberships(
        self,
        team_id: str | None = None,
        query: Mapping[str, Any] | None = None,
    ) -> Collection[TeamSpaceMembership]:
        """
        Get team space memberships.

        With team_id, results are filtered to that team via the
        sys.team.sys.id query parameter. The caller's query is not modified.
        """
        params = dict(query or {})
        if team_id:
            params["sys.team.sys.id"] = team_id
        data = await self.api.get("team_space_memberships", create_request_config(params))
        return wrap_team_space_membership_collection(self.api, data)

    async def get_team_space_membership(self, team_space_membership_id: str) -> TeamSpaceMembership:
        data = await self.api.get(f"team_space_memberships/{team_space_membership_id}")
        return wrap_team_space_membership(self.api, data)

    # =========================================================================
    # SPACE MEMBERSHIPS ACROSS THE ORGANIZATION
    # =========================================================================

    async def get_organization_space_membership(self, membership_id: str) -> SpaceMembership:
        data = await self.api.get(f"space_memberships/{membership_id}")
        return wrap_space_membership(self.api, data)

    async def get_organization_space_memberships(
        self, query: Mapping[str, Any] | None = None
    ) -> Collection[SpaceMembership]:
        data = await self.api.get("space_memberships", create_request_config(query))
        return wrap_space_membership_collection(self.api, data)

    # =========================================================================
    # INVITATIONS
    # =========================================================================

    async def get_organization_invitation(self, invitation_id: str) -> OrganizationInvitation:
        data = await self.api.get(f"invitations/{invitation_id}", headers=USER_MANAGEMENT_HEADERS)
        return wrap_organization_invitation(self.api, data)

    async def create_organization_invitation(
        self, data: Mapping[str, Any]
    ) -> OrganizationInvitation:
        """
        Invite a user to the organization.

        Example:
            invitation = await org.create_organization_invitation({
                "email": "user.email@example.com",
                "firstName": "User First Name",
                "lastName": "User Last Name",
                "role": "developer",
            })
        """
        response = await self.api.post(
            "invitations", dict(data), headers=PENDING_MEMBERSHIP_HEADERS
        )
        return wrap_organization_invitation(self.api, response)

    # =========================================================================
    # APP DEFINITIONS
    # =========================================================================

    async def create_app_definition(self, data: Mapping[str, Any]) -> AppDefinition:
        """
        Create an app definition.

        Example:
            app = await org.create_app_definition({
                "name": "Example app",
                "locations": [{"location": "app-config"}],
                "src": "http://my-app-host.com/my-app",
            })
        """
        response = await self.api.post("app_definitions", dict(data))
        return wrap_app_definition(self.api, response)

    async def get_app_definitions(
        self, query: Mapping[str, Any] | None = None
    ) -> Collection[AppDefinition]:
        data = await self.api.get("app_definitions", create_request_config(query))
        return wrap_app_definition_collection(self.api, data)

    async def get_app_definition(self, app_definition_id: str) -> AppDefinition:
        data = await self.api.get(f"app_definitions/{app_definition_id}")
        return wrap_app_definition(self.api, data)


def wrap_organization(http: HttpClient, data: Mapping[str, Any]) -> Organization:
    return Organization(http, data)


wrap_organization_collection = wrap_collection(wrap_organization)
