# ABOUTME: Unit tests for entity wrapping and entity mutation methods
# ABOUTME: Tests frozen sys, data copies, collections and update/delete requests

import copy
import json
from typing import Any

import httpx
import pytest
import respx

from contentful_management.entities import (
    AppDefinition,
    Collection,
    Entity,
    OrganizationMembership,
    SpaceMembership,
    Team,
    TeamMembership,
    TeamSpaceMembership,
    Upload,
    wrap_collection,
    wrap_preview_api_key_collection,
    wrap_team,
    wrap_team_collection,
)
from contentful_management.utils.errors import VersionMismatch
from contentful_management.utils.http import HttpClient
from conftest import BASE_URL, collection, link, make_sys


@pytest.mark.unit
class TestEntityWrapping:
    """Tests for the Entity base class."""

    def test_fields_as_attributes_and_items(self, settings, team_data: dict[str, Any]):
        team = wrap_team(HttpClient(settings), team_data)

        assert team.name == "Editors"
        assert team["description"] == "Content editors"
        assert team.id == "team1"
        assert team.version == 2
        assert "name" in team
        assert "sys" in team

    def test_missing_attribute(self, settings, team_data: dict[str, Any]):
        team = wrap_team(HttpClient(settings), team_data)

        with pytest.raises(AttributeError, match="no attribute 'color'"):
            _ = team.color

    def test_input_is_copied(self, settings, team_data: dict[str, Any]):
        """Test later changes to the source dict do not leak into the entity."""
        team = wrap_team(HttpClient(settings), team_data)

        team_data["name"] = "Changed"
        team_data["sys"]["version"] = 99

        assert team.name == "Editors"
        assert team.version == 2

    def test_sys_cannot_be_assigned(self, settings, team_data: dict[str, Any]):
        team = wrap_team(HttpClient(settings), team_data)

        with pytest.raises(AttributeError, match="read-only"):
            team.sys = {}
        with pytest.raises(TypeError, match="read-only"):
            team["sys"] = {}
        with pytest.raises(AttributeError):
            del team.sys

    def test_sys_is_deeply_frozen(self, settings, team_data: dict[str, Any]):
        """Test neither sys nor nested links can be mutated."""
        team = wrap_team(HttpClient(settings), team_data)

        with pytest.raises(TypeError):
            team.sys["version"] = 3
        with pytest.raises(TypeError):
            team.sys["organization"]["sys"]["id"] = "other"

    def test_fields_are_mutable(self, settings, team_data: dict[str, Any]):
        team = wrap_team(HttpClient(settings), team_data)

        team.name = "Renamed"
        team["description"] = "New"
        del team.description

        assert team.name == "Renamed"
        assert "description" not in team

    def test_to_plain_object_is_detached(self, settings, team_data: dict[str, Any]):
        """Test snapshots are equal to the input and fully independent."""
        team = wrap_team(HttpClient(settings), team_data)

        plain = team.to_plain_object()
        assert plain == team_data

        plain["name"] = "Other"
        plain["sys"]["version"] = 50
        assert team.name == "Editors"
        assert team.version == 2
        assert team.to_plain_object() == team_data

    def test_sys_lists_become_lists_again(self, settings):
        data = {"sys": make_sys("m1", "SpaceMembership", roles=[link("r1", "Role")])}
        membership = SpaceMembership(HttpClient(settings), data)

        assert isinstance(membership.sys["roles"], tuple)
        assert membership.to_plain_object()["sys"]["roles"] == [link("r1", "Role")]

    def test_missing_sys(self, settings):
        entity = Entity(HttpClient(settings), {"name": "x"})

        assert entity.id is None
        assert dict(entity.sys) == {}

    def test_equality_and_repr(self, settings, team_data: dict[str, Any]):
        http = HttpClient(settings)

        assert wrap_team(http, team_data) == wrap_team(http, team_data)
        assert repr(wrap_team(http, team_data)) == "<Team id='team1' version=2>"

    def test_missing_link(self, settings):
        membership = TeamMembership(HttpClient(settings), {"sys": make_sys("tm1", "TeamMembership")})

        with pytest.raises(ValueError, match="no sys.team link"):
            _ = membership.team_id

    def test_rewrap_with_sys_of_another_entity(self, settings, team_data: dict[str, Any]):
        """Test a frozen sys taken from an entity can be wrapped again."""
        http = HttpClient(settings)
        team = wrap_team(http, team_data)

        renamed = wrap_team(http, {"sys": team.sys, "name": "Reviewers"})

        assert renamed.sys == team.sys
        assert renamed.name == "Reviewers"
        assert renamed.to_plain_object()["sys"] == team_data["sys"]
        with pytest.raises(TypeError):
            renamed.sys["organization"]["sys"]["id"] = "other"

    def test_deepcopy(self, settings, team_data: dict[str, Any]):
        """Test deep copies are equal, independent and keep the client."""
        http = HttpClient(settings)
        team = wrap_team(http, team_data)

        clone = copy.deepcopy(team)
        clone.name = "Copy"

        assert isinstance(clone, Team)
        assert clone._http is http
        assert clone.sys == team.sys
        assert team.name == "Editors"
        assert copy.deepcopy(team) == team


@pytest.mark.unit
class TestCollection:
    """Tests for collection wrapping."""

    def test_wraps_every_item(self, settings, team_data: dict[str, Any]):
        data = collection([team_data, {**team_data, "sys": make_sys("team2", "Team")}], total=5)

        teams = wrap_team_collection(HttpClient(settings), data)

        assert isinstance(teams, Collection)
        assert len(teams) == 2
        assert all(isinstance(team, Team) for team in teams)
        assert teams[1].id == "team2"
        assert teams.total == 5
        assert teams.skip == 0
        assert teams.limit == 100
        assert teams.sys["type"] == "Array"
        assert teams.has_more

    def test_last_page(self, settings):
        data = collection([{"sys": make_sys("k1", "PreviewApiKey")}], total=3, skip=2)

        keys = wrap_preview_api_key_collection(HttpClient(settings), data)

        assert not keys.has_more

    def test_to_plain_object(self, settings, team_data: dict[str, Any]):
        data = collection([team_data])
        data["includes"] = {"Entry": []}

        teams = wrap_team_collection(HttpClient(settings), data)
        plain = teams.to_plain_object()

        assert plain == data
        plain["items"][0]["name"] = "changed"
        assert teams[0].name == "Editors"

    def test_empty_items(self, settings):
        teams = wrap_collection(wrap_team)(HttpClient(settings), {"total": 0})

        assert len(teams) == 0
        assert teams.total == 0
        assert not teams.has_more

    def test_deepcopy(self, settings, team_data: dict[str, Any]):
        """Test deep copies of a collection copy every item's data."""
        data = collection([team_data], total=4)
        data["includes"] = {"Entry": []}
        teams = wrap_team_collection(HttpClient(settings), data)

        clone = copy.deepcopy(teams)
        clone[0].name = "Copy"

        assert clone.total == 4
        assert clone.sys == teams.sys
        assert teams[0].name == "Editors"
        assert copy.deepcopy(teams).to_plain_object() == data


@pytest.mark.unit
class TestEntityMethods:
    """Tests for update/delete on simple entities."""

    @respx.mock
    async def test_team_update(self, http: HttpClient, team_data: dict[str, Any]):
        """Test update sends the data without sys and returns a new entity."""
        org_http = http.scoped("organizations/org1")
        updated = {**team_data, "name": "Renamed", "sys": make_sys("team1", "Team", version=3)}
        route = respx.put(f"{BASE_URL}/organizations/org1/teams/team1").mock(
            return_value=httpx.Response(200, json=updated)
        )
        team = wrap_team(org_http, team_data)
        team.name = "Renamed"

        result = await team.update()

        request = route.calls.last.request
        assert request.headers["X-Contentful-Version"] == "2"
        assert json.loads(request.content) == {"name": "Renamed", "description": "Content editors"}
        assert result is not team
        assert result.version == 3
        assert team.version == 2

    @respx.mock
    async def test_team_update_version_mismatch(self, http: HttpClient, team_data: dict[str, Any]):
        respx.put(f"{BASE_URL}/teams/team1").mock(
            return_value=httpx.Response(409, json={"sys": {"id": "VersionMismatch"}})
        )

        with pytest.raises(VersionMismatch):
            await wrap_team(http, team_data).update()

    @respx.mock
    async def test_team_delete(self, http: HttpClient, team_data: dict[str, Any]):
        route = respx.delete(f"{BASE_URL}/organizations/org1/teams/team1").mock(
            return_value=httpx.Response(204)
        )

        assert await wrap_team(http.scoped("organizations/org1"), team_data).delete() is None
        assert route.called

    @respx.mock
    async def test_team_membership_paths(self, http: HttpClient):
        data = {
            "sys": make_sys("tm1", "TeamMembership", version=4, team=link("team1", "Team")),
            "admin": False,
            "organizationMembershipId": "om1",
        }
        path = f"{BASE_URL}/organizations/org1/teams/team1/team_memberships/tm1"
        put = respx.put(path).mock(return_value=httpx.Response(200, json=data))
        delete = respx.delete(path).mock(return_value=httpx.Response(204))
        membership = TeamMembership(http.scoped("organizations/org1"), data)
        membership.admin = True

        await membership.update()
        await membership.delete()

        assert json.loads(put.calls.last.request.content)["admin"] is True
        assert put.calls.last.request.headers["X-Contentful-Version"] == "4"
        assert delete.called

    @respx.mock
    async def test_team_space_membership_uses_space_endpoint(self, http: HttpClient):
        """Test writes leave the organization scope and send x-contentful-team."""
        data = {
            "sys": make_sys(
                "tsm1",
                "TeamSpaceMembership",
                version=1,
                team=link("team1", "Team"),
                space=link("space1", "Space"),
            ),
            "admin": False,
            "roles": [link("role1", "Role")],
        }
        path = f"{BASE_URL}/spaces/space1/team_space_memberships/tsm1"
        put = respx.put(path).mock(return_value=httpx.Response(200, json=data))
        delete = respx.delete(path).mock(return_value=httpx.Response(204))
        membership = TeamSpaceMembership(http.scoped("organizations/org1"), data)

        result = await membership.update()
        await membership.delete()

        request = put.calls.last.request
        assert request.headers["x-contentful-team"] == "team1"
        assert json.loads(request.content) == {"admin": False, "roles": [link("role1", "Role")]}
        assert result.team_id == "team1"
        assert delete.called

    @respx.mock
    async def test_organization_membership_sends_role_only(self, http: HttpClient):
        data = {
            "sys": make_sys("om1", "OrganizationMembership", version=2, user=link("u1", "User")),
            "role": "member",
            "status": "active",
        }
        route = respx.put(f"{BASE_URL}/organizations/org1/organization_memberships/om1").mock(
            return_value=httpx.Response(200, json={**data, "role": "admin"})
        )
        membership = OrganizationMembership(http.scoped("organizations/org1"), data)
        membership.role = "admin"

        result = await membership.update()

        assert json.loads(route.calls.last.request.content) == {"role": "admin"}
        assert result.role == "admin"

    @respx.mock
    async def test_app_definition_update_and_delete(self, http: HttpClient):
        data = {"sys": make_sys("app1", "AppDefinition"), "name": "Example app", "src": "https://a"}
        path = f"{BASE_URL}/organizations/org1/app_definitions/app1"
        put = respx.put(path).mock(return_value=httpx.Response(200, json=data))
        delete = respx.delete(path).mock(return_value=httpx.Response(204))
        app = AppDefinition(http.scoped("organizations/org1"), data)

        assert isinstance(await app.update(), AppDefinition)
        await app.delete()

        assert put.called
        assert delete.called

    @respx.mock
    async def test_space_membership_relative_to_scope(self, http: HttpClient):
        data = {"sys": make_sys("sm1", "SpaceMembership"), "admin": True, "roles": []}
        route = respx.delete(f"{BASE_URL}/spaces/space1/space_memberships/sm1").mock(
            return_value=httpx.Response(204)
        )

        await SpaceMembership(http.scoped("spaces/space1"), data).delete()

        assert route.called

    def test_upload_link(self, settings):
        upload = Upload(HttpClient(settings), {"sys": make_sys("up1", "Upload")})

        assert upload.as_link() == {"sys": {"type": "Link", "linkType": "Upload", "id": "up1"}}
