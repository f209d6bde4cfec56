# ABOUTME: Integration tests for the Contentful client against a live organization
# ABOUTME: Requires CONTENTFUL_ACCESS_TOKEN and CONTENTFUL_ORGANIZATION_ID to be set

"""Integration tests against the real Contentful Management API.

These tests require:
- CONTENTFUL_ACCESS_TOKEN: a personal access token with organization admin rights
- CONTENTFUL_ORGANIZATION_ID: the organization to run against

The team test creates a temporary team and deletes it again.
"""

from __future__ import annotations

import os
import uuid
from typing import AsyncIterator

import pytest

from contentful_management import ContentfulClient, Organization, create_client
from contentful_management.utils.errors import NotFound

# Read at import time; the autouse clean_env fixture strips CONTENTFUL_* later
ACCESS_TOKEN = os.environ.get("CONTENTFUL_ACCESS_TOKEN", "")
ORGANIZATION_ID = os.environ.get("CONTENTFUL_ORGANIZATION_ID", "")

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not (ACCESS_TOKEN and ORGANIZATION_ID),
        reason="CONTENTFUL_ACCESS_TOKEN and CONTENTFUL_ORGANIZATION_ID are required",
    ),
]


@pytest.fixture
async def live_client() -> AsyncIterator[ContentfulClient]:
    async with create_client(ACCESS_TOKEN, max_retries=3) as client:
        yield client


@pytest.fixture
async def organization(live_client: ContentfulClient) -> Organization:
    return await live_client.get_organization(ORGANIZATION_ID)


class TestLiveOrganization:
    """Read-only calls against the configured organization."""

    async def test_current_user(self, live_client: ContentfulClient):
        user = await live_client.get_current_user()

        assert user.id
        assert user.sys["type"] == "User"

    async def test_get_organization(self, organization: Organization):
        assert organization.id == ORGANIZATION_ID
        assert organization.name

    async def test_unknown_organization(self, live_client: ContentfulClient):
        with pytest.raises(NotFound):
            await live_client.get_organization("does-not-exist")

    async def test_list_users_and_memberships(self, organization: Organization):
        users = await organization.get_users({"limit": 5})
        memberships = await organization.get_organization_memberships({"limit": 5})

        assert users.limit == 5
        assert len(users) <= 5
        assert memberships.total >= 1

    async def test_list_app_definitions(self, organization: Organization):
        apps = await organization.get_app_definitions({"limit": 1})

        assert apps.total >= len(apps)


class TestLiveTeams:
    """Team lifecycle: create, rename, delete."""

    async def test_team_lifecycle(self, organization: Organization):
        name = f"integration-test-{uuid.uuid4().hex[:8]}"
        team = await organization.create_team({"name": name, "description": "temporary"})
        try:
            assert team.name == name

            team.description = "renamed"
            updated = await team.update()
            assert updated.description == "renamed"
            assert updated.version > team.version

            fetched = await organization.get_team(team.id)
            assert fetched.description == "renamed"
            team = updated
        finally:
            await team.delete()

        with pytest.raises(NotFound):
            await organization.get_team(team.id)
