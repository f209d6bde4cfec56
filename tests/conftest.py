# ABOUTME: Pytest fixtures and configuration for Contentful Management tests
# ABOUTME: Provides settings, opened HTTP clients and API payload factories

import os
from typing import Any, AsyncIterator

import pytest
from pydantic import SecretStr

from contentful_management.client import ContentfulClient
from contentful_management.config import ClientSettings
from contentful_management.utils.http import HttpClient

BASE_URL = "https://api.contentful.com"
UPLOAD_URL = "https://upload.contentful.com"


def make_sys(entity_id: str, entity_type: str, version: int = 1, **extra: Any) -> dict[str, Any]:
    """Build a sys block like the API returns."""
    sys = {
        "id": entity_id,
        "type": entity_type,
        "version": version,
        "createdAt": "2024-01-15T10:30:00.000Z",
        "updatedAt": "2024-01-15T10:30:00.000Z",
    }
    sys.update(extra)
    return sys


def link(entity_id: str, link_type: str) -> dict[str, Any]:
    """Build a sys link such as sys.space or sys.team."""
    return {"sys": {"type": "Link", "linkType": link_type, "id": entity_id}}


def collection(items: list[dict[str, Any]], total: int | None = None, skip: int = 0, limit: int = 100) -> dict[str, Any]:
    """Build a collection response."""
    return {
        "sys": {"type": "Array"},
        "total": len(items) if total is None else total,
        "skip": skip,
        "limit": limit,
        "items": items,
    }


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's CONTENTFUL_* variables out of unit tests."""
    for key in list(os.environ):
        if key.startswith("CONTENTFUL_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings() -> ClientSettings:
    """Settings without retries so error tests see the first failure."""
    return ClientSettings(
        access_token=SecretStr("CFPAT-test-token-12345"),
        retry_on_error=False,
        retry_backoff=0,
    )


@pytest.fixture
def retry_settings() -> ClientSettings:
    """Settings with fast retries."""
    return ClientSettings(
        access_token=SecretStr("CFPAT-test-token-12345"),
        retry_on_error=True,
        max_retries=3,
        retry_backoff=0,
    )


@pytest.fixture
async def http(settings: ClientSettings) -> AsyncIterator[HttpClient]:
    """Opened root HTTP client."""
    async with HttpClient(settings, version="0.1.0") as client:
        yield client


@pytest.fixture
async def client(settings: ClientSettings) -> AsyncIterator[ContentfulClient]:
    """Opened top-level client."""
    async with ContentfulClient(settings, version="0.1.0") as c:
        yield c


@pytest.fixture
def organization_data() -> dict[str, Any]:
    return {"sys": make_sys("org1", "Organization"), "name": "Acme"}


@pytest.fixture
def team_data() -> dict[str, Any]:
    return {
        "sys": make_sys("team1", "Team", version=2, organization=link("org1", "Organization")),
        "name": "Editors",
        "description": "Content editors",
    }


@pytest.fixture
def asset_data() -> dict[str, Any]:
    return {
        "sys": make_sys(
            "asset1",
            "Asset",
            version=3,
            space=link("space1", "Space"),
            environment=link("master", "Environment"),
        ),
        "fields": {
            "title": {"en-US": "Playsam Streamliner"},
            "description": {"en-US": "A classic car"},
            "file": {
                "en-US": {
                    "fileName": "car.jpg",
                    "contentType": "image/jpeg",
                    "upload": "https://example.com/car.jpg",
                }
            },
        },
    }
