# ABOUTME: Contentful Management client package initialization
# ABOUTME: Exposes create_client, the client class, entities and errors

"""
Contentful Management - async Python client for the Content Management API.

Package layout:

contentful_management/
├── __init__.py          <- Package entry point
├── config.py            <- ClientSettings (environment variables, defaults)
├── client.py            <- ContentfulClient and create_client()
├── organization.py      <- Organization entity and organization API
├── space.py             <- Space / Environment entities (assets, uploads, keys)
├── entities/            <- Entity wrapping protocol and resource entities
└── utils/
    ├── http.py          <- HttpClient (httpx + tenacity)
    ├── errors.py        <- ContentfulError hierarchy
    └── logging.py       <- structlog setup with correlation IDs
"""

__version__ = "0.1.0"

from contentful_management.client import ContentfulClient, create_client  # noqa: E402
from contentful_management.config import ClientSettings, load_settings  # noqa: E402
from contentful_management.entities import (  # noqa: E402
    AppDefinition,
    Asset,
    Collection,
    Entity,
    OrganizationInvitation,
    OrganizationMembership,
    PreviewApiKey,
    SpaceMembership,
    Team,
    TeamMembership,
    TeamSpaceMembership,
    Upload,
    User,
)
from contentful_management.organization import Organization  # noqa: E402
from contentful_management.space import Environment, Space  # noqa: E402
from contentful_management.utils.errors import (  # noqa: E402
    AccessDenied,
    AccessTokenInvalid,
    AssetProcessingTimeout,
    BadRequest,
    ContentfulError,
    NotFound,
    RateLimitExceeded,
    ValidationFailed,
    VersionMismatch,
)

__all__ = [
    "AccessDenied",
    "AccessTokenInvalid",
    "AppDefinition",
    "Asset",
    "AssetProcessingTimeout",
    "BadRequest",
    "ClientSettings",
    "Collection",
    "ContentfulClient",
    "ContentfulError",
    "Entity",
    "Environment",
    "NotFound",
    "Organization",
    "OrganizationInvitation",
    "OrganizationMembership",
    "PreviewApiKey",
    "RateLimitExceeded",
    "Space",
    "SpaceMembership",
    "Team",
    "TeamMembership",
    "TeamSpaceMembership",
    "Upload",
    "User",
    "ValidationFailed",
    "VersionMismatch",
    "__version__",
    "create_client",
    "load_settings",
]
