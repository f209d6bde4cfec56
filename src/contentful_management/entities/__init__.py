# ABOUTME: Entity package for the Contentful Management client
# ABOUTME: Re-exports every entity class and its wrap functions

"""
Wrapped Contentful resources.

Each module defines one Entity subclass plus wrap_<name>() and, for
resources that can be listed, wrap_<name>_collection().
"""

from contentful_management.entities.app_definition import (
    AppDefinition,
    wrap_app_definition,
    wrap_app_definition_collection,
)
from contentful_management.entities.asset import Asset, wrap_asset, wrap_asset_collection
from contentful_management.entities.base import Collection, Entity, freeze_sys, wrap_collection
from contentful_management.entities.organization_invitation import (
    OrganizationInvitation,
    wrap_organization_invitation,
)
from contentful_management.entities.organization_membership import (
    OrganizationMembership,
    wrap_organization_membership,
    wrap_organization_membership_collection,
)
from contentful_management.entities.preview_api_key import (
    PreviewApiKey,
    wrap_preview_api_key,
    wrap_preview_api_key_collection,
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
from contentful_management.entities.upload import Upload, wrap_upload
from contentful_management.entities.user import User, wrap_user, wrap_user_collection

__all__ = [
    "AppDefinition",
    "Asset",
    "Collection",
    "Entity",
    "OrganizationInvitation",
    "OrganizationMembership",
    "PreviewApiKey",
    "SpaceMembership",
    "Team",
    "TeamMembership",
    "TeamSpaceMembership",
    "Upload",
    "User",
    "freeze_sys",
    "wrap_app_definition",
    "wrap_app_definition_collection",
    "wrap_asset",
    "wrap_asset_collection",
    "wrap_collection",
    "wrap_organization_invitation",
    "wrap_organization_membership",
    "wrap_organization_membership_collection",
    "wrap_preview_api_key",
    "wrap_preview_api_key_collection",
    "wrap_space_membership",
    "wrap_space_membership_collection",
    "wrap_team",
    "wrap_team_collection",
    "wrap_team_membership",
    "wrap_team_membership_collection",
    "wrap_team_space_membership",
    "wrap_team_space_membership_collection",
    "wrap_upload",
    "wrap_user",
    "wrap_user_collection",
]
