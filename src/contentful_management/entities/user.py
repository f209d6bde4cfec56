# ABOUTME: User entity for the Contentful Management API
# ABOUTME: Users are read-only from the management client

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from contentful_management.entities.base import Entity, wrap_collection

if TYPE_CHECKING:
    from collections.abc import Mapping

    from contentful_management.utils.http import HttpClient


class User(Entity):
    """User profile (firstName, lastName, email, avatarUrl, activated, ...)."""


def wrap_user(http: HttpClient, data: Mapping[str, Any]) -> User:
    return User(http, data)


wrap_user_collection = wrap_collection(wrap_user)
