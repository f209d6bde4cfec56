# ABOUTME: Preview API key entity for the Contentful space API
# ABOUTME: Read-only key used against the Content Preview API

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from contentful_management.entities.base import Entity, wrap_collection

if TYPE_CHECKING:
    from collections.abc import Mapping

    from contentful_management.utils.http import HttpClient


class PreviewApiKey(Entity):
    """Preview API key (name, description, accessToken). No mutation methods."""


def wrap_preview_api_key(http: HttpClient, data: Mapping[str, Any]) -> PreviewApiKey:
    """
    Wrap raw preview api key data.

    Args:
        http: HTTP client instance
        data: Raw api key data

    Returns:
        Wrapped preview api key
    """
    return PreviewApiKey(http, data)


wrap_preview_api_key_collection = wrap_collection(wrap_preview_api_key)
