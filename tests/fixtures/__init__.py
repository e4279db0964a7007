"""Test fixtures for archive tools tests.

This module provides:
- Content item documents and HAL listing pages as returned by the hub API
- ContentItem factories
- An in-memory hub API for workflow tests
"""

from .content_items import (
    DEFAULT_SCHEMA,
    FakeHubAPI,
    item_document,
    listing_page,
    make_item,
)

__all__ = [
    "DEFAULT_SCHEMA",
    "FakeHubAPI",
    "item_document",
    "listing_page",
    "make_item",
]
