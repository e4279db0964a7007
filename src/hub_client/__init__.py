"""Content hub client library for archive tools.

This package provides Python abstractions over the content hub REST API,
covering the hub, repository, folder and content item endpoints used to
locate and modify archived content.
"""

from .errors import (
    ArchiveToolsError,
    HubError,
    InvalidCredentialsError,
    ResourceNotFoundError,
    APIUnreachableError,
    APIAccessError,
)

__all__ = [
    "ArchiveToolsError",
    "HubError",
    "InvalidCredentialsError",
    "ResourceNotFoundError",
    "APIUnreachableError",
    "APIAccessError",
]
