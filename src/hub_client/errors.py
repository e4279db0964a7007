"""Typed exception hierarchy for content hub errors.

This module defines all custom exceptions used by the hub client library.
All exceptions inherit from HubError base class for easy catching and
include descriptive messages with context to help with debugging.
"""


class ArchiveToolsError(Exception):
    """Base exception for all archive-tools errors.

    Use this to catch any application-level error from the tool.
    """
    pass


class HubError(ArchiveToolsError):
    """Base exception for all content hub API errors."""
    pass


class InvalidCredentialsError(HubError):
    """Raised when API credentials are missing or authentication fails."""

    def __init__(self, client_id: str, endpoint: str):
        super().__init__(
            f"Client credentials are invalid (client: {client_id}, endpoint: {endpoint})"
        )
        self.client_id = client_id
        self.endpoint = endpoint


class ResourceNotFoundError(HubError):
    """Raised when a requested hub, repository, folder or content item does not exist."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"{resource} {resource_id} not found")
        self.resource = resource
        self.resource_id = resource_id


class APIUnreachableError(HubError):
    """Raised when the content hub API is not available or unreachable."""

    def __init__(self, endpoint: str):
        super().__init__(f"API is not available at {endpoint}")
        self.endpoint = endpoint


class APIAccessError(HubError):
    """Raised when API access fails after retries or due to access restrictions."""

    def __init__(self, message: str = "Content hub API failure (after 3 retries)"):
        super().__init__(message)
