"""API wrapper for the content hub REST API.

This module wraps a requests session authenticated with OAuth2 client
credentials and provides error translation from HTTP exceptions to our typed
exception hierarchy. It integrates with the retry logic for handling rate limits.
"""

import logging
import re
from typing import Any, Dict, List, Optional

import requests
from requests.exceptions import HTTPError, Timeout, ConnectionError

from .auth import Authenticator, Credentials
from .errors import (
    HubError,
    InvalidCredentialsError,
    ResourceNotFoundError,
    APIUnreachableError,
    APIAccessError,
)
from .models import ContentItem, ContentRepository, ContentStatus, Folder
from .paginator import DEFAULT_PAGE_SIZE, paginate
from .retry_logic import retry_on_rate_limit

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30

# Listing sources: resource path segment -> display name
LISTING_SOURCES = {
    'content-repositories': 'Content repository',
    'folders': 'Folder',
}


class HubAPIWrapper:
    """Wrapper around the content hub REST API with error translation.

    This class provides a thin wrapper over the hub API that:
    1. Handles OAuth2 client-credentials authentication using the Authenticator
    2. Translates HTTP errors to typed exceptions
    3. Integrates retry logic for 429 rate limits
    4. Exposes the get/list/unarchive/update/archive/publish operations

    Example:
        >>> auth = Authenticator()
        >>> api = HubAPIWrapper(auth)
        >>> item = api.get_content_item("0b6a3f4e-1d2c-4c5b-9a8f-7e6d5c4b3a21")
    """

    def __init__(self, authenticator: Authenticator, page_size: int = DEFAULT_PAGE_SIZE):
        """Initialize the API wrapper with authentication credentials.

        Args:
            authenticator: Authenticator instance for loading credentials
            page_size: Page size used when enumerating listings
        """
        self._authenticator = authenticator
        self._page_size = page_size
        self._credentials: Optional[Credentials] = None
        self._session: Optional[requests.Session] = None

    def _get_credentials(self) -> Credentials:
        if self._credentials is None:
            self._credentials = self._authenticator.get_credentials()
        return self._credentials

    def _get_session(self) -> requests.Session:
        """Get or create the authenticated session.

        The access token is requested on first use.

        Raises:
            InvalidCredentialsError: If credentials are missing or rejected
            APIUnreachableError: If the auth endpoint cannot be reached
        """
        if self._session is None:
            creds = self._get_credentials()
            try:
                response = requests.post(
                    creds.auth_url,
                    data={
                        'grant_type': 'client_credentials',
                        'client_id': creds.client_id,
                        'client_secret': creds.client_secret,
                    },
                    timeout=REQUEST_TIMEOUT,
                )
            except (Timeout, ConnectionError):
                raise APIUnreachableError(endpoint=creds.auth_url)

            if response.status_code in (400, 401, 403):
                raise InvalidCredentialsError(
                    client_id=creds.client_id,
                    endpoint=creds.auth_url
                )
            try:
                response.raise_for_status()
            except HTTPError as e:
                raise self._translate_error(e, "authenticate") from e

            token = response.json().get('access_token')
            if not token:
                raise InvalidCredentialsError(
                    client_id=creds.client_id,
                    endpoint=creds.auth_url
                )

            session = requests.Session()
            session.headers.update({
                'Authorization': f"Bearer {token}",
                'Accept': 'application/hal+json',
            })
            self._session = session
        return self._session

    @property
    def hub_id(self) -> str:
        return self._get_credentials().hub_id

    def _validate_id(self, resource_id: str) -> None:
        """Validate that a resource ID is safe to put into a URL path.

        Args:
            resource_id: The ID to validate

        Raises:
            ValueError: If resource_id is empty or contains path characters
        """
        if not resource_id or not str(resource_id).strip():
            raise ValueError("resource id cannot be empty")

        if not re.match(r'^[A-Za-z0-9_-]+$', str(resource_id).strip()):
            raise ValueError(
                f"Invalid resource id format: '{resource_id}'. "
                f"IDs may only contain letters, digits, '-' and '_'."
            )

    def _sanitize_credentials(self, text: str) -> str:
        """Mask bearer tokens and client secrets in error text.

        Example:
            >>> api._sanitize_credentials("Authorization: Bearer abc.def")
            "Authorization: ***REDACTED***"
        """
        if not text:
            return text

        sanitized = re.sub(
            r'Authorization:\s*[^\n\r]+',
            'Authorization: ***REDACTED***',
            text,
            flags=re.IGNORECASE
        )
        sanitized = re.sub(
            r'Bearer\s+[^\s\n\r]+',
            'Bearer ***REDACTED***',
            sanitized,
            flags=re.IGNORECASE
        )
        sanitized = re.sub(
            r'(client_secret|access_token)["\']?\s*[:=]\s*["\']?([^"\'\s&]+)',
            r'\1=***REDACTED***',
            sanitized,
            flags=re.IGNORECASE
        )
        return sanitized

    def _translate_error(
        self,
        exception: Exception,
        operation: str,
        resource: str = "Resource",
        resource_id: str = "unknown",
    ) -> Exception:
        """Translate HTTP exceptions to typed hub exceptions.

        Args:
            exception: The original exception from requests
            operation: Description of the operation that failed (for logging)
            resource: Resource kind used in not-found errors
            resource_id: Resource ID used in not-found errors

        Returns:
            Exception: Translated exception (one of our typed exceptions)
        """
        if isinstance(exception, (Timeout, ConnectionError)):
            creds = self._get_credentials()
            return APIUnreachableError(endpoint=creds.api_url)

        status_code = None
        response = getattr(exception, 'response', None)
        if response is not None:
            status_code = getattr(response, 'status_code', None)

        if status_code == 401:
            creds = self._get_credentials()
            return InvalidCredentialsError(
                client_id=creds.client_id,
                endpoint=creds.api_url
            )

        if status_code == 404:
            return ResourceNotFoundError(resource=resource, resource_id=resource_id)

        safe_error_msg = self._sanitize_credentials(str(exception))
        logger.error(f"API operation failed: {operation} - {safe_error_msg}")
        if status_code is not None:
            return APIAccessError(
                f"Content hub API failure during {operation} (HTTP {status_code})"
            )
        return APIAccessError(f"Content hub API failure during {operation}")

    def _request(
        self,
        method: str,
        path: str,
        operation: str,
        resource: str = "Resource",
        resource_id: str = "unknown",
        **kwargs: Any,
    ) -> requests.Response:
        """Perform an API call with error translation and rate limit retries."""
        def _call():
            try:
                session = self._get_session()
                url = f"{self._get_credentials().api_url}/{path}"
                response = session.request(method, url, timeout=REQUEST_TIMEOUT, **kwargs)
                response.raise_for_status()
                return response
            except HubError:
                raise
            except HTTPError as e:
                # Left untranslated so retry_on_rate_limit sees the 429
                if e.response is not None and e.response.status_code == 429:
                    raise
                raise self._translate_error(e, operation, resource, resource_id) from e
            except Exception as e:
                raise self._translate_error(e, operation, resource, resource_id) from e

        return retry_on_rate_limit(_call)

    def _get_json(self, path: str, operation: str, **kwargs: Any) -> Dict[str, Any]:
        return self._request('GET', path, operation, **kwargs).json()

    def get_hub(self) -> Dict[str, Any]:
        """Fetch the configured hub.

        Raises:
            InvalidCredentialsError: If credentials are invalid
            ResourceNotFoundError: If the hub doesn't exist
            APIUnreachableError: If API is unreachable
            APIAccessError: If API access fails after retries
        """
        hub_id = self.hub_id
        self._validate_id(hub_id)
        return self._get_json(
            f"hubs/{hub_id}", f"get_hub({hub_id})",
            resource="Hub", resource_id=hub_id,
        )

    def list_content_repositories(self) -> List[ContentRepository]:
        """List every content repository of the configured hub."""
        hub_id = self.hub_id
        self._validate_id(hub_id)

        def _fetch_page(**params):
            return self._get_json(
                f"hubs/{hub_id}/content-repositories",
                f"list_content_repositories({hub_id})",
                resource="Hub", resource_id=hub_id,
                params=params,
            )

        documents = paginate(_fetch_page, 'content-repositories', self._page_size)
        return [ContentRepository.from_dict(doc) for doc in documents]

    def get_content_repository(self, repository_id: str) -> ContentRepository:
        """Fetch a content repository by ID."""
        self._validate_id(repository_id)
        data = self._get_json(
            f"content-repositories/{repository_id}",
            f"get_content_repository({repository_id})",
            resource="Content repository", resource_id=repository_id,
        )
        return ContentRepository.from_dict(data)

    def get_folder(self, folder_id: str) -> Folder:
        """Fetch a folder by ID."""
        self._validate_id(folder_id)
        data = self._get_json(
            f"folders/{folder_id}",
            f"get_folder({folder_id})",
            resource="Folder", resource_id=folder_id,
        )
        return Folder.from_dict(data)

    def list_archived_content_items(self, source: str, source_id: str) -> List[ContentItem]:
        """List every ARCHIVED content item of a repository or folder.

        Args:
            source: Either "content-repositories" or "folders"
            source_id: ID of the repository or folder

        Returns:
            List of archived ContentItem

        Raises:
            ValueError: If source is not a listing source
            InvalidCredentialsError: If credentials are invalid
            ResourceNotFoundError: If the source doesn't exist
            APIUnreachableError: If API is unreachable
            APIAccessError: If API access fails after retries
        """
        if source not in LISTING_SOURCES:
            raise ValueError(f"Unknown listing source: {source}")
        self._validate_id(source_id)

        def _fetch_page(**params):
            return self._get_json(
                f"{source}/{source_id}/content-items",
                f"list_archived_content_items({source_id})",
                resource=LISTING_SOURCES[source], resource_id=source_id,
                params=params,
            )

        documents = paginate(
            _fetch_page,
            'content-items',
            self._page_size,
            status=ContentStatus.ARCHIVED.value,
        )
        return [ContentItem.from_dict(doc) for doc in documents]

    def get_content_item(self, item_id: str) -> ContentItem:
        """Fetch a content item by ID."""
        self._validate_id(item_id)
        data = self._get_json(
            f"content-items/{item_id}",
            f"get_content_item({item_id})",
            resource="Content item", resource_id=item_id,
        )
        return ContentItem.from_dict(data)

    def _item_action(self, item: ContentItem, action: str) -> ContentItem:
        self._validate_id(item.id)
        response = self._request(
            'POST',
            f"content-items/{item.id}/{action}",
            f"{action}({item.id})",
            resource="Content item", resource_id=item.id,
            json={'version': item.version},
        )
        return ContentItem.from_dict(response.json())

    def unarchive_content_item(self, item: ContentItem) -> ContentItem:
        """Move an archived item back to ACTIVE; returns the updated item."""
        return self._item_action(item, 'unarchive')

    def archive_content_item(self, item: ContentItem) -> ContentItem:
        """Move an item to ARCHIVED; returns the updated item."""
        return self._item_action(item, 'archive')

    def update_content_item(self, item: ContentItem) -> ContentItem:
        """Push the local body and label of an item; returns the updated item."""
        self._validate_id(item.id)
        response = self._request(
            'PATCH',
            f"content-items/{item.id}",
            f"update_content_item({item.id})",
            resource="Content item", resource_id=item.id,
            json=item.to_update_payload(),
        )
        return ContentItem.from_dict(response.json())

    def publish_content_item(self, item: ContentItem) -> Optional[str]:
        """Request publication of an item.

        Returns:
            The publishing job location, if the API returned one
        """
        self._validate_id(item.id)
        response = self._request(
            'POST',
            f"content-items/{item.id}/publish",
            f"publish_content_item({item.id})",
            resource="Content item", resource_id=item.id,
        )
        return response.headers.get('Location')
