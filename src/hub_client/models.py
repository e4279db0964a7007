"""Data models for content hub resources.

This module defines the resources returned by the hub API. All models use
dataclasses; each keeps enough of the raw HAL document to be pushed back
through an update call.
"""

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class ContentStatus(str, Enum):
    """Lifecycle status of a content item."""
    ACTIVE = "ACTIVE"
    ARCHIVED = "ARCHIVED"
    DELETED = "DELETED"


@dataclass
class ContentItem:
    """A content item as returned by the hub API.

    Attributes:
        id: Content item ID
        label: Human readable label
        status: Current lifecycle status
        body: Content document; ``body['_meta']`` holds ``schema`` and the
            optional ``deliveryKey``, ``body['active']`` the active flag
        version: Item version used for optimistic locking on updates
        last_published_version: Version last published (None if never published)
        links: Raw HAL ``_links`` block
    """
    id: str
    label: str
    status: ContentStatus
    body: Dict[str, Any] = field(default_factory=dict)
    version: int = 1
    last_published_version: Optional[int] = None
    links: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ContentItem':
        """Build a ContentItem from an API response document."""
        body = copy.deepcopy(data.get('body') or {})
        body.setdefault('_meta', {})
        return cls(
            id=data['id'],
            label=data.get('label') or '',
            status=ContentStatus(data.get('status', ContentStatus.ACTIVE.value)),
            body=body,
            version=data.get('version', 1),
            last_published_version=data.get('lastPublishedVersion'),
            links=data.get('_links') or {},
        )

    @property
    def meta(self) -> Dict[str, Any]:
        return self.body.setdefault('_meta', {})

    @property
    def schema(self) -> str:
        return self.meta.get('schema') or ''

    @property
    def delivery_key(self) -> Optional[str]:
        return self.meta.get('deliveryKey')

    @delivery_key.setter
    def delivery_key(self, value: Optional[str]) -> None:
        self.meta['deliveryKey'] = value

    @property
    def active(self) -> bool:
        return bool(self.body.get('active'))

    @active.setter
    def active(self, value: bool) -> None:
        self.body['active'] = value

    def to_update_payload(self) -> Dict[str, Any]:
        """Return the PATCH document for pushing local changes back."""
        return {
            'body': self.body,
            'label': self.label,
            'version': self.version,
        }


@dataclass
class ContentRepository:
    """A content repository belonging to a hub."""
    id: str
    name: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ContentRepository':
        return cls(id=data['id'], name=data.get('name') or data.get('label') or '')


@dataclass
class Folder:
    """A folder inside a content repository."""
    id: str
    name: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Folder':
        return cls(id=data['id'], name=data.get('name') or '')
