"""Publish queue for republishing content items.

Publish requests are submitted and their job locations recorded; completion
of the jobs is not awaited.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from src.hub_client.models import ContentItem

if TYPE_CHECKING:
    from src.hub_client.api_wrapper import HubAPIWrapper

logger = logging.getLogger(__name__)


@dataclass
class PublishJob:
    """A submitted publish request.

    Attributes:
        item_id: ID of the content item being published
        label: Label of the content item
        location: Job URL returned by the API (None if not provided)
    """
    item_id: str
    label: str
    location: Optional[str] = None


class PublishQueue:
    """Submits content items for publishing.

    Example:
        >>> queue = PublishQueue(api)
        >>> job = queue.publish(item)
        >>> print(job.location)
    """

    def __init__(self, api: "HubAPIWrapper"):
        self.api = api
        self.jobs: List[PublishJob] = []

    def publish(self, item: ContentItem) -> PublishJob:
        """Submit a publish request for an item.

        Raises:
            HubError: If the publish request is rejected
        """
        location = self.api.publish_content_item(item)
        job = PublishJob(item_id=item.id, label=item.label, location=location)
        self.jobs.append(job)
        logger.debug(f"Publish requested for {item.id} ({location})")
        return job
