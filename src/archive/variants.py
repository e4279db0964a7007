"""Removal variants.

Each variant names the field it strips from archived items and how an item is
left once the field is cleared:

- DeliveryKeyRemoval: clears ``_meta.deliveryKey`` and archives the item again
- ActiveFlagRemoval: clears ``active`` on previously published items and hands
  the item to the publish queue; the item is not archived again
"""

from typing import TYPE_CHECKING, Optional

from src.hub_client.models import ContentItem

if TYPE_CHECKING:
    from src.hub_client.api_wrapper import HubAPIWrapper
    from .archive_log import ArchiveLog
    from .publish_queue import PublishQueue


class RemovalVariant:
    """Base class for a field removal applied to archived content items."""

    #: Command slug, also used for the default log file name
    slug = ""
    #: Action name written to ACTION log lines
    action_name = ""
    #: Human name of the removed field, singular
    field_name = ""
    #: Title of the audit log
    log_title = ""
    #: Whether cleared items are handed to a publish queue
    uses_publish_queue = False

    @property
    def field_name_plural(self) -> str:
        return f"{self.field_name}s"

    def has_target_field(self, item: ContentItem) -> bool:
        raise NotImplementedError

    def captured_value(self, item: ContentItem) -> Optional[str]:
        """Value recorded in the log for the field being removed."""
        return None

    def clear_field(self, item: ContentItem) -> None:
        raise NotImplementedError

    def finish(
        self,
        api: "HubAPIWrapper",
        item: ContentItem,
        log: "ArchiveLog",
        publish_queue: Optional["PublishQueue"] = None,
    ) -> ContentItem:
        """Final step after the cleared item was updated."""
        raise NotImplementedError

    def action_data(self, item: ContentItem, value: Optional[str]) -> str:
        return item.id

    def failure_message(self, item: ContentItem, value: Optional[str], outcome: str) -> str:
        return (
            f"Failed to remove {self.field_name} and re-archive {item.label} ({item.id}), "
            f"current status is {item.status.value}, {outcome}."
        )


class DeliveryKeyRemoval(RemovalVariant):
    slug = "remove-archived-delivery-key"
    action_name = "REMOVED-ARCHIVED-DELIVERY-KEY"
    field_name = "delivery key"
    log_title = "Content Items Remove Archived Delivery Key Log"

    def has_target_field(self, item: ContentItem) -> bool:
        return bool(item.delivery_key)

    def captured_value(self, item: ContentItem) -> Optional[str]:
        return item.delivery_key

    def clear_field(self, item: ContentItem) -> None:
        item.delivery_key = None

    def finish(self, api, item, log, publish_queue=None):
        return api.archive_content_item(item)

    def action_data(self, item: ContentItem, value: Optional[str]) -> str:
        return f"{item.id}:{value}"

    def failure_message(self, item: ContentItem, value: Optional[str], outcome: str) -> str:
        return (
            f"Failed to remove delivery key {value} and re-archive {item.label} ({item.id}), "
            f"current status is {item.status.value}, {outcome}."
        )


class ActiveFlagRemoval(RemovalVariant):
    slug = "remove-archived-active-flag"
    action_name = "REMOVED-ARCHIVED-ACTIVE-FLAG"
    field_name = "active flag"
    log_title = "Content Items Remove Archived Active Flag Log"
    uses_publish_queue = True

    def has_target_field(self, item: ContentItem) -> bool:
        return item.active and bool(item.last_published_version)

    def clear_field(self, item: ContentItem) -> None:
        item.active = False

    def finish(self, api, item, log, publish_queue=None):
        # Publish failures are recorded but do not fail the item
        if publish_queue is not None:
            try:
                publish_queue.publish(item)
                log.add_comment(f"Started publish for {item.label}.")
            except Exception as e:
                log.add_comment(f"Failed to initiate publish for {item.label}: {e}")
        return item
