"""Sequential removal of a field from archived content items.

This module provides the BatchMutator class that drives each selected item
through unarchive, update and the variant's final step, one item at a time,
recording every outcome in the audit log.
"""

import logging
from typing import TYPE_CHECKING, List, Optional

from src.hub_client.models import ContentItem

from .archive_log import ArchiveLog
from .models import MutationResult
from .variants import RemovalVariant

if TYPE_CHECKING:
    from src.hub_client.api_wrapper import HubAPIWrapper
    from .publish_queue import PublishQueue

logger = logging.getLogger(__name__)


class BatchMutator:
    """Applies a removal variant to content items in order.

    Items are processed strictly one after another so the log order matches
    the processing order. A failing item is logged with its status at the
    time of failure; an item that fails after unarchive is left ACTIVE.

    Example:
        >>> mutator = BatchMutator(api, DeliveryKeyRemoval(), log)
        >>> result = mutator.run(items, ignore_error=False)
        >>> print(f"{result.success_count} items updated")
    """

    def __init__(
        self,
        api: "HubAPIWrapper",
        variant: RemovalVariant,
        log: ArchiveLog,
        publish_queue: Optional["PublishQueue"] = None,
    ):
        self.api = api
        self.variant = variant
        self.log = log
        self.publish_queue = publish_queue

    def run(self, items: List[ContentItem], ignore_error: bool = False) -> MutationResult:
        """Process items until done or until a failure aborts the batch.

        Args:
            items: Selected archived content items
            ignore_error: Log failures as warnings and continue instead of
                stopping at the first failure

        Returns:
            MutationResult with success/failure counts
        """
        result = MutationResult()
        action = self.variant.action_name

        for item in items:
            value = self.variant.captured_value(item)
            current = item

            try:
                current = self.api.unarchive_content_item(current)
                self.variant.clear_field(current)
                current = self.api.update_content_item(current)
                current = self.variant.finish(self.api, current, self.log, self.publish_queue)

                self.log.add_action(action, self.variant.action_data(current, value))
                result.success_count += 1
                logger.info(f"{action} {item.id}")

            except Exception as e:
                result.failure_count += 1
                failed = self.variant.action_data(item, value)
                self.log.add_comment(f"{action} FAILED: {failed}")
                self.log.add_comment(str(e))

                if ignore_error:
                    self.log.warn(self.variant.failure_message(current, value, "continuing"), e)
                else:
                    self.log.error(self.variant.failure_message(current, value, "aborting"), e)
                    result.aborted = True
                    break

        return result
