"""Remove command orchestration for CLI.

This module provides the RemoveArchivedCommand class that runs one removal
variant end to end: argument checks, item location and filtering, the
confirmation gate, the batch mutation, and writing the audit log.
"""

import logging
import time
from functools import partial
from typing import Optional

from src.archive.archive_log import ArchiveLog
from src.archive.batch_mutator import BatchMutator
from src.archive.errors import LogFileError
from src.archive.filters import filter_content_items
from src.archive.item_locator import ItemLocator
from src.archive.log_paths import resolve_log_path
from src.archive.publish_queue import PublishQueue
from src.archive.variants import RemovalVariant
from src.cli.models import RemovalSummary, RemoveOptions
from src.cli.output import OutputHandler
from src.hub_client.api_wrapper import HubAPIWrapper

logger = logging.getLogger(__name__)


def _timestamp() -> str:
    """Run timestamp in epoch milliseconds."""
    return str(int(time.time() * 1000))


class RemoveArchivedCommand:
    """Removes a field from archived content items.

    The workflow:
        1. Report conflicting or ignored location options
        2. Locate archived items and filter them to candidates
        3. List the candidates and ask for confirmation (unless forced)
        4. Apply the variant to each candidate in order
        5. Write the audit log (unless silent) and print a summary

    No error escapes run(): location failures yield no candidates, item
    failures are logged, and log write failures are reported.

    Example:
        >>> command = RemoveArchivedCommand(DeliveryKeyRemoval(), api, output)
        >>> summary = command.run(RemoveOptions(repo_ids=("repo1",), names=("/^header/",)))
    """

    def __init__(
        self,
        variant: RemovalVariant,
        api: HubAPIWrapper,
        output_handler: Optional[OutputHandler] = None,
        locator: Optional[ItemLocator] = None,
    ):
        """Initialize the command with its dependencies.

        Args:
            variant: Removal variant to apply
            api: Hub API wrapper
            output_handler: OutputHandler for terminal output (optional)
            locator: ItemLocator for finding items (optional)
        """
        self.variant = variant
        self.api = api
        self.output_handler = output_handler or OutputHandler()
        self.locator = locator or ItemLocator(api, self.output_handler)

    def run(self, options: RemoveOptions) -> RemovalSummary:
        """Run the removal.

        Args:
            options: Parsed command options

        Returns:
            RemovalSummary describing what happened
        """
        output = self.output_handler
        summary = RemovalSummary()
        plural = self.variant.field_name_plural

        if options.id and options.names:
            output.print("Please specify either a item name or an ID - not both.")
            return summary

        if options.id and options.repo_ids:
            output.warning("ID of content item is specified, ignoring repository ID")

        if options.folder_ids and options.repo_ids:
            output.warning("Folder is specified, ignoring repository ID")

        if options.all_content:
            output.warning(f"No filter was given, removing {plural} on all archived content")

        item_filter = partial(
            filter_content_items,
            has_target_field=self.variant.has_target_field,
            names=options.names,
            content_types=options.content_types,
            output=output,
        )

        with output.spinner("Locating archived content items..."):
            items = self.locator.locate(
                item_id=options.id,
                repo_ids=options.repo_ids,
                folder_ids=options.folder_ids,
                item_filter=item_filter,
            )

        summary.selected_count = len(items)
        if not items:
            output.print(f"No {plural} found in archived items.")
            return summary

        output.print_candidates(
            items,
            f"The following content items in the archive will have the {plural} removed:",
        )

        if not options.force:
            if options.all_content:
                question = (
                    f"Providing no ID or filter will remove {plural} from all archived "
                    f"content-items! Are you sure you want to do this? (y/n)"
                )
            else:
                question = (
                    f"Are you sure you want to remove {plural} from these archived "
                    f"content-items? (y/n)"
                )
            if not output.confirm(question):
                logger.info("Removal declined by user")
                return summary

        summary.confirmed = True
        timestamp = _timestamp()
        log = ArchiveLog(f"{self.variant.log_title} - {timestamp}", output)

        publish_queue = PublishQueue(self.api) if self.variant.uses_publish_queue else None
        mutator = BatchMutator(self.api, self.variant, log, publish_queue)
        result = mutator.run(items, ignore_error=options.ignore_error)

        summary.success_count = result.success_count
        summary.failure_count = result.failure_count
        summary.aborted = result.aborted

        if not options.silent and options.log_file:
            log_path = resolve_log_path(options.log_file, timestamp)
            try:
                log.write_to_file(log_path)
                summary.log_path = log_path
                output.info(f"Log written to {log_path}")
            except LogFileError as e:
                logger.error(str(e))
                output.error(str(e))

        output.print_removal_summary(
            self.variant.field_name,
            result.success_count,
            result.failure_count,
            result.aborted,
        )
        return summary
