"""Location of archived content items.

This module provides the ItemLocator class, which resolves the candidate set
of archived content items from an explicit ID, a set of folders, a set of
repositories, or every repository of the hub.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence

from src.hub_client.models import ContentItem, ContentStatus

if TYPE_CHECKING:
    from src.cli.output import OutputHandler
    from src.hub_client.api_wrapper import HubAPIWrapper

logger = logging.getLogger(__name__)

# Maximum parallel threads for repository/folder listing
MAX_WORKERS = 10

ItemFilter = Callable[[List[ContentItem]], List[ContentItem]]


class ItemLocator:
    """Resolves archived content items for a removal run.

    Location precedence:
        1. An explicit item ID: that item only if archived, other location
           filters ignored
        2. Folder IDs: archived items of each folder, repositories ignored
        3. Repository IDs: archived items of each repository
        4. Nothing: archived items of every repository in the hub

    Listings only request ARCHIVED items. Per-source fetches run in parallel
    and are merged in completion order, so the order across sources is not
    stable. Any remote failure is reported and yields an empty result.

    Example:
        >>> locator = ItemLocator(api, output)
        >>> items = locator.locate(repo_ids=["repo1"], item_filter=my_filter)
    """

    def __init__(self, api: "HubAPIWrapper", output: Optional["OutputHandler"] = None):
        self.api = api
        self.output = output

    def locate(
        self,
        item_id: Optional[str] = None,
        repo_ids: Optional[Sequence[str]] = None,
        folder_ids: Optional[Sequence[str]] = None,
        item_filter: Optional[ItemFilter] = None,
    ) -> List[ContentItem]:
        """Locate archived content items.

        Args:
            item_id: Explicit content item ID
            repo_ids: Content repository IDs to enumerate
            folder_ids: Folder IDs to enumerate (takes precedence over repo_ids)
            item_filter: Applied to every located item, including one fetched by ID

        Returns:
            Located items, or an empty list if any remote call failed
        """
        try:
            if item_id:
                logger.info(f"Fetching content item {item_id}")
                item = self.api.get_content_item(item_id)
                if item.status == ContentStatus.ARCHIVED:
                    items = [item]
                else:
                    logger.info(f"Content item {item_id} is {item.status.value}, not archived")
                    items = []
            elif folder_ids:
                items = self._collect('folders', folder_ids)
            elif repo_ids:
                items = self._collect('content-repositories', repo_ids)
            else:
                self.api.get_hub()
                repositories = self.api.list_content_repositories()
                logger.info(f"Enumerating {len(repositories)} content repositories")
                items = self._collect(
                    'content-repositories',
                    [repository.id for repository in repositories],
                    fetch_source=False,
                )

            logger.info(f"Located {len(items)} archived content items")
            return item_filter(items) if item_filter is not None else items

        except Exception as e:
            logger.error(f"Failed to locate archived content items: {e}")
            if self.output is not None:
                self.output.error(f"Failed to locate archived content items: {e}")
            return []

    def _collect(
        self,
        source: str,
        source_ids: Sequence[str],
        fetch_source: bool = True,
    ) -> List[ContentItem]:
        items: List[ContentItem] = []

        with ThreadPoolExecutor(max_workers=MAX_WORKERS) as executor:
            futures = {
                executor.submit(self._list_source, source, source_id, fetch_source): source_id
                for source_id in source_ids
            }

            # First failure propagates; the executor still drains the rest
            for future in as_completed(futures):
                found = future.result()
                logger.debug(f"  {futures[future]}: {len(found)} archived items")
                items.extend(found)

        return items

    def _list_source(self, source: str, source_id: str, fetch_source: bool) -> List[ContentItem]:
        if fetch_source:
            if source == 'folders':
                self.api.get_folder(source_id)
            else:
                self.api.get_content_repository(source_id)
        return self.api.list_archived_content_items(source, source_id)
