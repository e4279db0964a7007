"""Sample content hub documents and items for testing."""

from typing import Any, Dict, List, Optional

from src.hub_client.models import ContentItem, ContentRepository, ContentStatus, Folder

DEFAULT_SCHEMA = "https://example.com/schemas/banner.json"


def item_document(
    item_id: str,
    label: str = "",
    status: str = "ARCHIVED",
    schema: str = DEFAULT_SCHEMA,
    delivery_key: Optional[str] = None,
    active: Optional[bool] = None,
    last_published_version: Optional[int] = None,
    version: int = 1,
) -> Dict[str, Any]:
    """Build a content item document as returned by the hub API."""
    meta: Dict[str, Any] = {"name": label, "schema": schema}
    if delivery_key is not None:
        meta["deliveryKey"] = delivery_key
    body: Dict[str, Any] = {"_meta": meta}
    if active is not None:
        body["active"] = active

    document: Dict[str, Any] = {
        "id": item_id,
        "label": label or item_id,
        "status": status,
        "version": version,
        "body": body,
        "_links": {"self": {"href": f"https://api.example.com/content-items/{item_id}"}},
    }
    if last_published_version is not None:
        document["lastPublishedVersion"] = last_published_version
    return document


def make_item(item_id: str, **kwargs: Any) -> ContentItem:
    """Build a ContentItem from the same arguments as item_document()."""
    return ContentItem.from_dict(item_document(item_id, **kwargs))


def listing_page(
    embedded_key: str,
    documents: List[Dict[str, Any]],
    number: int = 0,
    total_pages: int = 1,
) -> Dict[str, Any]:
    """Build one page of a HAL listing response."""
    return {
        "_embedded": {embedded_key: documents},
        "page": {
            "size": len(documents),
            "totalElements": len(documents) * total_pages,
            "totalPages": total_pages,
            "number": number,
        },
    }


class FakeHubAPI:
    """In-memory stand-in for HubAPIWrapper.

    Holds items per repository and folder and mimics the status transitions
    of unarchive/update/archive. IDs listed in ``fail_on`` raise on the
    named operation.
    """

    def __init__(
        self,
        repositories: Optional[Dict[str, List[ContentItem]]] = None,
        folders: Optional[Dict[str, List[ContentItem]]] = None,
        fail_on: Optional[Dict[str, str]] = None,
    ):
        self.repositories = repositories or {}
        self.folders = folders or {}
        self.fail_on = fail_on or {}
        self.calls: List[tuple] = []
        self.published: List[str] = []

    def _all_items(self) -> List[ContentItem]:
        items = []
        for group in list(self.repositories.values()) + list(self.folders.values()):
            items.extend(group)
        return items

    def _check(self, operation: str, item_id: str) -> None:
        self.calls.append((operation, item_id))
        if self.fail_on.get(item_id) == operation:
            raise RuntimeError(f"{operation} failed for {item_id}")

    def get_hub(self) -> Dict[str, Any]:
        return {"id": "hub1"}

    def list_content_repositories(self):
        return [ContentRepository(id=repo_id) for repo_id in self.repositories]

    def get_content_repository(self, repository_id):
        if repository_id not in self.repositories:
            raise RuntimeError(f"Content repository {repository_id} not found")
        return ContentRepository(id=repository_id)

    def get_folder(self, folder_id):
        if folder_id not in self.folders:
            raise RuntimeError(f"Folder {folder_id} not found")
        return Folder(id=folder_id)

    def list_archived_content_items(self, source, source_id):
        group = self.folders if source == "folders" else self.repositories
        return [item for item in group[source_id] if item.status == ContentStatus.ARCHIVED]

    def get_content_item(self, item_id):
        for item in self._all_items():
            if item.id == item_id:
                return item
        raise RuntimeError(f"Content item {item_id} not found")

    def unarchive_content_item(self, item):
        self._check("unarchive", item.id)
        item.status = ContentStatus.ACTIVE
        return item

    def update_content_item(self, item):
        self._check("update", item.id)
        item.version += 1
        return item

    def archive_content_item(self, item):
        self._check("archive", item.id)
        item.status = ContentStatus.ARCHIVED
        return item

    def publish_content_item(self, item):
        self._check("publish", item.id)
        self.published.append(item.id)
        return f"https://api.example.com/publishing-jobs/{item.id}"
