"""Pytest configuration and fixtures for integration tests.

Provides an in-memory content hub reachable through the requests session
used by HubAPIWrapper, plus helpers to run the CLI against it.
"""

import copy
import logging
from typing import Any, Dict, List, Optional, Tuple
from unittest.mock import Mock, patch

import pytest
from requests.exceptions import HTTPError

from tests.fixtures.content_items import item_document, listing_page

API_PREFIX = "/v2/content/"


def make_response(status_code=200, json_data=None, headers=None):
    """Create a mock requests response."""
    response = Mock()
    response.status_code = status_code
    response.json.return_value = json_data if json_data is not None else {}
    response.headers = headers or {}
    if status_code >= 400:
        response.raise_for_status.side_effect = HTTPError(
            f"{status_code} Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


class HubSession:
    """Fake requests session routing hub API paths to in-memory documents.

    Attributes:
        items: Content item documents by ID
        repositories: Repository ID -> content item IDs
        folders: Folder ID -> content item IDs
        failures: (method, path) -> HTTP status returned instead of the route
        requests: Every (method, path) requested, in order
    """

    def __init__(self, hub_id: str = "hub1"):
        self.hub_id = hub_id
        self.headers: Dict[str, str] = {}
        self.items: Dict[str, Dict[str, Any]] = {}
        self.repositories: Dict[str, List[str]] = {}
        self.folders: Dict[str, List[str]] = {}
        self.failures: Dict[Tuple[str, str], int] = {}
        self.requests: List[Tuple[str, str]] = []

    def add_item(self, repository_id: str, folder_id: Optional[str] = None, **kwargs: Any) -> None:
        document = item_document(**kwargs)
        self.items[document["id"]] = document
        self.repositories.setdefault(repository_id, []).append(document["id"])
        if folder_id:
            self.folders.setdefault(folder_id, []).append(document["id"])

    def request(self, method, url, timeout=None, params=None, json=None):
        path = url.split(API_PREFIX, 1)[1]
        self.requests.append((method, path))

        if (method, path) in self.failures:
            return make_response(self.failures[(method, path)])

        parts = path.split("/")
        if method == "GET":
            return self._get(parts, params or {})
        if parts[0] == "content-items" and parts[1] in self.items:
            return self._change_item(method, parts, json or {})
        return make_response(404)

    def _get(self, parts: List[str], params: Dict[str, Any]):
        if parts == ["hubs", self.hub_id]:
            return make_response(200, {"id": self.hub_id})
        if parts == ["hubs", self.hub_id, "content-repositories"]:
            documents = [{"id": repo_id, "name": repo_id} for repo_id in self.repositories]
            return make_response(200, listing_page("content-repositories", documents))

        groups = {"content-repositories": self.repositories, "folders": self.folders}
        if parts[0] in groups and parts[1] in groups[parts[0]]:
            if len(parts) == 2:
                return make_response(200, {"id": parts[1], "name": parts[1]})
            return self._listing(groups[parts[0]][parts[1]], params)

        if parts[0] == "content-items" and len(parts) == 2 and parts[1] in self.items:
            return make_response(200, copy.deepcopy(self.items[parts[1]]))
        return make_response(404)

    def _listing(self, item_ids: List[str], params: Dict[str, Any]):
        documents = [
            self.items[item_id] for item_id in item_ids
            if self.items[item_id]["status"] == params.get("status", "ARCHIVED")
        ]
        size = params["size"]
        number = params["page"]
        total_pages = max(1, -(-len(documents) // size))
        page = documents[number * size:(number + 1) * size]
        return make_response(
            200, listing_page("content-items", copy.deepcopy(page), number, total_pages)
        )

    def _change_item(self, method: str, parts: List[str], payload: Dict[str, Any]):
        document = self.items[parts[1]]
        action = parts[2] if len(parts) > 2 else None

        if method == "POST" and action == "publish":
            return make_response(
                204, headers={"Location": f"https://api.example.com/publishing-jobs/{parts[1]}"}
            )
        if method == "POST" and action in ("archive", "unarchive"):
            document["status"] = "ARCHIVED" if action == "archive" else "ACTIVE"
        elif method == "PATCH" and action is None:
            document["body"] = copy.deepcopy(payload["body"])
            document["label"] = payload["label"]
        else:
            return make_response(404)

        document["version"] += 1
        return make_response(200, copy.deepcopy(document))


@pytest.fixture
def hub_session():
    """Serve an in-memory hub through HubAPIWrapper's requests calls."""
    session = HubSession()
    with patch('src.hub_client.api_wrapper.requests.post') as mock_post, \
            patch('src.hub_client.api_wrapper.requests.Session', return_value=session):
        mock_post.return_value = make_response(200, {"access_token": "token-abc"})
        yield session


@pytest.fixture
def hub_env(monkeypatch):
    """Hub credentials supplied through the environment."""
    monkeypatch.setenv("DC_CLIENT_ID", "client123")
    monkeypatch.setenv("DC_CLIENT_SECRET", "secret123")
    monkeypatch.setenv("DC_HUB_ID", "hub1")


@pytest.fixture(autouse=True)
def reset_app_logging():
    """Drop handlers the CLI attaches to the application logger."""
    yield
    app_logger = logging.getLogger("src")
    for handler in list(app_logger.handlers):
        handler.close()
    app_logger.handlers.clear()
