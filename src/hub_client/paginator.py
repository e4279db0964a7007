"""Collect every page of a HAL listing endpoint into a single list."""

import logging
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 100


def paginate(
    fetch_page: Callable[..., Dict[str, Any]],
    embedded_key: str,
    page_size: int = DEFAULT_PAGE_SIZE,
    **params: Any,
) -> List[Dict[str, Any]]:
    """Fetch all pages of a listing and return the embedded resources.

    Args:
        fetch_page: Callable taking ``page``, ``size`` and any extra query
            parameters, returning the decoded HAL response document
        embedded_key: Key of the resource list inside ``_embedded``
            (e.g. "content-items")
        page_size: Number of resources requested per page
        **params: Extra query parameters passed on every call (e.g. status)

    Returns:
        List of raw resource documents in the order the API returned them
    """
    results: List[Dict[str, Any]] = []
    page = 0

    while True:
        response = fetch_page(page=page, size=page_size, **params)
        embedded = response.get('_embedded') or {}
        results.extend(embedded.get(embedded_key, []))

        total_pages = (response.get('page') or {}).get('totalPages', 0)
        page += 1
        if page >= total_pages:
            break

        logger.debug(f"Fetching {embedded_key} page {page + 1}/{total_pages}")

    return results
