"""Predicate filtering of located content items.

Items are first narrowed to those carrying the field being removed, then
optionally to those whose label (or, failing that, schema ID) matches one of
the given patterns. A pattern wrapped in slashes (``/^header/``) is a regular
expression searched against the value; anything else must match exactly.
"""

import logging
import re
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence

from src.hub_client.models import ContentItem

if TYPE_CHECKING:
    from src.cli.output import OutputHandler

logger = logging.getLogger(__name__)


def equals_or_regex(value: str, pattern: str) -> bool:
    """Match a value against a literal or ``/regex/`` pattern.

    Raises:
        re.error: If a ``/regex/`` pattern does not compile
    """
    if len(pattern) > 1 and pattern.startswith('/') and pattern.endswith('/'):
        return re.search(pattern[1:-1], value) is not None
    return value == pattern


def matches_any(value: str, patterns: Sequence[str]) -> bool:
    return any(equals_or_regex(value, pattern) for pattern in patterns)


def filter_content_items(
    items: List[ContentItem],
    has_target_field: Callable[[ContentItem], bool],
    names: Optional[Sequence[str]] = None,
    content_types: Optional[Sequence[str]] = None,
    output: Optional["OutputHandler"] = None,
) -> List[ContentItem]:
    """Narrow located items to the removal candidates.

    Name patterns take precedence: content type patterns are only consulted
    when no name pattern was given.

    Args:
        items: Located content items
        has_target_field: Predicate selecting items that carry the field to remove
        names: Label patterns (OR'ed)
        content_types: Schema ID patterns (OR'ed)
        output: Output handler for reporting filter failures

    Returns:
        Matching items in their located order; empty list on any filter error
    """
    try:
        candidates = [item for item in items if has_target_field(item)]

        if names:
            return [item for item in candidates if matches_any(item.label, names)]

        if content_types:
            return [item for item in candidates if matches_any(item.schema, content_types)]

        return candidates
    except Exception as e:
        logger.error(f"Failed to filter content items: {e}")
        if output is not None:
            output.error(f"Failed to filter content items: {e}")
        return []
