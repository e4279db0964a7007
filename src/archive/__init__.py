"""Archived content workflow for archive tools.

This package locates archived content items, narrows them with field-presence
and pattern predicates, applies the per-item removal transition and records
every action in an audit log.
"""

from .archive_log import ArchiveLog, LogLineType
from .batch_mutator import BatchMutator
from .errors import ArchiveError, LogFileError
from .filters import equals_or_regex, filter_content_items
from .item_locator import ItemLocator
from .models import MutationResult
from .publish_queue import PublishQueue
from .variants import ActiveFlagRemoval, DeliveryKeyRemoval, RemovalVariant

__all__ = [
    'ArchiveLog',
    'LogLineType',
    'BatchMutator',
    'ArchiveError',
    'LogFileError',
    'equals_or_regex',
    'filter_content_items',
    'ItemLocator',
    'MutationResult',
    'PublishQueue',
    'ActiveFlagRemoval',
    'DeliveryKeyRemoval',
    'RemovalVariant',
]
