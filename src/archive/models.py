"""Data models for the archive workflow."""

from dataclasses import dataclass


@dataclass
class MutationResult:
    """Outcome of a batch mutation run.

    Attributes:
        success_count: Items whose transition completed
        failure_count: Items whose transition raised
        aborted: True if a failure stopped the remaining items from being processed
    """
    success_count: int = 0
    failure_count: int = 0
    aborted: bool = False
