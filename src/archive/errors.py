"""Typed exception hierarchy for archive workflow errors."""

from typing import Optional

from src.hub_client.errors import ArchiveToolsError


class ArchiveError(ArchiveToolsError):
    """Base exception for all archive workflow errors."""
    pass


class LogFileError(ArchiveError):
    """Raised when the audit log cannot be written."""

    def __init__(self, file_path: str, reason: Optional[str] = None):
        message = f"Failed to write log file {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.reason = reason
