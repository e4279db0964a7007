"""Data models for CLI operations.

This module defines all data models used by the CLI module.
All models use dataclasses for clean, type-safe data structures,
following the patterns established in src/hub_client/models.py.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Optional, Tuple


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    Workflow outcomes (nothing found, declined, per-item failures) all exit
    with SUCCESS; only an unreadable configuration file is an error.
    """
    SUCCESS = 0
    GENERAL_ERROR = 1


@dataclass
class HubConfig:
    """Settings read from the YAML configuration file.

    Attributes:
        client_id: OAuth client ID
        client_secret: OAuth client secret
        hub_id: ID of the hub to operate on
        api_url: Base URL of the content API
        auth_url: OAuth token endpoint
        page_size: Page size used when enumerating listings

    Example:
        >>> config = HubConfig(hub_id="5b32377e4cedfd01c45036d8", page_size=50)
    """
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    hub_id: Optional[str] = None
    api_url: Optional[str] = None
    auth_url: Optional[str] = None
    page_size: int = 100

    def credential_values(self) -> Dict[str, Optional[str]]:
        return {
            'client_id': self.client_id,
            'client_secret': self.client_secret,
            'hub_id': self.hub_id,
            'api_url': self.api_url,
            'auth_url': self.auth_url,
        }


@dataclass(frozen=True)
class RemoveOptions:
    """Options of a single removal run, built once from the command line.

    Attributes:
        id: Explicit content item ID
        repo_ids: Content repository IDs to search
        folder_ids: Folder IDs to search
        names: Label patterns (literal or /regex/)
        content_types: Schema ID patterns (literal or /regex/)
        force: Skip the confirmation prompt
        silent: Do not write the audit log
        ignore_error: Continue past failing items
        log_file: Audit log path template (may contain <DATE>)
    """
    id: Optional[str] = None
    repo_ids: Tuple[str, ...] = ()
    folder_ids: Tuple[str, ...] = ()
    names: Tuple[str, ...] = ()
    content_types: Tuple[str, ...] = ()
    force: bool = False
    silent: bool = False
    ignore_error: bool = False
    log_file: Optional[str] = None

    @property
    def all_content(self) -> bool:
        """True when no ID or filter narrows the run."""
        return not (
            self.id or self.names or self.content_types
            or self.folder_ids or self.repo_ids
        )


@dataclass
class RemovalSummary:
    """Outcome of a removal run for display and testing.

    Attributes:
        selected_count: Number of candidate items found
        confirmed: False if the run stopped before mutating
        success_count: Items successfully processed
        failure_count: Items that failed
        aborted: True if a failure stopped the batch
        log_path: Audit log file written (None if not written)
    """
    selected_count: int = 0
    confirmed: bool = False
    success_count: int = 0
    failure_count: int = 0
    aborted: bool = False
    log_path: Optional[str] = None


@dataclass
class GlobalOptions:
    """Options shared by every command, collected by the app callback.

    Attributes:
        hub_id: Hub ID override
        client_id: OAuth client ID override
        client_secret: OAuth client secret override
        config_path: YAML configuration file path
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        no_color: Disable colored output
        logdir: Directory for diagnostic log files
    """
    hub_id: Optional[str] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    config_path: Optional[str] = None
    verbosity: int = 0
    no_color: bool = False
    logdir: Optional[str] = None

    def credential_overrides(self) -> Dict[str, Optional[str]]:
        return {
            'client_id': self.client_id,
            'client_secret': self.client_secret,
            'hub_id': self.hub_id,
        }
