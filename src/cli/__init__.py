"""Command-line interface for archive tools.

This package provides the `archive-tools` CLI that locates archived content
items in a hub, removes a delivery key or active flag from each after
confirmation, and writes an audit log of the actions taken.
"""

from .remove_command import RemoveArchivedCommand
from .models import ExitCode, GlobalOptions, HubConfig, RemovalSummary, RemoveOptions
from .errors import CLIError, ConfigError

__all__ = [
    'RemoveArchivedCommand',
    'ExitCode',
    'GlobalOptions',
    'HubConfig',
    'RemovalSummary',
    'RemoveOptions',
    'CLIError',
    'ConfigError',
]
