"""Default locations for audit log files."""

import os
import sys
from typing import Optional

DATE_TOKEN = '<DATE>'


def default_log_path(resource: str, action: str, platform: Optional[str] = None) -> str:
    """Return the default log path template for a command.

    Logs live under ``~/.amplience/logs``; the home directory is taken from
    USERPROFILE on Windows and HOME elsewhere. The returned path contains the
    ``<DATE>`` token, substituted per run by :func:`resolve_log_path`.

    Example:
        >>> default_log_path('content-item', 'remove-archived-delivery-key', 'linux')
        '/home/me/.amplience/logs/content-item-remove-archived-delivery-key-<DATE>.log'
    """
    platform = platform or sys.platform
    home_var = 'USERPROFILE' if platform == 'win32' else 'HOME'
    home = os.environ.get(home_var) or os.path.expanduser('~')
    return os.path.join(home, '.amplience', 'logs', f"{resource}-{action}-{DATE_TOKEN}.log")


def resolve_log_path(template: str, timestamp: str) -> str:
    """Substitute the run timestamp for the ``<DATE>`` token."""
    return template.replace(DATE_TOKEN, timestamp)
