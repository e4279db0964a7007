"""Audit log for archived content operations.

This module provides the ArchiveLog class that accumulates the ACTION,
COMMENT, WARN and ERROR lines of a run and writes them to a text file.

File format:
    // <title>
    REMOVED-ARCHIVED-DELIVERY-KEY <id>:<delivery key>
    // <comment>
    // [WARN] <message>
    //   <cause>
    // [ERROR] <message>
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from .errors import LogFileError

if TYPE_CHECKING:
    from src.cli.output import OutputHandler

logger = logging.getLogger(__name__)


class LogLineType(str, Enum):
    """Kinds of line recorded in an audit log."""
    ACTION = "ACTION"
    COMMENT = "COMMENT"
    WARN = "WARN"
    ERROR = "ERROR"


@dataclass
class LogLine:
    """A single audit log entry.

    Attributes:
        kind: Line type
        data: Action data, comment text or warning/error message
        action: Action name (ACTION lines only)
        cause: Text of the associated exception (WARN/ERROR lines only)
    """
    kind: LogLineType
    data: str
    action: Optional[str] = None
    cause: Optional[str] = None

    def render(self) -> List[str]:
        if self.kind == LogLineType.ACTION:
            return [f"{self.action} {self.data}"]
        if self.kind == LogLineType.COMMENT:
            return [f"// {self.data}"]

        lines = [f"// [{self.kind.value}] {self.data}"]
        if self.cause:
            lines.append(f"//   {self.cause}")
        return lines


class ArchiveLog:
    """Ordered record of the actions taken during a run.

    Warnings and errors are also reported through the output handler (when one
    is given) as they are added.

    Example:
        >>> log = ArchiveLog("Content Items Remove Archived Delivery Key Log - 1700000000000")
        >>> log.add_action("REMOVED-ARCHIVED-DELIVERY-KEY", "item-1:home-page")
        >>> log.write_to_file("/tmp/remove.log")
    """

    def __init__(self, title: str, output: Optional["OutputHandler"] = None):
        self.title = title
        self.output = output
        self.lines: List[LogLine] = []

    def add_action(self, action: str, data: str) -> None:
        self.lines.append(LogLine(LogLineType.ACTION, data, action=action))

    def add_comment(self, comment: str) -> None:
        self.lines.append(LogLine(LogLineType.COMMENT, comment))

    def warn(self, message: str, error: Optional[BaseException] = None) -> None:
        self._add_problem(LogLineType.WARN, message, error)
        if self.output is not None:
            self.output.warning(message)

    def error(self, message: str, error: Optional[BaseException] = None) -> None:
        self._add_problem(LogLineType.ERROR, message, error)
        if self.output is not None:
            self.output.error(message)

    def _add_problem(
        self,
        kind: LogLineType,
        message: str,
        error: Optional[BaseException],
    ) -> None:
        cause = str(error) if error is not None else None
        self.lines.append(LogLine(kind, message, cause=cause))
        logger.debug(f"{kind.value}: {message}")

    def get_data(self, action: str) -> List[str]:
        """Return the data of every ACTION line recorded with the given name."""
        return [
            line.data for line in self.lines
            if line.kind == LogLineType.ACTION and line.action == action
        ]

    @property
    def warnings(self) -> List[LogLine]:
        return [line for line in self.lines if line.kind == LogLineType.WARN]

    @property
    def errors(self) -> List[LogLine]:
        return [line for line in self.lines if line.kind == LogLineType.ERROR]

    def render(self) -> str:
        rendered = [f"// {self.title}"]
        for line in self.lines:
            rendered.extend(line.render())
        return "\n".join(rendered) + "\n"

    def write_to_file(self, path: str) -> None:
        """Write the log, creating parent directories as needed.

        Raises:
            LogFileError: If the directory or file cannot be written
        """
        log_dir = os.path.dirname(path)
        try:
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                f.write(self.render())
        except PermissionError:
            raise LogFileError(path, 'Permission denied')
        except OSError as e:
            raise LogFileError(path, str(e))

        logger.info(f"Audit log written to {path}")
