"""Status codes with optional location, errno and description."""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass

SUCCESS = 0
VA_END = 1
ERRNO = 2
OOM = 3
NOT_IMPLEMENTED = 4
INCOMPATIBLE_TYPE = 5
EOF = 6
DATA_SIZE_TOO_BIG = 7
INDEX_OUT_OF_RANGE = 8
ITERATION_IN_PROGRESS = 9
EXTRACT_FROM_EMPTY_ARRAY = 10
KEY_NOT_FOUND = 11
FILE_ALREADY_OPENED = 12
NOT_REGULAR_FILE = 13
UNREAD_FAILED = 14

_MAX_STATUSES = 65535

_statuses: list[str] = [
    "SUCCESS",
    "VA_END",
    "ERRNO",
    "OOM",
    "NOT IMPLEMENTED",
    "INCOMPATIBLE_TYPE",
    "EOF",
    "DATA_SIZE_TOO_BIG",
    "INDEX_OUT_OF_RANGE",
    "ITERATION_IN_PROGRESS",
    "EXTRACT_FROM_EMPTY_ARRAY",
    "KEY_NOT_FOUND",
    "FILE_ALREADY_OPENED",
    "NOT_REGULAR_FILE",
    "UNREAD_FAILED",
]
_lock = threading.Lock()


def define_status(name: str) -> int:
    """Register a new status name and return its code."""
    with _lock:
        if len(_statuses) >= _MAX_STATUSES:
            raise OverflowError(f"cannot define more statuses than {len(_statuses)}")
        _statuses.append(name)
        return len(_statuses) - 1


def status_str(code: int) -> str:
    """Return the name of a status code, or "(unknown)"."""
    if 0 <= code < len(_statuses):
        return _statuses[code]
    return "(unknown)"


@dataclass(eq=False)
class Status:
    """A status value; any code other than SUCCESS is an error."""

    code: int = SUCCESS
    errno: int = 0
    file_name: str = ""
    line_number: int = 0
    description: str | None = None

    @property
    def is_error(self) -> bool:
        return self.code != SUCCESS

    @property
    def ok(self) -> bool:
        return not self.is_error

    def describe(self, description: str) -> Status:
        """Set the description and return this status."""
        self.description = description
        return self

    def __str__(self) -> str:
        if not self.is_error:
            return "OK"
        errno_desc = ""
        if self.code == ERRNO:
            errno_desc = f"; errno {self.errno}: {os.strerror(self.errno)}"
        text = f"{status_str(self.code)}; {self.file_name}:{self.line_number}{errno_desc}"
        if self.description:
            text += f"; {self.description}"
        return text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Status):
            return NotImplemented
        if self.code == ERRNO:
            return other.code == ERRNO and self.errno == other.errno
        return self.code == other.code

    def __hash__(self) -> int:
        if self.code == ERRNO:
            return hash((Status, self.code, self.errno))
        return hash((Status, self.code))

    def __bool__(self) -> bool:
        """Statuses are never truthy; use `ok` or `is_error`."""
        return False


class StatusError(Exception):
    """Exception carrying a Status."""

    def __init__(self, status: Status):
        super().__init__(str(status))
        self.status = status