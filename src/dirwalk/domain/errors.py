from __future__ import annotations

"""
Walk Error Taxonomy.

Fatal failures raised by the traversal subsystem. Non-fatal conditions
(unreadable entries, vanished files) are not exceptions: they are recorded
as WalkIssue entries on the walk result.
"""

import errno
from typing import Optional


class DirwalkError(Exception):
    """Base class for all fatal dirwalk failures."""


class OutputError(DirwalkError):
    """
    Raised when an output sink cannot write a path.

    Attributes:
        cause: The underlying OS-level failure.
    """

    def __init__(self, cause: OSError):
        super().__init__(str(cause))
        self.cause = cause

    @property
    def broken_pipe(self) -> bool:
        """True when the downstream consumer closed the stream."""
        return isinstance(self.cause, BrokenPipeError) or self.cause.errno == errno.EPIPE


class StartPathError(DirwalkError):
    """
    Raised when the metadata of the start path itself cannot be obtained.

    Attributes:
        path: The start path as given by the caller.
        cause: The underlying lstat failure.
    """

    def __init__(self, path: str, cause: Optional[OSError] = None):
        reason = cause.strerror if cause is not None and cause.strerror else str(cause)
        super().__init__(f"'{path}': {reason}")
        self.path = path
        self.cause = cause
