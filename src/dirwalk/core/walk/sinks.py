from __future__ import annotations

"""
Output Sink Strategies.

Two interchangeable destinations for matched paths: a streaming sink that
writes each path as soon as it is found, and a collecting sink that buffers
everything and writes it in collated order once the walk is over.
"""

import logging
import os
import sys
from abc import ABC, abstractmethod
from typing import BinaryIO, List, Optional

from dirwalk.core.walk.collation import Collation, bytewise_collation
from dirwalk.domain.errors import OutputError

logger = logging.getLogger(__name__)

_NEWLINE = b"\n"


def _default_stream() -> BinaryIO:
    return sys.stdout.buffer


def _write_line(stream: BinaryIO, path: str) -> None:
    """Write one path as raw filesystem bytes followed by a newline."""
    try:
        stream.write(os.fsencode(path) + _NEWLINE)
    except OSError as e:
        raise OutputError(e) from e


def _flush_stream(stream: BinaryIO) -> None:
    try:
        stream.flush()
    except OSError as e:
        raise OutputError(e) from e

# -----------------------------------------------------------------------------
# SINK INTERFACE
# -----------------------------------------------------------------------------

class OutputSink(ABC):
    """Capability shared by every output strategy."""

    collecting: bool = False

    def __init__(self, stream: Optional[BinaryIO] = None):
        self._stream = stream if stream is not None else _default_stream()

    @abstractmethod
    def emit(self, path: str) -> None:
        """
        Accept a matched path.

        Raises:
            OutputError: If the path could not be written.
        """

    @abstractmethod
    def flush(self) -> None:
        """
        Complete the output once the walk is over.

        Raises:
            OutputError: If writing fails.
        """

# -----------------------------------------------------------------------------
# STRATEGIES
# -----------------------------------------------------------------------------

class StreamingSink(OutputSink):
    """Writes every path immediately, in traversal order."""

    def emit(self, path: str) -> None:
        _write_line(self._stream, path)

    def flush(self) -> None:
        _flush_stream(self._stream)


class CollectingSink(OutputSink):
    """
    Buffers paths and writes them sorted on flush.

    The buffer is owned by this sink and released after flush.
    """

    collecting = True

    def __init__(self, stream: Optional[BinaryIO] = None, collation: Optional[Collation] = None):
        super().__init__(stream)
        self._collation = collation or bytewise_collation()
        self._paths: List[str] = []

    @property
    def paths(self) -> List[str]:
        """The PathRecord in its current order."""
        return self._paths

    def emit(self, path: str) -> None:
        self._paths.append(path)

    def flush(self) -> None:
        """Sort the buffered paths and write them one per line."""
        logger.debug(f"Sorting {len(self._paths)} paths using '{self._collation.name}' collation")
        self._collation.sort(self._paths)
        try:
            for path in self._paths:
                _write_line(self._stream, path)
            _flush_stream(self._stream)
        finally:
            self._paths = []


def select_sink(
        sort_output: bool,
        stream: Optional[BinaryIO] = None,
        collation: Optional[Collation] = None,
) -> OutputSink:
    """
    Choose the output strategy once, before the walk begins.

    Args:
        sort_output: Buffer and sort instead of streaming.
        stream: Binary destination, stdout by default.
        collation: Ordering used by the collecting sink.

    Returns:
        OutputSink: The selected sink.
    """
    if sort_output:
        return CollectingSink(stream, collation)
    return StreamingSink(stream)
