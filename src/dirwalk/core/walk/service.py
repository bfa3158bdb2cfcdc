from __future__ import annotations

"""
Walk Service Orchestrator.

Turns a validated configuration into a single walk: selects the output
strategy, runs the engine and performs the final sort-and-flush.
"""

import dataclasses
import logging
from typing import Any, BinaryIO, Dict, Optional

from dirwalk.core.walk.collation import Collation
from dirwalk.core.walk.engine import walk
from dirwalk.core.walk.sinks import select_sink
from dirwalk.domain.errors import OutputError
from dirwalk.domain.walk_models import FilterConfig, WalkResult

logger = logging.getLogger(__name__)


def build_filter_config(config: Dict[str, Any]) -> FilterConfig:
    """Derive the FilterConfig from the show_* configuration flags."""
    return FilterConfig.from_flags(
        links=config.get("show_links", False),
        dirs=config.get("show_dirs", False),
        files=config.get("show_files", False),
    )


def run_walk(
        config: Dict[str, Any],
        stream: Optional[BinaryIO] = None,
        collation: Optional[Collation] = None,
) -> WalkResult:
    """
    Execute one walk described by a validated configuration.

    Args:
        config: Output of validate_config.
        stream: Binary output stream, stdout by default.
        collation: Ordering for sorted output, resolved once by the caller.

    Returns:
        WalkResult: Engine result, turned into a failure if the final flush
                    could not be written.

    Raises:
        MemoryError: If the collecting sink cannot grow its buffer.
    """
    sort_output = bool(config.get("sort_output", False))
    sink = select_sink(sort_output, stream=stream, collation=collation)

    result = walk(config.get("start_path", "."), build_filter_config(config), sink)
    if not result.ok:
        return result

    try:
        sink.flush()
    except OutputError as e:
        if not e.broken_pipe:
            logger.error(f"write error: {e}")
        return dataclasses.replace(result, ok=False, error=str(e), broken_pipe=e.broken_pipe)

    return result
