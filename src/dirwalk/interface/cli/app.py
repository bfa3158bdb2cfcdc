from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration
resolution (defaults, optional JSON file, command-line overrides),
collation setup, walk execution and exit status mapping.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from dirwalk.core.walk.collation import Collation, resolve_collation
from dirwalk.core.walk.service import run_walk
from dirwalk.core.walk.validator import validate_config
from dirwalk.domain.config import CONFIG_KEYS, get_default_config, load_config_file
from dirwalk.domain.walk_models import WalkResult
from dirwalk.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_logger,
    level_for_verbosity,
    shutdown_logging,
)
from dirwalk.interface.cli import args as cli_args
from dirwalk.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success (including walks that skipped unreadable
             entries), 1 on fatal walk errors, 2 on usage errors.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        LoggingConfig(
            level=level_for_verbosity(args.verbose, args.debug),
            console=True,
            log_file=args.log_file,
        ),
        force=True,
    )
    try:
        return _run(args)
    finally:
        shutdown_logging()


def _run(args: Any) -> int:
    # 1. Resolve base configuration (defaults vs. file)
    base_conf = get_default_config()
    if args.config_file:
        try:
            base_conf.update(load_config_file(args.config_file))
        except (OSError, ValueError) as e:
            logger.error(i18n.t("cli.errors.config_unreadable", path=args.config_file, error=e))
            return EXIT_USAGE

    # 2. Merge command-line overrides and validate
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 3. Collation is resolved once, before the walk
    collation: Optional[Collation] = None
    if clean_conf["sort_output"]:
        collation = resolve_collation(clean_conf["collation_locale"])

    # 4. Walk
    try:
        result = run_walk(clean_conf, stream=sys.stdout.buffer, collation=collation)
    except KeyboardInterrupt:
        logger.warning(i18n.t("cli.errors.interrupted"))
        return EXIT_INTERRUPTED
    except MemoryError:
        logger.critical(i18n.t("cli.errors.out_of_memory"))
        return EXIT_FAILURE

    if result.broken_pipe:
        _silence_stdout()

    if args.summary:
        _print_summary(result)

    return EXIT_OK if result.ok else EXIT_FAILURE

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge known, non-None override values into the base."""
    out = dict(base)
    for k in CONFIG_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# OUTPUT HELPERS
# -----------------------------------------------------------------------------

def _silence_stdout() -> None:
    """
    Point stdout at devnull after the reader went away.

    Without this the interpreter raises BrokenPipeError again while
    flushing stdout at shutdown.
    """
    try:
        fd = sys.stdout.fileno()
    except (OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def _print_summary(result: WalkResult) -> None:
    print(
        i18n.t(
            "cli.status.summary",
            visited=result.visited,
            emitted=result.emitted,
            skipped=len(result.issues),
        ),
        file=sys.stderr,
    )
