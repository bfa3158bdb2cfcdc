from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

from dirwalk.domain.config import APP_NAME, APP_VERSION
from dirwalk.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirwalk CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=i18n.t("app.description"),
        epilog=i18n.t("app.epilog"),
    )

    p.add_argument(
        "path",
        nargs="?",
        default=None,
        help=i18n.t("cli.args.path"),
    )

    # --- Type filters ---
    p.add_argument("-l", "--links", action="store_true", help=i18n.t("cli.args.links"))
    p.add_argument("-d", "--dirs", action="store_true", help=i18n.t("cli.args.dirs"))
    p.add_argument("-f", "--files", action="store_true", help=i18n.t("cli.args.files"))

    # --- Presentation ---
    p.add_argument("-s", "--sort", action="store_true", help=i18n.t("cli.args.sort"))
    p.add_argument(
        "--locale",
        dest="collation_locale",
        default=None,
        metavar="NAME",
        help=i18n.t("cli.args.locale"),
    )

    # --- Configuration and diagnostics ---
    p.add_argument("--config", dest="config_file", default=None, metavar="FILE",
                   help=i18n.t("cli.args.config"))
    p.add_argument("--dump-config", action="store_true", help=i18n.t("cli.args.dump"))
    p.add_argument("--summary", action="store_true", help=i18n.t("cli.args.summary"))
    p.add_argument("-v", "--verbose", action="store_true", help=i18n.t("cli.args.verbose"))
    p.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))
    p.add_argument("--log-file", dest="log_file", default=None, metavar="FILE",
                   help=i18n.t("cli.args.log_file"))
    p.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Flags that were not given map to None (or are omitted) so they do not
    mask values coming from a configuration file.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "start_path": args.path,
        "collation_locale": args.collation_locale,
    }

    if args.links:
        overrides["show_links"] = True
    if args.dirs:
        overrides["show_dirs"] = True
    if args.files:
        overrides["show_files"] = True
    if args.sort:
        overrides["sort_output"] = True

    return overrides
