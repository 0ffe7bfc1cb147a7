from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the scaffold engine.
"""

import argparse
from typing import Any, Dict

from treescaffold.infra.logging import get_default_log_path

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treescaffold CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="treescaffold",
        description=(
            "Create a directory/file hierarchy from a textual tree description. "
            "Reads the clipboard when no file is given."
        ),
    )

    p.add_argument(
        "tree_file",
        nargs="?",
        default=None,
        help="File containing the tree description (default: clipboard).",
    )

    # --- Target ---
    p.add_argument(
        "-o", "--output-base",
        dest="target_dir",
        default=None,
        help="Directory the structure is created under (default: current directory).",
    )
    p.add_argument(
        "--encoding",
        default=None,
        help="Encoding of the tree file (default: utf-8).",
    )

    # --- Runtime ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Report what would be created without touching the disk.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const="",
        default=None,
        help=(
            "Also write logs to this file (rotated). Without a path, logs go to "
            "treescaffold.log in the per-user data directory."
        ),
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides; None means "not given".
    """
    log_file = args.log_file
    if log_file == "":
        log_file = get_default_log_path()

    overrides: Dict[str, Any] = {
        "target_dir": args.target_dir,
        "encoding": args.encoding,
        "log_file": log_file,
    }
    if args.dry_run:
        overrides["dry_run"] = True
    return overrides
