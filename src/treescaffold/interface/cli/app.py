from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: configuration merge (defaults plus the flags
given on this command line, nothing else), logging bootstrap, scaffold
execution and result rendering. Maps each failure class to its own exit code.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from treescaffold.core.pipeline.engine import run_scaffold
from treescaffold.core.pipeline.validator import validate_config
from treescaffold.domain.config import get_default_config
from treescaffold.domain.pipeline_models import BuildResult
from treescaffold.infra.logging import LoggingConfig, configure_logging, get_logger
from treescaffold.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_BUILD_FAILED = 1
EXIT_INPUT_ERROR = 2
EXIT_NO_CONTENT = 3
EXIT_INTERRUPTED = 130

_EXIT_CODES: Dict[str, int] = {
    "InputSourceError": EXIT_INPUT_ERROR,
    "NoStructuralContentError": EXIT_NO_CONTENT,
    "StructureBuildError": EXIT_BUILD_FAILED,
}

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Configuration: defaults overridden by explicit flags only
    raw_conf = _merge_config(get_default_config(), cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (diagnostics on stderr, optional rotating file)
    configure_logging(LoggingConfig.for_cli(args.debug, clean_conf["log_file"]))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # 4. Scaffold execution phase
    try:
        result = run_scaffold(clean_conf, input_path=args.tree_file)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED

    # 5. Output rendering phase
    if args.json_output:
        payload = asdict(result)
        payload["skipped_lines"] = result.skipped_lines
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return exit_code_for(result)


def exit_code_for(result: BuildResult) -> int:
    """Map a result to the process exit code."""
    if result.ok:
        return EXIT_OK
    return _EXIT_CODES.get(result.error_kind, EXIT_BUILD_FAILED)

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-None override values into the base configuration.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: BuildResult) -> None:
    """
    Print the scaffold result for a human reader.

    Args:
        result: The result to render.
    """
    if not result.ok:
        # The failure itself was already reported on stderr by the engine log
        if result.created_dirs or result.created_files:
            print(
                f"Partial structure left on disk: {len(result.created_dirs)} directories, "
                f"{len(result.created_files)} files.",
                file=sys.stderr,
            )
        return

    prefix = "[DRY RUN] " if result.dry_run else ""
    for path in result.created_dirs:
        print(f"{prefix}dir   {path}")
    for path in result.created_files:
        print(f"{prefix}file  {path}")

    print(
        f"Done: {len(result.created_dirs)} directories, {len(result.created_files)} files "
        f"under {result.target_dir} ({result.skipped_lines} lines skipped)."
    )

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
