from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates a complete scaffold run:
1. Validates configuration and resolves the target directory.
2. Acquires the tree text (file, clipboard or in-memory text).
3. Parses every line, dropping non-structural ones.
4. Builds the structure through a real or dry-run writer.
5. Packs outcome and metrics into a BuildResult.

Expected failures are returned as error results, never raised.
"""

import logging
import os
from typing import Any, Dict, Optional

from treescaffold.core.building.structure_builder import StructureBuilder
from treescaffold.core.parsing.line_parser import parse_lines
from treescaffold.core.pipeline.validator import validate_config
from treescaffold.core.services.input_reader import (
    SOURCE_CLIPBOARD,
    SOURCE_FILE,
    InputPayload,
    from_text,
    read_input,
)
from treescaffold.domain.errors import (
    InputSourceError,
    NoStructuralContentError,
    StructureBuildError,
)
from treescaffold.domain.pipeline_models import (
    BuildResult,
    create_error_result,
    create_success_result,
)
from treescaffold.infra.fs import DryRunWriter, FileSystemWriter, normalize_path

logger = logging.getLogger(__name__)


def run_scaffold(
        config: Optional[Dict[str, Any]] = None,
        *,
        input_path: Optional[str] = None,
        text: Optional[str] = None,
) -> BuildResult:
    """
    Execute a full scaffold run.

    Args:
        config: Raw or partial configuration dictionary.
        input_path: Tree description file. Ignored when ``text`` is given.
        text: In-memory tree text. When neither ``text`` nor ``input_path``
            is given, the clipboard is read.

    Returns:
        BuildResult: Status, created paths and line metrics.
    """
    cfg, warnings = validate_config(config or {}, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    target_dir = normalize_path(cfg["target_dir"], os.getcwd())
    dry_run = cfg["dry_run"]

    # -------------------------------------------------------------------------
    # 1) Input acquisition
    # -------------------------------------------------------------------------
    source = SOURCE_FILE if input_path else SOURCE_CLIPBOARD
    try:
        if text is not None:
            payload: InputPayload = from_text(text)
        else:
            payload = read_input(input_path, encoding=cfg["encoding"])
    except InputSourceError as e:
        logger.error(str(e))
        return create_error_result(e, cfg, source, target_dir)

    source = payload.source
    total_lines = len(payload.lines)
    logger.info(f"Read from {source} ({total_lines} lines)")

    # -------------------------------------------------------------------------
    # 2) Parsing
    # -------------------------------------------------------------------------
    entries = parse_lines(payload.lines)
    if not entries:
        err = NoStructuralContentError(total_lines)
        logger.error(str(err))
        return create_error_result(err, cfg, source, target_dir, total_lines=total_lines)

    logger.debug(f"{len(entries)} structural lines, {total_lines - len(entries)} skipped.")

    # -------------------------------------------------------------------------
    # 3) Structure build
    # -------------------------------------------------------------------------
    writer = DryRunWriter(target_dir) if dry_run else FileSystemWriter(target_dir)
    builder = StructureBuilder(writer)

    logger.info(f"Creating structure under {target_dir}{' (dry run)' if dry_run else ''}")
    try:
        report = builder.build(entries)
    except StructureBuildError as e:
        logger.error(str(e))
        partial = builder.report
        return create_error_result(
            e, cfg, source, target_dir,
            total_lines=total_lines,
            structural_lines=len(entries),
            created_dirs=list(partial.created_dirs),
            created_files=list(partial.created_files),
            summary_extra={"failed_path": e.path},
        )

    return create_success_result(
        cfg, source, target_dir,
        total_lines=total_lines,
        structural_lines=len(entries),
        created_dirs=report.created_dirs,
        created_files=report.created_files,
        summary_extra={"origin": payload.origin},
    )
