from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object handed from the scaffold engine to the interface
layer, together with the factory functions that build it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class BuildResult:
    """
    Unified result of a complete scaffold run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_kind: Class name of the failure ("" on success).
        source: Where the tree text came from ("file", "clipboard", "text").
        target_dir: Absolute directory the structure was built under.
        dry_run: Whether creation calls were only simulated.
        total_lines: Number of raw input lines.
        structural_lines: Number of lines that parsed into entries.
        created_dirs: Absolute paths of directories created, in order.
        created_files: Absolute paths of files created, in order.
        summary: Extra execution metadata.
    """
    ok: bool
    error: str
    error_kind: str

    source: str
    target_dir: str
    dry_run: bool

    total_lines: int = 0
    structural_lines: int = 0

    created_dirs: List[str] = field(default_factory=list)
    created_files: List[str] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

    @property
    def skipped_lines(self) -> int:
        return self.total_lines - self.structural_lines

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: Exception,
        cfg: Dict[str, Any],
        source: str,
        target_dir: str,
        total_lines: int = 0,
        structural_lines: int = 0,
        created_dirs: Optional[List[str]] = None,
        created_files: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> BuildResult:
    """
    Create a failed scaffold result.

    Paths created before the failure are kept in the result since they are
    left on disk.

    Args:
        error: The exception that aborted the run.
        cfg: The configuration used during the failed run.
        source: Origin of the input text.
        target_dir: Absolute build root.
        total_lines: Raw line count.
        structural_lines: Parsed entry count.
        created_dirs: Directories created before the failure.
        created_files: Files created before the failure.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        BuildResult: An immutable error result object.
    """
    return BuildResult(
        ok=False,
        error=str(error),
        error_kind=type(error).__name__,
        source=source,
        target_dir=target_dir,
        dry_run=bool(cfg.get("dry_run", False)),
        total_lines=total_lines,
        structural_lines=structural_lines,
        created_dirs=created_dirs or [],
        created_files=created_files or [],
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        source: str,
        target_dir: str,
        total_lines: int,
        structural_lines: int,
        created_dirs: List[str],
        created_files: List[str],
        summary_extra: Optional[Dict[str, Any]] = None
) -> BuildResult:
    """
    Create a successful scaffold result.
    """
    return BuildResult(
        ok=True,
        error="",
        error_kind="",
        source=source,
        target_dir=target_dir,
        dry_run=bool(cfg.get("dry_run", False)),
        total_lines=total_lines,
        structural_lines=structural_lines,
        created_dirs=created_dirs,
        created_files=created_files,
        summary=summary_extra or {},
    )
