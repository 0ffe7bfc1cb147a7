from __future__ import annotations

"""
Structure Builder.

Replays an ordered sequence of ParsedEntry values as filesystem creation
calls. The builder keeps a path stack holding the chain of directories that
are currently open; an entry at depth d becomes a child of the directory at
index d - 1, and everything deeper is closed.

Policies:
- Indentation deeper than the open chain allows is clamped, so the entry
  becomes a child of the deepest open directory instead of being rejected.
- A file at root level does not open a scope; the stack stays empty and the
  next entry is treated as a root entry again.
- The first failing creation call aborts the build. Entries created before it
  stay on disk.
"""

import logging
import os
from typing import Iterable, List

from treescaffold.domain.errors import StructureBuildError
from treescaffold.domain.tree_models import BuildReport, ParsedEntry
from treescaffold.infra.fs import FileSystemWriter

logger = logging.getLogger(__name__)


class StructureBuilder:
    """
    Builds a directory hierarchy from parsed tree entries.

    Attributes:
        writer: Receives the creation calls (real disk or dry run).
        path_stack: Names of the currently open directories, root first.
            Reset at the start of every build.
        report: Paths created by the current or last build, kept after a
            failed build so callers can report partial progress.
    """

    def __init__(self, writer: FileSystemWriter):
        self.writer = writer
        self.path_stack: List[str] = []
        self.report = BuildReport()

    def build(self, entries: Iterable[ParsedEntry]) -> BuildReport:
        """
        Create every entry in order.

        Args:
            entries: Parsed entries in document order.

        Returns:
            BuildReport: The created paths.

        Raises:
            StructureBuildError: On the first filesystem failure.
        """
        self.path_stack = []
        self.report = report = BuildReport()

        for entry in entries:
            if not self.path_stack:
                self._add_root(entry, report)
            else:
                self._add_nested(entry, report)

        logger.debug(
            f"Build finished: {len(report.created_dirs)} directories, "
            f"{len(report.created_files)} files."
        )
        return report

    def _add_root(self, entry: ParsedEntry, report: BuildReport) -> None:
        if entry.is_directory:
            self._make_dir(entry.name, report)
            self.path_stack = [entry.name]
        else:
            self._make_file(entry.name, report)

    def _add_nested(self, entry: ParsedEntry, report: BuildReport) -> None:
        parent = self._clamp_parent(entry.depth - 1)
        del self.path_stack[parent + 1:]

        relative = os.path.join(*self.path_stack, entry.name)
        if entry.is_directory:
            self._make_dir(relative, report)
            self.path_stack.append(entry.name)
        else:
            self._make_file(relative, report)

    def _clamp_parent(self, index: int) -> int:
        """Clamp a parent index into the open chain [0, len(path_stack) - 1]."""
        deepest = len(self.path_stack) - 1
        if index > deepest:
            logger.debug(f"Parent index {index} exceeds open depth {deepest}; clamped.")
            return deepest
        return max(index, 0)

    def _make_dir(self, relative: str, report: BuildReport) -> None:
        try:
            full = self.writer.make_dir(relative)
        except OSError as e:
            raise StructureBuildError(self.writer.resolve(relative), e) from e
        logger.debug(f"[MKDIR] {full}")
        report.created_dirs.append(full)

    def _make_file(self, relative: str, report: BuildReport) -> None:
        try:
            full = self.writer.make_file(relative)
        except OSError as e:
            raise StructureBuildError(self.writer.resolve(relative), e) from e
        logger.debug(f"[TOUCH] {full}")
        report.created_files.append(full)


def build_structure(entries: Iterable[ParsedEntry], writer: FileSystemWriter) -> BuildReport:
    """Convenience wrapper running a fresh StructureBuilder over ``entries``."""
    return StructureBuilder(writer).build(entries)
