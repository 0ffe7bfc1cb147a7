from __future__ import annotations

"""
Logging Configuration Models.

Defines the immutable record used to initialize the logging subsystem. The
console handler is the tool's stderr channel: failures and warnings reach the
user through it, so its format reads like a command-line diagnostic, while
the optional log file keeps the full timestamped record of a run.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable specification for the logging subsystem initialization.

    Attributes:
        level: Minimum severity captured by the root logger and the log file.
        console: Flag to enable stderr stream output.
        console_level: Minimum severity shown on stderr; None follows ``level``.
        log_file: Optional path for persistent, rotated log storage.
        max_bytes: Maximum size per log segment before rotation.
        backup_count: Number of historical log segments to preserve.
        console_fmt: Format for stderr diagnostics.
        file_fmt: Format for file entries.
        datefmt: Timestamp format.
    """
    level: str = "INFO"
    console: bool = True
    console_level: Optional[str] = None
    log_file: Optional[str] = None

    max_bytes: int = 256 * 1024
    backup_count: int = 1

    console_fmt: str = "treescaffold: %(levelname)s: %(message)s"
    file_fmt: str = "%(asctime)s %(levelname)-7s %(name)s:%(lineno)d %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def for_cli(cls, debug: bool, log_file: Optional[str] = None) -> "LoggingConfig":
        """
        Build the configuration used by the command-line entry point.

        Progress messages (INFO) go to the log file only; stderr shows
        warnings and failures, or everything when ``debug`` is set.
        """
        return cls(
            level="DEBUG" if debug else "INFO",
            console=True,
            console_level="DEBUG" if debug else "WARNING",
            log_file=log_file or None,
        )
