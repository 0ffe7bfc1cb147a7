from __future__ import annotations

"""
Filename Legality Validation.

Applies the portable subset of filename rules (the strictest of the common
platforms) so that a tree description produces the same structure on every
OS, regardless of which notation the name was written in.
"""

from treescaffold.domain.constants import (
    ILLEGAL_NAME_CHARS,
    MAX_NAME_LENGTH,
    RESERVED_NAMES,
)


def is_valid_name(name: str) -> bool:
    """
    Check whether a single path segment may be created on disk.

    Rejects empty names, names longer than MAX_NAME_LENGTH, reserved device
    names (compared case-insensitively on the part before the first period,
    so ``con.txt`` is rejected while ``a.CON`` is accepted), names containing
    any of ``< > : " / \\ | ? *`` and names ending in a space or a period.

    Args:
        name: Candidate file or directory name.

    Returns:
        bool: True if the name is legal.
    """
    if not name or len(name) > MAX_NAME_LENGTH:
        return False
    if not name.strip():
        return False

    base = name.strip().upper().split(".", 1)[0]
    if base in RESERVED_NAMES:
        return False

    if any(c in ILLEGAL_NAME_CHARS for c in name):
        return False

    if name.endswith((" ", ".")):
        return False

    return True
