from __future__ import annotations

"""
Unit tests for Filename Legality Validation.
"""

import pytest

from treescaffold.core.parsing.name_validator import is_valid_name


@pytest.mark.parametrize(
    "name",
    ["main.py", "README", "a.CON", "console.log", "COM10", ".gitignore", "my file.txt", "ünïcode"],
)
def test_accepts_legal_names(name: str) -> None:
    assert is_valid_name(name) is True


@pytest.mark.parametrize(
    "name",
    [
        "",
        "   ",
        "CON",
        "con",
        "con.txt",
        "Lpt9.log",
        "AUX",
        "a/b",
        "a\\b",
        "a<b",
        "a>b",
        'a"b',
        "a|b",
        "a?b",
        "a*b",
        "c:",
        "trailing ",
        "trailing.",
        ".",
        "..",
    ],
)
def test_rejects_illegal_names(name: str) -> None:
    assert is_valid_name(name) is False


def test_length_limit() -> None:
    assert is_valid_name("a" * 255) is True
    assert is_valid_name("a" * 256) is False
