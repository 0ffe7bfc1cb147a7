from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Positional tree file and flag mapping to configuration keys.
2. Defaults are explicit (None) so the merge keeps the built-in defaults.
3. "--log-file" without a path and the absence of hidden-state flags.
4. Result-to-exit-code mapping.
"""

from unittest.mock import patch

import pytest

from treescaffold.domain.errors import (
    InputSourceError,
    NoStructuralContentError,
    StructureBuildError,
)
from treescaffold.domain.pipeline_models import create_error_result, create_success_result
from treescaffold.interface.cli.app import (
    EXIT_BUILD_FAILED,
    EXIT_INPUT_ERROR,
    EXIT_NO_CONTENT,
    EXIT_OK,
    _merge_config,
    exit_code_for,
)
from treescaffold.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_positional_and_flags():
    args = parse_args(["tree.txt", "-o", "/out", "--dry-run", "--debug", "--json"])

    assert args.tree_file == "tree.txt"
    assert args.debug is True
    assert args.json_output is True

    overrides = args_to_overrides(args)
    assert overrides["target_dir"] == "/out"
    assert overrides["dry_run"] is True


def test_cli_defaults_are_explicit_in_overrides():
    args = parse_args([])
    overrides = args_to_overrides(args)

    assert args.tree_file is None
    assert overrides["target_dir"] is None
    assert overrides["encoding"] is None
    assert "dry_run" not in overrides


def test_merge_skips_none_values():
    base = {"target_dir": "/default", "dry_run": False, "encoding": "utf-8", "log_file": ""}
    merged = _merge_config(base, {"target_dir": None, "dry_run": True, "bogus": 1})

    assert merged["target_dir"] == "/default"
    assert merged["dry_run"] is True
    assert "bogus" not in merged


def test_log_file_without_path_uses_default_location():
    args = parse_args(["tree.txt", "--log-file"])

    with patch(
        "treescaffold.interface.cli.args.get_default_log_path",
        return_value="/data/logs/treescaffold.log",
    ) as default_path:
        overrides = args_to_overrides(args)

    default_path.assert_called_once_with()
    assert overrides["log_file"] == "/data/logs/treescaffold.log"
    assert args.tree_file == "tree.txt"


def test_log_file_with_path_is_kept():
    args = parse_args(["--log-file=run.log", "tree.txt"])

    with patch("treescaffold.interface.cli.args.get_default_log_path") as default_path:
        overrides = args_to_overrides(args)

    default_path.assert_not_called()
    assert overrides["log_file"] == "run.log"


def test_settings_file_switch_is_not_offered():
    with pytest.raises(SystemExit):
        parse_args(["--use-defaults"])

# -----------------------------------------------------------------------------
# EXIT CODES
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "error, code",
    [
        (InputSourceError("clipboard is empty"), EXIT_INPUT_ERROR),
        (NoStructuralContentError(3), EXIT_NO_CONTENT),
        (StructureBuildError("/x", OSError("disk full")), EXIT_BUILD_FAILED),
        (RuntimeError("unexpected"), EXIT_BUILD_FAILED),
    ],
)
def test_exit_code_for_errors(error, code, mock_config_dict):
    result = create_error_result(error, mock_config_dict, "file", "/target")
    assert exit_code_for(result) == code


def test_exit_code_for_success(mock_config_dict):
    result = create_success_result(mock_config_dict, "file", "/target", 2, 2, ["/target/a"], [])
    assert exit_code_for(result) == EXIT_OK
