"""
Tests for CLI argument parsing and dispatch.

Verifies that `main` forwards parsed arguments to the command handlers.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from swagger_migrate.cli.__main__ import main


@patch("swagger_migrate.cli.commands.handle_migrate", return_value=0)
def test_migrate_defaults(mock_handle):
  assert main(["migrate", "src/"]) == 0

  mock_handle.assert_called_once()
  args, kwargs = mock_handle.call_args
  assert args == (Path("src/"), None)
  assert kwargs == {
    "recipe": None,
    "dry_run": False,
    "skip_precondition": None,
    "json_trace_path": None,
  }


@patch("swagger_migrate.cli.commands.handle_migrate", return_value=1)
def test_migrate_options(mock_handle):
  code = main(
    [
      "migrate",
      "A.java",
      "--out",
      "out/A.java",
      "--recipe",
      "change-type",
      "--dry-run",
      "--skip-precondition",
      "--json-trace",
      "trace.json",
    ]
  )
  assert code == 1
  args, kwargs = mock_handle.call_args
  assert args == (Path("A.java"), Path("out/A.java"))
  assert kwargs["recipe"] == "change-type"
  assert kwargs["dry_run"] is True
  assert kwargs["skip_precondition"] is True
  assert kwargs["json_trace_path"] == Path("trace.json")


@patch("swagger_migrate.cli.commands.handle_recipes", return_value=0)
def test_recipes_command(mock_handle):
  assert main(["recipes"]) == 0
  mock_handle.assert_called_once_with()


def test_command_is_required():
  with pytest.raises(SystemExit):
    main([])
