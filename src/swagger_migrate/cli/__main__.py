"""
Main Entry Point for swagger-migrate CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `swagger_migrate.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from swagger_migrate.cli import commands
from swagger_migrate.utils.console import set_verbosity
from swagger_migrate import __version__


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Parses arguments via argparse and calls the appropriate handler function.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="swagger-migrate: Swagger 1.x to OpenAPI 3 annotation rewriter")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output from the rewrite pipeline")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: MIGRATE ---
  cmd_mig = subparsers.add_parser("migrate", help="Rewrite a Java file or directory")
  cmd_mig.add_argument("path", type=Path, help="Input source file or directory")
  cmd_mig.add_argument("--out", type=Path, default=None, help="Output destination (file or dir). Default: in place")
  cmd_mig.add_argument("--recipe", default=None, help="Recipe key (default: from toml, else api-param-to-parameter)")
  cmd_mig.add_argument(
    "--dry-run",
    action="store_true",
    help="Print a unified diff of the changes instead of writing files",
  )
  cmd_mig.add_argument(
    "--skip-precondition",
    action="store_true",
    default=None,
    help="Visit every file even when the usage scan finds nothing to migrate (Overrides config)",
  )
  cmd_mig.add_argument(
    "--json-trace", type=Path, default=None, help="Dump full execution trace (events, mutations) to a JSON file."
  )

  # --- Command: RECIPES ---
  subparsers.add_parser("recipes", help="List the available recipes")

  args = parser.parse_args(argv)
  set_verbosity(args.verbose)

  if args.command == "migrate":
    return commands.handle_migrate(
      args.path,
      args.out,
      recipe=args.recipe,
      dry_run=args.dry_run,
      skip_precondition=args.skip_precondition,
      json_trace_path=args.json_trace,
    )

  elif args.command == "recipes":
    return commands.handle_recipes()

  return 0


if __name__ == "__main__":
  sys.exit(main())
