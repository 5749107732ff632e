"""
CLI Command Handlers Facade.

Re-exports handlers from `swagger_migrate.cli.handlers` so the dispatcher and tests
have a single import point.
"""

from swagger_migrate.cli.handlers.migrate import (
  handle_migrate,
  _migrate_single_file,
  _print_batch_summary,
)
from swagger_migrate.cli.handlers.recipes import handle_recipes

__all__ = [
  "_migrate_single_file",
  "_print_batch_summary",
  "handle_migrate",
  "handle_recipes",
]
