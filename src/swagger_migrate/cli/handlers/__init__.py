from .migrate import handle_migrate, _migrate_single_file, _print_batch_summary
from .recipes import handle_recipes

__all__ = [
  "_migrate_single_file",
  "_print_batch_summary",
  "handle_migrate",
  "handle_recipes",
]
