"""
Recipes Command Handler.

Lists the registered recipes with their titles and descriptions.
"""

from rich.table import Table

from swagger_migrate.recipes.registry import DEFAULT_RECIPE, available_recipes, get_recipe
from swagger_migrate.utils.console import console


def handle_recipes() -> int:
  """
  Prints the recipe registry as a table.

  Returns:
      int: Exit code (always 0).
  """
  table = Table(title="Available Recipes")
  table.add_column("Key", style="cyan")
  table.add_column("Name", style="bold")
  table.add_column("Description")

  for key in available_recipes():
    recipe = get_recipe(key)
    label = f"{key} (default)" if key == DEFAULT_RECIPE else key
    table.add_row(label, recipe.display_name, recipe.description)

  console.print(table)
  return 0
