"""
Migration Recipes.

Each recipe rewrites one aspect of a compilation unit. `MigrateApiParamToParameter`
chains them into the full Swagger 1.x ``@ApiParam`` to OpenAPI 3 ``@Parameter`` migration.
"""

from swagger_migrate.recipes.base import Recipe
from swagger_migrate.recipes.change_type import ChangeType
from swagger_migrate.recipes.composite import CompositeRecipe, MigrateApiParamToParameter
from swagger_migrate.recipes.default_value import MigrateApiParamDefaultValue
from swagger_migrate.recipes.rename_attribute import ChangeAnnotationAttributeName
from swagger_migrate.recipes.registry import DEFAULT_RECIPE, available_recipes, get_recipe

__all__ = [
  "ChangeAnnotationAttributeName",
  "ChangeType",
  "CompositeRecipe",
  "DEFAULT_RECIPE",
  "MigrateApiParamDefaultValue",
  "MigrateApiParamToParameter",
  "Recipe",
  "available_recipes",
  "get_recipe",
]
