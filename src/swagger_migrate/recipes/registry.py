"""
Recipe Registry.

Maps the keys accepted by the configuration and CLI to recipe factories.
"""

from typing import Callable, Dict, List

from swagger_migrate.core.scanners import LEGACY_FQN, TARGET_FQN
from swagger_migrate.recipes.base import Recipe
from swagger_migrate.recipes.change_type import ChangeType
from swagger_migrate.recipes.composite import MigrateApiParamToParameter
from swagger_migrate.recipes.default_value import MigrateApiParamDefaultValue
from swagger_migrate.recipes.rename_attribute import ChangeAnnotationAttributeName

DEFAULT_RECIPE = "api-param-to-parameter"

_RECIPES: Dict[str, Callable[[], Recipe]] = {
  "api-param-to-parameter": MigrateApiParamToParameter,
  "api-param-default-value": MigrateApiParamDefaultValue,
  "change-type": lambda: ChangeType(LEGACY_FQN, TARGET_FQN),
  "rename-value-attribute": lambda: ChangeAnnotationAttributeName(TARGET_FQN, "value", "description"),
}


def available_recipes() -> List[str]:
  return list(_RECIPES)


def get_recipe(key: str) -> Recipe:
  """
  Instantiates a registered recipe.

  Args:
      key: Registry key (e.g. 'api-param-to-parameter').

  Returns:
      Recipe: A fresh recipe instance.

  Raises:
      KeyError: If the key is not registered.
  """
  try:
    factory = _RECIPES[key]
  except KeyError:
    raise KeyError(f"Unknown recipe: '{key}'. Available recipes: {available_recipes()}") from None
  return factory()
