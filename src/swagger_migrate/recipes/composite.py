"""
Composite Recipes.

Chains recipes so each one sees the output of the previous one, sharing a single
execution context for the file.
"""

from typing import List, Sequence

from swagger_migrate.core.context import ExecutionContext
from swagger_migrate.core.scanners import LEGACY_FQN, TARGET_FQN
from swagger_migrate.java.nodes import CompilationUnit
from swagger_migrate.recipes.base import Recipe
from swagger_migrate.recipes.change_type import ChangeType
from swagger_migrate.recipes.default_value import MigrateApiParamDefaultValue
from swagger_migrate.recipes.rename_attribute import ChangeAnnotationAttributeName


class CompositeRecipe(Recipe):
  """
  Runs a fixed list of recipes in order.

  Preconditions are evaluated per step, against the unit as left by the steps
  before it.
  """

  def __init__(self, steps: Sequence[Recipe]):
    self.steps: List[Recipe] = list(steps)

  def run(self, unit: CompilationUnit, ctx: ExecutionContext, check_precondition: bool = True) -> CompilationUnit:
    for step in self.steps:
      unit = step.run(unit, ctx, check_precondition=check_precondition)
    return unit


class MigrateApiParamToParameter(CompositeRecipe):
  display_name = "Migrate from `@ApiParam` to `@Parameter`"
  description = "Converts `@ApiParam` to `@Parameter`, `value` to `description`, and moves defaults into `@Schema`."

  def __init__(self):
    super().__init__(
      [
        ChangeType(LEGACY_FQN, TARGET_FQN),
        ChangeAnnotationAttributeName(TARGET_FQN, "value", "description"),
        MigrateApiParamDefaultValue(),
      ]
    )
