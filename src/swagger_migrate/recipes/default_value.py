"""
ApiParam Default Value Migration.

Moves ``defaultValue`` and ``allowableValues`` off ``@Parameter`` into a nested
``@Schema``:

.. code-block:: java

    @Parameter(example = "0", defaultValue = "30", allowableValues = "10,20", description = "offset")
    // becomes
    @Parameter(example = "0", description = "offset", schema = @Schema(defaultValue = "30", allowableValues = {"10", "20"}))

Runs after the type change from ``ApiParam``, so it matches ``Parameter``. If the file
already imports some other ``Schema``, the nested annotation is written fully qualified.
"""

import logging

from swagger_migrate.core.context import ExecutionContext
from swagger_migrate.core.imports import ImportManager
from swagger_migrate.core.scanners import TARGET_FQN, uses_legacy_attributes
from swagger_migrate.core.splicer import replace_arguments
from swagger_migrate.core.template import SCHEMA_FQN, synthesize
from swagger_migrate.core.tracer import get_tracer
from swagger_migrate.core.visitor import AnnotationTransformer
from swagger_migrate.java.nodes import AnnotationNode, CompilationUnit
from swagger_migrate.java.types import AnnotationTypeMatcher
from swagger_migrate.recipes.base import Recipe

logger = logging.getLogger(__name__)


class DefaultValueTransformer(AnnotationTransformer):
  """
  Rewrites each matched ``@Parameter`` whose arguments include ``defaultValue`` or
  ``allowableValues``.
  """

  def __init__(self, target_fqn: str = TARGET_FQN):
    super().__init__()
    self.matcher = AnnotationTypeMatcher(target_fqn)

  def leave_annotation(
    self,
    original_node: AnnotationNode,
    updated_node: AnnotationNode,
    ctx: ExecutionContext,
  ) -> AnnotationNode:
    if not self.matcher.matches(updated_node, self.unit):
      return updated_node

    shadowed = ImportManager().is_shadowed(self.unit, SCHEMA_FQN)
    synthesis = synthesize(updated_node, schema_name=SCHEMA_FQN if shadowed else "Schema")
    if not synthesis.migrates:
      get_tracer().log_inspection(updated_node.to_text(), "unchanged", "no defaultValue/allowableValues")
      return updated_node

    result = replace_arguments(synthesis.source, synthesis.template)
    if not shadowed:
      ctx.maybe_add_import(SCHEMA_FQN)

    logger.debug("Migrated %s -> %s", updated_node.to_text(), result.to_text())
    get_tracer().log_mutation("Parameter", updated_node.to_text(), result.to_text())
    return result


class MigrateApiParamDefaultValue(Recipe):
  display_name = "Migrate `@ApiParam(defaultValue)` to `@Parameter(schema)`"
  description = "Migrate `@ApiParam(defaultValue)` to `@Parameter(schema = @Schema(defaultValue))`."

  def precondition(self, unit: CompilationUnit) -> bool:
    return uses_legacy_attributes(unit)

  def visitor(self) -> AnnotationTransformer:
    return DefaultValueTransformer()
