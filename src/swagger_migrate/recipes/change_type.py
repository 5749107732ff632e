"""
Change Type Recipe.

Renames every usage of one annotation type to another and fixes up the import list.
"""

from dataclasses import replace

from swagger_migrate.core.context import ExecutionContext
from swagger_migrate.core.imports import ImportManager
from swagger_migrate.core.scanners import uses_type
from swagger_migrate.core.tracer import get_tracer
from swagger_migrate.core.visitor import AnnotationTransformer
from swagger_migrate.java.nodes import AnnotationNode, CompilationUnit
from swagger_migrate.java.types import AnnotationTypeMatcher
from swagger_migrate.recipes.base import Recipe


class _ChangeTypeTransformer(AnnotationTransformer):
  def __init__(self, old_fqn: str, new_fqn: str):
    super().__init__()
    self.matcher = AnnotationTypeMatcher(old_fqn)
    self.old_fqn = old_fqn
    self.new_fqn = new_fqn
    self._explicit = False
    self._shadowed = False

  def transform(self, unit: CompilationUnit, ctx: ExecutionContext) -> CompilationUnit:
    self._explicit = any(not i.static and not i.wildcard and i.name == self.old_fqn for i in unit.imports)
    self._shadowed = ImportManager().is_shadowed(unit, self.new_fqn, exclude=self.old_fqn)
    rewritten = super().transform(unit, ctx)
    if self._explicit:
      return ImportManager().change_import(rewritten, self.old_fqn, self.new_fqn)
    return rewritten

  def leave_annotation(
    self,
    original_node: AnnotationNode,
    updated_node: AnnotationNode,
    ctx: ExecutionContext,
  ) -> AnnotationNode:
    if not self.matcher.matches(updated_node, self.unit):
      return updated_node

    if "." in updated_node.name or self._shadowed:
      # Qualified usages stay qualified; a simple name owned by another import cannot be used.
      new_name = self.new_fqn
    else:
      new_name = self.new_fqn.rpartition(".")[2]
      # Explicit imports are retargeted in place; wildcard or same-package usages need one.
      if not self._explicit:
        ctx.maybe_add_import(self.new_fqn)

    result = replace(updated_node, name=new_name)
    get_tracer().log_mutation("Annotation Type", updated_node.to_text(), result.to_text())
    return result


class ChangeType(Recipe):
  """
  Changes an annotation type, e.g. ``io.swagger.annotations.ApiParam`` to
  ``io.swagger.v3.oas.annotations.Parameter``.

  Simple-name usages keep their simple-name style and qualified usages stay
  qualified. An explicit import of the old type is rewritten to the new type. When
  another import already uses the new type's simple name, usages are written fully
  qualified and the old import is dropped.
  """

  def __init__(self, old_fqn: str, new_fqn: str):
    self.old_fqn = old_fqn
    self.new_fqn = new_fqn

  @property
  def display_name(self) -> str:
    return f"Change type `{self.old_fqn.rpartition('.')[2]}` to `{self.new_fqn.rpartition('.')[2]}`"

  @property
  def description(self) -> str:
    return f"Change annotation type `{self.old_fqn}` to `{self.new_fqn}`."

  def precondition(self, unit: CompilationUnit) -> bool:
    return uses_type(unit, self.old_fqn)

  def visitor(self) -> AnnotationTransformer:
    return _ChangeTypeTransformer(self.old_fqn, self.new_fqn)

  def __repr__(self) -> str:
    return f"ChangeType({self.old_fqn!r}, {self.new_fqn!r})"
