"""
Annotation Attribute Rename Recipe.

Renames one attribute of an annotation type, e.g. ``@Parameter(value = "x")`` to
``@Parameter(description = "x")``.
"""

from dataclasses import replace

from swagger_migrate.core.context import ExecutionContext
from swagger_migrate.core.scanners import uses_type
from swagger_migrate.core.tracer import get_tracer
from swagger_migrate.core.visitor import AnnotationTransformer
from swagger_migrate.java.nodes import AnnotationNode, CompilationUnit, NamedArgument, PositionalArgument
from swagger_migrate.java.types import AnnotationTypeMatcher
from swagger_migrate.recipes.base import Recipe


class _RenameTransformer(AnnotationTransformer):
  def __init__(self, annotation_fqn: str, old_name: str, new_name: str):
    super().__init__()
    self.matcher = AnnotationTypeMatcher(annotation_fqn)
    self.old_name = old_name
    self.new_name = new_name

  def leave_annotation(
    self,
    original_node: AnnotationNode,
    updated_node: AnnotationNode,
    ctx: ExecutionContext,
  ) -> AnnotationNode:
    if not updated_node.args or not self.matcher.matches(updated_node, self.unit):
      return updated_node

    args = list(updated_node.args)
    changed = False
    for idx, arg in enumerate(args):
      if arg.name == self.old_name:
        args[idx] = replace(arg, name=self.new_name)
        changed = True

    # A lone positional argument is the implicit `value` attribute.
    if self.old_name == "value" and len(args) == 1 and isinstance(args[0], PositionalArgument):
      lone = args[0]
      args[0] = NamedArgument(name=self.new_name, value=lone.value, leading=lone.leading, trailing=lone.trailing)
      changed = True

    if not changed:
      return updated_node

    result = replace(updated_node, arguments=replace(updated_node.arguments, arguments=tuple(args)))
    get_tracer().log_mutation("Annotation Attribute", updated_node.to_text(), result.to_text())
    return result


class ChangeAnnotationAttributeName(Recipe):
  """
  Renames an attribute on every usage of an annotation type.

  Other arguments and their formatting are left untouched. When renaming ``value``,
  the shorthand form ``@A("x")`` is expanded to ``@A(newName = "x")``.
  """

  def __init__(self, annotation_fqn: str, old_name: str, new_name: str):
    self.annotation_fqn = annotation_fqn
    self.old_name = old_name
    self.new_name = new_name

  @property
  def display_name(self) -> str:
    return f"Rename attribute `{self.old_name}` to `{self.new_name}`"

  @property
  def description(self) -> str:
    return f"Rename attribute `{self.old_name}` to `{self.new_name}` on `@{self.annotation_fqn}`."

  def precondition(self, unit: CompilationUnit) -> bool:
    return uses_type(unit, self.annotation_fqn)

  def visitor(self) -> AnnotationTransformer:
    return _RenameTransformer(self.annotation_fqn, self.old_name, self.new_name)
