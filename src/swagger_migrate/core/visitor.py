"""
Annotation Traversal.

Defines `AnnotationTransformer`, a post-order walker over the annotations of a
`CompilationUnit`, modelled on LibCST's ``leave_*(original_node, updated_node)``
protocol. Nested annotations (``@Parameters({@Parameter(...)})``,
``schema = @Schema(...)``) are rewritten before the annotation that contains them
is handed to `leave_annotation`.
"""

from dataclasses import replace
from typing import List, Optional

from swagger_migrate.core.context import ExecutionContext
from swagger_migrate.java.nodes import (
  AnnotationNode,
  ArrayInitializer,
  CompilationUnit,
  ElementValue,
)


class AnnotationTransformer:
  """
  Base class for annotation rewrites.

  Subclasses override `leave_annotation`. Nodes are immutable: returning the
  ``updated_node`` unchanged keeps it, returning a new node replaces it.

  Attributes:
      unit (CompilationUnit): The unit being visited, for type resolution.
  """

  def __init__(self) -> None:
    self.unit: Optional[CompilationUnit] = None

  def transform(self, unit: CompilationUnit, ctx: ExecutionContext) -> CompilationUnit:
    """
    Visits every annotation of ``unit`` post-order.

    Args:
        unit: The compilation unit.
        ctx: The per-file execution context.

    Returns:
        CompilationUnit: ``unit`` itself if nothing changed, else a new unit.
    """
    self.unit = unit
    annotations: List[AnnotationNode] = []
    changed = False
    for anno in unit.annotations:
      updated = self._walk(anno, ctx)
      changed = changed or updated is not anno
      annotations.append(updated)

    if not changed:
      return unit
    return replace(unit, annotations=tuple(annotations))

  def _walk(self, node: AnnotationNode, ctx: ExecutionContext) -> AnnotationNode:
    updated = node
    if node.args:
      new_args = []
      for arg in node.args:
        value = self._walk_value(arg.value, ctx)
        new_args.append(arg if value is arg.value else replace(arg, value=value))
      if any(a is not b for a, b in zip(new_args, node.args)):
        updated = replace(node, arguments=replace(node.arguments, arguments=tuple(new_args)))
    return self.leave_annotation(node, updated, ctx)

  def _walk_value(self, value: ElementValue, ctx: ExecutionContext) -> ElementValue:
    if isinstance(value, AnnotationNode):
      return self._walk(value, ctx)
    if isinstance(value, ArrayInitializer):
      elements = []
      for element in value.elements:
        inner = self._walk_value(element.value, ctx)
        elements.append(element if inner is element.value else replace(element, value=inner))
      if any(a is not b for a, b in zip(elements, value.elements)):
        return replace(value, elements=tuple(elements))
    return value

  def leave_annotation(
    self,
    original_node: AnnotationNode,
    updated_node: AnnotationNode,
    ctx: ExecutionContext,
  ) -> AnnotationNode:
    """
    Hook called for each annotation after its children were visited.

    Args:
        original_node: The annotation as it was before this pass.
        updated_node: The annotation with rewritten children.
        ctx: The per-file execution context.

    Returns:
        AnnotationNode: The node to keep in the tree.
    """
    return updated_node
