"""
Recipe Base Class.

A recipe is a named, described rewrite of a compilation unit. It optionally guards
itself with a cheap precondition, runs an `AnnotationTransformer`, and then applies
the imports its visitor requested so that later recipes see an up-to-date import list.
"""

import logging

from swagger_migrate.core.context import ExecutionContext
from swagger_migrate.core.imports import ImportManager
from swagger_migrate.core.tracer import get_tracer
from swagger_migrate.core.visitor import AnnotationTransformer
from swagger_migrate.java.nodes import CompilationUnit

logger = logging.getLogger(__name__)


class Recipe:
  """
  Base for all migration recipes.

  Subclasses supply a `visitor`, or override `run` to delegate to other recipes.

  Attributes:
      display_name (str): Short human-readable title.
      description (str): One-sentence explanation of the rewrite.
  """

  display_name: str = ""
  description: str = ""

  def precondition(self, unit: CompilationUnit) -> bool:
    """
    Decides whether the recipe can apply to ``unit`` at all.

    Args:
        unit: The parsed compilation unit.

    Returns:
        bool: False to skip the file without visiting it.
    """
    return True

  def visitor(self) -> AnnotationTransformer:
    """Creates a fresh transformer for one file. The default changes nothing."""
    return AnnotationTransformer()

  def run(self, unit: CompilationUnit, ctx: ExecutionContext, check_precondition: bool = True) -> CompilationUnit:
    """
    Applies the recipe to one compilation unit.

    Args:
        unit: The compilation unit.
        ctx: The per-file execution context.
        check_precondition: If False, visit even when the precondition fails.

    Returns:
        CompilationUnit: The rewritten unit (``unit`` itself when nothing changed).
    """
    tracer = get_tracer()
    tracer.start_phase(f"Recipe: {self.display_name}", self.description)
    try:
      if check_precondition and not self.precondition(unit):
        logger.debug("Skipping %s: precondition not met", type(self).__name__)
        tracer.log_inspection(type(self).__name__, "skipped", "precondition not met")
        return unit

      unit = self.visitor().transform(unit, ctx)
      return ImportManager().add_imports(unit, ctx.drain_pending_imports())
    finally:
      tracer.end_phase()

  def __repr__(self) -> str:
    return f"{type(self).__name__}()"
