"""
Orchestration Engine for Annotation Migration.

This module provides the `MigrationEngine`, the primary driver for rewriting a single
Java source file. The pipeline consists of:

1.  **Parsing**: tokenizing the source and locating the package, imports and every
    annotation usage (`JavaParser`).
2.  **Recipe Execution**: running the configured recipe (by default the composite
    ``ApiParam`` -> ``Parameter`` migration) against the parsed unit with a fresh
    per-file `ExecutionContext`.
3.  **Rendering**: splicing rewritten annotations and imports back into the
    original text.

A file is either fully migrated or left untouched: any `MigrationError` raised by
the recipes (malformed synthesized values, template mismatches) aborts the file and
the original code is returned with ``success=False``.
"""

import logging
from typing import Optional

from swagger_migrate.config import RuntimeConfig
from swagger_migrate.core.context import ExecutionContext
from swagger_migrate.core.conversion_result import ConversionResult
from swagger_migrate.core.errors import MigrationError
from swagger_migrate.core.tracer import get_tracer, reset_tracer
from swagger_migrate.java.nodes import CompilationUnit
from swagger_migrate.java.parser import JavaParser, JavaSyntaxError
from swagger_migrate.recipes.base import Recipe
from swagger_migrate.recipes.registry import get_recipe

logger = logging.getLogger(__name__)


class MigrationEngine:
  """
  The main migration unit.

  Encapsulates the configuration and recipe used to rewrite one file at a time.
  Instances hold no per-file state and can be reused across files.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None, recipe: Optional[Recipe] = None):
    """
    Initializes the Engine.

    Args:
        config (RuntimeConfig, optional): The runtime configuration. Defaults are used if None.
        recipe (Recipe, optional): An explicit recipe instance, overriding ``config.recipe``.
    """
    self.config = config or RuntimeConfig()
    self.recipe = recipe or get_recipe(self.config.recipe)

  def parse(self, code: str) -> CompilationUnit:
    """
    Parses Java source into a compilation unit.

    Args:
        code (str): Java source code.

    Returns:
        CompilationUnit: The parsed unit.

    Raises:
        JavaSyntaxError: If the code cannot be tokenized or an annotation is malformed.
    """
    return JavaParser(code).parse()

  def to_source(self, unit: CompilationUnit) -> str:
    return unit.to_text()

  def run(self, code: str) -> ConversionResult:
    """
    Executes the full migration pipeline on one file.

    Args:
        code (str): The input source string.

    Returns:
        ConversionResult: Object containing rewritten code and error logs.
    """
    reset_tracer()
    tracer = get_tracer()
    tracer.start_phase("Migration Pipeline", self.recipe.display_name)

    tracer.start_phase("Parsing", "Java Source -> CST")
    try:
      unit = self.parse(code)
    except JavaSyntaxError as e:
      tracer.end_phase()
      tracer.end_phase()
      return ConversionResult(code=code, errors=[f"Parse Error: {e}"], success=False, trace_events=tracer.export())
    tracer.end_phase()

    ctx = ExecutionContext()
    try:
      unit = self.recipe.run(unit, ctx, check_precondition=not self.config.skip_precondition)
      final_code = self.to_source(unit)
    except MigrationError as e:
      logger.debug("Migration aborted", exc_info=True)
      tracer.log_warning(f"Migration aborted: {e}")
      tracer.end_phase()
      return ConversionResult(
        code=code,
        errors=[f"Migration Error: {e}"],
        success=False,
        requested_imports=ctx.requested_imports,
        trace_events=tracer.export(),
      )

    tracer.end_phase()
    return ConversionResult(
      code=final_code,
      success=True,
      changed=final_code != code,
      requested_imports=ctx.requested_imports,
      trace_events=tracer.export(),
    )
