"""
swagger-migrate Package.

A deterministic source rewriter that migrates Swagger 1.x ``@ApiParam`` annotations
in Java code to OpenAPI 3 ``@Parameter``, moving ``defaultValue`` and
``allowableValues`` into a nested ``@Schema``.

Usage
-----

Simple String Migration
^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import swagger_migrate as sm
    code = '@ApiParam(value = "offset", defaultValue = "30")\\nprivate Integer offset;'
    print(sm.migrate(code))

Advanced Usage (Engine)
^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from swagger_migrate import MigrationEngine, RuntimeConfig

    engine = MigrationEngine(config=RuntimeConfig(recipe="api-param-default-value"))
    res = engine.run(source)

    if res.success:
        print(res.code)
    else:
        print(f"Errors: {res.errors}")
"""

from swagger_migrate.config import RuntimeConfig
from swagger_migrate.core.conversion_result import ConversionResult
from swagger_migrate.core.engine import MigrationEngine

__version__ = "0.1.0"


def migrate(code: str, recipe: str = "api-param-to-parameter", skip_precondition: bool = False) -> str:
  """
  Migrates a string of Java source code.

  Args:
      code (str): The Java source to rewrite.
      recipe (str): Registry key of the recipe to run.
      skip_precondition (bool): If True, visit the file even when the usage scan rejects it.

  Returns:
      str: The rewritten source code.

  Raises:
      ValueError: If the source cannot be parsed or the migration aborts.
  """
  config = RuntimeConfig(recipe=recipe, skip_precondition=skip_precondition)
  result = MigrationEngine(config=config).run(code)

  if not result.success:
    error_msg = "\n".join(result.errors)
    raise ValueError(f"Migration failed:\n{error_msg}")

  return result.code


__all__ = [
  "ConversionResult",
  "MigrationEngine",
  "RuntimeConfig",
  "migrate",
  "__version__",
]
