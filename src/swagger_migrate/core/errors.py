"""
Migration Error Types.

Every fatal condition raised by the engine derives from `MigrationError`, so callers
can abort a file's rewrite with a single ``except`` clause.
"""


class MigrationError(Exception):
  """Base class for errors that abort the rewrite of a file."""


class TemplateError(MigrationError):
  """
  A rewrite template does not line up with its bound values.

  Templates are built by the engine, never by users, so this always signals a
  defect in the synthesizer rather than bad input.
  """
