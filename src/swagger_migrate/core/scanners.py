"""
Precondition Scanners.

Cheap per-file checks run before any traversal. They only decide whether a file is
worth visiting; skipping a file they reject never changes the migration output.
"""

from swagger_migrate.java.nodes import CompilationUnit
from swagger_migrate.java.types import AnnotationTypeMatcher

LEGACY_FQN = "io.swagger.annotations.ApiParam"
TARGET_FQN = "io.swagger.v3.oas.annotations.Parameter"

_MIGRATED_ATTRIBUTES = frozenset({"defaultValue", "allowableValues"})


def uses_type(unit: CompilationUnit, fqn: str) -> bool:
  """
  Checks whether any annotation in the file resolves to ``fqn``.

  Args:
      unit: The parsed compilation unit.
      fqn: Fully-qualified annotation type.

  Returns:
      bool: True on the first matching usage.
  """
  matcher = AnnotationTypeMatcher(fqn)
  return any(matcher.matches(anno, unit) for anno in unit.iter_all_annotations())


def uses_legacy_attributes(unit: CompilationUnit) -> bool:
  """
  Checks whether the file sets ``defaultValue`` or ``allowableValues`` on an
  ``ApiParam`` or ``Parameter`` annotation.

  Both types are accepted because the attribute migration normally runs after the
  type itself has been changed from ``ApiParam`` to ``Parameter``.

  Args:
      unit: The parsed compilation unit.

  Returns:
      bool: True if the attribute migration could apply somewhere in the file.
  """
  matchers = (AnnotationTypeMatcher(LEGACY_FQN), AnnotationTypeMatcher(TARGET_FQN))
  for anno in unit.iter_all_annotations():
    if not any(a.name in _MIGRATED_ATTRIBUTES for a in anno.args):
      continue
    if any(m.matches(anno, unit) for m in matchers):
      return True
  return False
