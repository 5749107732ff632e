"""
Annotation Type Resolution.

Resolves the name an annotation is written with (``@Parameter``,
``@io.swagger.v3.oas.annotations.Parameter``) against the imports of its file, so
recipes can match on fully-qualified types instead of spelling.
"""

from typing import Optional

from swagger_migrate.java.nodes import AnnotationNode, CompilationUnit


class AnnotationTypeMatcher:
  """
  Decides whether an annotation usage refers to one fully-qualified type.

  Resolution rules, first hit wins:

  1.  A dotted name is already qualified and must equal the type.
  2.  An explicit single-type import of the type makes its simple name match.
  3.  An explicit import of a *different* type with the same simple name shadows
      the rest, so the name does not match.
  4.  A wildcard import of the type's package, or the file living in that package,
      supplies the simple name.

  Attributes:
      fqn (str): The fully-qualified annotation type (e.g. ``io.swagger.annotations.ApiParam``).
  """

  def __init__(self, fqn: str):
    self.fqn = fqn
    self.package, _, self.simple_name = fqn.rpartition(".")

  def matches(self, annotation: AnnotationNode, unit: CompilationUnit) -> bool:
    """
    Checks an annotation usage against the target type.

    Args:
        annotation: The annotation usage.
        unit: The compilation unit it belongs to (for imports and package).

    Returns:
        bool: True if the annotation's type is ``fqn``.
    """
    return self.resolve(annotation.name, unit) == self.fqn

  def resolve(self, written: str, unit: CompilationUnit) -> Optional[str]:
    """
    Resolves a written annotation name to the matcher's type when the file makes
    it visible under that name.

    Args:
        written: The annotation name as it appears in source.
        unit: The enclosing compilation unit.

    Returns:
        Optional[str]: The qualified name it resolves to, if it could be determined.
    """
    if "." in written:
      return written

    if written != self.simple_name:
      # Resolving other names is never needed for matching.
      return None

    for imp in unit.imports:
      if imp.static or imp.wildcard:
        continue
      if imp.simple_name == written:
        return imp.name

    if unit.package_name == self.package:
      return self.fqn

    for imp in unit.imports:
      if imp.wildcard and not imp.static and imp.name == self.package:
        return self.fqn

    return None

  def __repr__(self) -> str:
    return f"AnnotationTypeMatcher({self.fqn!r})"
