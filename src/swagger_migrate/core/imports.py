"""
Import Manager.

Applies import changes to a `CompilationUnit`:

1.  **Add**: ensure a type is importable, skipping types that are already covered by
    an explicit import, a wildcard import, the file's own package or ``java.lang``.
    New imports are placed in lexical order among the existing non-static imports.
2.  **Change**: retarget an explicit import from one type to another (used when a
    type is renamed), dropping it instead if the new type is already imported or its
    simple name is taken by another import.

Imports are only ever removed as part of a change; nothing is pruned implicitly.
"""

import logging
from dataclasses import replace
from typing import Iterable, List, Optional

from swagger_migrate.core.tracer import get_tracer
from swagger_migrate.java.nodes import CompilationUnit, ImportDecl

logger = logging.getLogger(__name__)


class ImportManager:
  """
  Stateless helper operating on immutable compilation units.
  """

  def is_shadowed(self, unit: CompilationUnit, fqn: str, exclude: Optional[str] = None) -> bool:
    """
    Checks whether an explicit import of a different type claims the simple name of ``fqn``.

    A shadowed type cannot be imported; it has to be written fully qualified.

    Args:
        unit: The compilation unit.
        fqn: Fully-qualified type name.
        exclude: An import to disregard, e.g. the type about to be replaced.

    Returns:
        bool: True if the simple name already refers to another type.
    """
    simple_name = fqn.rpartition(".")[2]
    return any(
      not imp.static and not imp.wildcard and imp.simple_name == simple_name and imp.name not in (fqn, exclude)
      for imp in unit.imports
    )

  def is_imported(self, unit: CompilationUnit, fqn: str) -> bool:
    """
    Checks whether ``fqn`` is already visible by simple name.

    Args:
        unit: The compilation unit.
        fqn: Fully-qualified type name.

    Returns:
        bool: True if no import needs to be added.
    """
    if self.is_shadowed(unit, fqn):
      return False
    package = fqn.rpartition(".")[0]
    if package in ("java.lang", unit.package_name):
      return True
    for imp in unit.imports:
      if imp.static:
        continue
      if imp.wildcard and imp.name == package:
        return True
      if not imp.wildcard and imp.name == fqn:
        return True
    return False

  def add_import(self, unit: CompilationUnit, fqn: str) -> CompilationUnit:
    """
    Adds a single-type import of ``fqn`` unless it is already visible or shadowed.

    Args:
        unit: The compilation unit.
        fqn: Fully-qualified type name.

    Returns:
        CompilationUnit: The unit with the import added (or ``unit`` unchanged).
    """
    if self.is_shadowed(unit, fqn):
      logger.warning("Not importing %s: its simple name is taken by another import", fqn)
      return unit
    if self.is_imported(unit, fqn):
      logger.debug("Import of %s already satisfied", fqn)
      return unit

    new_import = ImportDecl(name=fqn)
    imports = list(unit.imports)
    position = len(imports)
    last_regular = None
    for idx, imp in enumerate(imports):
      if imp.static:
        continue
      if imp.name > fqn:
        position = idx
        break
      last_regular = idx
    else:
      if last_regular is not None:
        position = last_regular + 1

    imports.insert(position, new_import)
    get_tracer().log_import("add", fqn)
    return replace(unit, imports=tuple(imports))

  def add_imports(self, unit: CompilationUnit, fqns: Iterable[str]) -> CompilationUnit:
    for fqn in fqns:
      unit = self.add_import(unit, fqn)
    return unit

  def change_import(self, unit: CompilationUnit, old_fqn: str, new_fqn: str) -> CompilationUnit:
    """
    Retargets explicit imports of ``old_fqn`` to ``new_fqn``.

    Wildcard imports are left alone; callers request an explicit import instead.
    If another import already claims the simple name of ``new_fqn``, the old import
    is dropped and usages have to be written fully qualified.

    Args:
        unit: The compilation unit.
        old_fqn: The type being replaced.
        new_fqn: The replacement type.

    Returns:
        CompilationUnit: The updated unit.
    """
    already = self.is_shadowed(unit, new_fqn, exclude=old_fqn) or any(
      not i.static and not i.wildcard and i.name == new_fqn for i in unit.imports
    )
    imports: List[ImportDecl] = []
    changed = False
    for imp in unit.imports:
      if imp.static or imp.wildcard or imp.name != old_fqn:
        imports.append(imp)
        continue
      changed = True
      if already:
        get_tracer().log_import("remove", old_fqn)
        continue
      already = True
      get_tracer().log_import("change", f"{old_fqn} -> {new_fqn}")
      imports.append(replace(imp, name=new_fqn))

    if not changed:
      return unit
    return replace(unit, imports=tuple(imports))
