"""
Execution Context Module.

Holds the per-file mutable state shared between recipes: the import requests issued
while visiting annotations. One context is created per file and never shared, so
files can be migrated independently of each other.
"""

import logging
from typing import Dict, List

logger = logging.getLogger(__name__)


class ExecutionContext:
  """
  Per-file state container for a migration run.

  Attributes:
      requested_imports (List[str]): Every distinct import requested during the run,
          in first-request order. Never cleared, so callers can inspect it afterwards.
  """

  def __init__(self) -> None:
    self._pending: Dict[str, None] = {}
    self.requested_imports: List[str] = []

  def maybe_add_import(self, fqn: str) -> bool:
    """
    Requests that a type be imported in the current file.

    Requests are idempotent: asking twice for the same type records it once.

    Args:
        fqn: The fully-qualified type name.

    Returns:
        bool: True if this is the first request for ``fqn``.
    """
    if fqn in self.requested_imports:
      return False
    logger.debug("Import requested: %s", fqn)
    self.requested_imports.append(fqn)
    self._pending[fqn] = None
    return True

  def drain_pending_imports(self) -> List[str]:
    """
    Returns and clears imports requested since the last drain.

    Returns:
        List[str]: Qualified names in request order.
    """
    pending = list(self._pending)
    self._pending.clear()
    return pending
