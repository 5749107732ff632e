"""
Data structures representing the output of the migration pipeline.

This module defines the `ConversionResult` Pydantic model, which encapsulates
the rewritten code, any errors encountered, and the execution trace logs.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class ConversionResult(BaseModel):
  """
  Container for the results of migrating one file.
  """

  code: str = Field(default="", description="The rewritten source code (the input, on failure).")
  errors: List[str] = Field(default_factory=list, description="List of error messages encountered.")
  success: bool = Field(
    default=True,
    description="True if the pipeline completed without fatal errors.",
  )
  changed: bool = Field(default=False, description="True if the code differs from the input.")
  requested_imports: List[str] = Field(default_factory=list, description="Imports requested by the recipes.")
  trace_events: List[Dict[str, Any]] = Field(default_factory=list, description="Execution trace log data.")

  @property
  def has_errors(self) -> bool:
    """
    Check if the result contains any error messages.

    Returns:
        True if one or more errors are present.
    """
    return len(self.errors) > 0
