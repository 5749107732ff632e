"""
Attribute Classifier.

Tags each argument of a matched annotation with how the argument-list rewrite
treats it. The rules are keyed on the argument's name tag (``None`` for positional
arguments), so anything not listed falls through to a verbatim copy.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from swagger_migrate.java.nodes import Argument


class AttributeKind(str, Enum):
  """How an argument is carried into the rewritten annotation."""

  DIRECT_COPY = "direct_copy"
  DEFAULT_VALUE = "default_value"
  ALLOWABLE_VALUES = "allowable_values"


# Attribute name -> kind. Unlisted names (and positional arguments) are copied.
SPECIAL_ATTRIBUTES: Dict[Optional[str], AttributeKind] = {
  "defaultValue": AttributeKind.DEFAULT_VALUE,
  "allowableValues": AttributeKind.ALLOWABLE_VALUES,
}


@dataclass(frozen=True)
class Classification:
  kind: AttributeKind
  argument: Argument

  @property
  def value(self):
    return self.argument.value


def classify(argument: Argument) -> Classification:
  """
  Classifies one argument expression.

  Args:
      argument: A named or positional argument.

  Returns:
      Classification: The kind, with the argument it was computed from.
  """
  kind = SPECIAL_ATTRIBUTES.get(argument.name, AttributeKind.DIRECT_COPY)
  return Classification(kind=kind, argument=argument)
