"""
Template Synthesizer.

Builds the shape of a migrated argument list in one pass over the original
arguments. Two builders run side by side: the *main* builder for the target
annotation's own arguments and the *nested* builder for the ``@Schema`` annotation
that receives ``defaultValue`` / ``allowableValues``.

Templates are Java fragments where ``#{}`` marks a hole; each builder keeps the
ordered list of nodes that fill its holes. The splicer turns them into nodes.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Tuple

from swagger_migrate.core.classifier import AttributeKind, classify
from swagger_migrate.core.errors import TemplateError
from swagger_migrate.core.splicer import build_annotation
from swagger_migrate.core.values import to_array_value
from swagger_migrate.java.nodes import AnnotationNode, JavaNode
from swagger_migrate.java.parser import count_placeholders
from swagger_migrate.java.tokens import PLACEHOLDER

SCHEMA_FQN = "io.swagger.v3.oas.annotations.media.Schema"


@dataclass(frozen=True)
class RewriteTemplate:
  """
  A template pattern and the values bound to its holes, in order.

  Raises:
      TemplateError: On construction, if hole and value counts differ.
  """

  pattern: str
  values: Tuple[JavaNode, ...] = ()

  def __post_init__(self) -> None:
    holes = count_placeholders(self.pattern)
    if holes != len(self.values):
      raise TemplateError(f"Template {self.pattern!r} has {holes} placeholders for {len(self.values)} values")


@dataclass
class TemplateBuilder:
  """Accumulates comma-separated fragments and their bound values."""

  prefix: str = ""
  suffix: str = ""
  fragments: List[str] = field(default_factory=list)
  values: List[JavaNode] = field(default_factory=list)

  def add(self, fragment: str, value: JavaNode) -> None:
    self.fragments.append(fragment)
    self.values.append(value)

  def __len__(self) -> int:
    return len(self.values)

  def build(self) -> RewriteTemplate:
    return RewriteTemplate(
      pattern=self.prefix + ", ".join(self.fragments) + self.suffix,
      values=tuple(self.values),
    )


@dataclass(frozen=True)
class Synthesis:
  """
  Outcome of scanning one annotation.

  Attributes:
      template: The main argument-list template.
      nested: The freshly built ``@Schema`` node, if any attribute was moved.
      source: The annotation as last updated during the scan (``allowableValues``
          rewritten to an array).
      counts: How many arguments fell into each kind.
  """

  template: RewriteTemplate
  nested: Optional[AnnotationNode]
  source: AnnotationNode
  counts: Dict[AttributeKind, int]

  @property
  def migrates(self) -> bool:
    return self.nested is not None


def synthesize(annotation: AnnotationNode, schema_name: str = "Schema") -> Synthesis:
  """
  Scans an annotation's arguments and builds its replacement argument template.

  Args:
      annotation: The matched annotation.
      schema_name: How the nested annotation is written.

  Returns:
      Synthesis: The main template and the nested annotation (if needed).
  """
  main = TemplateBuilder()
  nested = TemplateBuilder(prefix=f"@{schema_name}(", suffix=")")
  counts = {kind: 0 for kind in AttributeKind}
  current = annotation

  for index, argument in enumerate(annotation.args):
    item = classify(argument)
    counts[item.kind] += 1

    if item.kind == AttributeKind.DEFAULT_VALUE:
      nested.add(f"defaultValue = {PLACEHOLDER}", item.value)
    elif item.kind == AttributeKind.ALLOWABLE_VALUES:
      array = to_array_value(item.value)
      updated = replace(argument, value=array)
      current = current.with_arguments(current.args[:index] + (updated,) + current.args[index + 1 :])
      nested.add(f"allowableValues = {PLACEHOLDER}", array)
    else:
      main.add(PLACEHOLDER, argument)

  schema = None
  if len(nested):
    schema = build_annotation(nested.build())
    main.add(f"schema = {PLACEHOLDER}", schema)

  return Synthesis(template=main.build(), nested=schema, source=current, counts=counts)
