"""
Tree Splicer.

Parses rewrite templates with their bound values and commits the result to the
annotation being migrated. Replacement is all-or-nothing: the template is parsed in
full before a new node is produced, and the original node is never modified.
"""

from swagger_migrate.java.nodes import AnnotationNode
from swagger_migrate.java.parser import parse_annotation, parse_arguments


def build_annotation(template) -> AnnotationNode:
  """
  Parses a template that spells one annotation, e.g. ``@Schema(defaultValue = #{})``.

  Args:
      template (RewriteTemplate): Pattern and bound values.

  Returns:
      AnnotationNode: The new annotation.

  Raises:
      TemplateError: If holes and values do not line up.
      JavaSyntaxError: If the pattern is not valid annotation syntax.
  """
  return parse_annotation(template.pattern, template.values)


def replace_arguments(annotation: AnnotationNode, template) -> AnnotationNode:
  """
  Replaces the entire argument list of ``annotation`` with the parsed template.

  Args:
      annotation: The annotation being rewritten.
      template (RewriteTemplate): Argument-list pattern and bound values.

  Returns:
      AnnotationNode: A new node in the same source slot, with the new arguments.

  Raises:
      TemplateError: If holes and values do not line up.
      JavaSyntaxError: If the pattern is not a valid argument list.
  """
  arguments = parse_arguments(template.pattern, template.values)
  return annotation.with_arguments(arguments)
