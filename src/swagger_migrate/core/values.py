"""
Value Transformer.

Turns the comma-separated string form of ``allowableValues`` into an element-value
array, e.g. ``"10,20"`` -> ``{"10", "20"}``.
"""

from swagger_migrate.java.nodes import ArrayInitializer, ElementValue, Literal
from swagger_migrate.java.parser import parse_element_value


def csv_to_array_literal(content: str) -> str:
  """
  Converts comma-separated tokens to array-literal source.

  Each token is stripped of surrounding whitespace and re-quoted. Blank tokens are
  kept as ``""``. No type interpretation takes place. Raw quotes and line breaks,
  which only occur in text blocks, are escaped.

  Args:
      content: The characters inside the string literal (without quotes).

  Returns:
      str: Java array-initializer source, e.g. ``{"a", "b"}``.
  """
  items = ", ".join(f'"{_escape_raw(token.strip())}"' for token in content.split(","))
  return "{" + items + "}"


def to_array_value(value: ElementValue) -> ElementValue:
  """
  Rewrites a string-literal ``allowableValues`` value into a parsed array node.

  Values that are already arrays, or are not string literals (constant references,
  concatenations), are returned unchanged.

  Args:
      value: The original element value.

  Returns:
      ElementValue: The array initializer, or ``value`` when nothing applies.

  Raises:
      JavaSyntaxError: If the synthesized array does not parse (e.g. a token splits
          an escape sequence).
  """
  if isinstance(value, ArrayInitializer):
    return value
  if isinstance(value, Literal) and value.is_string:
    return parse_element_value(csv_to_array_literal(value.string_content))
  return value


def _escape_raw(token: str) -> str:
  out = []
  escaped = False
  for ch in token:
    if escaped:
      escaped = False
      if ch == "\n":
        # Line continuation inside a text block.
        out.pop()
      else:
        out.append(ch)
    elif ch == "\\":
      escaped = True
      out.append(ch)
    elif ch == '"':
      out.append('\\"')
    elif ch == "\n":
      out.append("\\n")
    else:
      out.append(ch)
  return "".join(out)
