"""
Java Concrete Syntax Tree Nodes.

This module defines the data structures for the parts of a Java compilation unit
that the migration recipes read and rewrite: the package declaration, the import
list, and annotation usages (with their argument lists and element values).

Everything else in the file is kept as opaque source text. Nodes own their string
representation via ``to_text()`` and carry the whitespace and comments that surround
them (trivia), so an untouched annotation renders byte-identical to its source.

Nodes are immutable. A rewrite produces a new node (``dataclasses.replace``); the
``span`` of a top-level node identifies the slot in the original source that the
new node is spliced into.
"""

import textwrap
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Iterator, List, Optional, Tuple, Union

from swagger_migrate.java.tokens import TokenKind


@dataclass(frozen=True)
class Span:
  """Half-open character range ``[start, end)`` in the original source."""

  start: int
  end: int


class JavaNode(ABC):
  """Abstract base class for all Java CST nodes."""

  @abstractmethod
  def to_text(self) -> str:
    """
    Render this node to its source representation.

    Returns:
        str: The Java source code for this construct.
    """


# --- Element Values ---


@dataclass(frozen=True)
class Literal(JavaNode):
  """
  A single-token element value: string, char, number, boolean or a bare name.
  """

  text: str
  kind: TokenKind

  @property
  def is_string(self) -> bool:
    return self.kind in (TokenKind.STRING, TokenKind.TEXT_BLOCK)

  @property
  def string_content(self) -> str:
    """
    The characters between the quotes of a string literal, escapes untouched.

    For a text block this is the text after the opening line break, with line
    endings normalised to ``\\n`` and incidental indentation removed.

    Raises:
        ValueError: If the literal is not a string.
    """
    if not self.is_string:
      raise ValueError(f"Not a string literal: {self.text}")
    if self.kind == TokenKind.TEXT_BLOCK:
      body = self.text[3:-3].replace("\r\n", "\n").replace("\r", "\n")
      return textwrap.dedent(body.partition("\n")[2])
    return self.text[1:-1]

  def to_text(self) -> str:
    return self.text


@dataclass(frozen=True)
class RawExpression(JavaNode):
  """
  Any other constant expression (``A.B``, ``"a" + "b"``, ``X.class`` ...),
  kept verbatim.
  """

  text: str

  def to_text(self) -> str:
    return self.text


@dataclass(frozen=True)
class ArrayElement(JavaNode):
  """One entry of an array initializer, with the trivia around it."""

  value: "ElementValue"
  leading: str = ""
  trailing: str = ""

  def to_text(self) -> str:
    return f"{self.leading}{self.value.to_text()}{self.trailing}"


@dataclass(frozen=True)
class ArrayInitializer(JavaNode):
  """
  An element value array: ``{"a", "b"}``.

  Attributes:
      elements: The entries in source order.
      trailing_comma: True if the source ends the list with a comma.
      inner: Trivia before the closing brace (after a trailing comma, or inside ``{ }``).
  """

  elements: Tuple[ArrayElement, ...] = ()
  trailing_comma: bool = False
  inner: str = ""

  def to_text(self) -> str:
    body = ",".join(e.to_text() for e in self.elements)
    if self.trailing_comma:
      body += ","
    return "{" + body + self.inner + "}"


# --- Arguments ---


@dataclass(frozen=True)
class NamedArgument(JavaNode):
  """
  A ``name = value`` pair inside an annotation argument list.

  Attributes:
      name: The attribute name.
      value: The element value.
      leading: Trivia before the name.
      before_equal: Trivia between the name and ``=``.
      after_equal: Trivia between ``=`` and the value.
      trailing: Trivia after the value.
  """

  name: str
  value: "ElementValue"
  leading: str = ""
  before_equal: str = " "
  after_equal: str = " "
  trailing: str = ""

  def to_text(self) -> str:
    return f"{self.leading}{self.name}{self.before_equal}={self.after_equal}{self.value.to_text()}{self.trailing}"


@dataclass(frozen=True)
class PositionalArgument(JavaNode):
  """
  A bare value inside an annotation argument list (the implicit ``value`` attribute).
  """

  value: "ElementValue"
  leading: str = ""
  trailing: str = ""

  @property
  def name(self) -> None:
    return None

  def to_text(self) -> str:
    return f"{self.leading}{self.value.to_text()}{self.trailing}"


Argument = Union[NamedArgument, PositionalArgument]


@dataclass(frozen=True)
class ArgumentList(JavaNode):
  """
  The parenthesised argument list of an annotation.

  Attributes:
      arguments: Arguments in source order.
      inner: Trivia inside ``( )`` when there are no arguments.
  """

  arguments: Tuple[Argument, ...] = ()
  inner: str = ""

  def to_text(self) -> str:
    if not self.arguments:
      return f"({self.inner})"
    return "(" + ",".join(a.to_text() for a in self.arguments) + ")"


@dataclass(frozen=True)
class AnnotationNode(JavaNode):
  """
  An annotation usage: ``@Name``, ``@Name(value)`` or ``@Name(k = v, ...)``.

  Attributes:
      name: The name as written (simple or dotted).
      arguments: The argument list, or None for a marker annotation.
      name_trivia: Trivia between the name and the opening parenthesis.
      span: Location in the original source (top-level annotations only).
  """

  name: str
  arguments: Optional[ArgumentList] = None
  name_trivia: str = ""
  span: Optional[Span] = field(default=None, compare=False)

  @property
  def simple_name(self) -> str:
    return self.name.rsplit(".", 1)[-1]

  @property
  def args(self) -> Tuple[Argument, ...]:
    return self.arguments.arguments if self.arguments else ()

  def with_arguments(self, arguments: List[Argument]) -> "AnnotationNode":
    """
    Returns a copy of this annotation with its argument list replaced.

    Args:
        arguments: The new arguments.

    Returns:
        AnnotationNode: The new node, occupying the same source slot.
    """
    return replace(self, arguments=ArgumentList(arguments=tuple(arguments)))

  def to_text(self) -> str:
    args = self.arguments.to_text() if self.arguments is not None else ""
    return f"@{self.name}{self.name_trivia}{args}"


ElementValue = Union[Literal, RawExpression, ArrayInitializer, AnnotationNode]


def iter_annotations(value: JavaNode) -> Iterator[AnnotationNode]:
  """
  Yields every annotation nested in an element value or argument, depth first.

  Args:
      value: The node to search.

  Yields:
      AnnotationNode: Each nested annotation (including ``value`` itself).
  """
  if isinstance(value, AnnotationNode):
    yield value
    for arg in value.args:
      yield from iter_annotations(arg.value)
  elif isinstance(value, ArrayInitializer):
    for element in value.elements:
      yield from iter_annotations(element.value)


# --- Compilation Unit ---


@dataclass(frozen=True)
class PackageDecl(JavaNode):
  name: str
  span: Optional[Span] = field(default=None, compare=False)

  def to_text(self) -> str:
    return f"package {self.name};"


@dataclass(frozen=True)
class ImportDecl(JavaNode):
  """
  An import declaration.

  Attributes:
      name: The imported name without ``.*`` (a type, or a package for wildcards).
      static: True for ``import static``.
      wildcard: True for on-demand imports (``import a.b.*;``).
      span: Location in the original source; None for imports added by a rewrite.
  """

  name: str
  static: bool = False
  wildcard: bool = False
  span: Optional[Span] = field(default=None, compare=False)

  @property
  def package(self) -> str:
    return self.name if self.wildcard else self.name.rpartition(".")[0]

  @property
  def simple_name(self) -> str:
    return self.name.rpartition(".")[2]

  def to_text(self) -> str:
    static = "static " if self.static else ""
    star = ".*" if self.wildcard else ""
    return f"import {static}{self.name}{star};"


@dataclass(frozen=True)
class CompilationUnit(JavaNode):
  """
  A parsed Java source file.

  Only the package declaration, imports and top-level annotations are modelled;
  the rest of ``source`` is carried through verbatim by ``to_text()``.

  Attributes:
      source: The original file text. Spans index into it.
      package: The package declaration, if any.
      imports: Current import list. Entries without a span are pending insertions.
      annotations: Current top-level annotations, each occupying its ``span``.
      original_imports: The imports as parsed, used to detect removals.
  """

  source: str
  package: Optional[PackageDecl] = None
  imports: Tuple[ImportDecl, ...] = ()
  annotations: Tuple[AnnotationNode, ...] = ()
  original_imports: Tuple[ImportDecl, ...] = ()

  @property
  def newline(self) -> str:
    """The line separator used by the source (``\\r\\n`` if it appears at all)."""
    return "\r\n" if "\r\n" in self.source else "\n"

  @property
  def package_name(self) -> str:
    return self.package.name if self.package else ""

  def iter_all_annotations(self) -> Iterator[AnnotationNode]:
    for anno in self.annotations:
      yield from iter_annotations(anno)

  def to_text(self) -> str:
    """
    Renders the unit by splicing every modelled node back into ``source``.

    Returns:
        str: The Java source with all rewrites applied.
    """
    edits: List[Tuple[int, int, str]] = []

    for anno in self.annotations:
      edits.append((anno.span.start, anno.span.end, anno.to_text()))

    edits.extend(self._import_edits())

    out = self.source
    # Apply back to front so earlier offsets stay valid.
    for start, end, text in sorted(edits, key=lambda e: (e[0], e[1]), reverse=True):
      out = out[:start] + text + out[end:]
    return out

  def _import_edits(self) -> List[Tuple[int, int, str]]:
    edits: List[Tuple[int, int, str]] = []
    nl = self.newline
    kept = {imp.span for imp in self.imports if imp.span is not None}
    original = {imp.span: imp for imp in self.original_imports}

    for imp in self.original_imports:
      if imp.span not in kept:
        edits.append((imp.span.start, _line_end(self.source, imp.span.end), ""))

    for imp in self.imports:
      # Untouched imports keep their original spelling.
      if imp.span is not None and original.get(imp.span) != imp:
        edits.append((imp.span.start, imp.span.end, imp.to_text()))

    # Pending imports are grouped onto the nearest existing import before them,
    # or the first existing one after them.
    after_anchor: dict = {}
    before_anchor: dict = {}
    orphans: List[str] = []
    for idx, imp in enumerate(self.imports):
      if imp.span is not None:
        continue
      prev = next((i for i in reversed(self.imports[:idx]) if i.span is not None), None)
      nxt = next((i for i in self.imports[idx + 1 :] if i.span is not None), None)
      if prev is not None:
        after_anchor.setdefault(prev.span.end, []).append(imp.to_text())
      elif nxt is not None:
        before_anchor.setdefault(nxt.span.start, []).append(imp.to_text())
      else:
        orphans.append(imp.to_text())

    for offset, texts in after_anchor.items():
      edits.append((offset, offset, "".join(nl + t for t in texts)))
    for offset, texts in before_anchor.items():
      edits.append((offset, offset, "".join(t + nl for t in texts)))

    if orphans:
      block = nl.join(orphans)
      if self.package is not None:
        edits.append((self.package.span.end, self.package.span.end, nl * 2 + block))
      else:
        edits.append((0, 0, block + nl * 2))
    return edits


def _line_end(source: str, offset: int) -> int:
  """Extends a removal through trailing blanks and one newline."""
  end = offset
  while end < len(source) and source[end] in " \t":
    end += 1
  if source.startswith("\r\n", end):
    return end + 2
  if end < len(source) and source[end] == "\n":
    return end + 1
  return end
