"""
Java Recursive Descent Parser.

This module parses Java source into the CST object model defined in ``nodes.py``.
It locates the package declaration, the import list and every annotation usage
outside of comments and literals; all other code is left as opaque text.

The parser also reads rewrite templates: fragments of annotation syntax in which
``#{}`` marks a hole. Each hole is filled, in order, from the ``bindings`` passed to
the parser, so already-parsed nodes are reused instead of being re-printed.
"""

import re
from dataclasses import dataclass, replace
from typing import Generator, List, Optional, Sequence

from swagger_migrate.core.errors import MigrationError, TemplateError
from swagger_migrate.java.nodes import (
  AnnotationNode,
  Argument,
  ArgumentList,
  ArrayElement,
  ArrayInitializer,
  CompilationUnit,
  ElementValue,
  ImportDecl,
  JavaNode,
  Literal,
  NamedArgument,
  PackageDecl,
  PositionalArgument,
  RawExpression,
  Span,
)
from swagger_migrate.java.tokens import PLACEHOLDER, TRIVIA_KINDS, Symbol, TokenKind


class JavaSyntaxError(MigrationError, SyntaxError):
  """Raised when Java source (or a synthesized fragment) cannot be parsed."""


@dataclass
class Token:
  kind: TokenKind
  text: str
  offset: int
  line: int
  col: int

  @property
  def end(self) -> int:
    return self.offset + len(self.text)


class Tokenizer:
  PATTERN_DEFS = [
    (TokenKind.LINE_COMMENT, r"//[^\r\n]*"),
    (TokenKind.BLOCK_COMMENT, r"/\*[\s\S]*?\*/"),
    (TokenKind.TEXT_BLOCK, r'"""[\s\S]*?(?<!\\)"""'),
    (TokenKind.STRING, r'"(?:[^"\\\r\n]|\\.)*"'),
    (TokenKind.CHAR, r"'(?:[^'\\\r\n]|\\.)+'"),
    (TokenKind.PLACEHOLDER, re.escape(PLACEHOLDER)),
    (
      TokenKind.NUMBER,
      r"0[xX][0-9a-fA-F_]+[lL]?|(?:\d[\d_]*\.?[\d_]*|\.\d[\d_]*)(?:[eE][+-]?\d+)?[lLfFdD]?",
    ),
    (TokenKind.IDENTIFIER, r"(?:[^\W\d]|\$)(?:\w|\$)*"),
    (TokenKind.OPERATOR, r"\.\.\.|::|->|==|!=|<=|>=|&&|\|\||[-+*/%&|^!~?:<>]=?"),
    (TokenKind.SYMBOL, r"[@(){}\[\],.;=]"),
    (TokenKind.NEWLINE, r"\r?\n|\r"),
    (TokenKind.WHITESPACE, r"[ \t\f]+"),
    (TokenKind.MISMATCH, r"."),
  ]

  _REGEX = re.compile("|".join(f"(?P<{kind.value}>{pattern})" for kind, pattern in PATTERN_DEFS))

  def __init__(self, text: str):
    self.text = text

  def tokenize(self) -> Generator[Token, None, None]:
    line_num = 1
    line_start = 0
    for mo in self._REGEX.finditer(self.text):
      kind = TokenKind(mo.lastgroup)
      value = mo.group()
      col = mo.start() - line_start

      if kind == TokenKind.MISMATCH:
        raise JavaSyntaxError(f"Unexpected character {value!r} on line {line_num}:{col}")

      yield Token(kind, value, mo.start(), line_num, col)

      newlines = value.count("\n")
      if newlines:
        line_num += newlines
        line_start = mo.start() + value.rindex("\n") + 1
    yield Token(TokenKind.EOF, "", len(self.text), line_num, 0)


class JavaParser:
  """
  Parser for Java compilation units and annotation fragments.

  Args:
      text: The source (or template) text.
      bindings: Nodes that fill ``#{}`` holes, in order. A hole in argument position
          takes an ``Argument``; a hole in value position takes an ``ElementValue``.
  """

  def __init__(self, text: str, bindings: Sequence[JavaNode] = ()):
    self.text = text
    self.tokens = list(Tokenizer(text).tokenize())
    self.pos = 0
    self.bindings = list(bindings)
    self._bound = 0

  # --- Cursor ---

  def peek(self, offset: int = 0) -> Token:
    idx = self.pos + offset
    if idx >= len(self.tokens):
      return self.tokens[-1]
    return self.tokens[idx]

  def peek_significant(self) -> Token:
    """Returns the next non-trivia token without consuming anything."""
    offset = 0
    while self.peek(offset).kind in TRIVIA_KINDS:
      offset += 1
    return self.peek(offset)

  def consume(self) -> Token:
    token = self.peek()
    self.pos += 1
    return token

  def match(self, kind: str) -> bool:
    tk = self.peek()
    if tk.kind == kind:
      return True
    if tk.kind == TokenKind.SYMBOL and tk.text == kind:
      return True
    return False

  def expect(self, kind: str) -> Token:
    if not self.match(kind):
      cur = self.peek()
      raise JavaSyntaxError(f"Expected {kind}, got {cur.kind.value} ({cur.text!r}) on line {cur.line}:{cur.col}")
    return self.consume()

  def trivia(self) -> str:
    """Consumes and returns any whitespace/comments at the cursor."""
    parts = []
    while self.peek().kind in TRIVIA_KINDS:
      parts.append(self.consume().text)
    return "".join(parts)

  def _take_binding(self) -> JavaNode:
    tk = self.expect(TokenKind.PLACEHOLDER)
    if self._bound >= len(self.bindings):
      raise TemplateError(f"Template has more placeholders than the {len(self.bindings)} bound values (line {tk.line})")
    node = self.bindings[self._bound]
    self._bound += 1
    return node

  def _check_bindings_consumed(self) -> None:
    if self._bound != len(self.bindings):
      raise TemplateError(f"Template used {self._bound} placeholders but {len(self.bindings)} values were bound")

  def _expect_end(self) -> None:
    self.trivia()
    if not self.match(TokenKind.EOF):
      cur = self.peek()
      raise JavaSyntaxError(f"Unexpected trailing {cur.text!r} on line {cur.line}:{cur.col}")
    self._check_bindings_consumed()

  # --- Entry Points ---

  def parse(self) -> CompilationUnit:
    """
    Parses a whole source file.

    Returns:
        CompilationUnit: Package, imports and top-level annotations with spans.
    """
    package: Optional[PackageDecl] = None
    imports: List[ImportDecl] = []
    annotations: List[AnnotationNode] = []
    depth = 0

    while not self.match(TokenKind.EOF):
      tk = self.peek()
      if tk.kind in TRIVIA_KINDS:
        self.consume()
      elif depth == 0 and tk.kind == TokenKind.IDENTIFIER and tk.text == "package":
        package = self._parse_package()
      elif depth == 0 and tk.kind == TokenKind.IDENTIFIER and tk.text == "import":
        imports.append(self._parse_import())
      elif self.match(Symbol.AT) and self._at_annotation():
        annotations.append(self.parse_annotation())
      else:
        if self.match(Symbol.LBRACE):
          depth += 1
        elif self.match(Symbol.RBRACE):
          depth = max(0, depth - 1)
        self.consume()

    return CompilationUnit(
      source=self.text,
      package=package,
      imports=tuple(imports),
      annotations=tuple(annotations),
      original_imports=tuple(imports),
    )

  def parse_fragment_annotation(self) -> AnnotationNode:
    """Parses a template consisting of exactly one annotation."""
    self.trivia()
    anno = self.parse_annotation()
    self._expect_end()
    return replace(anno, span=None)

  def parse_fragment_arguments(self) -> List[Argument]:
    """Parses a template in annotation-argument-list context (no parentheses)."""
    args = self._parse_arguments(closer=TokenKind.EOF)
    self._check_bindings_consumed()
    return args

  def parse_fragment_value(self) -> ElementValue:
    """Parses a template consisting of exactly one element value."""
    self.trivia()
    value = self.parse_element_value()
    self._expect_end()
    return value

  # --- Declarations ---

  def _qualified_name(self) -> str:
    parts = [self.expect(TokenKind.IDENTIFIER).text]
    while True:
      self.trivia()
      if self.match(Symbol.DOT) and self.peek_after_dot_is_identifier():
        self.consume()
        self.trivia()
        parts.append(self.consume().text)
      else:
        break
    return ".".join(parts)

  def peek_after_dot_is_identifier(self) -> bool:
    offset = 1
    while self.peek(offset).kind in TRIVIA_KINDS:
      offset += 1
    return self.peek(offset).kind == TokenKind.IDENTIFIER

  def _parse_package(self) -> PackageDecl:
    start = self.consume().offset
    self.trivia()
    name = self._qualified_name()
    end = self.expect(Symbol.SEMICOLON).end
    return PackageDecl(name=name, span=Span(start, end))

  def _parse_import(self) -> ImportDecl:
    start = self.consume().offset
    self.trivia()
    static = False
    if self.peek().kind == TokenKind.IDENTIFIER and self.peek().text == "static":
      self.consume()
      self.trivia()
      static = True
    name = self._qualified_name()
    wildcard = False
    if self.match(Symbol.DOT):
      self.consume()
      self.trivia()
      if not (self.peek().kind == TokenKind.OPERATOR and self.peek().text == Symbol.STAR):
        raise JavaSyntaxError(f"Malformed import on line {self.peek().line}")
      self.consume()
      self.trivia()
      wildcard = True
    end = self.expect(Symbol.SEMICOLON).end
    return ImportDecl(name=name, static=static, wildcard=wildcard, span=Span(start, end))

  # --- Annotations ---

  def _at_annotation(self) -> bool:
    nxt = self.peek(1)
    return nxt.kind == TokenKind.IDENTIFIER and nxt.text != "interface"

  def parse_annotation(self) -> AnnotationNode:
    start = self.expect(Symbol.AT).offset
    name = self._qualified_name_no_trailing_trivia()
    end = self.tokens[self.pos - 1].end

    arguments = None
    name_trivia = ""
    if self.peek_significant().text == Symbol.LPAREN and self.peek_significant().kind == TokenKind.SYMBOL:
      name_trivia = self.trivia()
      self.expect(Symbol.LPAREN)
      arguments = self._parse_argument_list()
      end = self.expect(Symbol.RPAREN).end

    return AnnotationNode(name=name, arguments=arguments, name_trivia=name_trivia, span=Span(start, end))

  def _qualified_name_no_trailing_trivia(self) -> str:
    parts = [self.expect(TokenKind.IDENTIFIER).text]
    while self.match(Symbol.DOT) and self.peek(1).kind == TokenKind.IDENTIFIER:
      self.consume()
      parts.append(self.consume().text)
    return ".".join(parts)

  def _parse_argument_list(self) -> ArgumentList:
    save = self.pos
    inner = self.trivia()
    if self.match(Symbol.RPAREN):
      return ArgumentList(arguments=(), inner=inner)
    self.pos = save
    return ArgumentList(arguments=tuple(self._parse_arguments(closer=Symbol.RPAREN)))

  def _parse_arguments(self, closer: str) -> List[Argument]:
    args: List[Argument] = []
    while True:
      args.append(self._parse_argument())
      if self.match(Symbol.COMMA):
        self.consume()
        continue
      if self.match(closer):
        return args
      cur = self.peek()
      raise JavaSyntaxError(f"Expected ',' or {closer}, got {cur.text!r} on line {cur.line}:{cur.col}")

  def _parse_argument(self) -> Argument:
    leading = self.trivia()

    if self.match(TokenKind.PLACEHOLDER) and self._is_whole_argument_hole():
      bound = self._take_binding()
      if not isinstance(bound, (NamedArgument, PositionalArgument)):
        raise TemplateError(f"Argument placeholder bound to {type(bound).__name__}")
      trailing = self.trivia()
      return replace(
        bound,
        leading=_keep_comments(bound.leading, leading),
        trailing=_keep_comments(bound.trailing, trailing),
      )

    if self.match(TokenKind.IDENTIFIER) and self._is_named_argument():
      name = self.consume().text
      before_equal = self.trivia()
      self.expect(Symbol.EQUAL)
      after_equal = self.trivia()
      value = self.parse_element_value()
      trailing = self.trivia()
      return NamedArgument(
        name=name,
        value=value,
        leading=leading,
        before_equal=before_equal,
        after_equal=after_equal,
        trailing=trailing,
      )

    value = self.parse_element_value()
    trailing = self.trivia()
    return PositionalArgument(value=value, leading=leading, trailing=trailing)

  def _is_whole_argument_hole(self) -> bool:
    offset = 1
    while self.peek(offset).kind in TRIVIA_KINDS:
      offset += 1
    nxt = self.peek(offset)
    return nxt.kind == TokenKind.EOF or (nxt.kind == TokenKind.SYMBOL and nxt.text in (Symbol.COMMA, Symbol.RPAREN))

  def _is_named_argument(self) -> bool:
    offset = 1
    while self.peek(offset).kind in TRIVIA_KINDS:
      offset += 1
    nxt = self.peek(offset)
    return nxt.kind == TokenKind.SYMBOL and nxt.text == Symbol.EQUAL

  # --- Element Values ---

  def parse_element_value(self) -> ElementValue:
    if self.match(TokenKind.PLACEHOLDER):
      return self._take_binding()
    if self.match(Symbol.AT) and self._at_annotation():
      return replace(self.parse_annotation(), span=None)
    if self.match(Symbol.LBRACE):
      return self._parse_array()
    return self._parse_expression()

  def _parse_array(self) -> ArrayInitializer:
    self.expect(Symbol.LBRACE)
    elements: List[ArrayElement] = []
    trailing_comma = False

    while True:
      leading = self.trivia()
      if self.match(Symbol.RBRACE):
        # Empty array, or a trailing comma before the brace.
        self.consume()
        return ArrayInitializer(elements=tuple(elements), trailing_comma=trailing_comma, inner=leading)
      value = self.parse_element_value()
      trailing = self.trivia()
      elements.append(ArrayElement(value=value, leading=leading, trailing=trailing))

      if self.match(Symbol.COMMA):
        self.consume()
        trailing_comma = True
        continue
      self.expect(Symbol.RBRACE)
      return ArrayInitializer(elements=tuple(elements), trailing_comma=False, inner="")

  def _parse_expression(self) -> ElementValue:
    """
    Collects a constant expression up to the next top-level ``,``, ``)`` or ``}``.
    Trailing trivia is left for the caller.
    """
    collected: List[Token] = []
    depth = 0
    while True:
      tk = self.peek()
      if tk.kind == TokenKind.EOF:
        break
      if tk.kind == TokenKind.SYMBOL:
        if tk.text in (Symbol.LPAREN, Symbol.LBRACKET, Symbol.LBRACE):
          depth += 1
        elif tk.text in (Symbol.RPAREN, Symbol.RBRACKET, Symbol.RBRACE):
          if depth == 0:
            break
          depth -= 1
        elif tk.text in (Symbol.COMMA, Symbol.SEMICOLON) and depth == 0:
          break
      collected.append(self.consume())

    while collected and collected[-1].kind in TRIVIA_KINDS:
      collected.pop()
      self.pos -= 1

    if not collected:
      cur = self.peek()
      raise JavaSyntaxError(f"Expected an element value, got {cur.text!r} on line {cur.line}:{cur.col}")

    if len(collected) == 1 and collected[0].kind != TokenKind.SYMBOL:
      return Literal(text=collected[0].text, kind=collected[0].kind)
    return RawExpression(text=self.text[collected[0].offset : collected[-1].end])


def _keep_comments(bound: str, template: str) -> str:
  """Uses the template's spacing unless the bound trivia carries a comment."""
  return bound if bound.strip() else template


# --- Convenience Functions ---


def parse_compilation_unit(code: str) -> CompilationUnit:
  return JavaParser(code).parse()


def parse_annotation(template: str, bindings: Sequence[JavaNode] = ()) -> AnnotationNode:
  return JavaParser(template, bindings).parse_fragment_annotation()


def parse_arguments(template: str, bindings: Sequence[JavaNode] = ()) -> List[Argument]:
  return JavaParser(template, bindings).parse_fragment_arguments()


def parse_element_value(template: str, bindings: Sequence[JavaNode] = ()) -> ElementValue:
  return JavaParser(template, bindings).parse_fragment_value()


def count_placeholders(template: str) -> int:
  """Counts ``#{}`` holes that are real tokens (not inside literals or comments)."""
  return sum(1 for tk in Tokenizer(template).tokenize() if tk.kind == TokenKind.PLACEHOLDER)
