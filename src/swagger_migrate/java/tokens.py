"""
Java Token Definitions.

Defines the enumerations for Token Kinds and Symbols used by the Lexer and Parser.
"""

from enum import Enum


class TokenKind(str, Enum):
  """Enumeration of Lexer Token Types."""

  LINE_COMMENT = "LINE_COMMENT"
  BLOCK_COMMENT = "BLOCK_COMMENT"
  TEXT_BLOCK = "TEXT_BLOCK"
  STRING = "STRING"
  CHAR = "CHAR"
  PLACEHOLDER = "PLACEHOLDER"
  NUMBER = "NUMBER"
  IDENTIFIER = "IDENTIFIER"
  SYMBOL = "SYMBOL"
  OPERATOR = "OPERATOR"
  NEWLINE = "NEWLINE"
  WHITESPACE = "WHITESPACE"
  MISMATCH = "MISMATCH"
  EOF = "EOF"


TRIVIA_KINDS = frozenset(
  {
    TokenKind.LINE_COMMENT,
    TokenKind.BLOCK_COMMENT,
    TokenKind.NEWLINE,
    TokenKind.WHITESPACE,
  }
)


class Symbol(str, Enum):
  """Enumeration of Punctuation Symbols."""

  AT = "@"
  LBRACE = "{"
  RBRACE = "}"
  LPAREN = "("
  RPAREN = ")"
  LBRACKET = "["
  RBRACKET = "]"
  COMMA = ","
  DOT = "."
  SEMICOLON = ";"
  EQUAL = "="
  STAR = "*"


# Marks a hole in a rewrite template; filled by the parser from its bindings.
PLACEHOLDER = "#{}"
