"""
Java Source Support.

Provides the tokenizer, recursive-descent parser and CST nodes used to locate and
rewrite annotation usages, plus type resolution against a file's imports.
"""

from swagger_migrate.java.nodes import (
  AnnotationNode,
  ArgumentList,
  ArrayElement,
  ArrayInitializer,
  CompilationUnit,
  ImportDecl,
  Literal,
  NamedArgument,
  PackageDecl,
  PositionalArgument,
  RawExpression,
  Span,
)
from swagger_migrate.java.parser import (
  JavaParser,
  JavaSyntaxError,
  parse_annotation,
  parse_arguments,
  parse_compilation_unit,
  parse_element_value,
)

__all__ = [
  "AnnotationNode",
  "ArgumentList",
  "ArrayElement",
  "ArrayInitializer",
  "CompilationUnit",
  "ImportDecl",
  "JavaParser",
  "JavaSyntaxError",
  "Literal",
  "NamedArgument",
  "PackageDecl",
  "PositionalArgument",
  "RawExpression",
  "Span",
  "parse_annotation",
  "parse_arguments",
  "parse_compilation_unit",
  "parse_element_value",
]
