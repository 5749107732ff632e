"""
Tests for the Java Parser (Round-Trip and Structure).

Verifies:
1. Byte-identical rendering of unmodified sources.
2. Package, import and annotation discovery (comments and strings ignored).
3. Argument forms: named, positional, arrays, nested annotations, expressions.
4. Template fragments with ``#{}`` holes and binding mismatches.
"""

import pytest

from swagger_migrate.core.errors import TemplateError
from swagger_migrate.java.nodes import (
  AnnotationNode,
  ArrayInitializer,
  Literal,
  NamedArgument,
  PositionalArgument,
  RawExpression,
)
from swagger_migrate.java.parser import (
  JavaSyntaxError,
  count_placeholders,
  parse_annotation,
  parse_arguments,
  parse_compilation_unit,
  parse_element_value,
)
from swagger_migrate.java.tokens import TokenKind


def roundtrip(code: str) -> str:
  """Helper to parse and re-emit."""
  return parse_compilation_unit(code).to_text()


def test_roundtrip_is_byte_identical(sku_request_source):
  assert roundtrip(sku_request_source) == sku_request_source


def test_roundtrip_odd_formatting():
  code = (
    "package a.b ;\r\n"
    "import  static a.b.C.d;\r\n"
    "import a.b.*;\r\n"
    "@Foo ( x=1 , /* c */ y = { \"a\" ,\"b\", } )\r\n"
    "class X { @Bar void m() {} }\r\n"
  )
  assert roundtrip(code) == code


def test_package_and_imports():
  unit = parse_compilation_unit(
    "package com.example;\n"
    "import io.swagger.annotations.ApiParam;\n"
    "import static org.junit.Assert.*;\n"
    "import io.swagger.v3.oas.annotations.*;\n"
  )
  assert unit.package_name == "com.example"
  assert [i.name for i in unit.imports] == [
    "io.swagger.annotations.ApiParam",
    "org.junit.Assert",
    "io.swagger.v3.oas.annotations",
  ]
  assert unit.imports[1].static and unit.imports[1].wildcard
  assert unit.imports[2].wildcard and not unit.imports[2].static
  assert unit.imports[0].simple_name == "ApiParam"


def test_annotations_in_comments_and_strings_are_ignored():
  code = 'class X {\n  // @ApiParam(defaultValue = "1")\n  String s = "@ApiParam";\n  @Real int x;\n}\n'
  unit = parse_compilation_unit(code)
  assert [a.name for a in unit.annotations] == ["Real"]


def test_annotation_interface_declaration_is_not_a_usage():
  unit = parse_compilation_unit("public @interface Marker { String value(); }")
  assert unit.annotations == ()


def test_annotation_spans_cover_source():
  code = 'class X { @ApiParam(value = "a") int x; }'
  anno = parse_compilation_unit(code).annotations[0]
  assert code[anno.span.start : anno.span.end] == '@ApiParam(value = "a")'


def test_marker_annotation_has_no_arguments():
  anno = parse_compilation_unit("@Override\nvoid m() {}").annotations[0]
  assert anno.arguments is None
  assert anno.args == ()
  assert anno.to_text() == "@Override"


def test_empty_argument_list_keeps_inner_trivia():
  anno = parse_annotation("@Foo( )")
  assert anno.args == ()
  assert anno.to_text() == "@Foo( )"


def test_named_and_positional_arguments():
  anno = parse_annotation('@ApiParam("id")')
  assert isinstance(anno.args[0], PositionalArgument)
  assert anno.args[0].name is None

  anno = parse_annotation('@ApiParam(value="id", required = true)')
  first, second = anno.args
  assert isinstance(first, NamedArgument)
  assert first.name == "value"
  assert first.before_equal == "" and first.after_equal == ""
  assert second.leading == " "
  assert isinstance(second.value, Literal) and second.value.text == "true"


def test_qualified_annotation_name():
  anno = parse_annotation("@io.swagger.annotations.ApiParam(hidden = true)")
  assert anno.name == "io.swagger.annotations.ApiParam"
  assert anno.simple_name == "ApiParam"


def test_nested_annotations_are_parsed():
  unit = parse_compilation_unit('@Parameters({@Parameter(name = "a"), @Parameter(name = "b")}) class X {}')
  outer = unit.annotations[0]
  array = outer.args[0].value
  assert isinstance(array, ArrayInitializer)
  assert [e.value.name for e in array.elements] == ["Parameter", "Parameter"]
  assert [a.name for a in unit.iter_all_annotations()] == ["Parameters", "Parameter", "Parameter"]


def test_expression_values_are_kept_verbatim():
  anno = parse_annotation('@A(x = Constants.LIMIT, y = "a" + "b", z = String.class, w = (1 + 2))')
  values = [a.value for a in anno.args]
  assert all(isinstance(v, RawExpression) for v in values)
  assert [v.text for v in values] == ["Constants.LIMIT", '"a" + "b"', "String.class", "(1 + 2)"]


def test_string_literal_content():
  value = parse_element_value('"10,20"')
  assert isinstance(value, Literal)
  assert value.is_string
  assert value.string_content == "10,20"


def test_text_block_content():
  value = parse_element_value('"""\r\n    10,\r\n    20"""')
  assert value.is_string
  assert value.string_content == "10,\n20"


def test_string_content_rejects_non_strings():
  with pytest.raises(ValueError):
    parse_element_value("42").string_content


def test_array_with_trailing_comma_roundtrips():
  value = parse_element_value('{ "a", "b", }')
  assert isinstance(value, ArrayInitializer)
  assert value.trailing_comma
  assert value.to_text() == '{ "a", "b", }'


def test_empty_array():
  value = parse_element_value("{}")
  assert isinstance(value, ArrayInitializer)
  assert value.elements == ()


def test_malformed_annotation_raises():
  with pytest.raises(JavaSyntaxError):
    parse_compilation_unit("@Foo(a = ) class X {}")


def test_template_value_hole_takes_binding():
  bound = Literal(text='"30"', kind=TokenKind.STRING)
  anno = parse_annotation("@Schema(defaultValue = #{})", [bound])
  assert anno.to_text() == '@Schema(defaultValue = "30")'
  assert anno.args[0].value is bound
  assert anno.span is None


def test_template_argument_hole_takes_binding_and_trivia():
  original = parse_annotation('@A(  example = "0"  )').args[0]
  args = parse_arguments("#{}, #{}", [original, original])
  assert [a.to_text() for a in args] == ['example = "0"', ' example = "0"']


def test_template_nested_annotation_binding():
  schema = parse_annotation('@Schema(defaultValue = "0")')
  args = parse_arguments("schema = #{}", [schema])
  assert args[0].value is schema
  assert args[0].to_text() == 'schema = @Schema(defaultValue = "0")'


def test_template_too_few_bindings():
  with pytest.raises(TemplateError):
    parse_arguments("#{}, #{}", [parse_annotation("@A(x = 1)").args[0]])


def test_template_too_many_bindings():
  value = parse_element_value("1")
  with pytest.raises(TemplateError):
    parse_annotation("@A(x = #{})", [value, value])


def test_argument_hole_rejects_value_binding():
  with pytest.raises(TemplateError):
    parse_arguments("#{}", [parse_element_value("1")])


def test_count_placeholders_ignores_literals():
  assert count_placeholders('a = #{}, b = "#{}", /* #{} */ c = #{}') == 2


def test_fragment_rejects_trailing_text():
  with pytest.raises(JavaSyntaxError):
    parse_annotation("@A(x = 1) extra")


def test_parsed_nodes_are_annotation_nodes():
  assert isinstance(parse_annotation("@A"), AnnotationNode)
