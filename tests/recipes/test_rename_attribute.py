"""
Tests for the Annotation Attribute Rename Recipe.
"""

from swagger_migrate.core.context import ExecutionContext
from swagger_migrate.java.parser import parse_compilation_unit
from swagger_migrate.recipes.rename_attribute import ChangeAnnotationAttributeName

HEADER = "import io.swagger.v3.oas.annotations.Parameter;\n"


def run_recipe(body):
  recipe = ChangeAnnotationAttributeName("io.swagger.v3.oas.annotations.Parameter", "value", "description")
  unit = recipe.run(parse_compilation_unit(HEADER + body), ExecutionContext())
  return unit.to_text()[len(HEADER) :]


def test_named_attribute_renamed_in_place():
  assert run_recipe('@Parameter(example = "1", value  =  "v")') == '@Parameter(example = "1", description  =  "v")'


def test_shorthand_value_is_expanded():
  assert run_recipe('@Parameter("v")') == '@Parameter(description = "v")'


def test_other_attributes_untouched():
  source = '@Parameter(name = "n", hidden = true)'
  assert run_recipe(source) == source


def test_other_annotation_types_untouched():
  source = '@Schema(value = "v")'
  assert run_recipe(source) == source
