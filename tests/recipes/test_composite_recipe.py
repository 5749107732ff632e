"""
Tests for the composite ApiParam -> Parameter Migration.

Verifies the full chain (type change, attribute rename, schema nesting) on
realistic sources, including idempotence and import minimality.
"""

from swagger_migrate import migrate
from swagger_migrate.core.context import ExecutionContext
from swagger_migrate.core.template import SCHEMA_FQN
from swagger_migrate.java.parser import parse_compilation_unit
from swagger_migrate.recipes.base import Recipe
from swagger_migrate.recipes.composite import CompositeRecipe, MigrateApiParamToParameter
from swagger_migrate.recipes.default_value import MigrateApiParamDefaultValue


def test_sku_request(sku_request_source, sku_request_expected):
  assert migrate(sku_request_source) == sku_request_expected


def test_idempotent(sku_request_source):
  once = migrate(sku_request_source)
  assert migrate(once) == once


def test_no_schema_import_without_defaults():
  source = (
    "package p;\n\n"
    "import io.swagger.annotations.ApiParam;\n\n"
    "class C {\n"
    '    @ApiParam(value = "id", required = true)\n'
    "    private Long id;\n"
    "}\n"
  )
  ctx = ExecutionContext()
  unit = MigrateApiParamToParameter().run(parse_compilation_unit(source), ctx)
  code = unit.to_text()
  assert "Schema" not in code
  assert '@Parameter(description = "id", required = true)' in code
  assert SCHEMA_FQN not in ctx.requested_imports


def test_method_parameters(java_unit):
  source = java_unit(
    "public List<Sku> list(\n"
    '        @ApiParam(value = "page", defaultValue = "1") @RequestParam Integer page,\n'
    '        @ApiParam("size") @RequestParam Integer size) {\n'
    "    return null;\n"
    "}\n",
    imports=("io.swagger.annotations.ApiParam", "org.springframework.web.bind.annotation.RequestParam"),
  )
  code = migrate(source)
  assert '@Parameter(description = "page", schema = @Schema(defaultValue = "1")) @RequestParam Integer page' in code
  assert '@Parameter(description = "size") @RequestParam Integer size' in code
  assert code.index("import io.swagger.v3.oas.annotations.Parameter;") < code.index(
    "import io.swagger.v3.oas.annotations.media.Schema;"
  )
  assert code.index("import io.swagger.v3.oas.annotations.media.Schema;") < code.index(
    "import org.springframework.web.bind.annotation.RequestParam;"
  )


def test_steps_and_metadata():
  recipe = MigrateApiParamToParameter()
  assert isinstance(recipe, CompositeRecipe)
  assert [type(s).__name__ for s in recipe.steps] == [
    "ChangeType",
    "ChangeAnnotationAttributeName",
    "MigrateApiParamDefaultValue",
  ]
  assert isinstance(recipe.steps[-1], MigrateApiParamDefaultValue)
  assert recipe.display_name


def test_other_schema_import_keeps_single_schema_import(java_unit):
  source = java_unit(
    '@ApiParam(value = "x", defaultValue = "1")\nprivate Integer a;\n',
    imports=("com.other.Schema", "io.swagger.annotations.ApiParam"),
  )
  code = migrate(source)
  assert code.count("Schema;") == 1
  assert 'schema = @io.swagger.v3.oas.annotations.media.Schema(defaultValue = "1")' in code
  assert "import io.swagger.v3.oas.annotations.Parameter;" in code


def test_other_parameter_import_keeps_single_parameter_import(java_unit):
  source = java_unit(
    '@ApiParam(value = "x", defaultValue = "1")\nprivate Integer a;\n',
    imports=("com.other.Parameter", "io.swagger.annotations.ApiParam"),
  )
  code = migrate(source)
  assert code.count("Parameter;") == 1
  assert "import io.swagger.annotations.ApiParam;" not in code
  assert '@io.swagger.v3.oas.annotations.Parameter(description = "x", schema = @Schema(defaultValue = "1"))' in code
  assert "import io.swagger.v3.oas.annotations.media.Schema;" in code


def test_base_recipe_changes_nothing(java_unit):
  unit = parse_compilation_unit(java_unit('@Parameter(defaultValue = "1")\nprivate Integer a;\n'))
  assert Recipe().run(unit, ExecutionContext()) is unit
