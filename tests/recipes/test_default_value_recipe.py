"""
Tests for the defaultValue / allowableValues Migration Recipe.

Runs `MigrateApiParamDefaultValue` on its own, against sources that already use
``@Parameter``, and checks each rewrite rule in isolation.
"""

import pytest

from swagger_migrate.core.context import ExecutionContext
from swagger_migrate.core.template import SCHEMA_FQN
from swagger_migrate.java.parser import parse_compilation_unit
from swagger_migrate.recipes.default_value import MigrateApiParamDefaultValue


def run_recipe(code, check_precondition=True):
  ctx = ExecutionContext()
  unit = MigrateApiParamDefaultValue().run(parse_compilation_unit(code), ctx, check_precondition=check_precondition)
  return unit.to_text(), ctx


@pytest.mark.parametrize(
  "before, after",
  [
    (
      '@Parameter(example = "0", required = true, defaultValue = "30", allowableValues="10,20", description = "offset")',
      '@Parameter(example = "0", required = true, description = "offset", '
      'schema = @Schema(defaultValue = "30", allowableValues = {"10", "20"}))',
    ),
    (
      '@Parameter(description = "d", defaultValue = "false", hidden = true)',
      '@Parameter(description = "d", hidden = true, schema = @Schema(defaultValue = "false"))',
    ),
    (
      '@Parameter(allowableValues = "a, b ,c")',
      '@Parameter(schema = @Schema(allowableValues = {"a", "b", "c"}))',
    ),
    (
      '@Parameter(allowableValues = "")',
      '@Parameter(schema = @Schema(allowableValues = {""}))',
    ),
    (
      '@Parameter(allowableValues = {"x", "y"}, name = "n")',
      '@Parameter(name = "n", schema = @Schema(allowableValues = {"x", "y"}))',
    ),
    (
      "@Parameter(defaultValue = Defaults.PAGE_SIZE)",
      "@Parameter(schema = @Schema(defaultValue = Defaults.PAGE_SIZE))",
    ),
  ],
)
def test_rewrites(java_unit, before, after):
  code, ctx = run_recipe(java_unit(f"{before}\nprivate Integer offset;\n"))
  assert after in code
  assert "import io.swagger.v3.oas.annotations.media.Schema;" in code
  assert ctx.requested_imports == [SCHEMA_FQN]


def test_no_special_attributes_left_byte_identical(java_unit):
  source = java_unit('@Parameter( example="1" ,hidden=true )\nprivate Integer x;\n')
  code, ctx = run_recipe(source, check_precondition=False)
  assert code == source
  assert ctx.requested_imports == []


def test_non_matching_type_is_ignored(java_unit):
  source = java_unit('@Parameter(defaultValue = "1")\nprivate Integer x;\n', imports=("com.other.Parameter",))
  code, ctx = run_recipe(source, check_precondition=False)
  assert code == source
  assert ctx.requested_imports == []


def test_one_import_for_many_annotations(java_unit):
  source = java_unit(
    '@Parameter(defaultValue = "1")\nprivate Integer a;\n@Parameter(defaultValue = "2")\nprivate Integer b;\n'
  )
  code, ctx = run_recipe(source)
  assert code.count("import io.swagger.v3.oas.annotations.media.Schema;") == 1
  assert ctx.requested_imports == [SCHEMA_FQN]


def test_existing_wildcard_import_is_reused(java_unit):
  source = java_unit(
    '@Parameter(defaultValue = "1")\nprivate Integer a;\n',
    imports=("io.swagger.v3.oas.annotations.Parameter", "io.swagger.v3.oas.annotations.media.*"),
  )
  code, _ = run_recipe(source)
  assert "import io.swagger.v3.oas.annotations.media.Schema;" not in code
  assert "schema = @Schema(defaultValue = \"1\")" in code


def test_nested_parameters_are_rewritten(java_unit):
  source = java_unit(
    '@Parameters({@Parameter(name = "a", defaultValue = "1"), @Parameter(name = "b")})\npublic void m() {}\n',
    imports=("io.swagger.v3.oas.annotations.Parameter", "io.swagger.v3.oas.annotations.Parameters"),
  )
  code, _ = run_recipe(source)
  assert (
    '@Parameters({@Parameter(name = "a", schema = @Schema(defaultValue = "1")), @Parameter(name = "b")})' in code
  )


def test_schema_name_taken_by_other_import_is_written_qualified(java_unit):
  source = java_unit(
    '@Parameter(defaultValue = "1")\nprivate Integer a;\n',
    imports=("com.other.Schema", "io.swagger.v3.oas.annotations.Parameter"),
  )
  code, ctx = run_recipe(source)
  assert '@Parameter(schema = @io.swagger.v3.oas.annotations.media.Schema(defaultValue = "1"))' in code
  assert "import io.swagger.v3.oas.annotations.media.Schema;" not in code
  assert "import com.other.Schema;" in code
  assert ctx.requested_imports == []


def test_comments_on_kept_arguments_survive(java_unit):
  source = java_unit('@Parameter(example = "0" /* keep me */, required = true, defaultValue = "1")\nprivate Integer a;\n')
  code, _ = run_recipe(source)
  assert '@Parameter(example = "0" /* keep me */, required = true, schema = @Schema(defaultValue = "1"))' in code


def test_text_block_allowable_values_are_split(java_unit):
  source = java_unit('@Parameter(allowableValues = """\n    a, b""")\nprivate String s;\n')
  code, _ = run_recipe(source)
  assert '@Parameter(schema = @Schema(allowableValues = {"a", "b"}))' in code


def test_legacy_annotation_alone_is_not_rewritten(java_unit):
  source = java_unit('@ApiParam(defaultValue = "1")\nprivate Integer x;\n', imports=("io.swagger.annotations.ApiParam",))
  code, _ = run_recipe(source)
  assert code == source


def test_precondition():
  recipe = MigrateApiParamDefaultValue()
  assert recipe.precondition(
    parse_compilation_unit('import io.swagger.annotations.ApiParam;\n@ApiParam(defaultValue = "1") class C {}')
  )
  assert not recipe.precondition(parse_compilation_unit("class C {}"))
