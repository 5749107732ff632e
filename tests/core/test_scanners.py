"""
Tests for the Precondition Scanners.
"""

from swagger_migrate.core.scanners import LEGACY_FQN, uses_legacy_attributes, uses_type
from swagger_migrate.java.parser import parse_compilation_unit


def test_uses_type_finds_nested_usages():
  unit = parse_compilation_unit(
    "import io.swagger.annotations.*;\n@ApiImplicitParams({@ApiParam(value = \"x\")}) class C {}"
  )
  assert uses_type(unit, LEGACY_FQN)


def test_uses_type_requires_resolution():
  unit = parse_compilation_unit("import com.other.ApiParam;\n@ApiParam class C {}")
  assert not uses_type(unit, LEGACY_FQN)


def test_uses_legacy_attributes_on_either_type():
  legacy = parse_compilation_unit('import io.swagger.annotations.ApiParam;\nclass C { @ApiParam(defaultValue = "1") int x; }')
  target = parse_compilation_unit(
    'import io.swagger.v3.oas.annotations.Parameter;\nclass C { @Parameter(allowableValues = "a") int x; }'
  )
  assert uses_legacy_attributes(legacy)
  assert uses_legacy_attributes(target)


def test_uses_legacy_attributes_negative():
  plain = parse_compilation_unit('import io.swagger.v3.oas.annotations.Parameter;\nclass C { @Parameter(example = "1") int x; }')
  other = parse_compilation_unit('import com.other.Parameter;\nclass C { @Parameter(defaultValue = "1") int x; }')
  assert not uses_legacy_attributes(plain)
  assert not uses_legacy_attributes(other)
