"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Java source samples shared across recipe, engine and CLI tests.
- Tracer isolation so trace assertions only see the current test's events.
"""

import sys
import textwrap
from pathlib import Path

import pytest

# Add src to path so we can import 'swagger_migrate' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from swagger_migrate.core.tracer import reset_tracer  # noqa: E402

SKU_REQUEST_BEFORE = textwrap.dedent(
  """\
  package com.openrewrite.test.model;

  import io.swagger.annotations.ApiParam;

  public class SkuQueryRequest {
      @ApiParam(example = "1001", required = true, value = "PID")
      private Long poiId;

      @ApiParam(example = "0", required = true, defaultValue = "30", allowableValues="10,20", value = "分页offset")
      private Integer offset = 0;

      @ApiParam(example = "0", required = true, defaultValue = "0", value = "不限区间 -1 其他 1 默认1")
      private Integer notLimit;

      @ApiParam(value = "是否仅搜索,false:否，true:是", defaultValue = "false", hidden = true)
      private Boolean isSkuOnly = false;
  }
  """
)

SKU_REQUEST_AFTER = textwrap.dedent(
  """\
  package com.openrewrite.test.model;

  import io.swagger.v3.oas.annotations.Parameter;
  import io.swagger.v3.oas.annotations.media.Schema;

  public class SkuQueryRequest {
      @Parameter(example = "1001", required = true, description = "PID")
      private Long poiId;

      @Parameter(example = "0", required = true, description = "分页offset", schema = @Schema(defaultValue = "30", allowableValues = {"10", "20"}))
      private Integer offset = 0;

      @Parameter(example = "0", required = true, description = "不限区间 -1 其他 1 默认1", schema = @Schema(defaultValue = "0"))
      private Integer notLimit;

      @Parameter(description = "是否仅搜索,false:否，true:是", hidden = true, schema = @Schema(defaultValue = "false"))
      private Boolean isSkuOnly = false;
  }
  """
)


@pytest.fixture(autouse=True)
def fresh_tracer():
  """Gives every test an empty global trace log."""
  reset_tracer()
  yield
  reset_tracer()


@pytest.fixture
def sku_request_source() -> str:
  return SKU_REQUEST_BEFORE


@pytest.fixture
def sku_request_expected() -> str:
  return SKU_REQUEST_AFTER


@pytest.fixture
def java_unit():
  """
  Factory wrapping a class body in a package and import header.

  Returns:
      Callable: ``(body, imports=("io.swagger.v3.oas.annotations.Parameter",), package="com.example")`` -> source.
  """

  def create(body: str, imports=("io.swagger.v3.oas.annotations.Parameter",), package: str = "com.example") -> str:
    header = f"package {package};\n\n" if package else ""
    import_block = "".join(f"import {i};\n" for i in imports)
    if import_block:
      import_block += "\n"
    return f"{header}{import_block}public class Sample {{\n{textwrap.indent(textwrap.dedent(body), '    ')}}}\n"

  return create
