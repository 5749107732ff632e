"""
Runtime Configuration Store.

Settings come from the ``[tool.swagger_migrate]`` table of the nearest
``pyproject.toml`` and are overridden by explicit (CLI) arguments.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from swagger_migrate.recipes.registry import DEFAULT_RECIPE, available_recipes

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib


class RuntimeConfig(BaseModel):
  """
  Global configuration container for the migration engine.
  """

  recipe: str = Field(DEFAULT_RECIPE, description="Registry key of the recipe to run.")
  extensions: List[str] = Field(default_factory=lambda: [".java"], description="File suffixes processed in directories.")
  encoding: str = Field("utf-8", description="Encoding used to read and write source files.")
  skip_precondition: bool = Field(
    False,
    description="If True, visit every file even when the precondition scan rejects it.",
  )

  @field_validator("recipe")
  @classmethod
  def validate_recipe(cls, v: str) -> str:
    """
    Ensures the recipe is registered.

    Args:
        v (str): The recipe key to validate.

    Returns:
        str: The normalized (lowercase) recipe key.

    Raises:
        ValueError: If the recipe is not found in the registry.
    """
    v_clean = v.lower().strip()
    known = available_recipes()
    if v_clean not in known:
      raise ValueError(f"Unknown recipe: '{v_clean}'. Supported recipes: {known}")
    return v_clean

  @field_validator("extensions")
  @classmethod
  def normalize_extensions(cls, v: List[str]) -> List[str]:
    return [e if e.startswith(".") else f".{e}" for e in v]

  @classmethod
  def load(
    cls,
    recipe: Optional[str] = None,
    extensions: Optional[List[str]] = None,
    encoding: Optional[str] = None,
    skip_precondition: Optional[bool] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        recipe (Optional[str]): Override for the recipe key.
        extensions (Optional[List[str]]): Override for processed file suffixes.
        encoding (Optional[str]): Override for the file encoding.
        skip_precondition (Optional[bool]): Override for precondition skipping.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())

    values: Dict[str, Any] = {
      "recipe": recipe or toml_config.get("recipe", DEFAULT_RECIPE),
      "encoding": encoding or toml_config.get("encoding", "utf-8"),
    }

    final_ext = extensions or toml_config.get("extensions")
    if final_ext:
      values["extensions"] = final_ext

    if skip_precondition is not None:
      values["skip_precondition"] = skip_precondition
    else:
      values["skip_precondition"] = toml_config.get("skip_precondition", False)

    return cls(**values)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Recursively searches parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory definition was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except tomllib.TOMLDecodeError:
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get("swagger_migrate", {}), parent

  return {}, None
