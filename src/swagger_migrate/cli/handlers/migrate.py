"""
Migrate Command Handler.

This module implements the logic for the `swagger-migrate migrate` command.
It orchestrates:
1. Configuration loading (``pyproject.toml`` plus CLI overrides).
2. Recipe execution via the Engine, one file at a time.
3. Output writing (or a unified diff in dry-run mode) and trace logging.
"""

import difflib
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table

from swagger_migrate.config import RuntimeConfig
from swagger_migrate.core.conversion_result import ConversionResult
from swagger_migrate.core.engine import MigrationEngine
from swagger_migrate.utils.console import (
  console,
  log_error,
  log_info,
  log_success,
  log_warning,
)


def handle_migrate(
  input_path: Path,
  output_path: Optional[Path],
  recipe: Optional[str] = None,
  dry_run: bool = False,
  skip_precondition: Optional[bool] = None,
  json_trace_path: Optional[Path] = None,
) -> int:
  """
  Handles the 'migrate' command execution.

  Files are rewritten in place unless ``output_path`` is given. For a directory input,
  ``output_path`` is a directory mirroring the input tree.

  Args:
      input_path: Path to the source file or directory to migrate.
      output_path: Where rewritten code should be saved (None for in place).
      recipe: Override for the recipe key.
      dry_run: If True, print a unified diff and write nothing.
      skip_precondition: Override for the precondition scan.
      json_trace_path: Optional path to dump execution trace JSON.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.exists():
    log_error(f"Input not found: {input_path}")
    return 1

  try:
    config = RuntimeConfig.load(
      recipe=recipe,
      skip_precondition=skip_precondition,
      search_path=input_path if input_path.is_dir() else input_path.parent,
    )
  except ValidationError as e:
    log_error(f"Invalid configuration: {escape(str(e))}")
    return 1

  engine = MigrationEngine(config=config)
  batch_results: Dict[str, ConversionResult] = {}

  if input_path.is_file():
    result = _migrate_single_file(input_path, output_path or input_path, engine, config, dry_run)
    batch_results[input_path.name] = result
  else:
    src_files = sorted(p for p in input_path.rglob("*") if p.is_file() and p.suffix in config.extensions)
    if not src_files:
      log_warning(f"No {', '.join(config.extensions)} files found in {input_path}")
      return 0

    log_info(f"Processing {len(src_files)} files from {input_path}...")
    dest_root = output_path or input_path
    for src_file in src_files:
      rel_path = src_file.relative_to(input_path)
      batch_results[str(rel_path)] = _migrate_single_file(src_file, dest_root / rel_path, engine, config, dry_run)

  if json_trace_path:
    _write_trace(json_trace_path, {name: res.trace_events for name, res in batch_results.items()})

  _print_batch_summary(batch_results)
  return 0 if all(r.success for r in batch_results.values()) else 1


def _migrate_single_file(
  input_path: Path,
  output_path: Path,
  engine: MigrationEngine,
  config: RuntimeConfig,
  dry_run: bool = False,
) -> ConversionResult:
  """
  Helper to execute the migration on a single file.

  Unchanged files are only written when the destination differs from the source.

  Args:
      input_path: Source file path.
      output_path: Destination file path.
      engine: The configured engine.
      config: Runtime configuration object.
      dry_run: Print a diff instead of writing.

  Returns:
      ConversionResult: Result object containing status and code.
  """
  try:
    with open(input_path, "rt", encoding=config.encoding, newline="") as f:
      code = f.read()
  except (OSError, UnicodeDecodeError) as e:
    log_error(f"Failed to read {input_path}: {e}")
    return ConversionResult(success=False, errors=[str(e)])

  result = engine.run(code)
  if not result.success:
    log_error(f"Failed to migrate [path]{input_path}[/path]: {escape('; '.join(result.errors))}")
    return result

  if dry_run:
    if result.changed:
      print(render_diff(code, result.code, str(input_path)), end="")
    return result

  if not result.changed and output_path.resolve() == input_path.resolve():
    return result

  try:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "wt", encoding=config.encoding, newline="") as f:
      f.write(result.code)
  except OSError as e:
    log_error(f"Failed to write {output_path}: {e}")
    return ConversionResult(code=code, success=False, errors=[str(e)], trace_events=result.trace_events)

  if result.changed:
    log_success(f"Migrated: [path]{input_path}[/path] -> [path]{output_path}[/path]")
  return result


def render_diff(before: str, after: str, name: str) -> str:
  """
  Builds a unified diff between two versions of a file.

  Args:
      before: Original text.
      after: Rewritten text.
      name: File name used in the diff headers.

  Returns:
      str: The diff, empty when the texts are equal.
  """
  lines = difflib.unified_diff(
    before.splitlines(keepends=True),
    after.splitlines(keepends=True),
    fromfile=f"a/{name}",
    tofile=f"b/{name}",
  )
  out: List[str] = []
  for line in lines:
    out.append(line if line.endswith("\n") else line + "\n")
  return "".join(out)


def _write_trace(path: Path, traces: Dict[str, List[Dict[str, Any]]]) -> None:
  try:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wt", encoding="utf-8") as f:
      json.dump(traces, f, indent=2, default=str)
    log_info(f"Trace saved to [path]{path}[/path]")
  except OSError as e:
    log_error(f"Failed to write trace: {e}")


def _print_batch_summary(results: Dict[str, ConversionResult]) -> None:
  """
  Renders a summary table of migration results to the console.

  Args:
      results: Dictionary mapping filenames to conversion results.
  """
  total = len(results)
  changed = sum(1 for r in results.values() if r.success and r.changed)
  failures = sum(1 for r in results.values() if not r.success)

  if failures == 0:
    log_success(f"Batch Complete: {changed}/{total} files rewritten, {total - changed} already up to date.")
    return

  table = Table(title="Migration Report")
  table.add_column("File", style="cyan")
  table.add_column("Status", justify="center")
  table.add_column("Issues", style="red")

  for filename, res in results.items():
    if res.success:
      continue
    issues = escape("; ".join(res.errors)) if res.errors else "Unknown Error"
    table.add_row(filename, "❌ Failed", issues)

  console.print(table)
  console.print(f"\n[bold]Summary:[/bold] {total - failures} Passed, {failures} Failed.")
