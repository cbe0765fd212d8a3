"""CLI interface using Typer."""

import logging
import os
import traceback
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from stylediff import __version__
from stylediff.assembler import CheckstyleReporter
from stylediff.config import Settings, load_config
from stylediff.diff import GitChanges, GitError, find_project_root
from stylediff.errors import StylediffError
from stylediff.models import Severity
from stylediff.output import ReportMethod, get_formatter

app = typer.Typer(
  name="stylediff",
  help="Surface checkstyle findings on changed files and lines",
  no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _is_debug() -> bool:
  return os.environ.get("STYLEDIFF_DEBUG", "").lower() in ("1", "true", "yes")


def _configure_logging(debug: bool) -> None:
  logging.basicConfig(
    level=logging.DEBUG if debug else logging.WARNING,
    format="%(message)s",
    handlers=[RichHandler(console=err_console, show_path=False)],
    force=True,
  )


def version_callback(value: bool) -> None:
  if value:
    console.print(f"stylediff {__version__}")
    raise typer.Exit()


@app.command()
def main(
  report: str = typer.Argument(..., help="Checkstyle XML report to process"),
  root: Path = typer.Option(None, "--root", "-r", help="Project root (default: git top-level)"),
  inline: bool = typer.Option(None, "--inline/--no-inline", help="Annotate files and lines inline"),
  min_severity: str = typer.Option(
    None, "--min-severity", "-s", help="Minimum severity: ignore, info, warning, error"
  ),
  method: str = typer.Option(None, "--method", "-m", help="Report method: message, warn, fail"),
  all_files: bool = typer.Option(False, "--all-files", help="Report files not changed in this revision"),
  added_lines_only: bool = typer.Option(
    False, "--added-lines-only", help="Only report findings on added lines"
  ),
  base: str = typer.Option(None, "--base", "-b", help="Base revision to diff against"),
  format_type: str = typer.Option(
    "terminal", "--format", help="Output format: terminal, json, github"
  ),
  config: Path = typer.Option(None, "--config", "-c", help="Config file path"),
  debug: bool = typer.Option(False, "--debug", "-d", help="Show full traceback on errors"),
  version: bool = typer.Option(None, "--version", "-v", callback=version_callback, is_eager=True),
) -> None:
  """Report checkstyle findings for the current change.

  By default only files added or modified since the base revision are
  reported, and the run fails if any error-level finding remains.
  """
  show_traceback = debug or _is_debug()
  _configure_logging(show_traceback)

  try:
    settings = _build_settings(
      config=config,
      root=root,
      inline=inline,
      min_severity=min_severity,
      method=method,
      all_files=all_files,
      added_lines_only=added_lines_only,
      base=base,
    )
    formatter = get_formatter(format_type)

    project_root = find_project_root(settings.root_path)
    changes = GitChanges(settings.base, cwd=project_root) if settings.needs_changes else None
    reporter = CheckstyleReporter(settings, changes=changes, root=project_root)
    emitter = reporter.report(report)

    output = formatter.format(emitter.annotations)
    if output:
      typer.echo(output)

  except (StylediffError, GitError, ValueError) as e:
    err_console.print(f"[red]Error:[/red] {e}")
    if show_traceback:
      err_console.print(traceback.format_exc())
    raise typer.Exit(1) from None

  if emitter.failed:
    raise typer.Exit(1)


def _build_settings(
  config: Path | None,
  root: Path | None,
  inline: bool | None,
  min_severity: str | None,
  method: str | None,
  all_files: bool,
  added_lines_only: bool,
  base: str | None,
) -> Settings:
  """Load the config file and apply command-line overrides."""
  settings = load_config(config).model_copy(deep=True)

  if root:
    settings.root_path = root
  if inline is not None:
    settings.inline_comment = inline
  if min_severity:
    settings.min_severity = Severity.from_label(min_severity)
  if method:
    settings.report_method = ReportMethod.from_label(method)
  if all_files:
    settings.modified_files_only = False
  if added_lines_only:
    settings.added_lines_only = True
  if base:
    settings.base = base

  return settings


if __name__ == "__main__":
  app()
