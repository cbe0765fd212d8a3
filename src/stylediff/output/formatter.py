"""Output formatting for emitted annotations."""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from stylediff.output.emitter import Annotation, ReportMethod


class OutputFormatter(ABC):
  """Base output formatter."""

  @abstractmethod
  def format(self, annotations: Sequence[Annotation]) -> str:
    """Format annotations for output."""
    ...


class TerminalFormatter(OutputFormatter):
  """Rich terminal output formatter."""

  LEVEL_STYLES = {
    ReportMethod.FAIL: "bold red",
    ReportMethod.WARN: "yellow",
    ReportMethod.MESSAGE: "blue",
  }

  def __init__(self, console: Console | None = None):
    self.console = console or Console()

  def format(self, annotations: Sequence[Annotation]) -> str:
    if not annotations:
      self.console.print("[green]No findings to report.[/green]")
      return ""

    table = Table(show_header=True, header_style="bold")
    table.add_column("Level", width=8)
    table.add_column("File", width=30)
    table.add_column("Line", width=6, justify="right")
    table.add_column("Finding", min_width=40)

    for annotation in annotations:
      style = self.LEVEL_STYLES.get(annotation.level, "")
      level_text = Text(annotation.level.value.upper(), style=style)
      table.add_row(
        level_text,
        self._make_file_link(annotation.file, annotation.line) if annotation.file else "-",
        str(annotation.line) if annotation.line else "-",
        Text(annotation.message),
      )

    self.console.print(table)
    self.console.print(f"\n[dim]{len(annotations)} finding(s) reported[/dim]")
    return ""

  def _make_file_link(self, file_path: str, line: int | None) -> str:
    """Create a clickable file link for terminals that support hyperlinks."""
    url = Path(file_path).resolve().as_uri()
    if line:
      url += f":{line}"
    return f"[link={url}]{file_path}[/link]"


class JsonFormatter(OutputFormatter):
  """JSON output formatter."""

  def format(self, annotations: Sequence[Annotation]) -> str:
    data = {
      "annotations": [
        {
          "level": a.level.value,
          "file": a.file,
          "line": a.line,
          "message": a.message,
        }
        for a in annotations
      ],
    }
    return json.dumps(data, indent=2)


class GitHubFormatter(OutputFormatter):
  """GitHub Actions workflow command formatter for PR annotations."""

  LEVELS = {
    ReportMethod.MESSAGE: "notice",
    ReportMethod.WARN: "warning",
    ReportMethod.FAIL: "error",
  }

  def format(self, annotations: Sequence[Annotation]) -> str:
    lines = []
    for annotation in annotations:
      command = self.LEVELS[annotation.level]
      if annotation.is_inline:
        command += f" file={_escape_property(annotation.file)},line={annotation.line}"
      lines.append(f"::{command}::{_escape_data(annotation.message)}")
    return "\n".join(lines)


def _escape_data(value: str) -> str:
  return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
  return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


def get_formatter(format_type: str) -> OutputFormatter:
  """Get formatter by type name."""
  formatters = {
    "terminal": TerminalFormatter,
    "json": JsonFormatter,
    "github": GitHubFormatter,
  }
  formatter_class = formatters.get(format_type)
  if not formatter_class:
    raise ValueError(f"Unknown format: {format_type}")
  return formatter_class()
