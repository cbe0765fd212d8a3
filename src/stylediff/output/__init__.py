"""Annotation emission and output formatting."""

from stylediff.output.emitter import Annotation, Emitter, ReportMethod
from stylediff.output.formatter import (
    GitHubFormatter,
    JsonFormatter,
    OutputFormatter,
    TerminalFormatter,
    get_formatter,
)

__all__ = [
  "Annotation",
  "Emitter",
  "ReportMethod",
  "OutputFormatter",
  "TerminalFormatter",
  "JsonFormatter",
  "GitHubFormatter",
  "get_formatter",
]
