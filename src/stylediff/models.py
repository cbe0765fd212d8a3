"""Core domain models for checkstyle reports."""

import html
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Sequence

from stylediff.errors import InvalidSeverity


@total_ordering
class Severity(Enum):
  """Checkstyle severity levels, declared from least to most severe."""

  IGNORE = "ignore"
  INFO = "info"
  WARNING = "warning"
  ERROR = "error"

  @property
  def rank(self) -> int:
    return list(type(self)).index(self)

  def __lt__(self, other: object) -> bool:
    if not isinstance(other, Severity):
      return NotImplemented
    return self.rank < other.rank

  @classmethod
  def from_label(cls, label: str) -> "Severity":
    """Build a severity from a label such as 'warning' or 'ERROR'."""
    try:
      return cls(str(label).strip().lower())
    except ValueError:
      known = ", ".join(s.value for s in cls)
      raise InvalidSeverity(f"Unknown severity '{label}'. Expected one of: {known}") from None


@dataclass(frozen=True)
class Finding:
  """A single issue reported by the linter."""

  line: int
  severity: Severity
  message: str
  column: int | None = None
  source: str | None = None

  @property
  def display_message(self) -> str:
    """Message with HTML entities decoded for display."""
    return html.unescape(self.message)


@dataclass(frozen=True)
class FileReport:
  """All findings reported for one file."""

  path: str
  findings: Sequence[Finding]

  @property
  def is_empty(self) -> bool:
    return not self.findings


@dataclass(frozen=True)
class FileDiff:
  """A single file's diff."""

  path: str
  content: str
  is_new: bool = False
  is_deleted: bool = False


@dataclass(frozen=True)
class SurfacedFinding:
  """A finding that passed every filter, with its owning file."""

  path: str
  finding: Finding


@dataclass(frozen=True)
class ReportResult:
  """Findings to surface and the files they belong to."""

  findings: Sequence[SurfacedFinding]
  files: Sequence[str]

  @property
  def is_empty(self) -> bool:
    return not self.findings
