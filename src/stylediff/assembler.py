"""Report assembly: from parsed findings to what gets surfaced."""

import logging
from pathlib import Path
from typing import Protocol, Sequence

from stylediff.config import Settings
from stylediff.diff import parse_added_line_numbers
from stylediff.errors import InputError
from stylediff.filtering import FindingFilter
from stylediff.models import FileReport, ReportResult, Severity, SurfacedFinding
from stylediff.output import Emitter
from stylediff.report import read_report

logger = logging.getLogger(__name__)


class ChangeSource(Protocol):
  """Files and patches changed in the revision under review."""

  def modified_files(self) -> set[str]:
    ...

  def added_files(self) -> set[str]:
    ...

  def patch(self, path: str) -> str | None:
    """Unified diff for one file, or None when the file has no diff."""
    ...


def assemble_report(
  reports: Sequence[FileReport],
  min_severity: Severity,
  changes: ChangeSource | None = None,
  modified_files_only: bool = True,
  added_lines_only: bool = False,
) -> ReportResult:
  """Select the findings to surface.

  Args:
    reports: Parsed report, one entry per file.
    min_severity: Least severe level that is still reported.
    changes: Source of changed files and patches. Without one, the
      changed file set is empty.
    modified_files_only: Drop files that were not added or modified.
    added_lines_only: Keep only findings on lines the patch added.

  Returns:
    Surviving findings in report order, and the files they came from.
  """
  target_files: frozenset[str] = frozenset()
  if changes is not None and (modified_files_only or added_lines_only):
    target_files = frozenset(changes.modified_files() | changes.added_files())
    logger.debug("%d changed file(s) in revision", len(target_files))

  if modified_files_only:
    reports = [r for r in reports if r.path in target_files]
  reports = [r for r in reports if not r.is_empty]

  target_lines: dict[str, frozenset[int]] | None = None
  if added_lines_only:
    target_lines = {}
    for path in target_files:
      patch = changes.patch(path) if changes is not None else None
      if patch is None:
        continue
      target_lines[path] = frozenset(parse_added_line_numbers(patch))
      logger.debug("%s: %d added line(s)", path, len(target_lines[path]))

  finding_filter = FindingFilter(
    min_severity=min_severity,
    files=target_files if modified_files_only or added_lines_only else None,
    lines=target_lines,
  )

  surfaced: list[SurfacedFinding] = []
  files: dict[str, None] = {}
  for report in reports:
    for finding in report.findings:
      if finding_filter.accepts(report.path, finding):
        surfaced.append(SurfacedFinding(path=report.path, finding=finding))
        files.setdefault(report.path)

  logger.debug("%d finding(s) surfaced from %d file(s)", len(surfaced), len(files))
  return ReportResult(findings=surfaced, files=list(files))


def publish(result: ReportResult, emitter: Emitter, inline: bool = False) -> None:
  """Send every surfaced finding to the emitter."""
  for item in result.findings:
    message = item.finding.display_message
    if inline:
      emitter.emit(message, file=item.path, line=item.finding.line)
    else:
      emitter.emit(f"{item.path} : {message} at {item.finding.line}")


class CheckstyleReporter:
  """Orchestrates reading, filtering and emitting a checkstyle report."""

  def __init__(
    self,
    settings: Settings | None = None,
    changes: ChangeSource | None = None,
    root: Path | None = None,
  ):
    self.settings = settings or Settings()
    self.changes = changes
    self.root = root if root is not None else self.settings.root_path
    self.reported_files: list[str] = []

  def report(self, xml_file: str | Path) -> Emitter:
    """Report findings from the given checkstyle XML file."""
    if not str(xml_file).strip():
      raise InputError("Report path must not be empty")
    if self.settings.needs_changes and self.changes is None:
      raise InputError("Filtering by changed files or lines requires a change source")

    reports = read_report(xml_file, root=self.root)
    result = assemble_report(
      reports,
      self.settings.min_severity,
      changes=self.changes,
      modified_files_only=self.settings.modified_files_only,
      added_lines_only=self.settings.added_lines_only,
    )
    self.reported_files = list(result.files)

    emitter = Emitter(self.settings.report_method)
    if result.is_empty:
      logger.debug("Nothing to report")
      return emitter

    publish(result, emitter, inline=self.settings.inline_comment)
    return emitter
