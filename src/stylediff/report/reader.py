"""Checkstyle XML report parsing."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path, PurePath

from stylediff.errors import InputError, InvalidSeverity, ReportMalformed, ReportNotFound
from stylediff.models import FileReport, Finding, Severity

logger = logging.getLogger(__name__)


def read_report(path: str | Path, root: Path | None = None) -> list[FileReport]:
  """Parse a checkstyle XML report into per-file records.

  Args:
    path: Location of the checkstyle XML document.
    root: Project root; absolute file names below it are made relative.

  Returns:
    FileReport per ``<file>`` element, in document order.

  Raises:
    InputError: If the path is empty.
    ReportNotFound: If the report file does not exist.
    ReportMalformed: If the document or one of its findings cannot be parsed.
  """
  if not str(path).strip():
    raise InputError("Report path must not be empty")

  report_path = Path(path)
  if not report_path.is_file():
    raise ReportNotFound(f"Report not found: {report_path}")

  try:
    document = ET.parse(report_path).getroot()
  except ET.ParseError as e:
    raise ReportMalformed(f"Cannot parse {report_path}: {e}") from e

  files = [_parse_file(node, root) for node in document.findall("file")]
  logger.debug(
    "Read %d file(s) with %d finding(s) from %s",
    len(files),
    sum(len(f.findings) for f in files),
    report_path,
  )
  return files


def _parse_file(node: ET.Element, root: Path | None) -> FileReport:
  name = node.get("name")
  if not name:
    raise ReportMalformed("<file> element without a name attribute")

  path = _relative_path(name, root)
  findings = [_parse_finding(error, path) for error in node.findall("error")]
  return FileReport(path=path, findings=findings)


def _parse_finding(node: ET.Element, path: str) -> Finding:
  line = _to_int(node.get("line"), "line", path)
  if line is None or line < 1:
    raise ReportMalformed(f"{path}: finding without a positive line number")

  try:
    severity = Severity.from_label(node.get("severity", ""))
  except InvalidSeverity as e:
    raise ReportMalformed(f"{path}:{line}: {e}") from e

  return Finding(
    line=line,
    severity=severity,
    message=node.get("message", ""),
    column=_to_int(node.get("column"), "column", path),
    source=node.get("source"),
  )


def _relative_path(name: str, root: Path | None) -> str:
  file_path = PurePath(name)
  if root is not None and file_path.is_relative_to(root):
    file_path = file_path.relative_to(root)
  return file_path.as_posix()


def _to_int(value: str | None, attribute: str, path: str) -> int | None:
  if value is None or not value.strip():
    return None
  try:
    return int(value)
  except ValueError:
    raise ReportMalformed(f"{path}: {attribute} '{value}' is not a number") from None
