"""Per-finding filtering by severity, changed files and added lines."""

from dataclasses import dataclass
from typing import AbstractSet, Mapping

from stylediff.models import Finding, Severity


@dataclass(frozen=True)
class FindingFilter:
  """Decides whether a single finding should be surfaced.

  The file and line restrictions are independent switches:

  - ``files`` set: only findings in these files pass (any line).
  - ``lines`` set: only findings on an added line of a file that is also
    in ``files`` pass. Line filtering implies file filtering, so with
    ``lines`` set and ``files`` unset nothing passes.

  A file missing from ``lines`` has no qualifying lines.
  """

  min_severity: Severity
  files: AbstractSet[str] | None = None
  lines: Mapping[str, AbstractSet[int]] | None = None

  def accepts(self, path: str, finding: Finding) -> bool:
    if finding.severity < self.min_severity:
      return False

    if self.files is not None and path not in self.files:
      return False

    if self.lines is not None:
      if self.files is None or path not in self.files:
        return False
      return finding.line in self.lines.get(path, frozenset())

    return True
