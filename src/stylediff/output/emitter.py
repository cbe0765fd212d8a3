"""Outward signaling of surfaced findings."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from stylediff.errors import InputError

logger = logging.getLogger(__name__)


class ReportMethod(Enum):
  """How loudly findings are signaled to the reviewer."""

  MESSAGE = "message"
  WARN = "warn"
  FAIL = "fail"

  @classmethod
  def from_label(cls, label: str) -> "ReportMethod":
    try:
      return cls(str(label).strip().lower())
    except ValueError:
      known = ", ".join(m.value for m in cls)
      raise InputError(f"Unknown report method '{label}'. Expected one of: {known}") from None

  @property
  def blocking(self) -> bool:
    return self is ReportMethod.FAIL


@dataclass(frozen=True)
class Annotation:
  """One emitted message, inline when file and line are set."""

  level: ReportMethod
  message: str
  file: str | None = None
  line: int | None = None

  @property
  def is_inline(self) -> bool:
    return self.file is not None and self.line is not None


class Emitter:
  """Collects annotations using a report method chosen up front."""

  def __init__(self, method: ReportMethod = ReportMethod.FAIL):
    self.method = method
    self._annotations: list[Annotation] = []

  def emit(self, message: str, file: str | None = None, line: int | None = None) -> None:
    annotation = Annotation(level=self.method, message=message, file=file, line=line)
    logger.debug("%s: %s", self.method.value, message)
    self._annotations.append(annotation)

  @property
  def annotations(self) -> Sequence[Annotation]:
    return tuple(self._annotations)

  @property
  def failed(self) -> bool:
    """True if a blocking annotation was emitted."""
    return self.method.blocking and bool(self._annotations)
