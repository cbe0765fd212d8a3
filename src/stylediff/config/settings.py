"""Application settings."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from stylediff.models import Severity
from stylediff.output.emitter import ReportMethod


class Settings(BaseModel):
  """Application configuration."""

  model_config = ConfigDict(use_enum_values=False)

  root_path: Path | None = None
  inline_comment: bool = False
  min_severity: Severity = Severity.ERROR
  report_method: ReportMethod = ReportMethod.FAIL
  modified_files_only: bool = True
  added_lines_only: bool = False
  base: str = "main"

  @property
  def needs_changes(self) -> bool:
    """Whether a diff against the base revision is required."""
    return self.modified_files_only or self.added_lines_only
