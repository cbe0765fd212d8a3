"""Error types raised while producing a report."""


class StylediffError(Exception):
  """Base error for stylediff."""


class InputError(StylediffError):
  """Invalid input given before any finding is processed."""


class ReportNotFound(InputError):
  """Report file does not exist."""


class InvalidSeverity(InputError):
  """Severity label is not one of the recognized levels."""


class ReportMalformed(StylediffError):
  """Report cannot be parsed into file and finding records."""
