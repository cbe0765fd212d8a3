"""Configuration file loading."""

from pathlib import Path

import yaml

from stylediff.config.settings import Settings
from stylediff.errors import InputError
from stylediff.models import Severity
from stylediff.output.emitter import ReportMethod

CONFIG_FILENAMES = [".stylediff.yaml", ".stylediff.yml", "stylediff.yaml", "stylediff.yml"]


def _find_config_file(config_path: Path | None = None) -> Path | None:
  """Find config file path, or None if no config exists."""
  if config_path:
    if not config_path.exists():
      raise InputError(f"Config file not found: {config_path}")
    return config_path

  for filename in CONFIG_FILENAMES:
    path = Path.cwd() / filename
    if path.exists():
      return path

  return None


def load_config(config_path: Path | None = None) -> Settings:
  """Load configuration from file or defaults."""
  path = _find_config_file(config_path)
  if path:
    return _load_from_file(path)
  return Settings()


def _load_from_file(path: Path) -> Settings:
  """Load settings from a YAML file."""
  with open(path) as f:
    try:
      data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
      raise InputError(f"Invalid config file {path}: {e}") from e

  if not isinstance(data, dict):
    raise InputError(f"Config file {path} must contain a mapping")

  return _parse_config(data)


def _parse_config(data: dict) -> Settings:
  """Parse config dict into Settings."""
  if "min_severity" in data:
    data["min_severity"] = Severity.from_label(data["min_severity"])

  if "report_method" in data:
    data["report_method"] = ReportMethod.from_label(data["report_method"])

  if data.get("root_path") is not None:
    data["root_path"] = Path(data["root_path"])

  return Settings(**data)
