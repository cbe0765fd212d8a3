"""Tests for configuration loading."""

from pathlib import Path

import pytest
from stylediff.config.loader import _parse_config, load_config
from stylediff.config.settings import Settings
from stylediff.errors import InputError, InvalidSeverity
from stylediff.models import Severity
from stylediff.output import ReportMethod


class TestSettings:
  def test_default_settings(self) -> None:
    settings = Settings()
    assert settings.root_path is None
    assert not settings.inline_comment
    assert settings.min_severity == Severity.ERROR
    assert settings.report_method == ReportMethod.FAIL
    assert settings.modified_files_only
    assert not settings.added_lines_only
    assert settings.base == "main"

  def test_needs_changes(self) -> None:
    assert Settings().needs_changes
    assert Settings(modified_files_only=False, added_lines_only=True).needs_changes
    assert not Settings(modified_files_only=False).needs_changes


class TestConfigLoader:
  def test_load_default_config(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert load_config() == Settings()

  def test_load_from_file(self, tmp_path: Path) -> None:
    path = tmp_path / "custom.yaml"
    path.write_text(
      """
root_path: /work/project
inline_comment: true
min_severity: warning
report_method: warn
added_lines_only: true
base: origin/develop
"""
    )

    settings = load_config(path)

    assert settings.root_path == Path("/work/project")
    assert settings.inline_comment
    assert settings.min_severity == Severity.WARNING
    assert settings.report_method == ReportMethod.WARN
    assert settings.added_lines_only
    assert settings.base == "origin/develop"

  def test_discovers_file_in_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".stylediff.yml").write_text("min_severity: info\n")
    monkeypatch.chdir(tmp_path)

    assert load_config().min_severity == Severity.INFO

  def test_empty_file(self, tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == Settings()

  def test_missing_explicit_file(self, tmp_path: Path) -> None:
    with pytest.raises(InputError, match="not found"):
      load_config(tmp_path / "missing.yaml")

  def test_non_mapping(self, tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- one\n- two\n")
    with pytest.raises(InputError, match="mapping"):
      load_config(path)

  def test_invalid_yaml(self, tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("min_severity: [unclosed\n")
    with pytest.raises(InputError, match="Invalid config"):
      load_config(path)


class TestParseConfig:
  def test_labels_converted(self) -> None:
    settings = _parse_config({"min_severity": "ERROR", "report_method": "message"})
    assert settings.min_severity == Severity.ERROR
    assert settings.report_method == ReportMethod.MESSAGE

  def test_unknown_severity(self) -> None:
    with pytest.raises(InvalidSeverity):
      _parse_config({"min_severity": "fatal"})

  def test_unknown_report_method(self) -> None:
    with pytest.raises(InputError, match="Unknown report method"):
      _parse_config({"report_method": "shout"})
