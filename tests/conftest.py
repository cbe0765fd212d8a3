"""Pytest fixtures."""

from pathlib import Path

import pytest
from stylediff.models import FileReport, Finding, Severity


class FakeChanges:
  """In-memory change source."""

  def __init__(
    self,
    modified: set[str] | None = None,
    added: set[str] | None = None,
    patches: dict[str, str] | None = None,
  ):
    self._modified = modified or set()
    self._added = added or set()
    self._patches = patches or {}
    self.patch_requests: list[str] = []

  def modified_files(self) -> set[str]:
    return set(self._modified)

  def added_files(self) -> set[str]:
    return set(self._added)

  def patch(self, path: str) -> str | None:
    self.patch_requests.append(path)
    return self._patches.get(path)


@pytest.fixture
def sample_patch() -> str:
  return """diff --git a/src/Sample.java b/src/Sample.java
index 1234567..abcdefg 100644
--- a/src/Sample.java
+++ b/src/Sample.java
@@ -1,5 +1,6 @@
 package sample;
-import java.util.List;
+import java.util.ArrayList;
+import java.util.List;
 
 class Sample {
 }
"""


@pytest.fixture
def sample_report_xml() -> str:
  return """<?xml version="1.0" encoding="UTF-8"?>
<checkstyle version="8.12">
<file name="/work/project/src/Sample.java">
<error line="2" column="1" severity="error" message="Unused import - java.util.ArrayList." source="com.puppycrawl.tools.checkstyle.checks.imports.UnusedImportsCheck"/>
<error line="5" severity="warning" message="&apos;{&apos; at column 14 should be on a new line." source="com.puppycrawl.tools.checkstyle.checks.blocks.LeftCurlyCheck"/>
</file>
<file name="/work/project/src/Empty.java">
</file>
</checkstyle>
"""


@pytest.fixture
def report_file(tmp_path: Path, sample_report_xml: str) -> Path:
  path = tmp_path / "checkstyle.xml"
  path.write_text(sample_report_xml)
  return path


@pytest.fixture
def mixed_file_report() -> FileReport:
  return FileReport(
    path="src/Sample.java",
    findings=[
      Finding(line=10, severity=Severity.INFO, message="Info finding"),
      Finding(line=11, severity=Severity.ERROR, message="Error finding"),
      Finding(line=12, severity=Severity.WARNING, message="Warning finding"),
    ],
  )
