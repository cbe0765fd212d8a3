"""Git diff extraction and project root discovery."""

import logging
import subprocess
from pathlib import Path

from stylediff.models import FileDiff

logger = logging.getLogger(__name__)


class GitError(Exception):
  """Git command failed."""


def _sanitize_error(stderr: str) -> str:
  """Remove potentially sensitive path information from error messages."""
  lines = stderr.strip().split("\n")
  sanitized = []
  for line in lines:
    if "fatal:" in line or "error:" in line:
      sanitized.append(line.split("/")[-1] if "/" in line else line)
    else:
      sanitized.append(line)
  return "\n".join(sanitized)


def run_git(*args: str, cwd: Path | None = None) -> str:
  """Run a git command and return stdout."""
  try:
    result = subprocess.run(
      ["git", *args],
      capture_output=True,
      text=True,
      check=True,
      cwd=cwd,
    )
    return result.stdout
  except FileNotFoundError as e:
    raise GitError("git executable not found") from e
  except subprocess.CalledProcessError as e:
    sanitized = _sanitize_error(e.stderr)
    raise GitError(f"git {' '.join(args)} failed: {sanitized}") from e


def parse_diff_output(diff_output: str) -> list[FileDiff]:
  """Split multi-file git diff output into one patch per file."""
  if not diff_output.strip():
    return []

  files: list[FileDiff] = []
  current_file: str | None = None
  current_content: list[str] = []
  is_new = False
  is_deleted = False
  in_hunk = False

  for line in diff_output.split("\n"):
    if line.startswith("diff --git"):
      if current_file:
        files.append(FileDiff(
          path=current_file,
          content="\n".join(current_content),
          is_new=is_new,
          is_deleted=is_deleted,
        ))
      current_file = _header_path(line)
      current_content = [line]
      is_new = False
      is_deleted = False
      in_hunk = False
    elif line.startswith("@@"):
      in_hunk = True
      if current_file is not None:
        current_content.append(line)
    elif line.startswith("+++ ") and not in_hunk and current_file is not None:
      # +++ names the new side even when the header cannot be split
      name = _unquote_path(line[4:].rstrip("\t"))
      if name.startswith("b/"):
        current_file = name[2:]
      current_content.append(line)
    elif line.startswith("new file"):
      is_new = True
      current_content.append(line)
    elif line.startswith("deleted file"):
      is_deleted = True
      current_content.append(line)
    elif current_file is not None:
      current_content.append(line)

  if current_file:
    files.append(FileDiff(
      path=current_file,
      content="\n".join(current_content),
      is_new=is_new,
      is_deleted=is_deleted,
    ))

  return files


def _header_path(line: str) -> str:
  """New-side path from a ``diff --git`` header, quoted or not."""
  if line.endswith('"'):
    start = line.rfind(' "b/')
    if start != -1:
      return _unquote_path(line[start + 1:])[2:]
  parts = line.split(" b/")
  # Unparsable headers still collect content until a +++ line names the file
  return parts[-1] if len(parts) > 1 else ""


def _unquote_path(path: str) -> str:
  """Decode a C-style quoted path as git prints it (core.quotePath)."""
  if len(path) < 2 or not (path.startswith('"') and path.endswith('"')):
    return path
  raw = path[1:-1].encode("utf-8").decode("unicode_escape")
  return raw.encode("latin-1").decode("utf-8")


class GitChanges:
  """Changed files and patches between the working tree and a base revision.

  The diff is fetched once, on first use, and split per file.
  """

  def __init__(self, base: str = "main", cwd: Path | None = None):
    self.base = base
    self.cwd = cwd
    self._diffs: dict[str, FileDiff] | None = None

  def _load(self) -> dict[str, FileDiff]:
    if self._diffs is None:
      output = run_git("diff", self.base, cwd=self.cwd)
      self._diffs = {d.path: d for d in parse_diff_output(output)}
      logger.debug("git diff %s: %d changed file(s)", self.base, len(self._diffs))
    return self._diffs

  def modified_files(self) -> set[str]:
    return {
      path for path, d in self._load().items()
      if not d.is_new and not d.is_deleted
    }

  def added_files(self) -> set[str]:
    return {path for path, d in self._load().items() if d.is_new}

  def patch(self, path: str) -> str | None:
    diff = self._load().get(path)
    return diff.content if diff else None


def _find_git_root(start: Path) -> Path | None:
  """Find git repository root using filesystem traversal (no subprocess).

  Handles both regular repos (.git directory) and worktrees/submodules (.git file).
  """
  current = start if start.is_dir() else start.parent

  while current != current.parent:
    if (current / ".git").exists():
      return current
    current = current.parent

  return None


def find_project_root(root_path: Path | None = None, cwd: Path | None = None) -> Path:
  """Resolve the directory report paths are made relative to.

  An explicit root wins; otherwise the enclosing git repository, and
  finally the working directory itself.
  """
  if root_path is not None:
    return root_path.resolve()

  start = (cwd or Path.cwd()).resolve()
  return _find_git_root(start) or start
