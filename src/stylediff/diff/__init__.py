"""Diff parsing and git integration."""

from stylediff.diff.git import GitChanges, GitError, find_project_root, parse_diff_output
from stylediff.diff.lines import parse_added_line_numbers

__all__ = [
  "GitChanges",
  "GitError",
  "find_project_root",
  "parse_added_line_numbers",
  "parse_diff_output",
]
