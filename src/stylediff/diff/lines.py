"""Added line extraction from unified diff patches."""

import re

# New-file range of a hunk header, e.g. @@ -32,10 +32,7 @@ or @@@ -1 -1 +1,2 @@@
_HUNK_HEADER = re.compile(r"^@{2,} .*?\+(\d+)(?:,\d+)? @{2,}")


def parse_added_line_numbers(patch: str) -> set[int]:
  """Return the new-file line numbers added by a single file's patch.

  Every hunk header resets the cursor to the start of its new-file range.
  Lines seen before the first hunk header (``---``/``+++`` metadata and
  the like) are ignored. Text that does not look like a diff yields an
  empty set rather than an error.

  Args:
    patch: Unified diff text for exactly one file.

  Returns:
    Set of 1-based line numbers in the new version of the file.
  """
  added: set[int] = set()
  current_line: int | None = None

  for line in patch.strip().split("\n"):
    hunk_match = _HUNK_HEADER.search(line)
    if hunk_match:
      current_line = int(hunk_match.group(1))
      continue

    if current_line is None:
      continue

    if line.startswith("\\"):
      # "\ No newline at end of file" is not a file line. Counting it as
      # context, as a plain "not a removal" rule would, shifts later additions.
      continue

    if line.startswith("+"):
      added.add(current_line)
      current_line += 1
    elif not line.startswith("-"):
      # Context line, present in both versions
      current_line += 1

  return added
