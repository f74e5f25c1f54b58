"""Git diff collection for the files passed on the command line.

Contains:
- DiffResult: The diff text together with where it came from
- get_head_diff: Working tree vs HEAD for the given paths
- get_staged_diff: Index vs HEAD for the given paths
- collect_diff: HEAD diff with a fallback to the staged diff
"""

from dataclasses import dataclass

from gitx import config
from gitx.git.exceptions import NoChangesError
from gitx.git.runner import _run_git_command


SOURCE_HEAD = "HEAD"
SOURCE_STAGED = "staged"

TRUNCATION_MARKER = "\n...[truncated]\n"


@dataclass(frozen=True)
class DiffResult:
    """A diff produced for a set of files."""

    text: str
    source: str
    truncated: bool = False


def _is_empty(diff: str, blank_is_empty: bool) -> bool:
    if blank_is_empty:
        return not diff.strip()
    return diff == ""


def get_head_diff(files: list[str]) -> str:
    """Get the diff of the working tree against HEAD for the given files."""
    return _run_git_command(["diff", "HEAD", "--"] + list(files), strip=False)


def get_staged_diff(files: list[str]) -> str:
    """Get the diff of the index against HEAD for the given files."""
    return _run_git_command(["diff", "--staged", "--"] + list(files), strip=False)


def collect_diff(
    files: list[str],
    max_chars: int = config.DEFAULT_MAX_DIFF_CHARS,
    blank_is_empty: bool | None = None,
) -> DiffResult:
    """Collect the diff to describe for the given files.

    The working tree diff against HEAD is preferred. If it is empty the
    staged diff is used instead; it is computed once and reused.

    Args:
        files: Paths to restrict the diff to. Git validates them.
        max_chars: Maximum characters kept before truncation.
        blank_is_empty: Whether a whitespace-only diff counts as empty.
            Defaults to config.BLANK_DIFF_IS_EMPTY.

    Returns:
        A DiffResult with the diff text and its source.

    Raises:
        NoChangesError: If both diffs are empty.
        GitError: If a git command fails.
    """
    if blank_is_empty is None:
        blank_is_empty = config.BLANK_DIFF_IS_EMPTY

    diff = get_head_diff(files)
    source = SOURCE_HEAD

    if _is_empty(diff, blank_is_empty):
        diff = get_staged_diff(files)
        source = SOURCE_STAGED
        if _is_empty(diff, blank_is_empty):
            raise NoChangesError("No changes detected in specified files.")

    truncated = False
    if len(diff) > max_chars:
        diff = diff[:max_chars] + TRUNCATION_MARKER
        truncated = True

    return DiffResult(text=diff, source=source, truncated=truncated)
