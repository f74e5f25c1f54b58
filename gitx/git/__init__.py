"""Git helpers for gitx.

This package provides:
- exceptions: GitError, NoChangesError
- runner: _run_git_command
- diff: DiffResult, get_head_diff, get_staged_diff, collect_diff
- commit: stage_files, commit_with_message, push, commit_and_push
"""

# Exceptions
from gitx.git.exceptions import (
    GitError,
    NoChangesError,
)

# Runner utilities
from gitx.git.runner import _run_git_command

# Diff collection
from gitx.git.diff import (
    DiffResult,
    collect_diff,
    get_head_diff,
    get_staged_diff,
)

# Commit execution
from gitx.git.commit import (
    commit_and_push,
    commit_with_message,
    push,
    stage_files,
)


__all__ = [
    # Exceptions
    "GitError",
    "NoChangesError",
    # Runner
    "_run_git_command",
    # Diff
    "DiffResult",
    "collect_diff",
    "get_head_diff",
    "get_staged_diff",
    # Commit
    "commit_and_push",
    "commit_with_message",
    "push",
    "stage_files",
]
