"""Stage, commit and push.

The three steps run in order and stop at the first failure. Nothing is
rolled back: git has no transaction spanning add, commit and push, so a
failed push leaves a local commit behind.
"""

from typing import Callable, Optional

from gitx.git.runner import _run_git_command


def stage_files(files: list[str]) -> str:
    """Stage the given files with ``git add``."""
    return _run_git_command(["add", "--"] + list(files))


def commit_with_message(message: str) -> str:
    """Create a commit from the index with the given message."""
    return _run_git_command(["commit", "-m", message])


def push() -> str:
    """Push the current branch to its configured upstream."""
    return _run_git_command(["push"])


def commit_and_push(
    files: list[str],
    message: str,
    progress: Optional[Callable[[str], None]] = None,
) -> None:
    """Stage the files, commit them and push.

    Args:
        files: Paths to stage.
        message: The commit message, passed verbatim to ``git commit -m``.
        progress: Optional callback receiving a line per step.

    Raises:
        GitError: If any step fails. Later steps are not attempted.
    """
    report = progress or (lambda line: None)

    report("Performing git actions...")
    stage_files(files)
    commit_with_message(message)

    report("Pushing to remote...")
    push()
