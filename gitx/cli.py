"""CLI entry point for gitx.

    gitx <file1> [file2 ...]

Diffs the given files, asks Gemini for a commit message, then stages,
commits and pushes them.
"""

from typing import Optional

import typer

from gitx import __version__, config
from gitx.git import GitError, NoChangesError, collect_diff, commit_and_push
from gitx.llm import (
    GoogleProvider,
    MissingAPIKeyError,
    create_client,
    generate_commit_message,
    get_api_key,
    load_environment,
)


USAGE = "Usage: gitx <file1> <file2> ..."

app = typer.Typer(
    name="gitx",
    help="Generate a commit message with Gemini, then commit and push the given files",
    add_completion=False,
)


def _progress(line: str) -> None:
    typer.echo(line, err=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gitx {__version__}")
        raise typer.Exit()


def run_pipeline(
    files: list[str],
    provider: GoogleProvider,
    max_diff_chars: int = config.DEFAULT_MAX_DIFF_CHARS,
) -> None:
    """Collect the diff, generate a message, then stage, commit and push.

    Args:
        files: Paths given on the command line.
        provider: The provider wrapping the Gemini client.
        max_diff_chars: Maximum characters of diff sent to the model.

    Raises:
        typer.Exit: With code 0 when there is nothing to commit, 1 on failure.
    """
    _progress(f"Checking changes for: {', '.join(files)}...")

    try:
        diff = collect_diff(files, max_chars=max_diff_chars)
    except NoChangesError:
        _progress("No changes detected in specified files.")
        raise typer.Exit(0)
    except GitError as e:
        typer.echo(f"Process failed: {e}", err=True)
        raise typer.Exit(1)

    if diff.truncated:
        _progress(f"Diff truncated to {max_diff_chars} characters.")

    _progress("Generating commit message...")
    message = generate_commit_message(diff.text, provider)

    if not message:
        typer.echo("Could not generate commit message.", err=True)
        raise typer.Exit(1)

    typer.echo(f'Suggested Message: "{message}"')

    try:
        commit_and_push(files, message, progress=_progress)
    except GitError as e:
        typer.echo(f"Process failed: {e}", err=True)
        raise typer.Exit(1)

    _progress("Successfully committed and pushed!")


@app.command()
def main(
    files: Optional[list[str]] = typer.Argument(
        None,
        help="Files to diff, stage, commit and push (use -- before names starting with -)",
        show_default=False,
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help=f"Gemini model to use (default: ${config.MODEL_ENV_VAR} or {config.DEFAULT_MODEL})",
    ),
    max_diff_chars: int = typer.Option(
        config.DEFAULT_MAX_DIFF_CHARS,
        "--max-diff-chars",
        min=1,
        help="Maximum characters of diff sent to the model",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Commit and push the given files with an AI-generated message."""
    load_environment()

    try:
        api_key = get_api_key()
    except MissingAPIKeyError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not files:
        typer.echo(USAGE)
        raise typer.Exit(1)

    # One client per process, passed down explicitly
    client = create_client(api_key)
    provider = GoogleProvider(client=client, model=config.get_model(model))

    run_pipeline(files, provider, max_diff_chars=max_diff_chars)


if __name__ == "__main__":
    app()
