"""Commit message generation for gitx.

The Gemini client is created once by the CLI and handed to GoogleProvider;
generate_commit_message turns provider failures into console messages.
"""

from typing import Optional

import typer
from dotenv import find_dotenv, load_dotenv

from gitx.llm.base import LLMResult, build_prompt, get_api_key
from gitx.llm.exceptions import (
    EmptyResponseError,
    LLMError,
    MissingAPIKeyError,
    QuotaExceededError,
)
from gitx.llm.google_provider import GoogleProvider, create_client

QUOTA_EXCEEDED_MESSAGE = (
    "Quota Exceeded: You've reached the Gemini API free tier limit. "
    "Please wait a moment and try again."
)


def load_environment() -> None:
    """Load a .env file found from the current working directory upwards.

    Variables already set in the environment take precedence.
    """
    load_dotenv(find_dotenv(usecwd=True))


def generate_commit_message(diff: str, provider: GoogleProvider) -> Optional[str]:
    """Generate a commit message for the diff.

    Failures are reported on stderr and turned into None; nothing is retried.

    Args:
        diff: The diff text to describe.
        provider: The provider wrapping the Gemini client.

    Returns:
        The trimmed commit message, or None if generation failed.
    """
    try:
        result = provider.generate(diff)
    except QuotaExceededError:
        typer.echo(QUOTA_EXCEEDED_MESSAGE, err=True)
        return None
    except LLMError as e:
        typer.echo(f"AI Generation failed: {e}", err=True)
        return None

    typer.echo(
        f"Model: {result.model} | Tokens: {result.input_tokens} input / {result.output_tokens} output",
        err=True,
    )
    return result.message


# Export commonly used items
__all__ = [
    "EmptyResponseError",
    "GoogleProvider",
    "LLMError",
    "LLMResult",
    "MissingAPIKeyError",
    "QUOTA_EXCEEDED_MESSAGE",
    "QuotaExceededError",
    "build_prompt",
    "create_client",
    "generate_commit_message",
    "get_api_key",
    "load_environment",
]
