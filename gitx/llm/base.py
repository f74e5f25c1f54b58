"""Shared prompt, result type and API key lookup for commit message generation."""

import os
from dataclasses import dataclass

from gitx import config
from gitx.llm.exceptions import MissingAPIKeyError


@dataclass
class LLMResult:
    """Result from an LLM generation call, including token usage."""

    message: str
    model: str
    input_tokens: int
    output_tokens: int


PROMPT_TEMPLATE = """Generate a concise, professional git commit message for the following changes.
Output ONLY the commit message text, no quotes or prefix.

Diff:
{diff}"""


def build_prompt(diff: str) -> str:
    """Build the instruction prompt with the diff embedded verbatim.

    Args:
        diff: The diff text to describe.

    Returns:
        The full prompt sent to the model.
    """
    return PROMPT_TEMPLATE.format(diff=diff)


def get_api_key() -> str:
    """Get the Gemini API key from the environment.

    GOOGLE_API_KEY is checked first, then GEMINI_API_KEY.

    Returns:
        The API key string.

    Raises:
        MissingAPIKeyError: If none of the key variables is set.
    """
    for env_var in config.API_KEY_ENV_VARS:
        api_key = os.environ.get(env_var)
        if api_key:
            return api_key

    raise MissingAPIKeyError(
        f"{' or '.join(config.API_KEY_ENV_VARS)} not found in environment."
    )
