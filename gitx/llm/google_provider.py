"""Google Gemini provider implementation."""

from google import genai
from pydantic import ValidationError

from gitx import config
from gitx.formatters import CommitMessage
from gitx.llm.base import LLMResult, build_prompt
from gitx.llm.exceptions import EmptyResponseError, LLMError, QuotaExceededError


RATE_LIMIT_STATUS = 429


def create_client(api_key: str) -> genai.Client:
    """Create the Gemini client used for the whole run."""
    return genai.Client(api_key=api_key)


def _is_quota_error(error: Exception) -> bool:
    """Check whether an API error is a rate limit rejection.

    google-genai exposes the HTTP status as ``code``; other clients use
    ``status``. The message is checked as a last resort.
    """
    for attr in ("code", "status", "status_code"):
        if getattr(error, attr, None) == RATE_LIMIT_STATUS:
            return True
    return str(RATE_LIMIT_STATUS) in str(error)


class GoogleProvider:
    """Google Gemini commit message generator."""

    def __init__(self, client, model: str | None = None):
        """Initialize the Google provider.

        Args:
            client: A google.genai Client, created once at startup.
            model: The model to use. Defaults to config.DEFAULT_MODEL.
        """
        self.client = client
        self.model = model or config.DEFAULT_MODEL

    def generate(self, diff: str) -> LLMResult:
        """Generate a commit message for the diff using Google Gemini.

        Args:
            diff: The diff text to describe.

        Returns:
            An LLMResult containing the trimmed message and token usage.

        Raises:
            QuotaExceededError: If the API answered with HTTP 429.
            EmptyResponseError: If the response had no text content.
            LLMError: For other LLM-related errors.
        """
        prompt = build_prompt(diff)

        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except Exception as e:
            if _is_quota_error(e):
                raise QuotaExceededError(f"Google Gemini rate limit exceeded: {e}")
            raise LLMError(f"Google Gemini API call failed: {e}")

        candidates = getattr(response, "candidates", None) or []
        if candidates:
            finish_reason = str(getattr(candidates[0], "finish_reason", "") or "")
            if "SAFETY" in finish_reason:
                raise LLMError(f"Google Gemini blocked response due to safety filters: {finish_reason}")

        try:
            raw_response = response.text
        except ValueError:
            # Older SDK versions raise instead of returning None
            raw_response = None

        try:
            message = CommitMessage(text=raw_response or "").text
        except ValidationError:
            raise EmptyResponseError("AI response did not contain text content.")

        input_tokens = 0
        output_tokens = 0
        usage = getattr(response, "usage_metadata", None)
        if usage:
            input_tokens = getattr(usage, "prompt_token_count", 0) or 0
            output_tokens = getattr(usage, "candidates_token_count", 0) or 0

        # Fallback estimation if no token counts available
        if input_tokens == 0:
            input_tokens = len(prompt) // 4
        if output_tokens == 0:
            output_tokens = len(message) // 4

        return LLMResult(
            message=message,
            model=self.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
