"""LLM-related exception classes.

Contains all exception classes for commit message generation:
- LLMError: Base exception for LLM-related errors
- MissingAPIKeyError: Raised when no API key is set
- EmptyResponseError: Raised when the model returns no text
- QuotaExceededError: Raised when the API answers with HTTP 429
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class MissingAPIKeyError(LLMError):
    """Raised when the required API key is not set."""

    pass


class EmptyResponseError(LLMError):
    """Raised when the model response did not contain text content."""

    pass


class QuotaExceededError(LLMError):
    """Raised when the API rejects the request with a rate limit (HTTP 429)."""

    def __init__(self, message: str, status_code: int = 429):
        super().__init__(message)
        self.status_code = status_code
