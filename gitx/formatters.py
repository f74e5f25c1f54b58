"""Commit message validation."""

from pydantic import BaseModel, field_validator


class CommitMessage(BaseModel):
    """Pydantic model for a generated commit message.

    Attributes:
        text: The message, trimmed of surrounding whitespace.
    """

    text: str

    @field_validator("text")
    @classmethod
    def text_must_not_be_empty(cls, v: str) -> str:
        """Ensure the message is not blank and strip surrounding whitespace."""
        if not v or not v.strip():
            raise ValueError("Commit message cannot be empty")
        return v.strip()
