"""Shared test fixtures and configuration."""

import subprocess
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest


SAMPLE_DIFF = """diff --git a/app.py b/app.py
index 1234567..abcdefg 100644
--- a/app.py
+++ b/app.py
@@ -1,5 +1,8 @@
 def main():
-    print("old")
+    print("new")
+
+def helper():
+    return {"ok": True}
"""


class FakeGit:
    """Stand-in for ``subprocess.run`` that answers git commands.

    Diff output comes from ``head_diff`` and ``staged_diff``. A successful
    commit clears both, like a real repository would. Set ``failures`` to
    make a subcommand exit non-zero with the given stderr.
    """

    def __init__(self, head_diff: str = "", staged_diff: str = ""):
        self.head_diff = head_diff
        self.staged_diff = staged_diff
        self.failures: dict[str, str] = {}
        self.calls: list[list[str]] = []

    def __call__(self, cmd, **kwargs):
        args = list(cmd[1:])
        self.calls.append(args)

        subcommand = args[0]
        if subcommand in self.failures:
            raise subprocess.CalledProcessError(
                1, cmd, output="", stderr=self.failures[subcommand]
            )

        result = MagicMock()
        result.returncode = 0
        result.stderr = ""
        result.stdout = ""

        if args[:2] == ["diff", "HEAD"]:
            result.stdout = self.head_diff
        elif args[:2] == ["diff", "--staged"]:
            result.stdout = self.staged_diff
        elif subcommand == "commit":
            self.head_diff = ""
            self.staged_diff = ""

        return result

    @property
    def subcommands(self) -> list[str]:
        return [call[0] for call in self.calls]

    def calls_for(self, subcommand: str) -> list[list[str]]:
        return [call for call in self.calls if call[0] == subcommand]


@pytest.fixture
def sample_diff():
    """Sample diff for a single modified file."""
    return SAMPLE_DIFF


@pytest.fixture
def fake_git(mocker):
    """Patch subprocess.run with a FakeGit and return it."""
    git = FakeGit()
    mocker.patch("subprocess.run", side_effect=git)
    return git


def make_response(text, usage=None, finish_reason="STOP"):
    """Build an object shaped like a google-genai GenerateContentResponse."""
    return SimpleNamespace(
        text=text,
        usage_metadata=usage,
        candidates=[SimpleNamespace(finish_reason=finish_reason)],
    )


@pytest.fixture
def fake_client():
    """A Gemini client stub whose generate_content returns 'Fix bug'."""
    client = MagicMock()
    client.models.generate_content.return_value = make_response("Fix bug")
    return client


@pytest.fixture
def api_key_env(monkeypatch):
    """Set GOOGLE_API_KEY and clear the other key variables."""
    monkeypatch.setenv("GOOGLE_API_KEY", "test-key")
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GITX_MODEL", raising=False)


class RateLimitError(Exception):
    """Error carrying an HTTP status code, like google.genai.errors.ClientError."""

    def __init__(self, message: str = "RESOURCE_EXHAUSTED", code: int = 429):
        super().__init__(message)
        self.code = code


@pytest.fixture
def response_factory():
    """Return make_response for tests that need custom responses."""
    return make_response


@pytest.fixture
def rate_limit_error():
    """Return an exception instance carrying HTTP status 429."""
    return RateLimitError()
