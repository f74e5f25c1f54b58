"""Configuration for gitx.

There is no configuration file: every setting is either a constant below
or read from the environment at startup.
"""

import os


# ============================================================
# DEFAULT VALUES
# ============================================================

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_MAX_DIFF_CHARS = 50000

# Treat a whitespace-only diff as "no changes" when deciding whether to fall
# back to the staged diff
BLANK_DIFF_IS_EMPTY = True


# ============================================================
# ENVIRONMENT VARIABLES
# ============================================================

# Checked in order, first non-empty value wins
API_KEY_ENV_VARS = [
    "GOOGLE_API_KEY",
    "GEMINI_API_KEY",
]

MODEL_ENV_VAR = "GITX_MODEL"


def get_model(override: str | None = None) -> str:
    """Resolve the model identifier.

    Args:
        override: Model passed explicitly (e.g. from the command line).

    Returns:
        The override if given, else $GITX_MODEL, else DEFAULT_MODEL.
    """
    return override or os.environ.get(MODEL_ENV_VAR) or DEFAULT_MODEL
