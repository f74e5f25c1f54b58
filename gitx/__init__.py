"""AI-assisted git commit-and-push tool."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("gitx")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
