"""Allow running gitx with ``python -m gitx``."""

from gitx.cli import app

if __name__ == "__main__":
    app()
