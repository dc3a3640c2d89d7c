"""Allow running htmlprune as ``python -m htmlprune``."""

from htmlprune.cli import app

if __name__ == "__main__":
    app()
