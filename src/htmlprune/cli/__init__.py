"""Command-line interface for htmlprune.

Commands are organized into modules by functionality:

- remove: Element removal and selector inspection (remove, parse-selectors)
"""

# Import command modules to register them with the app
from htmlprune.cli import remove  # noqa: F401
from htmlprune.cli._common import app

__all__ = ["app"]
