"""Common CLI utilities and the main app group."""

import logging
from pathlib import Path

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)
_configured = False


def load_env_file(env_path: Path | None = None) -> bool:
    """
    Export variables from a .env file without overriding the real environment.

    Args:
        env_path: Optional path to .env file. If None, looks for .env in current directory.

    Returns:
        True if the file existed and defined at least one variable.
    """
    return load_dotenv(env_path or Path.cwd() / ".env", override=False)


load_env_file()


def configure_logging(*, verbose: bool = False) -> None:
    """Configure logging with Rich handler. Call once at startup."""
    global _configured
    if _configured:
        return

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                tracebacks_show_locals=verbose,
            )
        ],
        force=True,
    )

    _configured = True


@click.group(help="Remove elements from HTML by tag, class, or id.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging, including trace records.")
def app(verbose: bool) -> None:
    """
    Entry point for the htmlprune CLI.

    Provides commands for removing elements from HTML and for inspecting how a
    selector parameter string is parsed.
    """
    configure_logging(verbose=verbose)
