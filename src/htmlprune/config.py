"""Configuration management for htmlprune."""

import os
from dataclasses import dataclass
from typing import Literal, TypeAlias

from htmlprune.exceptions import ConfigurationError, generate_correlation_id

ParserBackend: TypeAlias = Literal["html.parser", "lxml", "html5lib"]

PARSER_BACKENDS: tuple[ParserBackend, ...] = ("html.parser", "lxml", "html5lib")
DEFAULT_PARSER: ParserBackend = "html5lib"

PARSER_ENV_VAR = "HTMLPRUNE_PARSER"


@dataclass(frozen=True)
class RemoverConfig:
    """Immutable element remover configuration."""

    parser: ParserBackend = DEFAULT_PARSER

    def __post_init__(self) -> None:
        """Validate configuration after initialisation."""
        if self.parser not in PARSER_BACKENDS:
            raise ConfigurationError(
                f"Invalid parser backend: {self.parser}. Must be one of: {', '.join(PARSER_BACKENDS)}",
                source="parser",
                correlation_id=generate_correlation_id(),
                context={"parser": self.parser},
            )


def load_config() -> RemoverConfig:
    """
    Load remover configuration from environment variables.

    Reads HTMLPRUNE_PARSER (case-insensitive). Unset or blank means the default
    ``html5lib`` backend, which builds the same head/body tree a browser does.

    Returns:
        RemoverConfig with validated settings.

    Raises:
        ConfigurationError: If HTMLPRUNE_PARSER names an unknown backend.
    """
    parser_str = (os.getenv(PARSER_ENV_VAR) or "").strip().lower()
    if not parser_str:
        return RemoverConfig()

    if parser_str not in PARSER_BACKENDS:
        raise ConfigurationError(
            f"Invalid {PARSER_ENV_VAR}: {parser_str}. Must be one of: {', '.join(PARSER_BACKENDS)}",
            source=PARSER_ENV_VAR,
            correlation_id=generate_correlation_id(),
            context={"parser": parser_str},
        )

    parser: ParserBackend = parser_str  # type: ignore[assignment]
    return RemoverConfig(parser=parser)
