"""Tests for configuration loading."""

from dataclasses import FrozenInstanceError

import pytest

from htmlprune.config import DEFAULT_PARSER, PARSER_ENV_VAR, RemoverConfig, load_config
from htmlprune.exceptions import ConfigurationError


class TestRemoverConfig:
    """Tests for RemoverConfig dataclass."""

    def test_default_parser(self) -> None:
        """Test the default backend builds an HTML5 head/body tree."""
        assert RemoverConfig().parser == "html5lib" == DEFAULT_PARSER

    def test_config_is_frozen(self) -> None:
        """Test that RemoverConfig is immutable."""
        config = RemoverConfig()

        with pytest.raises(FrozenInstanceError):
            config.parser = "lxml"  # type: ignore[misc]

    def test_rejects_unknown_parser(self) -> None:
        """Test unknown backends are rejected at construction."""
        with pytest.raises(ConfigurationError) as exc_info:
            RemoverConfig(parser="xml")  # type: ignore[arg-type]

        assert exc_info.value.context["source"] == "parser"
        assert exc_info.value.context["parser"] == "xml"


class TestLoadConfig:
    """Tests for load_config function."""

    def test_default_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the default is used when HTMLPRUNE_PARSER is not set."""
        monkeypatch.delenv(PARSER_ENV_VAR, raising=False)

        assert load_config().parser == "html5lib"

    def test_default_when_blank(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a blank value falls back to the default."""
        monkeypatch.setenv(PARSER_ENV_VAR, "  ")

        assert load_config().parser == "html5lib"

    @pytest.mark.parametrize("value", ["lxml", "html5lib", "html.parser"])
    def test_reads_parser(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        """Test each known backend is accepted."""
        monkeypatch.setenv(PARSER_ENV_VAR, value)

        assert load_config().parser == value

    def test_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test backend names are matched case-insensitively."""
        monkeypatch.setenv(PARSER_ENV_VAR, "LXML")

        assert load_config().parser == "lxml"

    def test_invalid_parser(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test an unknown backend raises ConfigurationError."""
        monkeypatch.setenv(PARSER_ENV_VAR, "bogus")

        with pytest.raises(ConfigurationError, match="Invalid HTMLPRUNE_PARSER"):
            load_config()
