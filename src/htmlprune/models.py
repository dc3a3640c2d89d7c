"""Data models for htmlprune."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MatchMode(str, Enum):
    """How class selectors are compared against an element's class attribute.

    PREFIX is the historical default and, despite its name, is a substring match
    on the raw attribute value. EXACT compares whole class tokens.
    """

    PREFIX = "prefix"
    EXACT = "exact"


class SelectorSpec(BaseModel):
    """Parsed form of a selector parameter string.

    Usage:
        spec = parse_params("'.ad, #banner:exact'")
        spec.match_mode  # MatchMode.EXACT
        spec.selectors   # [".ad", "#banner"]
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    match_mode: MatchMode = MatchMode.PREFIX
    selectors: list[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True when no selectors survived parsing."""
        return not self.selectors
