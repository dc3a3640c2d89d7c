"""Remove elements from HTML by tag, class, or id."""

from htmlprune.models import MatchMode, SelectorSpec
from htmlprune.services import parse_params, remove_html

__version__ = "0.1.0"

__all__ = ["MatchMode", "SelectorSpec", "__version__", "parse_params", "remove_html"]
