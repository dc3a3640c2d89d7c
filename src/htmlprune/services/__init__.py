"""Service layer for htmlprune.

This module provides the core services:
- parse_params: Selector parameter string parsing
- remove_html: Selector-based element removal and body serialization
"""

from htmlprune.services.params import parse_params, split_selectors, unwrap_params
from htmlprune.services.remover import body_children, find_matches, remove_html, remove_matches, serialize_body

__all__ = [
    "body_children",
    "find_matches",
    "parse_params",
    "remove_html",
    "remove_matches",
    "serialize_body",
    "split_selectors",
    "unwrap_params",
]
