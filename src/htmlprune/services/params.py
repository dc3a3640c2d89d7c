"""Parser for selector parameter strings.

A parameter string names the elements to remove, for example:

    .ad, #banner, aside
    ('.sidebar, .promo')
    ".card:exact"

Grammar (informal):

    params       := '(' inner ')' | inner
    inner        := quote body quote | body
    body         := selectorList [':exact']      ; suffix is case-insensitive
    selectorList := token (',' token)*           ; commas inside quotes don't split
    token        := '.' name | '#' name | name

Wrapping parentheses and quotes are removed once, never recursively.
"""

import re

from htmlprune.models import MatchMode, SelectorSpec

QUOTE_CHARS = ("'", '"')

_ESCAPED_QUOTE_RE = re.compile(r"\\(['\"])")
_EXACT_SUFFIX_RE = re.compile(r":exact\Z", re.IGNORECASE)


def unwrap_params(params: str) -> str:
    """
    Strip one layer of parentheses and one layer of matching quotes.

    Escaped quotes (\\' and \\") are unescaped afterwards. The unescape runs
    whether or not a quote pair was stripped.

    Args:
        params: Raw parameter string.

    Returns:
        Parameter string with outer wrappers removed.
    """
    text = params.strip()

    if len(text) >= 2 and text[0] == "(" and text[-1] == ")":
        text = text[1:-1]

    if len(text) >= 2 and text[0] in QUOTE_CHARS and text[-1] == text[0]:
        text = text[1:-1]

    return _ESCAPED_QUOTE_RE.sub(r"\1", text)


def split_selectors(text: str) -> list[str]:
    """
    Split a selector list on commas that sit outside quoted spans.

    A quoted span opens at ' or " and closes at the next occurrence of the same
    character. A quote with no closing partner is an ordinary character.

    Args:
        text: Selector list without wrappers or the :exact suffix.

    Returns:
        Trimmed, non-empty selector tokens in their original order.
    """
    pieces: list[str] = []
    start = 0
    i = 0
    while i < len(text):
        char = text[i]
        if char in QUOTE_CHARS:
            closing = text.find(char, i + 1)
            if closing != -1:
                i = closing + 1
                continue
        elif char == ",":
            pieces.append(text[start:i])
            start = i + 1
        i += 1
    pieces.append(text[start:])

    return [piece.strip() for piece in pieces if piece.strip()]


def parse_params(params: str | None) -> SelectorSpec:
    """
    Parse a parameter string into a match mode and selector tokens.

    Args:
        params: Raw parameter string. None and "" yield an empty spec.

    Returns:
        SelectorSpec with the match mode and ordered selectors.
    """
    if not params:
        return SelectorSpec()

    text = unwrap_params(params)

    match_mode = MatchMode.PREFIX
    if _EXACT_SUFFIX_RE.search(text):
        match_mode = MatchMode.EXACT
        text = _EXACT_SUFFIX_RE.sub("", text).strip()

    return SelectorSpec(match_mode=match_mode, selectors=split_selectors(text))
