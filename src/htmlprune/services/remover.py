"""Selector-based element removal.

Parses an HTML document with BeautifulSoup, detaches every element matched by
the selectors in a parameter string, and serializes what is left of the body.

Selector kinds:
- ``.name``: class. Substring match on the raw class attribute by default,
  whole-token match with the ``:exact`` suffix.
- ``#name``: id, always compared exactly.
- ``name``: tag name, case-insensitive. ``*`` matches every element in the body.
"""

import logging
import re
from collections.abc import Callable, Iterator

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PageElement, PreformattedString

from htmlprune.config import DEFAULT_PARSER
from htmlprune.models import MatchMode
from htmlprune.services.params import parse_params
from htmlprune.utils import log_with_correlation

LOGGER = logging.getLogger(__name__)

TRACE_CATEGORY = "remove_html"

# Elements the HTML5 tree builder places in <head> while no body content has been seen
HEAD_ELEMENTS = frozenset(
    {"base", "basefont", "bgsound", "link", "meta", "noframes", "noscript", "script", "style", "template", "title"}
)

# Whitespace that separates tokens in an HTML class attribute
_CLASS_SEPARATOR_RE = re.compile(r"[ \t\n\f\r]+")


def _class_value(tag: Tag) -> str | None:
    """Return the class attribute as written, joining it if the parser split it."""
    value = tag.get("class")
    if isinstance(value, list):
        return " ".join(value)
    return value


def _class_filter(class_name: str, match_mode: MatchMode) -> Callable[[Tag], bool]:
    """Build a tag filter for a class selector."""

    def exact(tag: Tag) -> bool:
        value = _class_value(tag)
        return value is not None and class_name in _CLASS_SEPARATOR_RE.split(value)

    def substring(tag: Tag) -> bool:
        value = _class_value(tag)
        return value is not None and class_name in value

    return exact if match_mode is MatchMode.EXACT else substring


def find_matches(soup: BeautifulSoup, token: str, match_mode: MatchMode) -> list[Tag]:
    """
    Find the elements a single selector token refers to.

    Args:
        soup: Parsed document.
        token: Selector token (``.class``, ``#id`` or tag name).
        match_mode: How class selectors compare against the class attribute.

    Returns:
        Matching elements in document order.
    """
    if token.startswith("."):
        class_name = token[1:]
        if not class_name:
            return []
        return list(soup.find_all(_class_filter(class_name, match_mode)))

    if token.startswith("#"):
        element_id = token[1:]
        return list(soup.find_all(lambda tag: tag.get("id") == element_id))

    if token == "*":
        scope = soup.body if soup.body is not None else soup
        return list(scope.find_all(True))
    return list(soup.find_all(token.lower()))


def remove_matches(soup: BeautifulSoup, token: str, match_mode: MatchMode = MatchMode.PREFIX) -> int:
    """
    Detach every element matched by a selector token.

    Elements that no longer have a parent (already detached along with an
    ancestor) are skipped.

    Args:
        soup: Parsed document, modified in-place.
        token: Selector token.
        match_mode: How class selectors compare against the class attribute.

    Returns:
        Number of elements detached.
    """
    removed = 0
    for element in find_matches(soup, token, match_mode):
        if element.parent is None:
            continue
        element.extract()
        removed += 1
    return removed


def _top_level_nodes(soup: BeautifulSoup) -> Iterator[PageElement]:
    """Yield the document's top-level nodes with a bare <html> wrapper unwrapped."""
    for node in soup.children:
        if isinstance(node, Tag) and node.name == "html":
            yield from node.children
        else:
            yield node


def body_children(soup: BeautifulSoup) -> list[PageElement]:
    """
    Return the direct children of the document body.

    Tree builders that follow the HTML5 algorithm (``html5lib``, ``lxml``) always
    produce a <body>. ``html.parser`` only does so for a literal <body> tag; for
    any other input the body is reconstructed the way the HTML5 algorithm would
    build it: a bare <html> is unwrapped, <head> is skipped, and leading
    head-level elements (title, style, meta, ...) together with leading
    whitespace and comments stay out until the first body content appears.

    Args:
        soup: Parsed document.

    Returns:
        Body child nodes in document order.
    """
    if soup.body is not None:
        return list(soup.body.children)

    children: list[PageElement] = []
    in_head = True
    for node in _top_level_nodes(soup):
        if isinstance(node, Tag) and node.name == "head":
            continue
        if in_head:
            if isinstance(node, Tag) and node.name in HEAD_ELEMENTS:
                continue
            if isinstance(node, NavigableString) and (isinstance(node, PreformattedString) or not node.strip()):
                continue
            in_head = False
        children.append(node)
    return children


def serialize_body(soup: BeautifulSoup) -> str:
    """
    Serialize the direct children of the document body.

    Elements are emitted as markup and text nodes as their raw text. Comments,
    doctypes, CDATA sections and processing instructions are dropped.

    Args:
        soup: Parsed document.

    Returns:
        Concatenated serialization in document order.
    """
    parts: list[str] = []
    for node in body_children(soup):
        if isinstance(node, Tag):
            parts.append(str(node))
        elif isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
            parts.append(str(node))
    return "".join(parts)


def remove_html(
    html: str,
    params: str = "",
    *,
    parser: str = DEFAULT_PARSER,
    logger: logging.Logger | None = None,
) -> str:
    """
    Remove elements matching a selector parameter string from HTML.

    An empty selector list returns ``html`` untouched, without parsing it.

    Args:
        html: HTML document or fragment.
        params: Selector parameter string, e.g. ``"('.ad, #banner, aside')"``.
        parser: BeautifulSoup tree builder to use.
        logger: Destination for debug trace records. Defaults to this module's logger.

    Returns:
        Serialized body content with matching elements removed.
    """
    logger = logger or LOGGER

    correlation_id = log_with_correlation(
        logger,
        logging.DEBUG,
        "remove_html input",
        category=TRACE_CATEGORY,
        html=html,
        params=params,
    )

    spec = parse_params(params)

    log_with_correlation(
        logger,
        logging.DEBUG,
        f"remove_html selectors: {spec.selectors} (match mode: {spec.match_mode.value})",
        correlation_id=correlation_id,
        category=TRACE_CATEGORY,
        selectors=spec.selectors,
        match_mode=spec.match_mode.value,
    )

    if spec.is_empty:
        return html

    soup = BeautifulSoup(html, parser, multi_valued_attributes=None)
    for token in spec.selectors:
        removed = remove_matches(soup, token, spec.match_mode)
        logger.debug("Removed %d element(s) for selector %r", removed, token)

    result = serialize_body(soup)

    log_with_correlation(
        logger,
        logging.DEBUG,
        "remove_html output",
        correlation_id=correlation_id,
        category=TRACE_CATEGORY,
        output=result,
    )

    return result
