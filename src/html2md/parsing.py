#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/parsing.py
"""Build the renderer's DOM model from HTML text.

BeautifulSoup does the actual parsing and error recovery; this module prunes
elements that must never reach the renderer (``script`` and ``style`` by
default) and copies the remaining soup into :mod:`html2md.dom` nodes.
Comments, doctypes, CDATA sections and processing instructions are not text
and are dropped during the copy.
"""

from __future__ import annotations

import logging
from typing import Iterable

from bs4 import BeautifulSoup, FeatureNotFound, NavigableString, Tag
from bs4.element import PreformattedString

from html2md.constants import (
    DEFAULT_HTML_PARSER,
    DEFAULT_STRIP_ELEMENTS,
    PARSER_PACKAGES,
    PARSERS_KEEPING_PRE_NEWLINE,
)
from html2md.dom import ElementNode, Node, TextNode
from html2md.exceptions import DependencyError, ParsingError

logger = logging.getLogger(__name__)


def load_soup(html: str, parser: str = DEFAULT_HTML_PARSER) -> BeautifulSoup:
    """Parse ``html`` with the requested BeautifulSoup tree builder.

    Raises
    ------
    DependencyError
        If the tree builder's package is not installed
    ParsingError
        If the parser fails on the input

    """
    try:
        return BeautifulSoup(html, parser)
    except FeatureNotFound as e:
        package = PARSER_PACKAGES.get(parser, parser)
        raise DependencyError(f"{parser} parser", [package], original_error=e) from e
    except Exception as e:
        raise ParsingError(f"Failed to parse HTML: {e}", parsing_stage="html_parsing", original_error=e) from e


def strip_elements(soup: BeautifulSoup, names: Iterable[str] = DEFAULT_STRIP_ELEMENTS) -> int:
    """Remove every element named in ``names`` together with its subtree.

    Returns
    -------
    int
        Number of elements removed

    """
    names = list(names)
    if not names:
        return 0

    removed = 0
    for tag in soup.find_all(names):
        # Nested matches go away with their ancestor
        if tag.decomposed:
            continue
        tag.decompose()
        removed += 1

    if removed:
        logger.debug("Stripped %d element(s): %s", removed, ", ".join(names))
    return removed


def _attribute_value(value: object) -> str:
    # BeautifulSoup returns multi-valued attributes such as class as lists
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return str(value)


def from_soup(tag: Tag, drop_pre_newline: bool = False) -> ElementNode:
    """Copy a BeautifulSoup tag and its descendants into the DOM model.

    Parameters
    ----------
    tag : bs4.Tag
        Element to copy
    drop_pre_newline : bool, default False
        Drop a line feed that immediately follows a ``<pre>`` start tag.
        HTML5 parsers do this themselves; ``html.parser`` does not.

    Returns
    -------
    ElementNode
        The copied element, parent links set throughout

    """
    node = ElementNode(
        tag=tag.name,
        attrs={name: _attribute_value(value) for name, value in tag.attrs.items()},
    )

    children: list[Node] = []
    for child in tag.children:
        if isinstance(child, Tag):
            children.append(from_soup(child, drop_pre_newline))
        elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
            children.append(TextNode(str(child)))

    if drop_pre_newline and node.tag == "pre" and children and isinstance(children[0], TextNode):
        first = children[0]
        if first.text.startswith("\r\n"):
            first.text = first.text[2:]
        elif first.text.startswith("\n"):
            first.text = first.text[1:]

    for child in children:
        node.append(child)
    return node


def parse_html(
    html: str,
    parser: str = DEFAULT_HTML_PARSER,
    strip: Iterable[str] = DEFAULT_STRIP_ELEMENTS,
) -> ElementNode:
    """Parse an HTML document and return its body as a DOM-model element.

    Parameters
    ----------
    html : str
        Complete document or fragment
    parser : str, default "html.parser"
        BeautifulSoup tree builder name
    strip : iterable of str, default ("script", "style")
        Elements pruned before the tree is copied

    Returns
    -------
    ElementNode
        The ``body`` element, or the document root when the parser does not
        synthesize a body (``html.parser`` on a fragment)

    """
    soup = load_soup(html, parser)
    strip_elements(soup, strip)

    root = soup.body if soup.body is not None else soup
    logger.debug("Building document tree from <%s> using %s", root.name, parser)
    return from_soup(root, drop_pre_newline=parser in PARSERS_KEEPING_PRE_NEWLINE)
