"""HTML to Markdown conversion entry points.

This module ties the pieces together: read the input, parse it with
BeautifulSoup, prune ``script``/``style`` subtrees, render the body with
:mod:`html2md.renderer` and finish the text with exactly one trailing newline.

Examples
--------
Convert an HTML string:

    >>> from html2md import html_to_markdown
    >>> html_to_markdown("<h1>Title</h1><p>Content with <strong>bold</strong></p>")
    '# Title\\n\\nContent with**bold**\\n'

Convert a file with the lxml parser:

    >>> from html2md.options import HtmlOptions
    >>> markdown = html_to_markdown("page.html", options=HtmlOptions(parser="lxml"))

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from __future__ import annotations

import logging

from ._input_utils import HtmlInput, read_html_input
from .dom import ElementNode
from .options import HtmlOptions
from .parsing import parse_html
from .renderer import MarkdownRenderer, render_blocks

logger = logging.getLogger(__name__)


def finalize_markdown(markdown: str) -> str:
    """Trim surrounding whitespace and end the document with one newline."""
    return markdown.strip() + "\n"


def convert_document(root: ElementNode, renderer: MarkdownRenderer | None = None) -> str:
    """Render an already-parsed document body to Markdown.

    Parameters
    ----------
    root : ElementNode
        The body element (or any container); its element children form the
        document and bare text directly under it is not rendered
    renderer : MarkdownRenderer, optional
        Renderer to use instead of the shared default

    Returns
    -------
    str
        Finished Markdown ending in a single newline

    """
    if renderer is None:
        body = render_blocks(root.element_children)
    else:
        body = renderer.render_blocks(root.element_children)
    return finalize_markdown(body)


def html_to_markdown(input_data: HtmlInput, options: HtmlOptions | None = None) -> str:
    """Convert HTML to Markdown.

    Parameters
    ----------
    input_data : str, pathlib.Path, bytes, or file-like object
        HTML content or a source to read it from. A string naming an existing
        file is read from disk; any other string is treated as HTML.
    options : HtmlOptions or None, default None
        Parsing configuration. If None, uses default settings.

    Returns
    -------
    str
        Markdown text ending in exactly one newline

    Raises
    ------
    ValidationError
        If the input type is not supported
    FileNotFoundError, FileAccessError
        If an input file is missing or unreadable
    ParsingError
        If the input cannot be decoded or parsed
    DependencyError
        If the requested parser backend is not installed

    """
    if options is None:
        options = HtmlOptions()

    html = read_html_input(input_data)
    logger.debug("Converting %d characters of HTML with %s", len(html), options.parser)

    root = parse_html(html, parser=options.parser, strip=options.strip_elements)
    markdown = convert_document(root)

    logger.info("Converted HTML to %d characters of Markdown", len(markdown))
    return markdown
