"""html2md - convert HTML documents to readable Markdown.

The package parses HTML with BeautifulSoup, copies the document body into a
small DOM model and renders it with a table-driven Markdown renderer. Output
covers a practical subset of Markdown: headings, paragraphs, emphasis, links,
images, nested lists, blockquotes, inline code and fenced code blocks.

Examples
--------
Convert a string or a file:

    >>> from html2md import html_to_markdown
    >>> markdown = html_to_markdown("<h2>Title</h2><p>Hello</p>")
    >>> markdown = html_to_markdown("page.html")

Render a tree built by hand:

    >>> from html2md import element, render_blocks
    >>> render_blocks([element("ol", element("li", "one"), element("li", "two"))])
    '1. one\\n2. two\\n'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "1.0.0"

from html2md.converter import convert_document, html_to_markdown
from html2md.dom import ElementNode, Node, TextNode, element
from html2md.exceptions import (
    DependencyError,
    FileAccessError,
    FileError,
    FileNotFoundError,
    Html2MdError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from html2md.options import HtmlOptions
from html2md.parsing import parse_html
from html2md.renderer import (
    MarkdownRenderer,
    RenderContext,
    RenderMode,
    escape_markdown,
    normalize_whitespace,
    render_blocks,
    render_inline,
    render_item_body,
    render_list_item,
    render_node,
)

__all__ = [
    "__version__",
    "html_to_markdown",
    "convert_document",
    "parse_html",
    "HtmlOptions",
    "Node",
    "TextNode",
    "ElementNode",
    "element",
    "MarkdownRenderer",
    "RenderContext",
    "RenderMode",
    "render_blocks",
    "render_node",
    "render_inline",
    "render_item_body",
    "render_list_item",
    "escape_markdown",
    "normalize_whitespace",
    "Html2MdError",
    "ValidationError",
    "FileError",
    "FileNotFoundError",
    "FileAccessError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
    "DependencyError",
]
