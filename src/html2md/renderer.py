#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/renderer.py
"""Markdown rendering of a parsed HTML tree.

The renderer walks the DOM model from :mod:`html2md.dom` and produces Markdown
text. It is organized around four pieces:

- ``render_blocks`` renders a run of sibling nodes as block-level Markdown,
  one fragment per node joined by newlines, with any run of three or more
  newlines collapsed to a single blank line.
- ``render_node`` dispatches on the node variant and, for elements, on the
  tag name through a handler table. Unknown tags fall back to a generic
  container rule.
- ``render_item_body`` / ``render_list_item`` nest list items and their
  block content with two spaces per level.
- Text nodes are whitespace-collapsed, trimmed and escaped. This is the only
  place raw document text enters the output.

The tree is never modified and no state survives between calls, so a single
:class:`MarkdownRenderer` can be shared freely.

Examples
--------
    >>> from html2md.dom import element
    >>> render_blocks([element("h2", "Title"), element("p", "Some ", element("b", "bold"))])
    '## Title\\n\\nSome**bold**\\n'

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable

from html2md.constants import (
    BLOCKQUOTE_PREFIX,
    CODE_FENCE,
    EMPHASIS_MARKER,
    HARD_LINE_BREAK,
    HEADING_TAGS,
    INDENT_UNIT,
    INLINE_CODE_MARKER,
    INLINE_TAGS,
    MARKDOWN_SPECIAL_CHARS,
    MAX_CONSECUTIVE_NEWLINES,
    STRONG_MARKER,
    THEMATIC_BREAK,
    UNORDERED_LIST_MARKER,
)
from html2md.dom import ElementNode, Node, TextNode

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")
_SPECIAL_CHARS_RE = re.compile(f"([{re.escape(MARKDOWN_SPECIAL_CHARS)}])")
_NEWLINE_RUN_RE = re.compile(r"\n{%d,}" % (MAX_CONSECUTIVE_NEWLINES + 1))


class RenderMode(Enum):
    """Whether a node is rendered as standalone lines or as part of a text run."""

    BLOCK = "block"
    INLINE = "inline"


@dataclass(frozen=True)
class RenderContext:
    """Immutable state threaded through a rendering call.

    Parameters
    ----------
    indent : int, default 0
        Nesting depth of lists and list-item bodies
    mode : RenderMode, default RenderMode.BLOCK
        Block or inline rendering

    """

    indent: int = 0
    mode: RenderMode = RenderMode.BLOCK

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")


ElementHandler = Callable[[ElementNode, RenderContext], str]


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to one space and trim the ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def escape_markdown(text: str) -> str:
    """Backslash-escape characters that Markdown would read as syntax.

    Parameters
    ----------
    text : str
        Plain document text

    Returns
    -------
    str
        Text with each of ``* _ ` [ ]`` preceded by a backslash

    """
    return _SPECIAL_CHARS_RE.sub(r"\\\1", text)


def collapse_blank_lines(text: str) -> str:
    """Reduce runs of three or more newlines to a single blank line."""
    return _NEWLINE_RUN_RE.sub("\n" * MAX_CONSECUTIVE_NEWLINES, text)


def is_inline(node: ElementNode) -> bool:
    """Return True if the element belongs in a run of inline text."""
    return node.tag in INLINE_TAGS


def indent_prefix(level: int) -> str:
    return INDENT_UNIT * level


def split_lines(text: str) -> list[str]:
    """Split on line feeds; a final line feed does not start a new line."""
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def indent_lines(text: str, level: int) -> str:
    """Prefix every line of ``text`` with ``level`` indentation steps."""
    prefix = indent_prefix(level)
    return "\n".join(f"{prefix}{line}" for line in split_lines(text))


class MarkdownRenderer:
    """Render DOM-model nodes to Markdown.

    Element rendering is table driven: :attr:`handlers` maps a lowercase tag
    name to a callable taking the element and the current
    :class:`RenderContext`. Tags without an entry use the generic container
    rule, which renders inline tags as a text run and everything else as
    blocks. :meth:`register` adds or replaces an entry.
    """

    def __init__(self) -> None:
        self.handlers: dict[str, ElementHandler] = {tag: self._render_heading for tag in HEADING_TAGS}
        self.handlers.update(
            {
                "p": self._render_paragraph,
                "strong": self._render_strong,
                "b": self._render_strong,
                "em": self._render_emphasis,
                "i": self._render_emphasis,
                "a": self._render_link,
                "img": self._render_image,
                "br": self._render_line_break,
                "hr": self._render_thematic_break,
                "ul": self._render_unordered_list,
                "ol": self._render_ordered_list,
                "li": self._render_stray_list_item,
                "code": self._render_code,
                "pre": self._render_code_block,
                "blockquote": self._render_blockquote,
            }
        )

    def register(self, tag: str, handler: ElementHandler) -> None:
        """Use ``handler`` for elements named ``tag``."""
        self.handlers[tag.lower()] = handler

    # ------------------------------------------------------------------
    # Tree rendering
    # ------------------------------------------------------------------

    def render_blocks(self, nodes: Iterable[Node], indent: int = 0) -> str:
        """Render sibling nodes as block-level Markdown.

        Every node contributes a fragment, even when it renders empty.

        Parameters
        ----------
        nodes : iterable of Node
            Sibling nodes in document order
        indent : int, default 0
            Nesting depth passed to list and container rules

        Returns
        -------
        str
            Fragments joined by newlines, with no more than one blank line in a row

        """
        context = RenderContext(indent=indent)
        fragments = [self.render_node(node, context) for node in nodes]
        return collapse_blank_lines("\n".join(fragments))

    def render_node(self, node: Node, context: RenderContext) -> str:
        """Render a single node in the given context."""
        if isinstance(node, TextNode):
            return escape_markdown(normalize_whitespace(node.text))
        if isinstance(node, ElementNode):
            handler = self.handlers.get(node.tag, self._render_container)
            return handler(node, context)
        logger.debug("Ignoring unsupported node type %s", type(node).__name__)
        return ""

    def render_inline(self, node: ElementNode) -> str:
        """Render every child as inline Markdown, concatenated and trimmed."""
        context = RenderContext(mode=RenderMode.INLINE)
        return "".join(self.render_node(child, context) for child in node.children).strip()

    # ------------------------------------------------------------------
    # List and blockquote nesting
    # ------------------------------------------------------------------

    def render_item_body(self, node: ElementNode, indent: int) -> str:
        """Render the content of a list item.

        Items with only inline children become a single text run. Items with
        at least one block child are rendered as indented blocks starting on
        the line after the marker.
        """
        if all(is_inline(child) for child in node.element_children):
            return self.render_inline(node)
        content = self.render_blocks(node.children, indent)
        return "\n" + indent_lines(content, indent)

    def render_list_item(self, item: ElementNode, indent: int, ordered: bool, number: int = 1) -> str:
        """Render one list item with its marker.

        Parameters
        ----------
        item : ElementNode
            The item element (normally ``li``)
        indent : int
            Nesting depth of the list
        ordered : bool
            Use ``<number>. `` instead of ``- ``
        number : int, default 1
            Position of the item in an ordered list

        Returns
        -------
        str
            The marker line followed by continuation lines, each ending in a newline

        """
        marker = f"{number}. " if ordered else UNORDERED_LIST_MARKER
        body = self.render_item_body(item, indent + 1)
        first, *rest = split_lines(body) or [""]

        lines = [f"{indent_prefix(indent)}{marker}{first}\n"]
        continuation = indent_prefix(indent + 1)
        lines.extend(f"{continuation}{line}\n" for line in rest)
        return "".join(lines)

    # ------------------------------------------------------------------
    # Element handlers
    # ------------------------------------------------------------------

    def _render_heading(self, node: ElementNode, context: RenderContext) -> str:
        level = int(node.tag[1])
        return f"{'#' * level} {self.render_inline(node)}\n"

    def _render_paragraph(self, node: ElementNode, context: RenderContext) -> str:
        return f"{self.render_inline(node)}\n"

    def _render_strong(self, node: ElementNode, context: RenderContext) -> str:
        return f"{STRONG_MARKER}{self.render_inline(node)}{STRONG_MARKER}"

    def _render_emphasis(self, node: ElementNode, context: RenderContext) -> str:
        return f"{EMPHASIS_MARKER}{self.render_inline(node)}{EMPHASIS_MARKER}"

    def _render_link(self, node: ElementNode, context: RenderContext) -> str:
        href = node.get("href").strip()
        label = self.render_inline(node) or href
        if href:
            return f"[{label}]({href})"
        return label

    def _render_image(self, node: ElementNode, context: RenderContext) -> str:
        src = node.get("src")
        if not src:
            return ""
        return f"![{node.get('alt')}]({src})"

    def _render_line_break(self, node: ElementNode, context: RenderContext) -> str:
        return HARD_LINE_BREAK

    def _render_thematic_break(self, node: ElementNode, context: RenderContext) -> str:
        return THEMATIC_BREAK

    def _render_unordered_list(self, node: ElementNode, context: RenderContext) -> str:
        return "".join(
            self.render_list_item(child, context.indent, ordered=False) for child in node.element_children
        )

    def _render_ordered_list(self, node: ElementNode, context: RenderContext) -> str:
        # Numbering follows position; start/value/reversed attributes are ignored
        return "".join(
            self.render_list_item(child, context.indent, ordered=True, number=position)
            for position, child in enumerate(node.element_children, start=1)
        )

    def _render_stray_list_item(self, node: ElementNode, context: RenderContext) -> str:
        # li outside ul/ol
        body = self.render_item_body(node, context.indent + 1)
        return f"{indent_prefix(context.indent)}{UNORDERED_LIST_MARKER}{body}"

    def _render_code(self, node: ElementNode, context: RenderContext) -> str:
        if node.parent is not None and node.parent.tag == "pre":
            return node.text_content
        code = normalize_whitespace(node.text_content).replace("`", "\\`")
        return f"{INLINE_CODE_MARKER}{code}{INLINE_CODE_MARKER}"

    def _render_code_block(self, node: ElementNode, context: RenderContext) -> str:
        code = node.text_content.replace("\r\n", "\n").replace("\r", "\n")
        return f"\n{CODE_FENCE}\n{code}\n{CODE_FENCE}\n"

    def _render_blockquote(self, node: ElementNode, context: RenderContext) -> str:
        content = self.render_blocks(node.element_children, context.indent)
        quoted = "\n".join(f"{BLOCKQUOTE_PREFIX}{line}" for line in content.rstrip("\n").split("\n"))
        return f"{quoted}\n"

    def _render_container(self, node: ElementNode, context: RenderContext) -> str:
        if is_inline(node):
            return self.render_inline(node)
        # Bare text directly inside a block container is not rendered
        return self.render_blocks(node.element_children, context.indent)


_default_renderer = MarkdownRenderer()


def render_blocks(nodes: Iterable[Node], indent: int = 0) -> str:
    """Render sibling nodes as block Markdown with the shared renderer."""
    return _default_renderer.render_blocks(nodes, indent)


def render_node(node: Node, indent: int = 0, mode: RenderMode = RenderMode.BLOCK) -> str:
    """Render one node with the shared renderer."""
    return _default_renderer.render_node(node, RenderContext(indent=indent, mode=mode))


def render_inline(node: ElementNode) -> str:
    """Render an element's children as one trimmed inline run."""
    return _default_renderer.render_inline(node)


def render_item_body(node: ElementNode, indent: int) -> str:
    return _default_renderer.render_item_body(node, indent)


def render_list_item(item: ElementNode, indent: int, ordered: bool, number: int = 1) -> str:
    return _default_renderer.render_list_item(item, indent, ordered, number)
