#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the html2md library.

Constants are organized by category:
1. Type Definitions - Literal types used by options and the CLI
2. Markdown Formatting - Markers and escaping used by the renderer
3. HTML Classification - Tag sets that drive block/inline dispatch
4. Parsing Defaults - BeautifulSoup configuration
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HtmlParser = Literal["html.parser", "html5lib", "lxml"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

# =============================================================================
# Markdown Formatting
# =============================================================================

# Characters backslash-escaped in raw text nodes
MARKDOWN_SPECIAL_CHARS = "*_`[]"

# One nesting step for lists and list-item bodies
INDENT_UNIT = "  "

UNORDERED_LIST_MARKER = "- "
BLOCKQUOTE_PREFIX = "> "
HARD_LINE_BREAK = "  \n"
THEMATIC_BREAK = "\n---\n"
CODE_FENCE = "```"
STRONG_MARKER = "**"
EMPHASIS_MARKER = "*"
INLINE_CODE_MARKER = "`"

# Longest run of newlines kept after joining block fragments
MAX_CONSECUTIVE_NEWLINES = 2

# =============================================================================
# HTML Classification
# =============================================================================

HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})

# Elements rendered inline when they appear as containers or list-item content
INLINE_TAGS = frozenset({"a", "span", "strong", "b", "em", "i", "img", "code", "br"})

# =============================================================================
# Parsing Defaults
# =============================================================================

DEFAULT_HTML_PARSER: HtmlParser = "html.parser"
SUPPORTED_HTML_PARSERS: tuple[HtmlParser, ...] = ("html.parser", "html5lib", "lxml")

# Subtrees pruned before rendering
DEFAULT_STRIP_ELEMENTS: tuple[str, ...] = ("script", "style")

# Tree builders that keep the newline directly after <pre> (HTML5 parsers drop it)
PARSERS_KEEPING_PRE_NEWLINE = frozenset({"html.parser"})

# Distribution names backing each BeautifulSoup tree builder
PARSER_PACKAGES: dict[str, str] = {
    "lxml": "lxml",
    "html5lib": "html5lib",
}

# =============================================================================
# CLI
# =============================================================================

ENV_PREFIX = "HTML2MD_"
DEFAULT_LOG_LEVEL: LogLevel = "WARNING"
