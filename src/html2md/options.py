#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML parsing.

The Markdown renderer itself takes no options; these settings control how the
HTML document is read and prepared before rendering.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from html2md.constants import (
    DEFAULT_HTML_PARSER,
    DEFAULT_STRIP_ELEMENTS,
    SUPPORTED_HTML_PARSERS,
    HtmlParser,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class HtmlOptions(CloneFrozenMixin):
    """Configuration options for reading HTML documents.

    Parameters
    ----------
    parser : {"html.parser", "html5lib", "lxml"}, default "html.parser"
        BeautifulSoup tree builder used to parse the document. ``lxml`` and
        ``html5lib`` must be installed separately.
    strip_elements : tuple[str, ...], default ("script", "style")
        Elements removed together with their subtrees before rendering.

    """

    parser: HtmlParser = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": "HTML parser backend used by BeautifulSoup",
            "choices": list(SUPPORTED_HTML_PARSERS),
        },
    )
    strip_elements: tuple[str, ...] = field(
        default=DEFAULT_STRIP_ELEMENTS,
        metadata={"help": "Elements removed with their content before conversion"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If the parser is unknown or a stripped element name is empty.

        """
        if self.parser not in SUPPORTED_HTML_PARSERS:
            raise ValueError(
                f"parser must be one of {', '.join(SUPPORTED_HTML_PARSERS)}, got {self.parser!r}"
            )

        # Accept any iterable of names but store a normalized tuple
        normalized = tuple(name.strip().lower() for name in self.strip_elements)
        if any(not name for name in normalized):
            raise ValueError("strip_elements must not contain empty tag names")
        object.__setattr__(self, "strip_elements", normalized)
