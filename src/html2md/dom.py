#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/dom.py
"""Minimal DOM model consumed by the Markdown renderer.

A parsed document is a tree of two node variants:

    - TextNode: raw character data
    - ElementNode: a tag name, attributes and ordered child nodes

Children are owned by their element; each node keeps a non-owning back
reference to its parent. The renderer only reads the tree.

Trees normally come from :func:`html2md.parsing.parse_html`, but they can also
be built by hand with :func:`element`::

    >>> tree = element("ul", element("li", "x"))
    >>> tree.element_children[0].text_content
    'x'

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass
class TextNode:
    """Character data inside an element.

    Parameters
    ----------
    text : str
        Raw text, exactly as it appeared in the source document
    parent : ElementNode or None
        Containing element (set when the node is attached)

    """

    text: str
    parent: Optional[ElementNode] = field(default=None, repr=False, compare=False)


@dataclass
class ElementNode:
    """An HTML element.

    Parameters
    ----------
    tag : str
        Tag name; normalized to lowercase
    attrs : dict[str, str]
        Attribute values keyed by attribute name
    children : list[Node]
        Child nodes in document order
    parent : ElementNode or None
        Containing element, None for the root

    """

    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    parent: Optional[ElementNode] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.tag = self.tag.lower()
        for child in self.children:
            child.parent = self

    def append(self, child: Node) -> Node:
        """Attach ``child`` as the last child of this element and return it."""
        child.parent = self
        self.children.append(child)
        return child

    def get(self, name: str, default: str = "") -> str:
        """Return an attribute value, or ``default`` when it is absent."""
        return self.attrs.get(name, default)

    @property
    def element_children(self) -> list[ElementNode]:
        """Child elements only, skipping text nodes."""
        return [child for child in self.children if isinstance(child, ElementNode)]

    @property
    def text_content(self) -> str:
        """Concatenated text of all descendant text nodes, unmodified."""
        parts: list[str] = []
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, TextNode):
                parts.append(node.text)
            else:
                stack.extend(reversed(node.children))
        return "".join(parts)


Node = Union[TextNode, ElementNode]


def element(tag: str, *children: Union[Node, str], **attrs: str) -> ElementNode:
    """Build an element, wrapping plain strings in text nodes.

    Attribute names that collide with Python keywords can be given with a
    trailing underscore (``class_="x"``).

    Parameters
    ----------
    tag : str
        Tag name
    *children : Node or str
        Child nodes; strings become :class:`TextNode` instances
    **attrs : str
        Attribute values

    Returns
    -------
    ElementNode
        The new element with parent links set on its children

    """
    nodes: list[Node] = [TextNode(child) if isinstance(child, str) else child for child in children]
    attributes = {name.rstrip("_"): value for name, value in attrs.items()}
    return ElementNode(tag=tag, attrs=attributes, children=nodes)
