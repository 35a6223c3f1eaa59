"""Unit tests for text-node whitespace normalization and escaping."""

import pytest

from html2md.dom import TextNode, element
from html2md.renderer import escape_markdown, normalize_whitespace, render_node


@pytest.mark.unit
def test_whitespace_runs_collapse_to_single_space():
    assert render_node(TextNode("a   \n\n  b")) == "a b"


@pytest.mark.unit
def test_tabs_and_non_breaking_spaces_collapse():
    assert normalize_whitespace("\ta\u00a0 b\t") == "a b"


@pytest.mark.unit
def test_whitespace_only_text_renders_empty():
    assert render_node(TextNode(" \n\t ")) == ""


@pytest.mark.unit
def test_special_characters_are_escaped():
    assert render_node(TextNode("*bold* [link]")) == "\\*bold\\* \\[link\\]"


@pytest.mark.unit
@pytest.mark.parametrize(
    "text,expected",
    [
        ("snake_case", "snake\\_case"),
        ("use `ticks`", "use \\`ticks\\`"),
        ("a*b", "a\\*b"),
        ("[x]", "\\[x\\]"),
        ("# not a heading", "# not a heading"),
        ("1. not a list", "1. not a list"),
    ],
)
def test_escape_markdown(text, expected):
    assert escape_markdown(text) == expected


@pytest.mark.unit
def test_generated_markers_are_not_escaped():
    """Only raw text is escaped, never the Markdown the renderer adds."""
    result = render_node(element("p", element("strong", "a*b"), element("a", "[c]", href="d")))
    assert result == "**a\\*b**[\\[c\\]](d)\n"


@pytest.mark.unit
def test_escaping_happens_after_whitespace_collapse():
    assert render_node(TextNode("  _x_  ")) == "\\_x\\_"
