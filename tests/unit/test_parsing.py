"""Unit tests for building the DOM model with BeautifulSoup."""

import pytest
from bs4 import BeautifulSoup, FeatureNotFound

from html2md.dom import ElementNode, TextNode
from html2md.exceptions import DependencyError, ParsingError
from html2md.parsing import from_soup, load_soup, parse_html, strip_elements


@pytest.mark.unit
class TestParseHtml:
    """Test parse_html body lookup and tree copying."""

    def test_returns_body(self):
        root = parse_html("<html><head><title>T</title></head><body><p>x</p></body></html>")
        assert root.tag == "body"
        assert [child.tag for child in root.element_children] == ["p"]

    def test_fragment_without_body(self):
        root = parse_html("<h1>A</h1><p>b</p>")
        assert [child.tag for child in root.element_children] == ["h1", "p"]

    def test_script_and_style_are_removed(self):
        root = parse_html("<body><script>alert(1)</script><p>x</p><style>p {}</style></body>")
        assert [child.tag for child in root.element_children] == ["p"]
        assert "alert" not in root.text_content

    def test_custom_strip_list(self):
        root = parse_html("<body><nav>menu</nav><p>x</p><script>s</script></body>", strip=["nav"])
        assert [child.tag for child in root.element_children] == ["p", "script"]

    def test_comments_are_dropped(self):
        root = parse_html("<body><!-- note --><p>x</p></body>")
        assert all(not isinstance(child, TextNode) for child in root.children)
        assert "note" not in root.text_content

    def test_multi_valued_attributes_are_joined(self):
        root = parse_html('<p class="a b" id="p1">x</p>')
        paragraph = root.element_children[0]
        assert paragraph.attrs == {"class": "a b", "id": "p1"}

    def test_parent_links(self):
        root = parse_html("<body><p>text</p></body>")
        paragraph = root.element_children[0]
        assert paragraph.parent is root
        assert paragraph.children[0].parent is paragraph

    def test_newline_after_pre_is_dropped(self):
        root = parse_html("<pre>\ncode\n  indented</pre>")
        assert root.element_children[0].text_content == "code\n  indented"

    def test_entities_are_decoded(self):
        root = parse_html("<p>a &amp; b &lt;c&gt;</p>")
        assert root.element_children[0].text_content == "a & b <c>"

    def test_lxml_parser(self):
        pytest.importorskip("lxml")
        root = parse_html("<p>x</p>", parser="lxml")
        assert root.tag == "body"
        assert root.element_children[0].text_content == "x"


@pytest.mark.unit
class TestSoupHelpers:
    """Test load_soup, strip_elements and from_soup."""

    def test_strip_elements_counts_removed(self):
        soup = BeautifulSoup("<div><script>a</script><style>b</style><p>c</p></div>", "html.parser")
        assert strip_elements(soup, ["script", "style"]) == 2
        assert soup.find("script") is None

    def test_strip_nested_matches(self):
        soup = BeautifulSoup("<div><script><style>x</style></script></div>", "html.parser")
        strip_elements(soup, ["script", "style"])
        assert soup.find("script") is None

    def test_strip_nothing(self):
        soup = BeautifulSoup("<p>x</p>", "html.parser")
        assert strip_elements(soup, []) == 0

    def test_from_soup_copies_text(self):
        soup = BeautifulSoup("<div>a<b>b</b></div>", "html.parser")
        node = from_soup(soup.div)
        assert isinstance(node, ElementNode)
        assert node.children[0] == TextNode("a")
        assert node.element_children[0].tag == "b"

    def test_from_soup_keeps_pre_newline_by_default(self):
        soup = BeautifulSoup("<pre>\nx</pre>", "html.parser")
        assert from_soup(soup.pre).text_content == "\nx"

    def test_missing_parser_raises_dependency_error(self, monkeypatch):
        def missing(*args, **kwargs):
            raise FeatureNotFound("Couldn't find a tree builder")

        monkeypatch.setattr("html2md.parsing.BeautifulSoup", missing)
        with pytest.raises(DependencyError) as exc_info:
            load_soup("<p>x</p>", "lxml")
        assert exc_info.value.missing_packages == ["lxml"]
        assert "pip install lxml" in str(exc_info.value)

    def test_parser_failure_raises_parsing_error(self, monkeypatch):
        def broken(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("html2md.parsing.BeautifulSoup", broken)
        with pytest.raises(ParsingError) as exc_info:
            load_soup("<p>x</p>")
        assert exc_info.value.parsing_stage == "html_parsing"
        assert isinstance(exc_info.value.original_error, RuntimeError)
