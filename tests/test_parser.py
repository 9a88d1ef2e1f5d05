"""Tests for the HTML tree builder."""

import pytest
from htmlmd import ConverterConfig
from htmlmd.conversion import HtmlParser, parse_html
from htmlmd.errors import (
    ConversionError,
    MalformedInput,
    MalformedTag,
    MismatchedTag,
    UnclosedElement,
    UnterminatedComment,
    UnterminatedSkipBlock,
    UnterminatedTag,
)
from htmlmd.models import AstNode, NodeKind


def names(node: AstNode) -> list[str]:
    return [child.name for child in node.children if child.kind == NodeKind.ELEMENT]


class TestTreeStructure:
    """Tests for the shape of the parsed tree."""

    def test_root_node(self):
        """Test that parsing returns a root with no name or text."""
        root = parse_html("<p>x</p>")

        assert root.kind == NodeKind.ROOT
        assert root.name == ""
        assert root.text == ""

    def test_nested_elements(self):
        """Test nesting and text placement."""
        root = parse_html("<div><p>Hello <b>world</b></p></div>")

        div = root.children[0]
        assert div.is_element("div")
        p = div.children[0]
        assert p.is_element("p")
        assert p.children[0] == AstNode.text_node("Hello ")
        assert p.children[1].name == "b"
        assert p.children[1].children[0].text == "world"

    def test_siblings_keep_order(self):
        """Test that children are kept in document order."""
        root = parse_html("<ul><li>a</li><li>b</li><li>c</li></ul>")

        items = root.children[0].children
        assert [item.children[0].text for item in items] == ["a", "b", "c"]

    def test_text_only(self):
        """Test input without any tags."""
        root = parse_html("just text")

        assert root.children == [AstNode.text_node("just text")]

    def test_text_at_root_around_elements(self):
        """Test text before and after elements."""
        root = parse_html("before<p>in</p>after")

        assert root.children[0].text == "before"
        assert root.children[1].name == "p"
        assert root.children[2].text == "after"

    def test_entities_decoded_in_text(self):
        """Test that text nodes hold decoded text."""
        root = parse_html("<p>A &amp; B &lt;C&gt;</p>")

        assert root.children[0].children[0].text == "A & B <C>"

    def test_case_preserved(self):
        """Test that tag names are not normalized."""
        root = parse_html("<DIV>x</DIV>")

        assert root.children[0].name == "DIV"

    def test_case_sensitive_matching(self):
        """Test that closing tags must match case exactly."""
        with pytest.raises(MismatchedTag):
            parse_html("<DIV>x</div>")


class TestAttributes:
    """Tests for attributes on parsed elements."""

    def test_attributes_parsed(self):
        """Test attributes on a normal element."""
        root = parse_html('<a href="/docs" class=nav>Docs</a>')

        assert root.children[0].attributes == {"href": "/docs", "class": "nav"}

    def test_self_closing_tag_attributes(self):
        """Test that void elements keep their attributes."""
        root = parse_html('<img src="a.png" alt="logo">')

        assert root.children[0].attributes == {"src": "a.png", "alt": "logo"}

    def test_get_attribute_missing(self):
        """Test the error for a missing attribute."""
        root = parse_html("<a>x</a>")

        with pytest.raises(KeyError):
            root.children[0].get_attribute("href")


class TestSelfClosing:
    """Tests for void elements."""

    def test_void_elements_not_pushed(self):
        """Test that text after a void element is its sibling."""
        root = parse_html("<p>a<br>b</p>")

        p = root.children[0]
        assert [child.kind for child in p.children] == [NodeKind.TEXT, NodeKind.ELEMENT, NodeKind.TEXT]
        assert p.children[1].children == []

    def test_trailing_slash(self):
        """Test XHTML style self-closing syntax."""
        root = parse_html('<p><img src=a.png alt="x"/>after</p>')

        img = root.children[0].children[0]
        assert img.name == "img"
        assert img.attributes == {"src": "a.png", "alt": "x"}
        assert root.children[0].children[1].text == "after"

    def test_trailing_slash_on_any_tag(self):
        """Test that a trailing slash closes tags outside the void list."""
        root = parse_html("<div><span />text</div>")

        div = root.children[0]
        assert names(div) == ["span"]
        assert div.children[1].text == "text"

    def test_slash_in_unquoted_value(self):
        """Test that a slash ending an unquoted value does not self-close."""
        root = parse_html("<a href=/docs/>Docs</a>")

        link = root.children[0]
        assert link.attributes == {"href": "/docs/"}
        assert link.children[0].text == "Docs"

    def test_custom_self_closing_tags(self):
        """Test a configured void element."""
        config = ConverterConfig(self_closing_tags=["x-icon"])
        root = HtmlParser(config).parse("<p><x-icon>text</p>")

        p = root.children[0]
        assert names(p) == ["x-icon"]
        assert p.children[1].text == "text"


class TestCommentsAndSkippedTags:
    """Tests for content that does not reach the tree."""

    def test_comment_dropped(self):
        """Test that comments produce no node."""
        root = parse_html("<p>a<!-- note -->b</p>")

        assert [child.text for child in root.children[0].children] == ["a", "b"]

    def test_comment_containing_tags(self):
        """Test that '>' inside a comment does not end it."""
        root = parse_html("<!-- <p>hidden</p> --><p>shown</p>")

        assert names(root) == ["p"]
        assert root.children[0].children[0].text == "shown"

    def test_skip_tags_dropped(self):
        """Test that script, style and title content is discarded."""
        root = parse_html("<title>T</title><style>p { }</style><script>if (a < b) {}</script><p>kept</p>")

        assert names(root) == ["p"]

    def test_skip_tag_with_attributes(self):
        """Test that attributes do not stop a tag from being skipped."""
        root = parse_html('<script type="text/javascript">x()</script><p>kept</p>')

        assert names(root) == ["p"]

    def test_self_closed_skip_tag(self):
        """Test that a self-closed skip tag needs no closing tag."""
        root = parse_html('<script src="a.js"/><p>kept</p>')

        assert names(root) == ["p"]


class TestParseErrors:
    """Tests for each error kind."""

    def test_unterminated_tag(self):
        """Test a '<' without '>'."""
        with pytest.raises(UnterminatedTag) as excinfo:
            parse_html("<p>abc<b")

        assert excinfo.value.position == 6

    def test_unterminated_comment(self):
        """Test a comment without '-->'."""
        with pytest.raises(UnterminatedComment):
            parse_html("<p>a<!-- open </p>")

    def test_unterminated_skip_block(self):
        """Test a script without its closing tag."""
        with pytest.raises(UnterminatedSkipBlock) as excinfo:
            parse_html("<script>alert(1)<p>x</p>")

        assert excinfo.value.tag == "script"

    def test_mismatched_tag(self):
        """Test crossing tags."""
        with pytest.raises(MismatchedTag) as excinfo:
            parse_html("<div><span></div>")

        assert excinfo.value.expected == "span"
        assert excinfo.value.found == "div"

    def test_closing_tag_without_open_element(self):
        """Test a closing tag at the top level."""
        with pytest.raises(MismatchedTag) as excinfo:
            parse_html("text</p>")

        assert excinfo.value.expected is None

    def test_empty_tag_name(self):
        """Test '<' followed by whitespace."""
        with pytest.raises(MalformedTag):
            parse_html("<div>a < b > c</div>")

    def test_error_hierarchy(self):
        """Test that parser errors share a base class."""
        assert issubclass(UnterminatedTag, MalformedInput)
        assert issubclass(UnterminatedComment, MalformedInput)
        assert issubclass(UnterminatedSkipBlock, MalformedInput)
        assert issubclass(MismatchedTag, ConversionError)

    def test_balanced_input_parses(self):
        """Test that well-formed input never raises."""
        html = '<html><body><div class=a><p>x<br>y</p><ul><li><a href=u>z</a></li></ul></div></body></html>'

        root = parse_html(html)

        assert names(root) == ["html"]


class TestUnclosedElements:
    """Tests for elements still open at end of input."""

    def test_lenient_by_default(self):
        """Test that unclosed elements end with the document."""
        root = parse_html("<div><p>text")

        p = root.children[0].children[0]
        assert p.children[0].text == "text"

    def test_strict_mode_raises(self):
        """Test that strict mode rejects unclosed elements."""
        parser = HtmlParser(ConverterConfig(strict=True))

        with pytest.raises(UnclosedElement) as excinfo:
            parser.parse("<div><p>text")

        assert excinfo.value.tag == "p"

    def test_strict_mode_accepts_balanced_input(self):
        """Test that strict mode parses balanced input."""
        parser = HtmlParser(ConverterConfig(strict=True))

        root = parser.parse("<div><p>text</p></div>")

        assert names(root) == ["div"]
