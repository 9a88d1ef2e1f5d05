"""HTML parsing and Markdown rendering for htmlmd."""

from .attributes import parse_attributes, split_tag
from .entities import decode_entities
from .markdown import HtmlToMarkdown, convert, convert_html_to_markdown, looks_like_html
from .parser import HtmlParser, parse_html
from .protocols import MarkdownConverter, TreeBuilder
from .renderer import MarkdownRenderer, render_markdown

__all__ = [
    # Protocols
    "MarkdownConverter",
    "TreeBuilder",
    # Implementations
    "HtmlParser",
    "MarkdownRenderer",
    "HtmlToMarkdown",
    # Functions
    "convert",
    "convert_html_to_markdown",
    "decode_entities",
    "looks_like_html",
    "parse_attributes",
    "parse_html",
    "render_markdown",
    "split_tag",
]
