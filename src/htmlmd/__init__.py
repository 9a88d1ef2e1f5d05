"""
htmlmd - Convert simple HTML documents to Markdown.

Usage:
    from htmlmd import convert, ConverterConfig

    markdown = convert("<h1>Title</h1><p>Some <b>bold</b> text</p>")

    config = ConverterConfig(strict=True, tidy_output=True)
    markdown = convert(html, config)
"""

__version__ = "1.0.0"

from .conversion import (
    HtmlParser,
    HtmlToMarkdown,
    MarkdownRenderer,
    convert,
    convert_html_to_markdown,
    looks_like_html,
    parse_html,
    render_markdown,
)
from .errors import (
    ConversionError,
    InvalidHeading,
    MalformedInput,
    MalformedTag,
    MismatchedTag,
    MissingAttribute,
    UnclosedElement,
    UnterminatedComment,
    UnterminatedSkipBlock,
    UnterminatedTag,
)
from .models import AstNode, ConversionResult, ConverterConfig, NodeKind
from .source import decode_html, read_html, write_markdown

__all__ = [
    "__version__",
    # Core
    "convert",
    "convert_html_to_markdown",
    "looks_like_html",
    "parse_html",
    "render_markdown",
    "HtmlToMarkdown",
    "HtmlParser",
    "MarkdownRenderer",
    # Models
    "AstNode",
    "NodeKind",
    "ConverterConfig",
    "ConversionResult",
    # Errors
    "ConversionError",
    "MalformedInput",
    "UnterminatedTag",
    "UnterminatedComment",
    "UnterminatedSkipBlock",
    "MalformedTag",
    "UnclosedElement",
    "MismatchedTag",
    "MissingAttribute",
    "InvalidHeading",
    # I/O
    "decode_html",
    "read_html",
    "write_markdown",
]
