"""HTML to Markdown conversion entry point."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from ..constants import HTML_MARKERS
from ..errors import ConversionError
from ..models.ast import AstNode
from ..models.config import ConverterConfig
from ..models.result import ConversionResult
from .parser import HtmlParser
from .protocols import TreeBuilder
from .renderer import MarkdownRenderer

logger = logging.getLogger(__name__)


def looks_like_html(text: str, markers: Iterable[str] = HTML_MARKERS) -> bool:
    """Check whether any of the marker substrings (e.g. "<div", "</p") occurs in text."""
    return any(marker in text for marker in markers)


class HtmlToMarkdown:
    """
    Converts HTML content to Markdown.

    Input that does not look like HTML, or that fails to parse or render,
    is returned unchanged, so convert() never raises for string input.
    convert_with_result() also reports why an input was passed through.
    Use parse() and render() directly to see the errors.

    Example:
        converter = HtmlToMarkdown()
        markdown = converter.convert("<h1>Title</h1><p>Body</p>")
    """

    def __init__(self, config: ConverterConfig | None = None, parser: TreeBuilder | None = None):
        """
        Initialize the Markdown converter.

        Args:
            config: Converter configuration (uses defaults if None)
            parser: Tree builder (uses HtmlParser with the same config if None)
        """
        self.config = config or ConverterConfig()
        self._parser = parser or HtmlParser(self.config)
        self._renderer = MarkdownRenderer(self.config)

    def _clean_output(self, markdown: str) -> str:
        """Clean up the rendered Markdown."""
        # Remove trailing whitespace on each line
        markdown = "\n".join(line.rstrip() for line in markdown.split("\n"))

        # Remove excessive blank lines
        markdown = re.sub(r"\n{3,}", "\n\n", markdown)

        # Ensure single newline at end
        return markdown.strip() + "\n"

    def looks_like_html(self, text: str) -> bool:
        return looks_like_html(text, self.config.markers)

    def parse(self, html: str) -> AstNode:
        """Parse HTML into a tree. Raises ConversionError subclasses."""
        return self._parser.parse(html)

    def render(self, root: AstNode) -> str:
        """Render a tree as Markdown. Raises ConversionError subclasses."""
        markdown = self._renderer.render(root)
        if self.config.tidy_output:
            markdown = self._clean_output(markdown)
        return markdown

    def convert(self, html: str) -> str:
        """
        Convert HTML to Markdown.

        Args:
            html: HTML content string

        Returns:
            Markdown string, or the input unchanged if it is not HTML
            or cannot be converted
        """
        return self.convert_with_result(html).markdown

    def convert_with_result(self, html: str) -> ConversionResult:
        """
        Convert HTML to Markdown, reporting whether the input was passed through.

        Returns:
            ConversionResult whose fallback_reason is None when the input
            was converted
        """
        if not self.looks_like_html(html):
            logger.debug("Input does not look like HTML, returning it unchanged")
            return ConversionResult(html, "not recognized as HTML")

        try:
            root = self.parse(html)
            return ConversionResult(self.render(root))
        except ConversionError as e:
            # Most likely not HTML after all, or malformed
            reason = str(e)
        except RecursionError:
            # Rendering recurses once per nesting level
            reason = "elements nested too deeply to render"

        logger.warning(f"Failed to convert HTML to Markdown, returning input unchanged: {reason}")
        return ConversionResult(html, reason)


def convert(html: str, config: ConverterConfig | None = None) -> str:
    """
    Convert HTML to Markdown in one call.

    Example:
        >>> convert("<p>A &amp; B</p>")
        '\\n\\nA & B\\n'
    """
    return HtmlToMarkdown(config).convert(html)


convert_html_to_markdown = convert
