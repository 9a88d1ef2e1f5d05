"""Protocol definitions for content conversion."""

from typing import Protocol

from ..models.ast import AstNode
from ..models.result import ConversionResult


class TreeBuilder(Protocol):
    """
    Protocol for turning HTML text into a tree.

    Implementations raise ConversionError subclasses on input they
    cannot structure.
    """

    def parse(self, html: str) -> AstNode:
        """
        Parse HTML.

        Args:
            html: HTML content string

        Returns:
            Root node of the parsed tree
        """
        ...


class MarkdownConverter(Protocol):
    """
    Protocol for converting HTML to Markdown.

    Implementations never raise for string input; anything they cannot
    convert is returned as is.
    """

    def convert(self, html: str) -> str:
        """
        Convert HTML to Markdown.

        Args:
            html: HTML content string

        Returns:
            Markdown string
        """
        ...

    def convert_with_result(self, html: str) -> ConversionResult:
        """Convert HTML, also reporting why the input was passed through."""
        ...
