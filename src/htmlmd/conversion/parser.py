"""Tokenizer and tree builder for the supported HTML subset."""

import logging
from typing import Optional

from ..constants import COMMENT_CLOSE, COMMENT_OPEN
from ..errors import (
    MalformedTag,
    MismatchedTag,
    UnclosedElement,
    UnterminatedComment,
    UnterminatedSkipBlock,
    UnterminatedTag,
)
from ..models.ast import AstNode
from ..models.config import ConverterConfig
from .attributes import parse_attributes, split_tag
from .entities import decode_entities

logger = logging.getLogger(__name__)


def _has_trailing_solidus(content: str) -> bool:
    """Check for '<br/>', '<img src=x />' or '<img alt="x"/>' style self-closing."""
    if not content.endswith("/"):
        return False
    rest = content[:-1]
    # In <a href=/docs/> the slash belongs to the unquoted value
    return not rest or rest[-1].isspace() or rest[-1] == '"' or len(rest.split()) == 1


class HtmlParser:
    """
    Builds an AstNode tree from an HTML string in one forward scan.

    Open elements are kept on an explicit stack whose bottom is the root;
    the top of the stack receives new children. There is no implicit tag
    closing: every closing tag must match the element on top of the stack.

    Example:
        parser = HtmlParser()
        root = parser.parse("<p>Hello <b>world</b></p>")
    """

    def __init__(self, config: Optional[ConverterConfig] = None):
        """
        Initialize the parser.

        Args:
            config: Tag tables and strictness (uses defaults if None)
        """
        config = config or ConverterConfig()
        self._skip_tags = frozenset(config.skip_tags)
        self._self_closing_tags = frozenset(config.self_closing_tags)
        self._entities = dict(config.entities)
        self._strict = config.strict

    def parse(self, html: str) -> AstNode:
        """
        Parse HTML into a tree.

        Args:
            html: HTML source text

        Returns:
            The root node

        Raises:
            MalformedInput: On unterminated tags, comments or skipped blocks
            MismatchedTag: When a closing tag does not match the open element
        """
        root = AstNode.root()
        stack = [root]
        position = 0
        length = len(html)

        while position < length:
            if html[position] != "<":
                position = self._consume_text(html, position, stack[-1])
                continue

            tag_end = html.find(">", position)
            if tag_end == -1:
                raise UnterminatedTag(position)

            content = html[position + 1 : tag_end]

            if content.startswith(COMMENT_OPEN):
                comment_end = html.find(COMMENT_CLOSE, position)
                if comment_end == -1:
                    raise UnterminatedComment(position)
                position = comment_end + len(COMMENT_CLOSE)
            elif content.startswith("/"):
                self._close_element(content[1:], stack, position)
                position = tag_end + 1
            else:
                position = self._open_element(html, content, stack, position, tag_end)

        if len(stack) > 1:
            unclosed = [node.name for node in stack[1:]]
            if self._strict:
                raise UnclosedElement(unclosed[-1], length)
            logger.debug(f"Elements left open at end of input: {', '.join(unclosed)}")

        return root

    def _consume_text(self, html: str, position: int, parent: AstNode) -> int:
        text_end = html.find("<", position)
        if text_end == -1:
            text_end = len(html)
        text = decode_entities(html[position:text_end], self._entities)
        parent.append(AstNode.text_node(text))
        return text_end

    def _close_element(self, content: str, stack: list[AstNode], position: int) -> None:
        name, _ = split_tag(content)
        if len(stack) == 1:
            raise MismatchedTag(None, name, position)
        if stack[-1].name != name:
            raise MismatchedTag(stack[-1].name, name, position)
        stack.pop()

    def _open_element(
        self,
        html: str,
        content: str,
        stack: list[AstNode],
        position: int,
        tag_end: int,
    ) -> int:
        """Handle an opening tag and return the position after it."""
        self_closing = _has_trailing_solidus(content)
        if self_closing:
            content = content[:-1]

        name, raw_attributes = split_tag(content)
        if not name:
            raise MalformedTag(f"tag name expected in <{content}>", position)

        if name in self._skip_tags:
            if self_closing:
                return tag_end + 1
            closing = f"</{name}>"
            close_start = html.find(closing, tag_end + 1)
            if close_start == -1:
                raise UnterminatedSkipBlock(name, position)
            return close_start + len(closing)

        node = stack[-1].append(AstNode.element(name, parse_attributes(raw_attributes)))
        if not self_closing and name not in self._self_closing_tags:
            stack.append(node)
        return tag_end + 1


def parse_html(html: str, config: Optional[ConverterConfig] = None) -> AstNode:
    """Parse HTML into a tree using the given (or default) configuration."""
    return HtmlParser(config).parse(html)
