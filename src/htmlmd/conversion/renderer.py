"""Markdown rendering of the parsed tree."""

from typing import Optional

from ..constants import BLOCK_WRAPPERS, LIST_CONTAINERS, TABLE_CELLS
from ..errors import InvalidHeading
from ..models.ast import AstNode, NodeKind
from ..models.config import ConverterConfig

_DIGITS = "0123456789"


def _is_heading(name: str) -> bool:
    return len(name) == 2 and name[0] == "h" and name[1] in _DIGITS


class MarkdownRenderer:
    """
    Renders an AstNode tree as Markdown.

    Each element is rendered from the point of view of its parent, since
    list items and code blocks depend on the tag that contains them.
    The only state carried down the recursion is the list nesting level;
    ordered list numbering lives in the call that renders the list.

    Example:
        renderer = MarkdownRenderer()
        markdown = renderer.render(parse_html("<ul><li>one</li></ul>"))
    """

    def __init__(self, config: Optional[ConverterConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Wrapper table, hidden class and indent unit (uses defaults if None)
        """
        config = config or ConverterConfig()
        self._wrappers = dict(config.wrappers)
        self._hidden_class = config.hidden_class
        self._indent = config.list_indent

    def render(self, node: AstNode, list_level: int = 0) -> str:
        """
        Render the children of a node.

        Args:
            node: Node whose children are rendered (usually the root)
            list_level: Number of lists enclosing the node

        Returns:
            Markdown text

        Raises:
            MissingAttribute: When a, img, input or label lacks a required attribute
            InvalidHeading: For a two-letter h* tag without a digit
        """
        parts: list[str] = []
        counter = 1

        for child in node.children:
            if child.kind == NodeKind.TEXT:
                parts.append(child.text)
                continue
            if child.kind == NodeKind.ROOT:
                parts.append(self.render(child))
                continue
            if child.attributes.get("class") == self._hidden_class:
                continue

            name = child.name
            if name in self._wrappers:
                prefix, suffix = self._wrappers[name]
                parts.append(prefix + self.render(child, list_level) + suffix)
                if name in BLOCK_WRAPPERS or _is_heading(name):
                    parts.append("\n")
            elif name == "a":
                href = child.get_attribute("href")
                inner_text = self.render(child, list_level)
                parts.append(f"[{inner_text}]({href})" if inner_text else href)
            elif name == "li":
                indent = self._indent * max(list_level - 1, 0)
                if node.name == "ol":
                    bullet = f"{counter}. "
                    counter += 1
                else:
                    bullet = "- "
                parts.append("\n" + indent + bullet + self.render(child, list_level))
            elif name in LIST_CONTAINERS:
                parts.append("\n" + self.render(child, list_level + 1))
            elif name == "img":
                src = child.get_attribute("src")
                alt = child.get_attribute("alt")
                parts.append(f"![{alt}]({src})\n")
            elif name == "code":
                inner = self.render(child, list_level)
                if node.name and node.name != "pre":
                    parts.append(f"```{inner}```\n")
                else:
                    parts.append(inner)
            elif len(name) == 2 and name[0] == "h":
                parts.append(self._render_heading(child, list_level))
            elif name == "input":
                parts.append(f"\n\n[input: {child.get_attribute('type')}]\n\n")
            elif name == "label":
                parts.append(f"\n\n[label: {child.get_attribute('value')}]\n\n")
            elif name == "table":
                parts.append(self._render_table(child, list_level))
            else:
                parts.append(self.render(child, list_level))

        return "".join(parts)

    def _render_heading(self, node: AstNode, list_level: int) -> str:
        if node.name[1] not in _DIGITS:
            raise InvalidHeading(node.name)
        hashes = "#" * int(node.name[1])
        return f"\n{hashes} {self.render(node, list_level)}\n"

    def _render_row(self, row: AstNode, list_level: int) -> tuple[str, int]:
        """Render a table row, returning the row text and its cell count."""
        cells = [cell for cell in row.iter_elements() if cell.name in TABLE_CELLS]
        text = "".join("|" + self.render(cell, list_level) for cell in cells)
        return text + "|\n", len(cells)

    def _render_table(self, table: AstNode, list_level: int) -> str:
        """
        Render a table as a pipe table.

        Output order is caption, header rows, separator, body rows, footer
        rows. Rows directly under <table> count as body rows; only <thead>
        rows produce a separator line.
        """
        caption = ""
        header_rows = ""
        separator_rows = ""
        body_rows = ""
        footer_rows = ""

        for section in table.iter_elements():
            if section.name == "tr":
                body_rows += self._render_row(section, list_level)[0]
            elif section.name == "thead":
                for row in section.iter_elements("tr"):
                    text, cell_count = self._render_row(row, list_level)
                    header_rows += text
                    separator_rows += "|---" * cell_count + "|\n"
            elif section.name == "tbody":
                for row in section.iter_elements("tr"):
                    body_rows += self._render_row(row, list_level)[0]
            elif section.name == "tfoot":
                for row in section.iter_elements("tr"):
                    footer_rows += self._render_row(row, list_level)[0]
            elif section.name == "caption":
                caption = f"\n**{self.render(section, list_level)}**\n"

        return caption + header_rows + separator_rows + body_rows + footer_rows


def render_markdown(node: AstNode, config: Optional[ConverterConfig] = None, list_level: int = 0) -> str:
    """Render a parsed tree as Markdown using the given (or default) configuration."""
    return MarkdownRenderer(config).render(node, list_level)
