"""Tree produced by the parser and consumed by the renderer."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

from ..errors import MissingAttribute


class NodeKind(str, Enum):
    """Kinds of nodes in the parsed tree."""

    ROOT = "root"
    TEXT = "text"
    ELEMENT = "element"


@dataclass
class AstNode:
    """
    A node of the parsed document.

    Children are owned by their parent and there are no back references,
    so the tree can be walked with plain recursion.

    Attributes:
        kind: Root, text or element
        name: Tag name as written in the input (elements only)
        text: Decoded text content (text nodes only)
        attributes: Attribute values keyed by attribute name
        children: Child nodes in document order
    """

    kind: NodeKind
    name: str = ""
    text: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    children: list["AstNode"] = field(default_factory=list)

    @classmethod
    def root(cls) -> "AstNode":
        return cls(kind=NodeKind.ROOT)

    @classmethod
    def text_node(cls, text: str) -> "AstNode":
        return cls(kind=NodeKind.TEXT, text=text)

    @classmethod
    def element(cls, name: str, attributes: Optional[dict[str, str]] = None) -> "AstNode":
        return cls(kind=NodeKind.ELEMENT, name=name, attributes=dict(attributes or {}))

    def is_element(self, name: Optional[str] = None) -> bool:
        """Check whether this is an element, optionally with the given tag name."""
        if self.kind != NodeKind.ELEMENT:
            return False
        return name is None or self.name == name

    def get_attribute(self, key: str) -> str:
        """
        Look up an attribute that a rendering rule depends on.

        Raises:
            MissingAttribute: If the element has no such attribute
        """
        try:
            return self.attributes[key]
        except KeyError:
            raise MissingAttribute(self.name, key) from None

    def iter_elements(self, name: Optional[str] = None) -> Iterator["AstNode"]:
        """Yield direct element children, optionally filtered by tag name."""
        for child in self.children:
            if child.is_element(name):
                yield child

    def append(self, child: "AstNode") -> "AstNode":
        self.children.append(child)
        return child
