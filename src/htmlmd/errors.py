"""Exceptions raised while converting HTML to Markdown."""

from typing import Optional


class ConversionError(Exception):
    """Base class for every parse and render failure.

    Attributes:
        position: Offset in the input where the problem was found, if known
    """

    def __init__(self, message: str, position: Optional[int] = None):
        self.position = position
        if position is not None:
            message = f"{message} (at offset {position})"
        super().__init__(message)


class MalformedInput(ConversionError):
    """The input is structurally broken and cannot be tokenized."""


class UnterminatedTag(MalformedInput):
    """A '<' has no matching '>' before the end of input."""

    def __init__(self, position: Optional[int] = None):
        super().__init__("malformed or incomplete HTML input (no closing '>')", position)


class UnterminatedComment(MalformedInput):
    """A comment opener has no matching '-->'."""

    def __init__(self, position: Optional[int] = None):
        super().__init__("malformed or incomplete HTML input (no closing '-->')", position)


class UnterminatedSkipBlock(MalformedInput):
    """A skipped tag (script, style, title) has no literal closing tag."""

    def __init__(self, tag: str, position: Optional[int] = None):
        self.tag = tag
        super().__init__(f"malformed or incomplete HTML input (no closing </{tag}>)", position)


class MalformedTag(MalformedInput):
    """Bracketed content that does not start with a tag name."""


class UnclosedElement(MalformedInput):
    """An element is still open at end of input (strict mode only)."""

    def __init__(self, tag: str, position: Optional[int] = None):
        self.tag = tag
        super().__init__(f"element <{tag}> is never closed", position)


class MismatchedTag(ConversionError):
    """A closing tag does not match the currently open element."""

    def __init__(self, expected: Optional[str], found: str, position: Optional[int] = None):
        self.expected = expected
        self.found = found
        if expected is None:
            message = f"closing tag </{found}> has no open element"
        else:
            message = f"closing tag </{found}> does not match opening tag <{expected}>"
        super().__init__(message, position)


class MissingAttribute(ConversionError, KeyError):
    """A rendering rule needs an attribute the element does not have."""

    def __init__(self, tag: str, attribute: str):
        self.tag = tag
        self.attribute = attribute
        super().__init__(f"<{tag}> is missing required attribute '{attribute}'")

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return str(self.args[0])


class InvalidHeading(ConversionError):
    """A two-letter h* tag whose second character is not a digit."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"cannot read heading level from <{tag}>")
