"""Static lookup tables shared by the parser, renderer and entry point."""

from types import MappingProxyType

# Character references decoded inside text content
HTML_ENTITIES = MappingProxyType(
    {
        "&quot;": '"',
        "&apos;": "'",
        "&amp;": "&",
        "&lt;": "<",
        "&nbsp;": " ",
        "&gt;": ">",
    }
)

# Tags that never have a closing tag (<br> has no </br> in normal usage)
SELF_CLOSING_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "command",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Tags removed together with everything up to their literal closing tag
SKIP_TAGS = frozenset({"script", "style", "title"})

# Tags rendered as prefix + children + suffix
MARKDOWN_WRAPPERS = MappingProxyType(
    {
        "p": ("\n\n", ""),
        "strong": ("**", "**"),
        "b": ("**", "**"),
        "em": ("_", "_"),
        "i": ("_", "_"),
        "del": ("~~", "~~"),
        "ins": ("__", "__"),
        "br": ("\n", ""),
        "hr": ("\n\n_________________\n\n", ""),
        "form": ("\n\n[form]\n\n", ""),
        "blockquote": ("\n> ", ""),
    }
)

# Wrapped tags followed by an extra newline
BLOCK_WRAPPERS = frozenset({"p", "hr"})

_MARKER_TAGS = (
    "html",
    "head",
    "body",
    "div",
    "p",
    "a",
    "img",
    "span",
    "table",
    "tr",
    "td",
    "ul",
    "li",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
)

# Substrings whose presence makes the input look like HTML
HTML_MARKERS = tuple(f"<{tag}" for tag in _MARKER_TAGS) + tuple(f"</{tag}" for tag in _MARKER_TAGS)

TABLE_CELLS = frozenset({"td", "th"})
LIST_CONTAINERS = frozenset({"ol", "ul"})

HIDDEN_CLASS = "hidden"
LIST_INDENT = "\t"

COMMENT_OPEN = "!--"
COMMENT_CLOSE = "-->"
