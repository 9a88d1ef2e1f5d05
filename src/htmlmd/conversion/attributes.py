"""Tag content splitting and attribute parsing."""


def split_tag(content: str) -> tuple[str, str]:
    """
    Split bracketed tag content into the tag name and the raw attributes.

    Args:
        content: Text between '<' and '>' with any leading '/' removed

    Returns:
        Tuple of (tag name, attribute text stripped of surrounding whitespace)
    """
    parts = content.split(None, 1) if content[:1].strip() else ["", content]
    name = parts[0]
    attributes = parts[1].strip() if len(parts) > 1 else ""
    return name, attributes


def parse_attributes(raw: str) -> dict[str, str]:
    """
    Parse the attribute part of a tag into a mapping.

    Only whitespace-separated key=value tokens are kept; bare tokens are
    ignored. Values wrapped in double quotes have the quotes removed, no
    escapes are interpreted, and the last duplicate key wins.

    Example:
        >>> parse_attributes('href="/docs" class=nav hidden')
        {'href': '/docs', 'class': 'nav'}
    """
    attributes: dict[str, str] = {}
    for token in raw.split():
        key, sep, value = token.partition("=")
        if not sep:
            continue
        if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
            value = value[1:-1]
        attributes[key] = value
    return attributes
