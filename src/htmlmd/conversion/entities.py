"""Character reference decoding for text content."""

import re
from collections.abc import Mapping
from functools import lru_cache

from ..constants import HTML_ENTITIES

_NUMERIC_REFERENCE = r"&#(?:[xX](?P<hex>[0-9a-fA-F]+)|(?P<dec>[0-9]+));"


@lru_cache(maxsize=16)
def _entity_pattern(names: tuple[str, ...]) -> re.Pattern[str]:
    # Longest first so a table entry never shadows a longer one
    alternatives = "|".join(re.escape(name) for name in sorted(names, key=len, reverse=True))
    if alternatives:
        return re.compile(f"(?P<named>{alternatives})|{_NUMERIC_REFERENCE}")
    return re.compile(_NUMERIC_REFERENCE)


def _decode_numeric(match: re.Match[str]) -> str:
    digits = match.group("hex")
    codepoint = int(digits, 16) if digits is not None else int(match.group("dec"))
    if codepoint == 0 or codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
        return match.group(0)
    return chr(codepoint)


def decode_entities(text: str, entities: Mapping[str, str] = HTML_ENTITIES) -> str:
    """
    Replace character references with the characters they stand for.

    Named references come from the entity table; decimal and hexadecimal
    numeric references are decoded as well. Replacement is a single
    left-to-right pass, so "&amp;lt;" becomes "&lt;" and not "<".

    Args:
        text: Raw text between tags
        entities: Mapping of reference (e.g. "&amp;") to replacement

    Returns:
        Decoded text
    """
    if "&" not in text:
        return text

    pattern = _entity_pattern(tuple(entities))

    def replace(match: re.Match[str]) -> str:
        named = match.group("named") if "named" in pattern.groupindex else None
        if named is not None:
            return entities[named]
        return _decode_numeric(match)

    return pattern.sub(replace, text)
